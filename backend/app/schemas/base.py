# backend/app/schemas/base.py
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# Text that must carry something besides whitespace; stored stripped.
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class CamelModel(BaseModel):
    """
    Wire format is camelCase (itemId, lastBooking, ...); Python side stays snake_case.
    """
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
