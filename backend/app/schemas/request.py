# backend/app/schemas/request.py
from datetime import datetime
from typing import List

from app.schemas.base import CamelModel, NonBlankStr
from app.schemas.item import ItemOut


class ItemRequestCreate(CamelModel):
    description: NonBlankStr


class ItemRequestOut(CamelModel):
    id: int
    description: str
    created: datetime
    items: List[ItemOut] = []
