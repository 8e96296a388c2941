# backend/app/schemas/item.py
from typing import List, Optional

from app.schemas.base import CamelModel, NameStr, NonBlankStr
from app.schemas.booking import BookingShort
from app.schemas.comment import CommentOut


class ItemOut(CamelModel):
    id: int
    name: str
    description: str
    available: bool
    request_id: Optional[int] = None


class ItemDetail(ItemOut):
    # Only filled in for the item's owner
    last_booking: Optional[BookingShort] = None
    next_booking: Optional[BookingShort] = None
    comments: List[CommentOut] = []


class ItemCreate(CamelModel):
    name: NameStr
    description: NonBlankStr
    available: bool
    request_id: Optional[int] = None


class ItemUpdate(CamelModel):
    name: Optional[NameStr] = None
    description: Optional[NonBlankStr] = None
    available: Optional[bool] = None
