# backend/app/schemas/booking.py
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.core.clock import to_naive_utc
from app.db.models import BookingStatus
from app.schemas.base import CamelModel
from app.schemas.user import UserOut


class BookingCreate(CamelModel):
    item_id: int
    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def _naive_utc(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class BookedItem(CamelModel):
    id: int
    name: str
    description: str
    available: bool
    request_id: Optional[int] = None


class BookingOut(CamelModel):
    id: int
    start: datetime
    end: datetime
    status: BookingStatus
    booker: UserOut
    item: BookedItem


class BookingShort(CamelModel):
    """Booking summary embedded in an item (lastBooking / nextBooking)."""
    id: int
    booker_id: int
    start: datetime
    end: datetime
