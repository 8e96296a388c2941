# app/services/booking_states.py
"""
Query-time classification of bookings relative to "now".

BookingState is never persisted. Each member knows both its SQL filter (used
by the list queries) and an in-memory predicate; the two must agree.
"""
import enum
from datetime import datetime

from app.core.errors import UnknownState
from app.db.models import Booking, BookingStatus


class BookingState(str, enum.Enum):
    ALL = "ALL"
    CURRENT = "CURRENT"
    PAST = "PAST"
    FUTURE = "FUTURE"
    WAITING = "WAITING"
    REJECTED = "REJECTED"

    @classmethod
    def parse(cls, raw: str) -> "BookingState":
        try:
            return cls(raw)
        except ValueError:
            raise UnknownState(raw) from None

    def where(self, now: datetime):
        """SQL condition for this state, or None for ALL."""
        return _SQL_FILTERS[self](now)

    def matches(self, booking: Booking, now: datetime) -> bool:
        return _PREDICATES[self](booking, now)


class BookingRole(str, enum.Enum):
    BOOKER = "BOOKER"
    OWNER = "OWNER"


_SQL_FILTERS = {
    BookingState.ALL: lambda now: None,
    BookingState.CURRENT: lambda now: (Booking.start < now) & (Booking.end > now),
    BookingState.PAST: lambda now: Booking.end < now,
    BookingState.FUTURE: lambda now: Booking.start > now,
    BookingState.WAITING: lambda now: Booking.status == BookingStatus.WAITING,
    BookingState.REJECTED: lambda now: Booking.status == BookingStatus.REJECTED,
}

_PREDICATES = {
    BookingState.ALL: lambda b, now: True,
    BookingState.CURRENT: lambda b, now: b.start < now < b.end,
    BookingState.PAST: lambda b, now: b.end < now,
    BookingState.FUTURE: lambda b, now: b.start > now,
    BookingState.WAITING: lambda b, now: b.status == BookingStatus.WAITING,
    BookingState.REJECTED: lambda b, now: b.status == BookingStatus.REJECTED,
}

# Every state needs an arm in both tables.
assert set(_SQL_FILTERS) == set(BookingState) == set(_PREDICATES)
