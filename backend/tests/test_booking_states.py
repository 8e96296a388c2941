from datetime import datetime, timedelta

import pytest

from app.core.errors import UnknownState
from app.core.paging import page_offset
from app.db.models import Booking, BookingStatus
from app.services.booking_states import BookingState

NOW = datetime(2030, 1, 15, 12, 0, 0)


def _booking(start_days: int, end_days: int, status=BookingStatus.APPROVED) -> Booking:
    return Booking(
        start=NOW + timedelta(days=start_days),
        end=NOW + timedelta(days=end_days),
        status=status,
    )


def test_parse_known_states():
    for name in ("ALL", "CURRENT", "PAST", "FUTURE", "WAITING", "REJECTED"):
        assert BookingState.parse(name).value == name


@pytest.mark.parametrize("raw", ["UNSUPPORTED_STATUS", "past", "", "CANCELED"])
def test_parse_unknown_state(raw):
    with pytest.raises(UnknownState) as exc:
        BookingState.parse(raw)
    assert exc.value.message == f"Unknown state: {raw}"
    assert exc.value.status_code == 400


def test_time_states_partition_bookings():
    past = _booking(-3, -2)
    current = _booking(-1, 1)
    future = _booking(2, 3)

    for b in (past, current, future):
        hits = [
            s for s in (BookingState.CURRENT, BookingState.PAST, BookingState.FUTURE)
            if s.matches(b, NOW)
        ]
        assert len(hits) == 1

    assert BookingState.PAST.matches(past, NOW)
    assert not BookingState.CURRENT.matches(past, NOW)
    assert not BookingState.FUTURE.matches(past, NOW)
    assert BookingState.CURRENT.matches(current, NOW)
    assert BookingState.FUTURE.matches(future, NOW)


def test_status_states_ignore_time():
    waiting = _booking(-3, -2, BookingStatus.WAITING)
    rejected = _booking(2, 3, BookingStatus.REJECTED)

    assert BookingState.WAITING.matches(waiting, NOW)
    assert not BookingState.WAITING.matches(rejected, NOW)
    assert BookingState.REJECTED.matches(rejected, NOW)
    assert BookingState.ALL.matches(waiting, NOW)
    assert BookingState.ALL.where(NOW) is None


def test_page_offset_aligns_to_size():
    assert page_offset(0, 10) == 0
    assert page_offset(10, 10) == 10
    assert page_offset(5, 10) == 0
    assert page_offset(7, 3) == 6
