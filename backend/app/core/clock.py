# app/core/clock.py
from datetime import datetime, timezone
from typing import Callable

# A clock is any zero-arg callable returning "now" as a naive UTC datetime.
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """
    Normalize an incoming datetime to the naive-UTC form stored in the DB.
    Naive values are assumed to already be UTC.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


# FastAPI dependency; tests swap it through app.dependency_overrides
def get_clock() -> Clock:
    return utc_now
