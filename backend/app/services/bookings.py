# app/services/bookings.py
"""
Booking lifecycle: creation, the owner's approve/reject decision, visibility
rules and the per-state listings for bookers and owners.
"""
import logging
from datetime import datetime
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import (
    AlreadyDecided,
    BookingNotFound,
    InvalidInterval,
    ItemNotAvailable,
    ItemNotFound,
    OwnerMismatch,
    SelfBookingNotAllowed,
    UserNotFound,
)
from app.core.paging import page_offset
from app.db import crud_bookings, crud_items, crud_users
from app.db.models import Booking, BookingStatus
from app.services.booking_states import BookingRole, BookingState

logger = logging.getLogger(__name__)


async def _ensure_user(db: AsyncSession, user_id: int) -> None:
    if await crud_users.get_user(db, user_id) is None:
        logger.warning("user %s not found", user_id)
        raise UserNotFound(user_id)


async def create_booking(
    db: AsyncSession,
    *,
    booker_id: int,
    item_id: int,
    start: datetime,
    end: datetime,
) -> Booking:
    if start >= end:
        raise InvalidInterval()

    await _ensure_user(db, booker_id)

    item = await crud_items.get_item(db, item_id)
    if item is None:
        raise ItemNotFound(item_id)
    if not item.available:
        raise ItemNotAvailable(item_id)
    if item.owner_id == booker_id:
        logger.warning("owner %s tried to book own item %s", booker_id, item_id)
        raise SelfBookingNotAllowed(item_id)

    # NOTE: no overlap check against other bookings of the same item
    booking = await crud_bookings.create_booking(
        db,
        booker_id=booker_id,
        item_id=item_id,
        start=start,
        end=end,
    )
    logger.info("booking %s created by user %s for item %s", booking.id, booker_id, item_id)
    return booking


async def decide_booking(
    db: AsyncSession,
    *,
    owner_id: int,
    booking_id: int,
    approved: bool,
) -> Booking:
    """
    Owner's one-shot decision on a WAITING booking.
    Read and write happen in the same transaction; the row is locked where
    the backend supports SELECT ... FOR UPDATE.
    """
    booking = await crud_bookings.get_booking(db, booking_id, for_update=True)
    if booking is None:
        raise BookingNotFound(booking_id)

    if booking.item.owner_id != owner_id:
        logger.warning("user %s is not the owner of booking %s", owner_id, booking_id)
        raise OwnerMismatch(owner_id, booking_id)

    if booking.status != BookingStatus.WAITING:
        raise AlreadyDecided(booking_id, booking.status.value)

    new_status = BookingStatus.APPROVED if approved else BookingStatus.REJECTED
    booking = await crud_bookings.set_status(db, booking, new_status)
    logger.info("owner %s set booking %s to %s", owner_id, booking_id, new_status.value)
    return booking


async def get_booking(db: AsyncSession, *, user_id: int, booking_id: int) -> Booking:
    await _ensure_user(db, user_id)

    booking = await crud_bookings.get_booking(db, booking_id)
    # not visible == not found, so third parties can't probe ids
    if booking is None or user_id not in (booking.booker_id, booking.item.owner_id):
        raise BookingNotFound(booking_id)
    return booking


async def list_bookings(
    db: AsyncSession,
    *,
    role: BookingRole,
    user_id: int,
    state: str,
    now: datetime,
    from_: int = 0,
    size: int = 10,
) -> List[Booking]:
    await _ensure_user(db, user_id)
    booking_state = BookingState.parse(state)

    where = booking_state.where(now)
    offset = page_offset(from_, size)

    if role == BookingRole.BOOKER:
        bookings = await crud_bookings.list_bookings_for_booker(
            db, user_id, where=where, offset=offset, limit=size
        )
    else:
        if not await crud_items.owner_has_items(db, user_id):
            logger.info("user %s owns no items, skipping booking query", user_id)
            return []
        bookings = await crud_bookings.list_bookings_for_owner(
            db, user_id, where=where, offset=offset, limit=size
        )

    logger.info(
        "listed %d %s bookings for %s %s", len(bookings), booking_state.value, role.value.lower(), user_id
    )
    return bookings
