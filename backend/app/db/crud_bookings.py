# app/db/crud_bookings.py

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import Booking, BookingStatus, Item


def _with_relations(stmt):
    # Responses embed item + booker; load them up front (no lazy IO under asyncio)
    return stmt.options(selectinload(Booking.item), selectinload(Booking.booker))


async def create_booking(
    db: AsyncSession,
    *,
    booker_id: int,
    item_id: int,
    start: datetime,
    end: datetime,
) -> Booking:
    booking = Booking(
        booker_id=booker_id,
        item_id=item_id,
        start=start,
        end=end,
        status=BookingStatus.WAITING,
    )
    db.add(booking)
    await db.commit()
    await db.refresh(booking, attribute_names=["item", "booker"])
    return booking


async def get_booking(
    db: AsyncSession,
    booking_id: int,
    *,
    for_update: bool = False,
) -> Optional[Booking]:
    stmt = _with_relations(select(Booking).where(Booking.id == booking_id))
    if for_update:
        stmt = stmt.with_for_update()
    res = await db.execute(stmt)
    return res.scalar_one_or_none()


async def set_status(db: AsyncSession, booking: Booking, status: BookingStatus) -> Booking:
    booking.status = status
    db.add(booking)
    await db.commit()
    return booking


async def list_bookings_for_booker(
    db: AsyncSession,
    booker_id: int,
    *,
    where=None,
    offset: int = 0,
    limit: int = 10,
) -> List[Booking]:
    """
    Bookings made by booker_id, most recently starting first.
    `where` is an optional extra SQL condition (see services.booking_states).
    """
    stmt = select(Booking).where(Booking.booker_id == booker_id)
    if where is not None:
        stmt = stmt.where(where)
    stmt = _with_relations(stmt).order_by(Booking.start.desc()).offset(offset).limit(limit)
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def list_bookings_for_owner(
    db: AsyncSession,
    owner_id: int,
    *,
    where=None,
    offset: int = 0,
    limit: int = 10,
) -> List[Booking]:
    """
    All bookings of items owned by owner_id, most recently starting first.
    """
    stmt = (
        select(Booking)
        .join(Item, Booking.item_id == Item.id)
        .where(Item.owner_id == owner_id)
    )
    if where is not None:
        stmt = stmt.where(where)
    stmt = _with_relations(stmt).order_by(Booking.start.desc()).offset(offset).limit(limit)
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def find_last_approved(
    db: AsyncSession, item_id: int, now: datetime
) -> Optional[Booking]:
    """
    Approved booking of the item that started before now, greatest end first.
    """
    stmt = (
        select(Booking)
        .where(
            Booking.item_id == item_id,
            Booking.status == BookingStatus.APPROVED,
            Booking.start < now,
        )
        .order_by(Booking.end.desc())
        .limit(1)
    )
    res = await db.execute(stmt)
    return res.scalars().first()


async def find_next_approved(
    db: AsyncSession, item_id: int, now: datetime
) -> Optional[Booking]:
    """
    Approved booking of the item starting after now, soonest first.
    """
    stmt = (
        select(Booking)
        .where(
            Booking.item_id == item_id,
            Booking.status == BookingStatus.APPROVED,
            Booking.start > now,
        )
        .order_by(Booking.start.asc())
        .limit(1)
    )
    res = await db.execute(stmt)
    return res.scalars().first()


async def has_completed_booking(
    db: AsyncSession, *, item_id: int, booker_id: int, now: datetime
) -> bool:
    stmt = (
        select(Booking.id)
        .where(
            Booking.item_id == item_id,
            Booking.booker_id == booker_id,
            Booking.status == BookingStatus.APPROVED,
            Booking.end < now,
        )
        .limit(1)
    )
    res = await db.execute(stmt)
    return res.scalar_one_or_none() is not None
