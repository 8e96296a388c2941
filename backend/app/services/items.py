# app/services/items.py
"""
Booking-derived views of items: the owner-only last/next booking projection
and the completed-rental gate for leaving comments.
"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ItemNotFound, NoEligibleBooking, UserNotFound
from app.db import crud_bookings, crud_comments, crud_items, crud_users
from app.db.models import Booking, Comment, Item
from app.schemas.booking import BookingShort
from app.schemas.comment import CommentOut
from app.schemas.item import ItemDetail

logger = logging.getLogger(__name__)


def _short(booking: Optional[Booking]) -> Optional[BookingShort]:
    if booking is None:
        return None
    return BookingShort(
        id=booking.id,
        booker_id=booking.booker_id,
        start=booking.start,
        end=booking.end,
    )


async def project_bookings(
    db: AsyncSession,
    item: Item,
    *,
    viewer_id: int,
    now: datetime,
) -> Tuple[Optional[BookingShort], Optional[BookingShort]]:
    """
    (last_booking, next_booking) for the item, both None unless the viewer owns it.
    """
    if item.owner_id != viewer_id:
        return None, None
    last = await crud_bookings.find_last_approved(db, item.id, now)
    nxt = await crud_bookings.find_next_approved(db, item.id, now)
    return _short(last), _short(nxt)


async def _detail(
    db: AsyncSession,
    item: Item,
    comments: List[Comment],
    *,
    viewer_id: int,
    now: datetime,
) -> ItemDetail:
    last, nxt = await project_bookings(db, item, viewer_id=viewer_id, now=now)
    return ItemDetail(
        id=item.id,
        name=item.name,
        description=item.description,
        available=item.available,
        request_id=item.request_id,
        last_booking=last,
        next_booking=nxt,
        comments=[CommentOut.from_comment(c) for c in comments],
    )


async def get_item_detail(
    db: AsyncSession, *, item_id: int, viewer_id: int, now: datetime
) -> ItemDetail:
    item = await crud_items.get_item(db, item_id)
    if item is None:
        raise ItemNotFound(item_id)
    comments = await crud_comments.list_comments_for_items(db, [item.id])
    return await _detail(db, item, comments.get(item.id, []), viewer_id=viewer_id, now=now)


async def list_owner_items(
    db: AsyncSession,
    *,
    owner_id: int,
    now: datetime,
    offset: int = 0,
    limit: int = 10,
) -> List[ItemDetail]:
    if await crud_users.get_user(db, owner_id) is None:
        raise UserNotFound(owner_id)

    items = await crud_items.list_items_for_owner(db, owner_id, offset=offset, limit=limit)
    if not items:
        return []

    comments = await crud_comments.list_comments_for_items(db, [i.id for i in items])
    return [
        await _detail(db, item, comments.get(item.id, []), viewer_id=owner_id, now=now)
        for item in items
    ]


async def add_comment(
    db: AsyncSession,
    *,
    author_id: int,
    item_id: int,
    text: str,
    now: datetime,
) -> Comment:
    """
    Only someone whose approved booking of the item has already ended may comment.
    Repeat comments are allowed.
    """
    if await crud_users.get_user(db, author_id) is None:
        raise UserNotFound(author_id)
    if await crud_items.get_item(db, item_id) is None:
        raise ItemNotFound(item_id)

    if not await crud_bookings.has_completed_booking(
        db, item_id=item_id, booker_id=author_id, now=now
    ):
        logger.warning("user %s has no completed booking of item %s", author_id, item_id)
        raise NoEligibleBooking(author_id, item_id)

    comment = await crud_comments.create_comment(
        db, item_id=item_id, author_id=author_id, text=text, created=now
    )
    logger.info("comment %s added by user %s on item %s", comment.id, author_id, item_id)
    return comment
