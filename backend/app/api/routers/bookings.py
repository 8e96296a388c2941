from typing import List

from fastapi import APIRouter, Query

from app.api.dependencies import CurrentUserId, DbSession, Now
from app.core.config import get_settings
from app.schemas.booking import BookingCreate, BookingOut
from app.services import bookings as booking_service
from app.services.booking_states import BookingRole

router = APIRouter()

settings = get_settings()


@router.post("", response_model=BookingOut)
async def create_booking(
    body: BookingCreate,
    db: DbSession,
    user_id: CurrentUserId,
):
    booking = await booking_service.create_booking(
        db,
        booker_id=user_id,
        item_id=body.item_id,
        start=body.start,
        end=body.end,
    )
    return BookingOut.model_validate(booking)


@router.patch("/{booking_id}", response_model=BookingOut)
async def decide_booking(
    booking_id: int,
    db: DbSession,
    user_id: CurrentUserId,
    approved: bool = Query(...),
):
    """
    Owner approves (approved=true) or rejects a WAITING booking. One decision only.
    """
    booking = await booking_service.decide_booking(
        db, owner_id=user_id, booking_id=booking_id, approved=approved
    )
    return BookingOut.model_validate(booking)


@router.get("", response_model=List[BookingOut])
async def list_booker_bookings(
    db: DbSession,
    user_id: CurrentUserId,
    now: Now,
    state: str = "ALL",
    from_: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
):
    bookings = await booking_service.list_bookings(
        db,
        role=BookingRole.BOOKER,
        user_id=user_id,
        state=state,
        now=now,
        from_=from_,
        size=size,
    )
    return [BookingOut.model_validate(b) for b in bookings]


@router.get("/owner", response_model=List[BookingOut])
async def list_owner_bookings(
    db: DbSession,
    user_id: CurrentUserId,
    now: Now,
    state: str = "ALL",
    from_: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
):
    """
    Bookings of every item the current user owns.
    """
    bookings = await booking_service.list_bookings(
        db,
        role=BookingRole.OWNER,
        user_id=user_id,
        state=state,
        now=now,
        from_=from_,
        size=size,
    )
    return [BookingOut.model_validate(b) for b in bookings]


@router.get("/{booking_id}", response_model=BookingOut)
async def get_booking(
    booking_id: int,
    db: DbSession,
    user_id: CurrentUserId,
):
    booking = await booking_service.get_booking(db, user_id=user_id, booking_id=booking_id)
    return BookingOut.model_validate(booking)
