# app/api/routers/requests.py
from typing import List

from fastapi import APIRouter, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import CurrentUserId, DbSession, Now
from app.core.config import get_settings
from app.core.errors import ItemRequestNotFound, UserNotFound
from app.core.paging import page_offset
from app.db import crud_items, crud_requests, crud_users
from app.db.models import ItemRequest
from app.schemas.item import ItemOut
from app.schemas.request import ItemRequestCreate, ItemRequestOut

router = APIRouter()

settings = get_settings()


async def _with_items(db: AsyncSession, requests: List[ItemRequest]) -> List[ItemRequestOut]:
    """
    Attach the items listed in answer to each request (one query for all).
    """
    items = await crud_items.list_items_for_requests(db, [r.id for r in requests])
    by_request: dict[int, list[ItemOut]] = {}
    for item in items:
        by_request.setdefault(item.request_id, []).append(ItemOut.model_validate(item))
    return [
        ItemRequestOut(
            id=r.id,
            description=r.description,
            created=r.created,
            items=by_request.get(r.id, []),
        )
        for r in requests
    ]


async def _ensure_user(db: AsyncSession, user_id: int) -> None:
    if await crud_users.get_user(db, user_id) is None:
        raise UserNotFound(user_id)


@router.post("", response_model=ItemRequestOut)
async def create_request(
    body: ItemRequestCreate,
    db: DbSession,
    user_id: CurrentUserId,
    now: Now,
):
    await _ensure_user(db, user_id)
    request = await crud_requests.create_request(
        db, requestor_id=user_id, description=body.description, created=now
    )
    return ItemRequestOut(
        id=request.id,
        description=request.description,
        created=request.created,
        items=[],
    )


@router.get("", response_model=List[ItemRequestOut])
async def list_my_requests(db: DbSession, user_id: CurrentUserId):
    await _ensure_user(db, user_id)
    requests = await crud_requests.list_requests_by_requestor(db, user_id)
    return await _with_items(db, requests)


@router.get("/all", response_model=List[ItemRequestOut])
async def list_other_requests(
    db: DbSession,
    user_id: CurrentUserId,
    from_: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
):
    await _ensure_user(db, user_id)
    requests = await crud_requests.list_requests_of_others(
        db, user_id, offset=page_offset(from_, size), limit=size
    )
    return await _with_items(db, requests)


@router.get("/{request_id}", response_model=ItemRequestOut)
async def get_request(request_id: int, db: DbSession, user_id: CurrentUserId):
    await _ensure_user(db, user_id)
    request = await crud_requests.get_request(db, request_id)
    if request is None:
        raise ItemRequestNotFound(request_id)
    return (await _with_items(db, [request]))[0]
