# app/api/routers/items.py
import logging
from typing import List

from fastapi import APIRouter, Query

from app.api.dependencies import CurrentUserId, DbSession, Now
from app.core.config import get_settings
from app.core.errors import ItemNotFound, ItemRequestNotFound, UserNotFound
from app.core.paging import page_offset
from app.db import crud_items, crud_requests, crud_users
from app.schemas.comment import CommentCreate, CommentOut
from app.schemas.item import ItemCreate, ItemDetail, ItemOut, ItemUpdate
from app.services import items as item_service

logger = logging.getLogger(__name__)

router = APIRouter()

settings = get_settings()


@router.post("", response_model=ItemOut)
async def create_item(body: ItemCreate, db: DbSession, user_id: CurrentUserId):
    if await crud_users.get_user(db, user_id) is None:
        raise UserNotFound(user_id)
    if body.request_id is not None and await crud_requests.get_request(db, body.request_id) is None:
        raise ItemRequestNotFound(body.request_id)

    item = await crud_items.create_item(
        db,
        owner_id=user_id,
        name=body.name,
        description=body.description,
        available=body.available,
        request_id=body.request_id,
    )
    logger.info("item %s created by user %s", item.id, user_id)
    return ItemOut.model_validate(item)


@router.patch("/{item_id}", response_model=ItemOut)
async def update_item(
    item_id: int,
    body: ItemUpdate,
    db: DbSession,
    user_id: CurrentUserId,
):
    """
    Partial update; only the owner may edit. Anyone else sees 404.
    """
    item = await crud_items.get_item(db, item_id)
    if item is None or not await crud_items.is_owner(db, item_id, user_id):
        raise ItemNotFound(item_id)

    item = await crud_items.update_item(db, item, body.model_dump(exclude_unset=True))
    return ItemOut.model_validate(item)


@router.get("/search", response_model=List[ItemOut])
async def search_items(
    db: DbSession,
    text: str = "",
    from_: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
):
    if not text.strip():
        return []
    items = await crud_items.search_items(
        db, text, offset=page_offset(from_, size), limit=size
    )
    return [ItemOut.model_validate(i) for i in items]


@router.get("", response_model=List[ItemDetail])
async def list_my_items(
    db: DbSession,
    user_id: CurrentUserId,
    now: Now,
    from_: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
):
    return await item_service.list_owner_items(
        db,
        owner_id=user_id,
        now=now,
        offset=page_offset(from_, size),
        limit=size,
    )


@router.get("/{item_id}", response_model=ItemDetail)
async def get_item(item_id: int, db: DbSession, user_id: CurrentUserId, now: Now):
    # last/next booking are only shown to the owner
    return await item_service.get_item_detail(db, item_id=item_id, viewer_id=user_id, now=now)


@router.post("/{item_id}/comment", response_model=CommentOut)
async def add_comment(
    item_id: int,
    body: CommentCreate,
    db: DbSession,
    user_id: CurrentUserId,
    now: Now,
):
    comment = await item_service.add_comment(
        db, author_id=user_id, item_id=item_id, text=body.text, now=now
    )
    return CommentOut.from_comment(comment)
