# app/db/crud_requests.py
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import ItemRequest


async def create_request(
    db: AsyncSession, *, requestor_id: int, description: str, created: datetime
) -> ItemRequest:
    request = ItemRequest(requestor_id=requestor_id, description=description, created=created)
    db.add(request)
    await db.commit()
    await db.refresh(request)
    return request


async def get_request(db: AsyncSession, request_id: int) -> Optional[ItemRequest]:
    res = await db.execute(select(ItemRequest).where(ItemRequest.id == request_id))
    return res.scalar_one_or_none()


async def list_requests_by_requestor(db: AsyncSession, requestor_id: int) -> List[ItemRequest]:
    res = await db.execute(
        select(ItemRequest)
        .where(ItemRequest.requestor_id == requestor_id)
        .order_by(ItemRequest.created.desc(), ItemRequest.id.desc())
    )
    return list(res.scalars().all())


async def list_requests_of_others(
    db: AsyncSession,
    user_id: int,
    *,
    offset: int = 0,
    limit: int = 10,
) -> List[ItemRequest]:
    """
    Everyone else's requests, newest first.
    """
    res = await db.execute(
        select(ItemRequest)
        .where(ItemRequest.requestor_id != user_id)
        .order_by(ItemRequest.created.desc(), ItemRequest.id.desc())
        .offset(offset)
        .limit(limit)
    )
    return list(res.scalars().all())
