# app/db/crud_items.py
from typing import List, Optional

from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Item


async def get_item(db: AsyncSession, item_id: int) -> Optional[Item]:
    res = await db.execute(select(Item).where(Item.id == item_id))
    return res.scalar_one_or_none()


async def is_owner(db: AsyncSession, item_id: int, user_id: int) -> bool:
    res = await db.execute(
        select(Item.id).where(Item.id == item_id, Item.owner_id == user_id)
    )
    return res.scalar_one_or_none() is not None


async def owner_has_items(db: AsyncSession, owner_id: int) -> bool:
    res = await db.execute(select(Item.id).where(Item.owner_id == owner_id).limit(1))
    return res.scalar_one_or_none() is not None


async def list_items_for_owner(
    db: AsyncSession,
    owner_id: int,
    *,
    offset: int = 0,
    limit: int = 10,
) -> List[Item]:
    res = await db.execute(
        select(Item)
        .where(Item.owner_id == owner_id)
        .order_by(Item.id)
        .offset(offset)
        .limit(limit)
    )
    return list(res.scalars().all())


async def list_items_for_requests(db: AsyncSession, request_ids: List[int]) -> List[Item]:
    if not request_ids:
        return []
    res = await db.execute(
        select(Item).where(Item.request_id.in_(request_ids)).order_by(Item.id)
    )
    return list(res.scalars().all())


async def search_items(
    db: AsyncSession,
    text: str,
    *,
    offset: int = 0,
    limit: int = 10,
) -> List[Item]:
    """
    Available items whose name or description contains `text`, case-insensitive.
    """
    pattern = f"%{text}%"
    stmt = (
        select(Item)
        .where(Item.available.is_(True))
        .where(or_(Item.name.ilike(pattern), Item.description.ilike(pattern)))
        .order_by(Item.id)
        .offset(offset)
        .limit(limit)
    )
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def create_item(db: AsyncSession, **kwargs) -> Item:
    item = Item(**kwargs)
    db.add(item)
    await db.commit()
    await db.refresh(item)
    return item


async def update_item(db: AsyncSession, item: Item, data: dict) -> Item:
    for k, v in data.items():
        if v is not None:
            setattr(item, k, v)
    db.add(item)
    await db.commit()
    await db.refresh(item)
    return item
