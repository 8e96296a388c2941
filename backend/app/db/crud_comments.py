# app/db/crud_comments.py
from datetime import datetime
from typing import Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import Comment


async def create_comment(
    db: AsyncSession,
    *,
    item_id: int,
    author_id: int,
    text: str,
    created: datetime,
) -> Comment:
    comment = Comment(item_id=item_id, author_id=author_id, text=text, created=created)
    db.add(comment)
    await db.commit()
    await db.refresh(comment, attribute_names=["author"])
    return comment


async def list_comments_for_items(db: AsyncSession, item_ids: List[int]) -> Dict[int, List[Comment]]:
    """
    Comments grouped by item id, oldest first; items without comments are absent.
    """
    grouped: Dict[int, List[Comment]] = {}
    if not item_ids:
        return grouped
    res = await db.execute(
        select(Comment)
        .options(selectinload(Comment.author))
        .where(Comment.item_id.in_(item_ids))
        .order_by(Comment.created, Comment.id)
    )
    for comment in res.scalars().all():
        grouped.setdefault(comment.item_id, []).append(comment)
    return grouped
