# app/api/dependencies.py
from datetime import datetime
from typing import Annotated, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, get_clock
from app.core.config import get_settings
from app.core.errors import MissingUserHeader
from app.db.session import get_db

settings = get_settings()


async def get_current_user_id(
    user_id: Optional[int] = Header(None, alias=settings.USER_ID_HEADER),
) -> int:
    """
    The acting user is identified by a plain id header; existence is checked
    by the operation itself so each can report its own not-found.
    """
    if user_id is None:
        raise MissingUserHeader(settings.USER_ID_HEADER)
    return user_id


def get_now(clock: Clock = Depends(get_clock)) -> datetime:
    return clock()


DbSession = Annotated[AsyncSession, Depends(get_db)]
CurrentUserId = Annotated[int, Depends(get_current_user_id)]
Now = Annotated[datetime, Depends(get_now)]
