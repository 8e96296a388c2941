# backend/app/schemas/user.py
from typing import Optional

from pydantic import EmailStr

from app.schemas.base import CamelModel, NameStr


class UserOut(CamelModel):
    id: int
    name: str
    email: EmailStr


class UserCreate(CamelModel):
    name: NameStr
    email: EmailStr


class UserUpdate(CamelModel):
    """
    Partial update: omitted / null fields are left unchanged.
    """
    name: Optional[NameStr] = None
    email: Optional[EmailStr] = None
