from typing import List

from fastapi import APIRouter

from app.api.dependencies import DbSession
from app.core.errors import EmailAlreadyExists, UserNotFound
from app.db import crud_users
from app.schemas.user import UserCreate, UserOut, UserUpdate

router = APIRouter()


@router.post("", response_model=UserOut)
async def create_user(body: UserCreate, db: DbSession):
    if await crud_users.get_user_by_email(db, body.email):
        raise EmailAlreadyExists(body.email)
    user = await crud_users.create_user(db, name=body.name, email=body.email)
    return UserOut.model_validate(user)


@router.get("", response_model=List[UserOut])
async def list_users(db: DbSession):
    users = await crud_users.list_users(db)
    return [UserOut.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: int, db: DbSession):
    user = await crud_users.get_user(db, user_id)
    if not user:
        raise UserNotFound(user_id)
    return UserOut.model_validate(user)


@router.patch("/{user_id}", response_model=UserOut)
async def update_user(user_id: int, body: UserUpdate, db: DbSession):
    user = await crud_users.get_user(db, user_id)
    if not user:
        raise UserNotFound(user_id)

    if body.email is not None and body.email != user.email:
        if await crud_users.get_user_by_email(db, body.email):
            raise EmailAlreadyExists(body.email)

    user = await crud_users.update_user(db, user, body.model_dump(exclude_unset=True))
    return UserOut.model_validate(user)


@router.delete("/{user_id}")
async def delete_user(user_id: int, db: DbSession):
    user = await crud_users.get_user(db, user_id)
    if not user:
        raise UserNotFound(user_id)
    await crud_users.delete_user(db, user)
    return {"message": "deleted"}
