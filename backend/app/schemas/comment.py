# backend/app/schemas/comment.py
from datetime import datetime

from app.schemas.base import CamelModel, NonBlankStr


class CommentCreate(CamelModel):
    text: NonBlankStr


class CommentOut(CamelModel):
    id: int
    text: str
    author_name: str
    created: datetime

    @classmethod
    def from_comment(cls, comment) -> "CommentOut":
        return cls(
            id=comment.id,
            text=comment.text,
            author_name=comment.author.name,
            created=comment.created,
        )
