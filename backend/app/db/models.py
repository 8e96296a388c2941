# app/db/models.py

import enum
from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Text,
    ForeignKey,
    Boolean,
    Enum,
)
from sqlalchemy.orm import relationship

from app.db.base import Base


class BookingStatus(str, enum.Enum):
    WAITING = "WAITING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    # No operation moves a booking here; kept for rows written out-of-band.
    CANCELED = "CANCELED"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)

    # Items this user lends out (via items.owner_id)
    items = relationship(
        "Item",
        back_populates="owner",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )

    bookings = relationship(
        "Booking",
        back_populates="booker",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )

    requests = relationship(
        "ItemRequest",
        back_populates="requestor",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )


class ItemRequest(Base):
    __tablename__ = "requests"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(Text, nullable=False)

    requestor_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created = Column(DateTime, default=datetime.utcnow, nullable=False)

    requestor = relationship("User", back_populates="requests")
    items = relationship("Item", back_populates="request")


class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True)

    owner_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    available = Column(Boolean, nullable=False, default=True)

    # Set when the item was listed in answer to someone's request
    request_id = Column(
        Integer,
        ForeignKey("requests.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    owner = relationship("User", back_populates="items")
    request = relationship("ItemRequest", back_populates="items")

    bookings = relationship(
        "Booking",
        back_populates="item",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )

    comments = relationship(
        "Comment",
        back_populates="item",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)

    # [start, end), naive UTC
    start = Column("start_date", DateTime, nullable=False, index=True)
    end = Column("end_date", DateTime, nullable=False)

    item_id = Column(
        Integer,
        ForeignKey("items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    booker_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    status = Column(
        Enum(BookingStatus, name="booking_status", native_enum=False, length=20),
        nullable=False,
        default=BookingStatus.WAITING,
        index=True,
    )

    item = relationship("Item", back_populates="bookings")
    booker = relationship("User", back_populates="bookings")


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    text = Column(Text, nullable=False)

    item_id = Column(
        Integer,
        ForeignKey("items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    author_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created = Column(DateTime, default=datetime.utcnow, nullable=False)

    item = relationship("Item", back_populates="comments")
    author = relationship("User")
