# scripts/seed.py
import asyncio
from datetime import timedelta

from app.core.clock import utc_now
from app.db.base import Base
from app.db.models import BookingStatus
from app.db.session import AsyncSessionLocal, engine
from app.db import crud_bookings, crud_items, crud_users


async def seed():
    async with engine.begin() as conn:
        # create tables (if migrations not run)
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        owner = await crud_users.get_user_by_email(db, 'owner@example.com')
        if not owner:
            owner = await crud_users.create_user(db, name='Owner', email='owner@example.com')
        booker = await crud_users.get_user_by_email(db, 'booker@example.com')
        if not booker:
            booker = await crud_users.create_user(db, name='Booker', email='booker@example.com')

        names = ['Drill', 'Ladder', 'Tent', 'Bike pump']
        items = []
        for name in names:
            items.append(await crud_items.create_item(
                db, owner_id=owner.id, name=name, description=f'{name} for rent', available=True,
            ))

        now = utc_now()
        # one finished rental (so the booker can comment) and one upcoming
        past = await crud_bookings.create_booking(
            db, booker_id=booker.id, item_id=items[0].id,
            start=now - timedelta(days=3), end=now - timedelta(days=2),
        )
        await crud_bookings.set_status(db, past, BookingStatus.APPROVED)
        await crud_bookings.create_booking(
            db, booker_id=booker.id, item_id=items[1].id,
            start=now + timedelta(days=1), end=now + timedelta(days=2),
        )
        print('Seed complete')

if __name__ == '__main__':
    asyncio.run(seed())
