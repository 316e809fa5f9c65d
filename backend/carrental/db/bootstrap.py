# carrental/db/bootstrap.py
"""
Schema creation and the fixed seed catalog.

create_all() only adds missing tables. reset_schema() is the escape hatch for
schema drift: it drops both tables, rebuilds them and reloads SEED_CARS.
"""
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from carrental.core.logger import get_logger
from carrental.db.base import Base
from carrental.db.models import Car

logger = get_logger(__name__)

SEED_CARS = [
    {
        "name": "Toyota Vios",
        "category": "Economy",
        "image_url": "/images/cars/toyota-vios.jpg",
        "price_per_day": 35.0,
        "transmission": "Auto",
        "status": "Available",
    },
    {
        "name": "Perodua Myvi",
        "category": "Economy",
        "image_url": "/images/cars/perodua-myvi.jpg",
        "price_per_day": 28.0,
        "transmission": "Manual",
        "status": "Available",
    },
    {
        "name": "Honda City",
        "category": "Sedan",
        "image_url": "/images/cars/honda-city.jpg",
        "price_per_day": 40.0,
        "transmission": "Auto",
        "status": "Available",
    },
    {
        "name": "Honda CR-V",
        "category": "SUV",
        "image_url": "/images/cars/honda-crv.jpg",
        "price_per_day": 75.0,
        "transmission": "Auto",
        "status": "Available",
    },
    {
        "name": "Toyota Hilux",
        "category": "Pickup",
        "image_url": "/images/cars/toyota-hilux.jpg",
        "price_per_day": 85.0,
        "transmission": "Manual",
        "status": "Available",
    },
    {
        "name": "Toyota Alphard",
        "category": "MPV",
        "image_url": "/images/cars/toyota-alphard.jpg",
        "price_per_day": 150.0,
        "transmission": "Auto",
        "status": "Available",
    },
]


def _rebuild_tables(session) -> None:
    conn = session.connection()
    Base.metadata.drop_all(bind=conn)
    Base.metadata.create_all(bind=conn)


async def seed_cars(db: AsyncSession) -> int:
    """
    Load SEED_CARS into an empty catalog. Returns how many rows were added.
    """
    count = (await db.execute(select(func.count(Car.id)))).scalar_one()
    if count:
        return 0
    db.add_all([Car(**row) for row in SEED_CARS])
    await db.commit()
    return len(SEED_CARS)


async def init_db(engine: AsyncEngine, seed: bool = True) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if not seed:
        return
    async with AsyncSession(bind=engine, expire_on_commit=False) as db:
        added = await seed_cars(db)
    if added:
        logger.info("Seeded %d cars into empty catalog", added)


async def reset_schema(db: AsyncSession) -> None:
    """
    Drop and recreate cars + bookings, then reload the seed catalog.
    Not atomic: a failure halfway leaves whatever was already rebuilt.
    """
    await db.run_sync(_rebuild_tables)
    # rows held by this session no longer exist
    db.expunge_all()
    db.add_all([Car(**row) for row in SEED_CARS])
    await db.commit()
    logger.warning("Schema reset: bookings cleared, %d seed cars loaded", len(SEED_CARS))
