# scripts/seed.py
import asyncio

from carrental.core.config import settings
from carrental.db.bootstrap import init_db
from carrental.db.session import engine


async def seed():
    # creates missing tables, then fills the catalog only if it is empty
    await init_db(engine, seed=True)
    await engine.dispose()
    print(f"Seed complete ({settings.DATABASE_URL})")


if __name__ == '__main__':
    asyncio.run(seed())
