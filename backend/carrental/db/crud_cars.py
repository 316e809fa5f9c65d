# carrental/db/crud_cars.py
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.db.models import Car


async def list_cars(db: AsyncSession) -> List[Car]:
    """
    Public catalog: cheapest first.
    """
    stmt = select(Car).order_by(Car.price_per_day.asc(), Car.id.asc())
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def get_car(db: AsyncSession, car_id: int) -> Optional[Car]:
    res = await db.execute(select(Car).where(Car.id == car_id))
    return res.scalar_one_or_none()


async def create_car(db: AsyncSession, **kwargs) -> int:
    """
    Insert a car and return its new id. status defaults to 'Available'.
    """
    if not kwargs.get("status"):
        kwargs["status"] = "Available"
    car = Car(**kwargs)
    db.add(car)
    await db.commit()
    await db.refresh(car)
    return car.id


async def update_car(db: AsyncSession, car_id: int, **kwargs) -> int:
    """
    Overwrite every given column of the row in one UPDATE.
    Returns the number of rows matched; an unknown id is simply 0.
    """
    res = await db.execute(update(Car).where(Car.id == car_id).values(**kwargs))
    await db.commit()
    return res.rowcount


async def delete_car(db: AsyncSession, car_id: int) -> int:
    # bookings that reference this car are left as they are
    res = await db.execute(delete(Car).where(Car.id == car_id))
    await db.commit()
    return res.rowcount
