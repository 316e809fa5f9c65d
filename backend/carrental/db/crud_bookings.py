# carrental/db/crud_bookings.py

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.db.models import Booking


async def create_booking(
    db: AsyncSession,
    *,
    car_id: int,
    car_name: str,
    start_date: str,
    end_date: str,
    total_days: int,
    total_price: float,
    customer_name: Optional[str] = None,
    customer_phone: Optional[str] = None,
) -> int:
    """
    Record a booking request exactly as sent. Nothing is checked against
    the cars table or the calendar.
    """
    booking = Booking(
        car_id=car_id,
        car_name=car_name,
        customer_name=customer_name,
        customer_phone=customer_phone,
        start_date=start_date,
        end_date=end_date,
        total_days=total_days,
        total_price=total_price,
        status="Pending",
    )
    db.add(booking)
    await db.commit()
    await db.refresh(booking)
    return booking.id


async def list_bookings(db: AsyncSession) -> List[Booking]:
    stmt = select(Booking).order_by(Booking.created_at.desc(), Booking.id.desc())
    res = await db.execute(stmt)
    return list(res.scalars().all())
