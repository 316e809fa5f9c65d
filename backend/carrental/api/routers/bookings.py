from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.core.logger import get_logger
from carrental.db import crud_bookings
from carrental.db.session import get_db
from carrental.schemas.booking import BookingCreate
from carrental.schemas.common import CreatedResponse

logger = get_logger(__name__)

router = APIRouter()


@router.post("/bookings", response_model=CreatedResponse)
async def create_booking(body: BookingCreate, db: AsyncSession = Depends(get_db)):
    """
    Store a booking request before the client hands off to WhatsApp.
    The car id, dates and price are taken as sent.
    """
    try:
        booking_id = await crud_bookings.create_booking(db, **body.model_dump())
    except SQLAlchemyError:
        logger.exception("Failed to create booking for car %s", body.car_id)
        raise HTTPException(status_code=500, detail="Failed to create booking")

    logger.info("Booking %s created for car %s", booking_id, body.car_id)
    return {"success": True, "id": booking_id}
