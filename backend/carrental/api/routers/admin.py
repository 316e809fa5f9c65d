from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.api.dependencies import require_admin
from carrental.core.logger import get_logger
from carrental.db import bootstrap, crud_bookings, crud_cars
from carrental.db.session import get_db
from carrental.schemas.booking import BookingOut
from carrental.schemas.car import CarCreate, CarUpdate
from carrental.schemas.common import CreatedResponse, SuccessResponse

logger = get_logger(__name__)

# Every route below sits behind the shared-secret check
router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/bookings", response_model=list[BookingOut])
async def admin_bookings(db: AsyncSession = Depends(get_db)):
    """
    All booking requests, newest first.
    """
    try:
        bookings = await crud_bookings.list_bookings(db)
    except SQLAlchemyError:
        logger.exception("Failed to fetch bookings")
        raise HTTPException(status_code=500, detail="Failed to fetch bookings")
    return [BookingOut.model_validate(b) for b in bookings]


@router.post("/cars", response_model=CreatedResponse)
async def admin_create_car(body: CarCreate, db: AsyncSession = Depends(get_db)):
    try:
        car_id = await crud_cars.create_car(db, **body.model_dump())
    except SQLAlchemyError:
        logger.exception("Failed to create car %r", body.name)
        raise HTTPException(status_code=500, detail="Failed to create car")

    logger.info("Car %s created: %s", car_id, body.name)
    return {"success": True, "id": car_id}


@router.put("/cars/{car_id}", response_model=SuccessResponse)
async def admin_update_car(
    car_id: int,
    body: CarUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Overwrite all fields of the car. An unknown id still answers success.
    """
    try:
        updated = await crud_cars.update_car(db, car_id, **body.model_dump())
    except SQLAlchemyError:
        logger.exception("Failed to update car %s", car_id)
        raise HTTPException(status_code=500, detail="Failed to update car")

    logger.info("Car %s updated (%d row(s))", car_id, updated)
    return {"success": True}


@router.delete("/cars/{car_id}", response_model=SuccessResponse)
async def admin_delete_car(car_id: int, db: AsyncSession = Depends(get_db)):
    try:
        deleted = await crud_cars.delete_car(db, car_id)
    except SQLAlchemyError:
        logger.exception("Failed to delete car %s", car_id)
        raise HTTPException(status_code=500, detail="Failed to delete car")

    logger.info("Car %s deleted (%d row(s))", car_id, deleted)
    return {"success": True}


@router.post("/reset", response_model=SuccessResponse)
async def admin_reset(db: AsyncSession = Depends(get_db)):
    """
    Drop and rebuild both tables, then reload the seed cars.
    Destroys every booking. Meant for fixing schema drift only.
    """
    try:
        await bootstrap.reset_schema(db)
    except SQLAlchemyError:
        logger.exception("Schema reset failed")
        raise HTTPException(status_code=500, detail="Failed to reset database")
    return {"success": True}
