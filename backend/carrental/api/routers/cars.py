# carrental/api/routers/cars.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from carrental.core.logger import get_logger
from carrental.db import crud_cars
from carrental.db.session import get_db
from carrental.schemas.car import CarOut

logger = get_logger(__name__)

router = APIRouter()


@router.get("/cars", response_model=list[CarOut])
async def list_cars(db: AsyncSession = Depends(get_db)):
    """
    Public catalog, cheapest first.
    """
    try:
        cars = await crud_cars.list_cars(db)
    except SQLAlchemyError:
        logger.exception("Failed to fetch cars")
        raise HTTPException(status_code=500, detail="Failed to fetch cars")
    return [CarOut.model_validate(c) for c in cars]


@router.get("/cars/{car_id}", response_model=CarOut)
async def get_car(car_id: int, db: AsyncSession = Depends(get_db)):
    try:
        car = await crud_cars.get_car(db, car_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch car %s", car_id)
        raise HTTPException(status_code=500, detail="Failed to fetch car")

    if not car:
        raise HTTPException(status_code=404, detail="Car not found")
    return CarOut.model_validate(car)
