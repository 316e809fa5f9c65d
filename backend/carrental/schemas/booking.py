# backend/carrental/schemas/booking.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class BookingCreate(BaseModel):
    car_id: int
    car_name: str
    # free-form strings from the booking form, not parsed
    start_date: str
    end_date: str
    total_days: int
    total_price: float
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None


class BookingOut(BaseModel):
    id: int
    car_id: Optional[int] = None
    car_name: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    total_days: Optional[int] = None
    total_price: Optional[float] = None
    status: str
    created_at: datetime

    # Pydantic v2 style, replaces orm_mode=True
    model_config = {"from_attributes": True}
