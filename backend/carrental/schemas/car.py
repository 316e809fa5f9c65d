# backend/carrental/schemas/car.py
from typing import Optional
from pydantic import BaseModel


class CarOut(BaseModel):
    id: int
    name: str
    category: str
    image_url: Optional[str] = None
    price_per_day: float
    transmission: str
    status: str

    model_config = {"from_attributes": True}


class CarCreate(BaseModel):
    name: str
    category: str = "Economy"
    image_url: Optional[str] = None
    # "150.50" from a form field is accepted and stored as 150.5
    price_per_day: float
    # Checked by the cars table constraint, not here
    transmission: str
    status: Optional[str] = None


class CarUpdate(BaseModel):
    """
    Full replacement of a car row: every column is sent, status included.
    """
    name: str
    category: str
    image_url: Optional[str] = None
    price_per_day: float
    transmission: str
    status: str
