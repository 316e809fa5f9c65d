# carrental/db/models.py

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    func,
    Float,
    Integer,
    String,
    Text,
)

from carrental.db.base import Base

TRANSMISSIONS = ("Auto", "Manual")


class Car(Base):
    __tablename__ = "cars"
    __table_args__ = (
        # Enforced by the database only; the API passes the value through
        CheckConstraint(
            "transmission IN ('Auto', 'Manual')",
            name="ck_cars_transmission",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False, default="Economy")
    image_url = Column(Text, nullable=True)
    price_per_day = Column(Float, nullable=False)
    transmission = Column(String(10), nullable=False)

    # "Available" | "Booked"
    status = Column(String(20), nullable=False, default="Available")


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)

    # Plain column, no ForeignKey: bookings may point at deleted or unknown cars
    car_id = Column(Integer, nullable=True, index=True)
    # Copy of the car name at booking time
    car_name = Column(String(255), nullable=True)

    customer_name = Column(String(255), nullable=True)
    customer_phone = Column(String(32), nullable=True)

    # Stored as sent by the client, no date parsing
    start_date = Column(String(32), nullable=True)
    end_date = Column(String(32), nullable=True)

    total_days = Column(Integer, nullable=True)
    total_price = Column(Float, nullable=True)

    status = Column(String(20), nullable=False, default="Pending")
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
