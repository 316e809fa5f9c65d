"""Direct tests of the storage helpers, without HTTP in between."""

from sqlalchemy import select

from carrental.db import bootstrap, crud_bookings, crud_cars
from carrental.db.models import Booking, Car
from carrental.db.session import engine_options


async def test_create_car_defaults_status(db):
    car_id = await crud_cars.create_car(
        db, name="Myvi", category="Economy", image_url=None,
        price_per_day=28.0, transmission="Manual", status=None,
    )
    car = await crud_cars.get_car(db, car_id)
    assert car.status == "Available"


async def test_update_and_delete_report_rowcount(db):
    car_id = await crud_cars.create_car(db, name="Vios", price_per_day=35.0, transmission="Auto")

    assert await crud_cars.update_car(db, 9999, name="Nope") == 0
    assert await crud_cars.update_car(db, car_id, name="Vios GR", status="Booked") == 1

    car = await crud_cars.get_car(db, car_id)
    await db.refresh(car)
    assert car.name == "Vios GR"
    assert car.status == "Booked"

    assert await crud_cars.delete_car(db, car_id) == 1
    assert await crud_cars.delete_car(db, car_id) == 0
    assert await crud_cars.get_car(db, car_id) is None


async def test_list_cars_ties_keep_insert_order(db):
    first = await crud_cars.create_car(db, name="One", price_per_day=50.0, transmission="Auto")
    second = await crud_cars.create_car(db, name="Two", price_per_day=50.0, transmission="Auto")
    cheap = await crud_cars.create_car(db, name="Cheap", price_per_day=10.0, transmission="Auto")

    assert [c.id for c in await crud_cars.list_cars(db)] == [cheap, first, second]


async def test_create_booking_defaults(db):
    booking_id = await crud_bookings.create_booking(
        db, car_id=77, car_name="Ghost", start_date="a", end_date="b",
        total_days=1, total_price=9.0,
    )
    booking = (await db.execute(select(Booking).where(Booking.id == booking_id))).scalar_one()
    assert booking.status == "Pending"
    assert booking.created_at is not None
    assert booking.customer_phone is None


async def test_seed_cars_only_fills_empty_catalog(db):
    assert await bootstrap.seed_cars(db) == len(bootstrap.SEED_CARS)
    assert await bootstrap.seed_cars(db) == 0
    assert len(await crud_cars.list_cars(db)) == len(bootstrap.SEED_CARS)


async def test_init_db_creates_and_seeds(engine):
    await bootstrap.init_db(engine, seed=True)
    await bootstrap.init_db(engine, seed=True)

    async with engine.connect() as conn:
        rows = (await conn.execute(select(Car.name))).scalars().all()
    assert sorted(rows) == sorted(c["name"] for c in bootstrap.SEED_CARS)


async def test_reset_schema_clears_bookings(db):
    await crud_cars.create_car(db, name="Extra", price_per_day=1.0, transmission="Auto")
    await crud_bookings.create_booking(
        db, car_id=1, car_name="Extra", start_date="a", end_date="b",
        total_days=1, total_price=1.0,
    )

    await bootstrap.reset_schema(db)

    assert await crud_bookings.list_bookings(db) == []
    names = [c.name for c in await crud_cars.list_cars(db)]
    assert "Extra" not in names
    assert len(names) == len(bootstrap.SEED_CARS)


def test_engine_options_per_backend():
    assert engine_options("sqlite+aiosqlite:///./carrental.db") == {
        "connect_args": {"check_same_thread": False}
    }
    mysql = engine_options("mysql+aiomysql://u:p@localhost/carrental")
    assert mysql["pool_pre_ping"] is True
    assert "connect_args" not in mysql


async def test_created_at_set_by_database(db):
    first = await crud_bookings.create_booking(
        db, car_id=1, car_name="A", start_date="a", end_date="b",
        total_days=1, total_price=1.0,
    )
    second = await crud_bookings.create_booking(
        db, car_id=1, car_name="B", start_date="a", end_date="b",
        total_days=1, total_price=1.0,
    )
    listed = await crud_bookings.list_bookings(db)
    assert [b.id for b in listed] == [second, first]
    assert all(b.created_at is not None for b in listed)
