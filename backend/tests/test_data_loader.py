"""Tests for CSV airport seeding and metric backfill on SQLite."""

from datetime import datetime
from decimal import Decimal

import pytest

from flight_manager.data_loader import (
    DEFAULT_AIRPORTS_CSV,
    backfill_metrics,
    load_airports,
    read_airports_csv,
    seed_airports_if_empty,
)
from flight_manager.models import Airport, Flight


@pytest.fixture
def airports_csv(tmp_path):
    path = tmp_path / "airports.csv"
    path.write_text(
        "code,name,city,country,latitude,longitude\n"
        "sin,Singapore Changi Airport,Singapore,Singapore,1.3644,103.9915\n"
        "SYD,Sydney Airport,Sydney,Australia,-33.9399,151.1753\n"
    )
    return str(path)


def test_bundled_csv_has_seed_airports():
    codes = {row["code"] for row in read_airports_csv(DEFAULT_AIRPORTS_CSV)}
    assert {"JFK", "LAX", "LHR", "CDG", "DXB", "NRT"} <= codes


def test_missing_columns_rejected(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("code,name\nJFK,Kennedy\n")
    with pytest.raises(ValueError):
        read_airports_csv(str(path))


def test_load_airports_uppercases_codes(db, airports_csv):
    assert load_airports(db, airports_csv) == 2

    sin = db.query(Airport).filter(Airport.code == "SIN").one()
    assert sin.city == "Singapore"
    assert sin.longitude == pytest.approx(103.9915)


def test_load_airports_is_an_upsert(db, airports_csv, tmp_path):
    load_airports(db, airports_csv)

    renamed = tmp_path / "renamed.csv"
    renamed.write_text(
        "code,name,city,country,latitude,longitude\n"
        "SIN,Changi,Singapore,Singapore,1.3644,103.9915\n"
    )
    load_airports(db, str(renamed))
    db.expire_all()

    assert db.query(Airport).count() == 2
    assert db.query(Airport).filter(Airport.code == "SIN").one().name == "Changi"


def test_seed_only_when_empty(db, airports_csv):
    assert seed_airports_if_empty(db, airports_csv) == 2
    assert seed_airports_if_empty(db, airports_csv) == 0
    assert db.query(Airport).count() == 2


def test_backfill_metrics(db, airports):
    flight = Flight(
        flight_number="OLD1",
        departure_airport_id=airports["EQA"].id,
        destination_airport_id=airports["EQB"].id,
        departure_date=datetime(2025, 1, 1, 6, 0),
        fuel_consumption_per_km=Decimal("2"),
        takeoff_fuel=Decimal("100"),
        created_at=datetime(2025, 1, 1),
    )
    db.add(flight)
    db.commit()

    assert backfill_metrics(db) == 1
    db.expire_all()

    stored = db.get(Flight, flight.id)
    assert stored.calculated_distance == Decimal("111.19")
    assert stored.required_fuel == Decimal("322.39")
    assert backfill_metrics(db) == 0
