import os
import logging
from typing import Optional

import pandas as pd
from sqlalchemy.orm import Session
from sqlalchemy.dialects import postgresql, sqlite

from flight_manager.config import settings
from flight_manager.database import Base, SessionLocal, engine
from flight_manager.models import Airport, Flight
from flight_manager.services.flight_calculations import FlightCalculator, FlightCalculatorInterface, round_metric

logger = logging.getLogger("DataLoader")

DEFAULT_AIRPORTS_CSV = os.path.join(os.path.dirname(__file__), "data", "airports.csv")
AIRPORT_COLUMNS = ["code", "name", "city", "country", "latitude", "longitude"]


def _insert_for(db: Session):
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert
    if dialect == "sqlite":
        return sqlite.insert
    raise ValueError(f"Airport upsert not supported on dialect '{dialect}'")


def read_airports_csv(csv_path: Optional[str] = None) -> list:
    df = pd.read_csv(csv_path or settings.airports_csv_path or DEFAULT_AIRPORTS_CSV)

    missing = set(AIRPORT_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(f"Airport CSV is missing columns: {sorted(missing)}")

    df = df[AIRPORT_COLUMNS].copy()
    df["code"] = df["code"].str.strip().str.upper()
    df = df.drop_duplicates(subset="code", keep="last")
    df = df.astype(object).where(pd.notnull(df), None)
    return df.to_dict(orient="records")


def load_airports(db: Session, csv_path: Optional[str] = None) -> int:
    """Upsert airports from CSV keyed on code. Returns the number of rows sent."""
    records = read_airports_csv(csv_path)
    if not records:
        return 0

    insert = _insert_for(db)
    try:
        stmt = insert(Airport).values(records)
        stmt = stmt.on_conflict_do_update(
            index_elements=["code"],
            set_={
                "name": stmt.excluded.name,
                "city": stmt.excluded.city,
                "country": stmt.excluded.country,
                "latitude": stmt.excluded.latitude,
                "longitude": stmt.excluded.longitude,
            }
        )
        db.execute(stmt)
        db.commit()
    except Exception as e:
        logger.error(f"Failed to load airports: {e}")
        db.rollback()
        raise

    logger.info(f"Successfully upserted {len(records)} airports via bulk insert.")
    return len(records)


def seed_airports_if_empty(db: Session, csv_path: Optional[str] = None) -> int:
    if db.query(Airport.id).first() is not None:
        return 0
    return load_airports(db, csv_path)


def backfill_metrics(db: Session, calculator: Optional[FlightCalculatorInterface] = None) -> int:
    """Compute distance and required fuel for flights stored without them."""
    calculator = calculator or FlightCalculator()

    missing = db.query(Flight).filter(
        (Flight.calculated_distance == None) | (Flight.required_fuel == None)  # noqa: E711
    ).all()

    logger.info(f"Found {len(missing)} flights requiring metric backfill.")
    if not missing:
        return 0

    for flight in missing:
        distance = calculator.calculate_distance(flight.departure_airport, flight.destination_airport)
        fuel = calculator.calculate_fuel_required(distance, flight.fuel_consumption_per_km, flight.takeoff_fuel)
        flight.calculated_distance = round_metric(distance)
        flight.required_fuel = round_metric(fuel)

    try:
        db.commit()
    except Exception as e:
        logger.error(f"Failed to backfill flight metrics: {e}")
        db.rollback()
        raise

    logger.info(f"Complete. Backfilled {len(missing)} flights.")
    return len(missing)


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        load_airports(db)
        backfill_metrics(db)
    finally:
        db.close()
