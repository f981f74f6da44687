"""Shared fixtures: in-memory SQLite session, seeded airports, in-memory stores."""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from flight_manager.database import Base, build_engine, utcnow
from flight_manager.models import Airport, Flight
from flight_manager.repositories.base import AirportRepositoryInterface, FlightRepositoryInterface
from flight_manager.schemas.flight_schema import FlightCreate


AIRPORT_ROWS = [
    dict(code="JFK", name="John F. Kennedy International Airport", city="New York", country="USA",
         latitude=40.6413, longitude=-73.7781),
    dict(code="LAX", name="Los Angeles International Airport", city="Los Angeles", country="USA",
         latitude=33.9416, longitude=-118.4085),
    dict(code="LHR", name="London Heathrow Airport", city="London", country="UK",
         latitude=51.4700, longitude=-0.4543),
    # One degree of longitude apart on the equator: 6371 * pi / 180 = 111.19 km
    dict(code="EQA", name="Equator A", city="Nowhere", country="XX", latitude=0.0, longitude=0.0),
    dict(code="EQB", name="Equator B", city="Nowhere", country="XX", latitude=0.0, longitude=1.0),
]


# =============================================================================
# Database fixtures
# =============================================================================

@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def airports(db) -> Dict[str, Airport]:
    """Airports stored in the SQLite session, keyed by code."""
    rows = [Airport(**row) for row in AIRPORT_ROWS]
    db.add_all(rows)
    db.commit()
    return {a.code: a for a in rows}


# =============================================================================
# In-memory stores
# =============================================================================

class InMemoryAirportRepository(AirportRepositoryInterface):

    def __init__(self, airports: Optional[List[Airport]] = None):
        self._rows: Dict[int, Airport] = {}
        for airport in airports or []:
            self.add(airport)

    def get_all(self) -> List[Airport]:
        return sorted(self._rows.values(), key=lambda a: a.code)

    def get_by_id(self, airport_id: int) -> Optional[Airport]:
        return self._rows.get(airport_id)

    def get_by_code(self, code: str) -> Optional[Airport]:
        return next((a for a in self._rows.values() if a.code == code.upper()), None)

    def add(self, airport: Airport) -> Airport:
        if airport.id is None:
            airport.id = max(self._rows, default=0) + 1
        self._rows[airport.id] = airport
        return airport


class InMemoryFlightRepository(FlightRepositoryInterface):

    def __init__(self):
        self._rows: Dict[int, Flight] = {}
        self._next_id = 1
        self.deleted: List[int] = []

    def get_all(self) -> List[Flight]:
        return sorted(self._rows.values(), key=lambda f: f.departure_date, reverse=True)

    def get_by_id(self, flight_id: int) -> Optional[Flight]:
        return self._rows.get(flight_id)

    def add(self, flight: Flight) -> Flight:
        flight.id = self._next_id
        flight.created_at = utcnow()
        self._next_id += 1
        self._rows[flight.id] = flight
        return flight

    def update(self, flight: Flight) -> None:
        flight.modified_at = utcnow()
        self._rows[flight.id] = flight

    def delete(self, flight_id: int) -> None:
        if self._rows.pop(flight_id, None) is not None:
            self.deleted.append(flight_id)

    def exists(self, flight_id: int) -> bool:
        return flight_id in self._rows


@pytest.fixture
def airport_store() -> InMemoryAirportRepository:
    return InMemoryAirportRepository([Airport(**row) for row in AIRPORT_ROWS])


@pytest.fixture
def flight_store() -> InMemoryFlightRepository:
    return InMemoryFlightRepository()


# =============================================================================
# Payload helpers
# =============================================================================

@pytest.fixture
def make_flight_create():
    """Factory for FlightCreate payloads between two airport ids."""

    def _make(
        departure_airport_id: int,
        destination_airport_id: int,
        flight_number: str = "FM101",
        departure_date: datetime = datetime(2026, 11, 1, 10, 30),
        fuel_consumption_per_km: Decimal = Decimal("3.5"),
        takeoff_fuel: Decimal = Decimal("500"),
    ) -> FlightCreate:
        return FlightCreate(
            flight_number=flight_number,
            departure_airport_id=departure_airport_id,
            destination_airport_id=destination_airport_id,
            departure_date=departure_date,
            fuel_consumption_per_km=fuel_consumption_per_km,
            takeoff_fuel=takeoff_fuel,
        )

    return _make
