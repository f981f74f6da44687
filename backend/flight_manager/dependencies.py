"""FastAPI dependency providers wiring repositories into services per request."""
import logging

from fastapi import Depends
from sqlalchemy.orm import Session

from flight_manager.database import get_db
from flight_manager.repositories import AirportRepository, FlightRepository
from flight_manager.services import AirportService, FlightCalculator, FlightService

_calculator = FlightCalculator()


def get_airport_repository(db: Session = Depends(get_db)) -> AirportRepository:
    return AirportRepository(db)


def get_flight_service(db: Session = Depends(get_db)) -> FlightService:
    return FlightService(
        flight_repository=FlightRepository(db),
        airport_repository=AirportRepository(db),
        calculator=_calculator,
        logger=logging.getLogger("flight_manager.services.flight_service"),
    )


def get_airport_service(airports: AirportRepository = Depends(get_airport_repository)) -> AirportService:
    return AirportService(airports)
