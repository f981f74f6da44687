from flight_manager.repositories.base import AirportRepositoryInterface, FlightRepositoryInterface
from flight_manager.repositories.airport_repository import AirportRepository
from flight_manager.repositories.flight_repository import FlightRepository

__all__ = [
    "AirportRepositoryInterface",
    "FlightRepositoryInterface",
    "AirportRepository",
    "FlightRepository",
]
