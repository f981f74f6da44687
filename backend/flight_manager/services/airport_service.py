import logging
from typing import List, Optional

from flight_manager.exceptions import AirportNotFoundError, DuplicateAirportError
from flight_manager.models import Airport
from flight_manager.repositories.base import AirportRepositoryInterface
from flight_manager.schemas.airport_schema import AirportCreate


class AirportService:
    """Administrative airport registration and lookups."""

    def __init__(self, airport_repository: AirportRepositoryInterface, logger: Optional[logging.Logger] = None):
        self._airports = airport_repository
        self._logger = logger or logging.getLogger(__name__)

    def list_airports(self) -> List[Airport]:
        return self._airports.get_all()

    def get_airport(self, code: str) -> Airport:
        airport = self._airports.get_by_code(code)
        if airport is None:
            raise AirportNotFoundError(code.upper())
        return airport

    def register_airport(self, data: AirportCreate) -> Airport:
        if self._airports.get_by_code(data.code) is not None:
            raise DuplicateAirportError(data.code)

        airport = self._airports.add(Airport(**data.model_dump()))
        self._logger.info(f"Airport {airport.code} registered with ID {airport.id}")
        return airport
