from typing import Tuple

from flight_manager.exceptions import AirportsMustDifferError, InvalidAirportSelectionError
from flight_manager.models import Airport
from flight_manager.repositories.base import AirportRepositoryInterface


class AirportPairValidator:
    """
    Checks a proposed departure/destination pair: the ids must differ and both
    must resolve to stored airports.
    """

    def __init__(self, airport_repository: AirportRepositoryInterface):
        self._airports = airport_repository

    def validate(self, departure_airport_id: int, destination_airport_id: int) -> Tuple[Airport, Airport]:
        """Return the resolved (departure, destination) airports or raise a FlightValidationError."""
        if departure_airport_id == destination_airport_id:
            raise AirportsMustDifferError(departure_airport_id)

        departure = self._airports.get_by_id(departure_airport_id)
        destination = self._airports.get_by_id(destination_airport_id)

        if departure is None or destination is None:
            raise InvalidAirportSelectionError(departure_airport_id, destination_airport_id)

        return departure, destination

    def is_valid(self, departure_airport_id: int, destination_airport_id: int) -> bool:
        if departure_airport_id == destination_airport_id:
            return False

        return (
            self._airports.get_by_id(departure_airport_id) is not None
            and self._airports.get_by_id(destination_airport_id) is not None
        )
