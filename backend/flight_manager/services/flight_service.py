"""
Flight lifecycle: validation, metric calculation and persistence.

Every mutating call validates the airport pair first and then recomputes
distance and required fuel together, so the stored metrics always match the
stored inputs.
"""
import logging
from typing import List, Optional

from flight_manager.database import utcnow
from flight_manager.exceptions import FlightNotFoundError
from flight_manager.models import Airport, Flight
from flight_manager.repositories.base import AirportRepositoryInterface, FlightRepositoryInterface
from flight_manager.schemas.flight_schema import FlightCreate, FlightUpdate
from flight_manager.services.flight_calculations import FlightCalculator, FlightCalculatorInterface, round_metric
from flight_manager.services.flight_validator import AirportPairValidator


class FlightService:
    """
    Usage:
        service = FlightService(FlightRepository(db), AirportRepository(db))
        flight = service.create_flight(FlightCreate(...))
    """

    def __init__(
        self,
        flight_repository: FlightRepositoryInterface,
        airport_repository: AirportRepositoryInterface,
        calculator: Optional[FlightCalculatorInterface] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._flights = flight_repository
        self._airports = airport_repository
        self._calculator = calculator or FlightCalculator()
        self._validator = AirportPairValidator(airport_repository)
        self._logger = logger or logging.getLogger(__name__)

    def list_flights(self) -> List[Flight]:
        return self._flights.get_all()

    def get_flight(self, flight_id: int) -> Flight:
        flight = self._flights.get_by_id(flight_id)
        if flight is None:
            self._logger.warning(f"Flight with ID {flight_id} not found")
            raise FlightNotFoundError(flight_id)
        return flight

    def create_flight(self, data: FlightCreate) -> Flight:
        departure, destination = self._validator.validate(
            data.departure_airport_id, data.destination_airport_id
        )

        flight = Flight(
            flight_number=data.flight_number,
            departure_airport_id=departure.id,
            destination_airport_id=destination.id,
            departure_date=data.departure_date,
            fuel_consumption_per_km=data.fuel_consumption_per_km,
            takeoff_fuel=data.takeoff_fuel,
            created_at=utcnow(),
        )
        self._apply_metrics(flight, departure, destination)

        created = self._flights.add(flight)
        self._logger.info(f"Flight {created.flight_number} created with ID {created.id}")

        return self._flights.get_by_id(created.id) or created

    def update_flight(self, flight_id: int, data: FlightUpdate) -> Flight:
        existing = self.get_flight(flight_id)

        departure, destination = self._validator.validate(
            data.departure_airport_id, data.destination_airport_id
        )

        existing.flight_number = data.flight_number
        existing.departure_airport_id = departure.id
        existing.destination_airport_id = destination.id
        existing.departure_date = data.departure_date
        existing.fuel_consumption_per_km = data.fuel_consumption_per_km
        existing.takeoff_fuel = data.takeoff_fuel
        existing.modified_at = utcnow()
        self._apply_metrics(existing, departure, destination)

        self._flights.update(existing)
        self._logger.info(f"Flight {existing.flight_number} (ID: {flight_id}) updated")

        return self._flights.get_by_id(flight_id) or existing

    def delete_flight(self, flight_id: int) -> None:
        """Delete a flight. Raises FlightNotFoundError when the id is unknown."""
        flight = self.get_flight(flight_id)
        flight_number = flight.flight_number

        self._flights.delete(flight_id)
        self._logger.info(f"Flight {flight_number} (ID: {flight_id}) deleted")

    def validate_airports(self, departure_airport_id: int, destination_airport_id: int) -> bool:
        return self._validator.is_valid(departure_airport_id, destination_airport_id)

    def _apply_metrics(self, flight: Flight, departure: Airport, destination: Airport) -> None:
        flight.departure_airport = departure
        flight.destination_airport = destination

        distance = self._calculator.calculate_distance(departure, destination)
        fuel = self._calculator.calculate_fuel_required(
            distance, flight.fuel_consumption_per_km, flight.takeoff_fuel
        )

        flight.calculated_distance = round_metric(distance)
        flight.required_fuel = round_metric(fuel)
