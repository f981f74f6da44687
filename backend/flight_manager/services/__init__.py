from flight_manager.services.flight_calculations import (
    FlightCalculator,
    FlightCalculatorInterface,
    compute_haversine_distance,
    round_metric,
)
from flight_manager.services.flight_validator import AirportPairValidator
from flight_manager.services.flight_service import FlightService
from flight_manager.services.airport_service import AirportService
from flight_manager.services.report_service import build_report

__all__ = [
    "FlightCalculator",
    "FlightCalculatorInterface",
    "compute_haversine_distance",
    "round_metric",
    "AirportPairValidator",
    "FlightService",
    "AirportService",
    "build_report",
]
