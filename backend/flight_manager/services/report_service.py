from decimal import Decimal
from typing import Iterable

from flight_manager.models import Flight
from flight_manager.schemas.report_schema import FlightReport, FlightReportItem, FlightReportSummary
from flight_manager.services.flight_calculations import round_metric


def _airport_label(airport) -> str:
    if airport is None:
        return ""
    return f"{airport.code} - {airport.name}"


def build_report(flights: Iterable[Flight]) -> FlightReport:
    """
    Per-flight rows plus totals and averages.
    Flights without computed metrics count as 0 in the sums and still count
    towards the averages' denominator. No flights means all zeros.
    """
    items = [
        FlightReportItem(
            id=f.id,
            flight_number=f.flight_number,
            departure_airport=_airport_label(f.departure_airport),
            destination_airport=_airport_label(f.destination_airport),
            departure_date=f.departure_date,
            calculated_distance=f.calculated_distance,
            fuel_consumption_per_km=f.fuel_consumption_per_km,
            takeoff_fuel=f.takeoff_fuel,
            required_fuel=f.required_fuel,
        )
        for f in flights
    ]

    total_distance = sum((i.calculated_distance or Decimal("0") for i in items), Decimal("0"))
    total_fuel = sum((i.required_fuel or Decimal("0") for i in items), Decimal("0"))

    summary = FlightReportSummary(total_flights=len(items))
    if items:
        summary.total_distance = total_distance
        summary.total_fuel_required = total_fuel
        summary.average_distance = round_metric(total_distance / len(items))
        summary.average_fuel_per_flight = round_metric(total_fuel / len(items))

    return FlightReport(flights=items, summary=summary)
