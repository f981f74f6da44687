from pydantic import BaseModel
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

class FlightReportItem(BaseModel):
    id: int
    flight_number: str
    departure_airport: str
    destination_airport: str
    departure_date: datetime
    calculated_distance: Optional[Decimal] = None
    fuel_consumption_per_km: Decimal
    takeoff_fuel: Decimal
    required_fuel: Optional[Decimal] = None

class FlightReportSummary(BaseModel):
    total_flights: int = 0
    total_distance: Decimal = Decimal("0")
    total_fuel_required: Decimal = Decimal("0")
    average_distance: Decimal = Decimal("0")
    average_fuel_per_flight: Decimal = Decimal("0")

class FlightReport(BaseModel):
    flights: List[FlightReportItem]
    summary: FlightReportSummary
