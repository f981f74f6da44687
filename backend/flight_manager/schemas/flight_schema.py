from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from flight_manager.schemas.airport_schema import AirportResponse

class FlightBase(BaseModel):
    flight_number: str = Field(..., min_length=1, max_length=10)
    departure_airport_id: int
    destination_airport_id: int
    departure_date: datetime
    fuel_consumption_per_km: Decimal = Field(..., ge=Decimal("0.1"), le=1000, decimal_places=2, description="Litres per km")
    takeoff_fuel: Decimal = Field(..., ge=0, le=10000, decimal_places=2, description="Litres")

    @field_validator("flight_number")
    def normalize_flight_number(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Flight number must not be blank.")
        return v

class FlightCreate(FlightBase):
    pass

class FlightUpdate(FlightBase):
    pass

class FlightResponse(FlightBase):
    id: int
    calculated_distance: Optional[Decimal] = None
    required_fuel: Optional[Decimal] = None
    created_at: datetime
    modified_at: Optional[datetime] = None
    departure_airport: Optional[AirportResponse] = None
    destination_airport: Optional[AirportResponse] = None

    model_config = ConfigDict(from_attributes=True)

class AirportPairValidation(BaseModel):
    departure_airport_id: int
    destination_airport_id: int
    valid: bool

class FlightFormDefaults(BaseModel):
    departure_date: datetime
    fuel_consumption_per_km: Decimal
    takeoff_fuel: Decimal
    airports: List[AirportResponse]
