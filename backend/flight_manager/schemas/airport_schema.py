from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

class AirportBase(BaseModel):
    code: str = Field(..., min_length=3, max_length=3, description="IATA Airport Code, 3 letters.")
    name: str = Field(..., min_length=1, max_length=100)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    city: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)

class AirportCreate(AirportBase):

    @field_validator("code")
    def validate_iata(cls, v):
        if not v.isalpha():
            raise ValueError("IATA code must be exactly 3 letters.")
        return v.upper()

class AirportResponse(AirportBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
