from datetime import timedelta
from decimal import Decimal
from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from flight_manager.config import settings
from flight_manager.database import utcnow
from flight_manager.dependencies import get_airport_service, get_flight_service
from flight_manager.exceptions import FlightNotFoundError, FlightValidationError
from flight_manager.schemas.airport_schema import AirportResponse
from flight_manager.schemas.flight_schema import (
    AirportPairValidation,
    FlightCreate,
    FlightFormDefaults,
    FlightResponse,
    FlightUpdate,
)
from flight_manager.schemas.report_schema import FlightReport
from flight_manager.services import AirportService, FlightService, build_report

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/flights",
    tags=["flights"]
)

@router.get("", response_model=List[FlightResponse])
def list_flights(service: FlightService = Depends(get_flight_service)):
    """All flights, most recent departure first."""
    return service.list_flights()

@router.get("/new", response_model=FlightFormDefaults)
def new_flight_defaults(airports: AirportService = Depends(get_airport_service)):
    """
    Pre-filled values for the create form: departure one hour from now,
    the configured fuel defaults, and the airports to choose from.
    """
    return FlightFormDefaults(
        departure_date=utcnow() + timedelta(hours=1),
        fuel_consumption_per_km=Decimal(str(settings.default_fuel_consumption_per_km)),
        takeoff_fuel=Decimal(str(settings.default_takeoff_fuel)),
        airports=[AirportResponse.model_validate(a) for a in airports.list_airports()],
    )

@router.get("/report", response_model=FlightReport)
def flight_report(service: FlightService = Depends(get_flight_service)):
    return build_report(service.list_flights())

@router.get("/validate-airports", response_model=AirportPairValidation)
def validate_airports(
    departure_airport_id: int = Query(...),
    destination_airport_id: int = Query(...),
    service: FlightService = Depends(get_flight_service),
):
    """Form-level pre-check of an airport pair. Never persists anything."""
    return AirportPairValidation(
        departure_airport_id=departure_airport_id,
        destination_airport_id=destination_airport_id,
        valid=service.validate_airports(departure_airport_id, destination_airport_id),
    )

@router.get("/{flight_id}", response_model=FlightResponse)
def get_flight(flight_id: int, service: FlightService = Depends(get_flight_service)):
    try:
        return service.get_flight(flight_id)
    except FlightNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

@router.post("", response_model=FlightResponse, status_code=status.HTTP_201_CREATED)
def create_flight(request: FlightCreate, service: FlightService = Depends(get_flight_service)):
    try:
        return service.create_flight(request)
    except FlightValidationError as e:
        logger.info(f"Rejected flight {request.flight_number}: {e.message}")
        raise HTTPException(status_code=422, detail=e.message)

@router.put("/{flight_id}", response_model=FlightResponse)
def update_flight(flight_id: int, request: FlightUpdate, service: FlightService = Depends(get_flight_service)):
    try:
        return service.update_flight(flight_id, request)
    except FlightNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except FlightValidationError as e:
        logger.info(f"Rejected update of flight {flight_id}: {e.message}")
        raise HTTPException(status_code=422, detail=e.message)

@router.delete("/{flight_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_flight(flight_id: int, service: FlightService = Depends(get_flight_service)):
    try:
        service.delete_flight(flight_id)
    except FlightNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
