from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from flight_manager.dependencies import get_airport_service
from flight_manager.exceptions import AirportNotFoundError, DuplicateAirportError
from flight_manager.schemas.airport_schema import AirportCreate, AirportResponse
from flight_manager.services import AirportService

router = APIRouter(prefix="/airports", tags=["airports"])

@router.get("", response_model=List[AirportResponse])
def list_airports(service: AirportService = Depends(get_airport_service)):
    return service.list_airports()

@router.get("/{code}", response_model=AirportResponse)
def get_airport(code: str, service: AirportService = Depends(get_airport_service)):
    try:
        return service.get_airport(code)
    except AirportNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

@router.post("", response_model=AirportResponse, status_code=status.HTTP_201_CREATED)
def register_airport(request: AirportCreate, service: AirportService = Depends(get_airport_service)):
    try:
        return service.register_airport(request)
    except DuplicateAirportError as e:
        raise HTTPException(status_code=409, detail=e.message)
