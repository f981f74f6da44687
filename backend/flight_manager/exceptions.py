"""
Domain exceptions for flight management.

Not-found and validation errors are expected outcomes that routers turn into
HTTP responses. InvalidInputError marks a broken calculator contract and is
not meant to be shown to users.
"""
from typing import Optional, Dict, Any


class FlightManagementError(Exception):
    """Base exception for all domain errors."""

    def __init__(
        self,
        message: str,
        code: str = "FLIGHT_MANAGEMENT_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(FlightManagementError):
    """Raised when a requested entity does not exist."""

    def __init__(self, message: str, code: str = "NOT_FOUND", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code=code, details=details)


class FlightNotFoundError(NotFoundError):
    def __init__(self, flight_id: int):
        super().__init__(
            message=f"Flight with ID {flight_id} not found",
            code="FLIGHT_NOT_FOUND",
            details={"flight_id": flight_id}
        )


class AirportNotFoundError(NotFoundError):
    def __init__(self, code: str):
        super().__init__(
            message=f"Airport {code} not found",
            code="AIRPORT_NOT_FOUND",
            details={"code": code}
        )


class FlightValidationError(FlightManagementError):
    """Raised when a flight breaks a business rule. Recoverable by the caller."""

    def __init__(self, message: str, code: str = "FLIGHT_VALIDATION_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code=code, details=details)


class AirportsMustDifferError(FlightValidationError):
    def __init__(self, airport_id: int):
        super().__init__(
            message="Departure and destination airports must be different",
            code="AIRPORTS_MUST_DIFFER",
            details={"airport_id": airport_id}
        )


class InvalidAirportSelectionError(FlightValidationError):
    def __init__(self, departure_airport_id: int, destination_airport_id: int):
        super().__init__(
            message="Invalid airport selection",
            code="INVALID_AIRPORT_SELECTION",
            details={
                "departure_airport_id": departure_airport_id,
                "destination_airport_id": destination_airport_id,
            }
        )


class DuplicateAirportError(FlightManagementError):
    def __init__(self, code: str):
        super().__init__(
            message=f"Airport with code {code} already exists",
            code="DUPLICATE_AIRPORT",
            details={"code": code}
        )


class InvalidInputError(FlightManagementError, ValueError):
    """Raised by the calculators for missing points or negative quantities."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_INPUT")
