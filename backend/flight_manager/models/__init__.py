from flight_manager.models.airport import Airport
from flight_manager.models.flight import Flight

__all__ = [
    "Airport",
    "Flight",
]
