"""
Abstract stores for airports and flights.
The service layer only talks to these contracts, so it runs the same against
the SQLAlchemy repositories and the in-memory doubles used in tests.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from flight_manager.models import Airport, Flight


class AirportRepositoryInterface(ABC):

    @abstractmethod
    def get_all(self) -> List[Airport]:
        """All airports ordered by code."""
        ...

    @abstractmethod
    def get_by_id(self, airport_id: int) -> Optional[Airport]:
        ...

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Airport]:
        ...

    @abstractmethod
    def add(self, airport: Airport) -> Airport:
        ...


class FlightRepositoryInterface(ABC):

    @abstractmethod
    def get_all(self) -> List[Flight]:
        """All flights with both airports loaded, most recent departure first."""
        ...

    @abstractmethod
    def get_by_id(self, flight_id: int) -> Optional[Flight]:
        ...

    @abstractmethod
    def add(self, flight: Flight) -> Flight:
        """Persist a new flight. Assigns the id and stamps created_at."""
        ...

    @abstractmethod
    def update(self, flight: Flight) -> None:
        """Persist changes to an existing flight. Stamps modified_at."""
        ...

    @abstractmethod
    def delete(self, flight_id: int) -> None:
        """Remove the flight if it exists, otherwise do nothing."""
        ...

    @abstractmethod
    def exists(self, flight_id: int) -> bool:
        ...
