import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from flight_manager.database import utcnow
from flight_manager.models import Flight
from flight_manager.repositories.base import FlightRepositoryInterface

logger = logging.getLogger(__name__)


class FlightRepository(FlightRepositoryInterface):

    def __init__(self, db: Session):
        self._db = db

    def _query(self):
        return self._db.query(Flight).options(
            joinedload(Flight.departure_airport),
            joinedload(Flight.destination_airport),
        )

    def get_all(self) -> List[Flight]:
        return self._query().order_by(Flight.departure_date.desc()).all()

    def get_by_id(self, flight_id: int) -> Optional[Flight]:
        return self._query().filter(Flight.id == flight_id).first()

    def add(self, flight: Flight) -> Flight:
        flight.created_at = utcnow()
        self._db.add(flight)
        self._commit(f"insert flight {flight.flight_number}")
        self._db.refresh(flight)
        return flight

    def update(self, flight: Flight) -> None:
        flight.modified_at = utcnow()
        self._db.add(flight)
        self._commit(f"update flight {flight.id}")

    def delete(self, flight_id: int) -> None:
        flight = self._db.get(Flight, flight_id)
        if flight is None:
            return
        self._db.delete(flight)
        self._commit(f"delete flight {flight_id}")

    def exists(self, flight_id: int) -> bool:
        return self._db.query(Flight.id).filter(Flight.id == flight_id).first() is not None

    def _commit(self, action: str) -> None:
        try:
            self._db.commit()
        except Exception as e:
            logger.error(f"Failed to {action}: {e}")
            self._db.rollback()
            raise
