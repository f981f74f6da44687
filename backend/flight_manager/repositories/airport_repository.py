import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from flight_manager.models import Airport
from flight_manager.repositories.base import AirportRepositoryInterface

logger = logging.getLogger(__name__)


class AirportRepository(AirportRepositoryInterface):

    def __init__(self, db: Session):
        self._db = db

    def get_all(self) -> List[Airport]:
        return self._db.query(Airport).order_by(Airport.code).all()

    def get_by_id(self, airport_id: int) -> Optional[Airport]:
        return self._db.query(Airport).filter(Airport.id == airport_id).first()

    def get_by_code(self, code: str) -> Optional[Airport]:
        return self._db.query(Airport).filter(Airport.code == code.upper()).first()

    def add(self, airport: Airport) -> Airport:
        try:
            self._db.add(airport)
            self._db.commit()
        except Exception as e:
            logger.error(f"Failed to insert airport {airport.code}: {e}")
            self._db.rollback()
            raise
        self._db.refresh(airport)
        return airport
