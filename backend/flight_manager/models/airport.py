from sqlalchemy import Column, Integer, String, Float
from sqlalchemy.orm import relationship
from flight_manager.database import Base

class Airport(Base):
    __tablename__ = "airports"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(3), unique=True, index=True, nullable=False) # IATA code, stored uppercase
    name = Column(String(100), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    city = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)

    departure_flights = relationship(
        "Flight", foreign_keys="Flight.departure_airport_id", back_populates="departure_airport", passive_deletes="all"
    )
    destination_flights = relationship(
        "Flight", foreign_keys="Flight.destination_airport_id", back_populates="destination_airport", passive_deletes="all"
    )

    def __repr__(self):
        return f"<Airport {self.code}>"
