from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from flight_manager.database import Base

class Flight(Base):
    __tablename__ = "flights"

    id = Column(Integer, primary_key=True, index=True)
    flight_number = Column(String(10), nullable=False)

    departure_airport_id = Column(Integer, ForeignKey("airports.id", ondelete="RESTRICT"), nullable=False, index=True)
    destination_airport_id = Column(Integer, ForeignKey("airports.id", ondelete="RESTRICT"), nullable=False, index=True)
    departure_date = Column(DateTime, nullable=False, index=True)

    fuel_consumption_per_km = Column(Numeric(18, 2), nullable=False)
    takeoff_fuel = Column(Numeric(18, 2), nullable=False)

    # Derived from the airport pair and the two fuel inputs, always written together
    calculated_distance = Column(Numeric(18, 2), nullable=True)
    required_fuel = Column(Numeric(18, 2), nullable=True)

    created_at = Column(DateTime, server_default=func.current_timestamp(), nullable=False)
    modified_at = Column(DateTime, nullable=True)

    departure_airport = relationship("Airport", foreign_keys=[departure_airport_id], back_populates="departure_flights")
    destination_airport = relationship("Airport", foreign_keys=[destination_airport_id], back_populates="destination_flights")

    __table_args__ = (
        Index('idx_flight_route', 'departure_airport_id', 'destination_airport_id'),
    )

    def __repr__(self):
        return f"<Flight {self.flight_number} ({self.id})>"
