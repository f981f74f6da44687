from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from typing import Union

import numpy as np

from flight_manager.exceptions import InvalidInputError

EARTH_RADIUS_KM = 6371.0

TWO_PLACES = Decimal("0.01")

Number = Union[Real, Decimal]


def compute_haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    lat1_rad, lat2_rad = np.radians(lat1), np.radians(lat2)
    dlat = np.radians(lat2 - lat1)
    dlon = np.radians(lon2 - lon1)
    a = np.sin(dlat / 2)**2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(dlon / 2)**2
    # Float error can push a just outside [0, 1] for antipodal points
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return float(EARTH_RADIUS_KM * c)


def round_metric(value: Number) -> Decimal:
    """Round a metric to 2 decimal places, halves away from zero."""
    return _to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps float values like 3.5 exact instead of carrying binary noise
    return Decimal(str(value))


class FlightCalculatorInterface(ABC):
    """Distance and fuel formulas a FlightService computes metrics with."""

    @abstractmethod
    def calculate_distance(self, departure, destination) -> float:
        ...

    @abstractmethod
    def calculate_fuel_required(self, distance_km: Number, fuel_consumption_per_km: Number, takeoff_fuel: Number) -> Decimal:
        ...


class FlightCalculator(FlightCalculatorInterface):
    """
    Distance and fuel formulas used for every flight.

    Both methods are pure. Points are anything exposing `latitude` and
    `longitude` in degrees (Airport rows, schemas, simple namespaces).
    """

    def calculate_distance(self, departure, destination) -> float:
        """Great-circle distance in kilometers between two points."""
        if departure is None or destination is None:
            raise InvalidInputError("Airports cannot be null")

        return compute_haversine_distance(
            departure.latitude, departure.longitude,
            destination.latitude, destination.longitude,
        )

    def calculate_fuel_required(self, distance_km: Number, fuel_consumption_per_km: Number, takeoff_fuel: Number) -> Decimal:
        """Total fuel: (distance x consumption per km) + takeoff fuel. Not rounded."""
        distance = _to_decimal(distance_km)
        consumption = _to_decimal(fuel_consumption_per_km)
        reserve = _to_decimal(takeoff_fuel)

        if distance < 0 or consumption < 0 or reserve < 0:
            raise InvalidInputError("Values cannot be negative")

        return distance * consumption + reserve
