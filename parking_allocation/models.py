"""
Parking entities
================

Spot types, vehicle types, vehicles and parking spots.

Design Patterns Used:
1. Factory Pattern - VehicleFactory validates and builds vehicles
2. Value Object - Vehicle is immutable once created

Spot identifiers encode their position as "R{row}-{column}", both 1-indexed.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .exceptions import (
    DoubleOccupancyError,
    InvalidRequestError,
    MalformedSpotIdentifierError,
)

SPOT_ID_SEPARATOR = "-"
UNKNOWN_ROW = "UNKNOWN"


class SpotType(Enum):
    CONSTRAINED = "Constrained"
    UNCONSTRAINED = "Unconstrained"

    @classmethod
    def parse(cls, token: Union[str, "SpotType"]) -> "SpotType":
        """Accepts the member itself, its value or its name, case-insensitively."""
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise ValueError(f"Spot type must be a string, got {type(token).__name__}")
        wanted = token.strip().lower()
        for member in cls:
            if wanted in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown spot type: {token!r}")


class VehicleType(Enum):
    SMALL = "Small"
    STANDARD = "Standard"
    LARGE = "Large"

    @classmethod
    def parse(cls, token: Union[str, "VehicleType"]) -> "VehicleType":
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise ValueError(f"Vehicle type must be a string, got {type(token).__name__}")
        wanted = token.strip().lower()
        for member in cls:
            if wanted in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown vehicle type: {token!r}")


# ==================== SPOT IDENTIFIERS ====================

def make_spot_id(row: int, column: int) -> str:
    return f"R{row}{SPOT_ID_SEPARATOR}{column}"


def split_spot_id(spot_id: str) -> Tuple[str, int]:
    """
    Split an identifier into its row label and numeric column.

    >>> split_spot_id("R2-3")
    ('R2', 3)

    Raises MalformedSpotIdentifierError unless there is exactly one separator
    followed by an integer column.
    """
    if not isinstance(spot_id, str):
        raise MalformedSpotIdentifierError(str(spot_id))
    parts = spot_id.split(SPOT_ID_SEPARATOR)
    if len(parts) != 2 or not parts[0]:
        raise MalformedSpotIdentifierError(spot_id)
    try:
        column = int(parts[1])
    except ValueError:
        raise MalformedSpotIdentifierError(spot_id) from None
    return parts[0], column


def row_of(spot_id: str) -> str:
    return split_spot_id(spot_id)[0]


def row_or_unknown(spot_id: str) -> str:
    """Row label for reporting; unparseable identifiers go to the UNKNOWN bucket."""
    try:
        return row_of(spot_id)
    except MalformedSpotIdentifierError:
        return UNKNOWN_ROW


# ==================== VEHICLES ====================

@dataclass(frozen=True)
class Vehicle:
    identifier: str
    vehicle_type: VehicleType

    @property
    def is_large(self) -> bool:
        return self.vehicle_type is VehicleType.LARGE


class VehicleFactory:
    """Factory Pattern - Creates vehicles with validation"""

    @staticmethod
    def create_vehicle(identifier: str, vehicle_type: Union[str, VehicleType]) -> Vehicle:
        if not isinstance(identifier, str) or not identifier.strip():
            raise InvalidRequestError("Vehicle identifier must be a non-empty string")
        try:
            v_type = VehicleType.parse(vehicle_type)
        except ValueError as e:
            raise InvalidRequestError(str(e)) from e
        return Vehicle(identifier, v_type)


# ==================== PARKING SPOT ====================

@dataclass(frozen=True)
class SpotView:
    """Read-only copy of a spot handed to callers outside the lot administrator"""
    spot_id: str
    spot_type: SpotType
    occupant: Optional[str] = None
    occupant_type: Optional[VehicleType] = None

    def is_available(self) -> bool:
        return self.occupant is None


class ParkingSpot:
    """A single parking location; its type never changes after creation."""

    __slots__ = ("_spot_id", "_spot_type", "_vehicle")

    def __init__(self, spot_id: str, spot_type: SpotType):
        self._spot_id = spot_id
        self._spot_type = spot_type
        self._vehicle: Optional[Vehicle] = None

    @property
    def spot_id(self) -> str:
        return self._spot_id

    @property
    def spot_type(self) -> SpotType:
        return self._spot_type

    @property
    def vehicle(self) -> Optional[Vehicle]:
        return self._vehicle

    @property
    def vehicle_type(self) -> Optional[VehicleType]:
        return self._vehicle.vehicle_type if self._vehicle else None

    def is_available(self) -> bool:
        return self._vehicle is None

    def assign_vehicle(self, vehicle: Vehicle):
        if not self.is_available():
            raise DoubleOccupancyError(
                f"Parking spot {self._spot_id} is already occupied by vehicle: "
                f"{self._vehicle.identifier}")
        self._vehicle = vehicle

    def remove_vehicle(self) -> Optional[Vehicle]:
        vehicle = self._vehicle
        self._vehicle = None
        return vehicle

    def snapshot(self) -> SpotView:
        if self._vehicle is None:
            return SpotView(self._spot_id, self._spot_type)
        return SpotView(self._spot_id, self._spot_type,
                        self._vehicle.identifier, self._vehicle.vehicle_type)

    def __repr__(self) -> str:
        occupant = self._vehicle.identifier if self._vehicle else None
        return f"ParkingSpot({self._spot_id!r}, {self._spot_type.value}, vehicle={occupant!r})"
