"""Errors raised by the parking allocation engine."""

from typing import Optional


class ParkingError(Exception):
    """Base class for every engine error"""


class InvalidSpotTypeError(ParkingError, ValueError):
    """Row template contains a token that is not a known spot type"""

    def __init__(self, token: str, cause: Optional[Exception] = None):
        super().__init__(f"Invalid spot type in row sequence: {token!r}")
        self.token = token
        self.cause = cause


class InvalidRequestError(ParkingError, ValueError):
    """Caller passed something the engine cannot work with"""


class MalformedSpotIdentifierError(ParkingError, ValueError):
    """Spot identifier does not follow the R{row}-{column} format"""

    def __init__(self, spot_id: str):
        super().__init__(f"Invalid spot id: {spot_id!r}")
        self.spot_id = spot_id


class ParkingUnavailableError(ParkingError):
    """No suitable spot exists for the vehicle"""

    def __init__(self, identifier: str):
        super().__init__(f"No available spots for vehicle: {identifier}")
        self.identifier = identifier


class DoubleOccupancyError(ParkingError, RuntimeError):
    """Spot is already held by another vehicle"""


class UnsupportedAdminTypeError(ParkingError, ValueError):
    """Lot administrator type is not supported"""
