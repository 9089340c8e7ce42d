"""
Parking Allocation Engine

Assigns vehicles to typed parking spots, keeps track of who is parked where,
and reports lot occupancy.

Design Patterns Used:
1. Strategy Pattern - pluggable spot allocation (FirstFitAllocationStrategy)
2. Observer Pattern - parking event notifications
3. Factory Pattern - vehicle and lot administrator creation
4. Facade Pattern - ParkingLot as the caller-facing entry point
"""

from .admin import ParkingLotAdmin
from .events import ConsoleDisplay, LoggingObserver, Observer, ParkingEventNotifier
from .exceptions import (
    DoubleOccupancyError,
    InvalidRequestError,
    InvalidSpotTypeError,
    MalformedSpotIdentifierError,
    ParkingError,
    ParkingUnavailableError,
    UnsupportedAdminTypeError,
)
from .inventory import SpotInventory
from .lot import LotAdminType, ParkingLot, create_admin
from .models import ParkingSpot, SpotType, SpotView, Vehicle, VehicleFactory, VehicleType
from .strategy import FirstFitAllocationStrategy, SpotAllocationStrategy
from .summary import ParkingLotSummary, SpotStatus, format_summary, generate_summary

__version__ = "1.0.0"
