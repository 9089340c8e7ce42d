"""
Parking lot facade
==================

Design Patterns Used:
1. Facade Pattern - ParkingLot gives callers spot identifiers back and turns
   "no space" into an ordinary None result
2. Factory Pattern - create_admin builds the administrator for a lot type
"""

import logging
from enum import Enum
from typing import List, Optional, Union

from .admin import ParkingLotAdmin
from .events import ParkingEventNotifier
from .exceptions import ParkingUnavailableError, UnsupportedAdminTypeError
from .inventory import RowTemplate
from .models import VehicleType
from .summary import ParkingLotSummary, format_summary

log = logging.getLogger(__name__)


class LotAdminType(Enum):
    COMPACT_REGULAR = "COMPACT_REGULAR"

    @classmethod
    def parse(cls, name: Union[str, "LotAdminType"]) -> "LotAdminType":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().upper())
        except ValueError:
            raise UnsupportedAdminTypeError(f"Unsupported lot admin type: {name!r}") from None


def create_admin(admin_type: Union[str, LotAdminType], rows: int, row_template: RowTemplate,
                 notifier: Optional[ParkingEventNotifier] = None) -> ParkingLotAdmin:
    admin_type = LotAdminType.parse(admin_type)
    if admin_type is LotAdminType.COMPACT_REGULAR:
        return ParkingLotAdmin(rows, row_template, notifier=notifier)
    raise UnsupportedAdminTypeError(f"Unsupported lot admin type: {admin_type}")


class ParkingLot:

    def __init__(self, rows: int, row_template: RowTemplate,
                 admin_type: Union[str, LotAdminType] = LotAdminType.COMPACT_REGULAR,
                 notifier: Optional[ParkingEventNotifier] = None):
        self._admin = create_admin(admin_type, rows, row_template, notifier)

    @property
    def admin(self) -> ParkingLotAdmin:
        return self._admin

    @property
    def size(self) -> int:
        return self._admin.total_spots

    def park_vehicle(self, identifier: str,
                     vehicle_type: Union[str, VehicleType]) -> Optional[List[str]]:
        """Returns the assigned spot identifiers, or None if the lot has no room."""
        try:
            spots = self._admin.park(identifier, vehicle_type)
        except ParkingUnavailableError:
            return None
        return [spot.spot_id for spot in spots]

    def remove_vehicle(self, identifier: str):
        self._admin.remove(identifier)

    def summary(self) -> ParkingLotSummary:
        return self._admin.summary()

    def print_summary(self):
        print(format_summary(self.summary()))
