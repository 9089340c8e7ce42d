"""
Lot administrator
=================

Owns the spot inventory and the vehicle -> spots assignment table. Every
public operation runs under one lock, so the search-then-assign sequence in
park() cannot interleave with another park() or remove().
"""

import logging
from threading import Lock
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from . import events
from .events import ParkingEventNotifier
from .exceptions import DoubleOccupancyError, ParkingUnavailableError
from .inventory import RowTemplate, SpotInventory
from .models import ParkingSpot, SpotType, SpotView, VehicleFactory, VehicleType
from .strategy import FirstFitAllocationStrategy, SpotAllocationStrategy
from .summary import ParkingLotSummary, generate_summary

log = logging.getLogger(__name__)


class ParkingLotAdmin:
    """Allocates, releases and reports on the spots of one lot"""

    def __init__(self, rows: int, row_template: RowTemplate,
                 strategy: Optional[SpotAllocationStrategy] = None,
                 notifier: Optional[ParkingEventNotifier] = None):
        self._inventory = SpotInventory(rows, row_template)
        self.strategy = strategy or FirstFitAllocationStrategy()
        self.notifier = notifier or ParkingEventNotifier()
        self._active_vehicles: Dict[str, Tuple[ParkingSpot, ...]] = {}
        self.lock = Lock()

    @property
    def total_spots(self) -> int:
        return self._inventory.capacity

    def park(self, identifier: str, vehicle_type: Union[str, VehicleType]) -> List[SpotView]:
        """
        Park a vehicle and return read-only copies of the spots it now holds.

        Parking an identifier that is already parked returns its current
        spots unchanged. Raises ParkingUnavailableError when nothing fits.
        """
        with self.lock:
            existing = self._active_vehicles.get(identifier)
            if existing is not None:
                log.debug("REPARK id=%s spots=%s", identifier, _ids(existing))
                return [spot.snapshot() for spot in existing]

            vehicle = VehicleFactory.create_vehicle(identifier, vehicle_type)
            spots = self.strategy.find(vehicle, self._inventory.spots_by_type())
            assigned: List[ParkingSpot] = []
            if spots:
                try:
                    for spot in spots:
                        spot.assign_vehicle(vehicle)
                        assigned.append(spot)
                except DoubleOccupancyError:
                    for spot in assigned:
                        spot.remove_vehicle()
                    log.error("DOUBLE_OCCUPANCY id=%s spots=%s", identifier, _ids(spots))
                    raise
                self._active_vehicles[identifier] = tuple(assigned)
                views = [spot.snapshot() for spot in assigned]
                log.info("PARK id=%s type=%s spots=%s", identifier,
                         vehicle.vehicle_type.value, _ids(assigned))

        # Observers run outside the lock so they may query the lot
        if not assigned:
            log.warning("UNAVAILABLE id=%s type=%s", identifier, vehicle.vehicle_type.value)
            self.notifier.notify(
                events.PARKING_UNAVAILABLE,
                f"No available spots for {vehicle.vehicle_type.value} vehicle {identifier}")
            raise ParkingUnavailableError(identifier)

        self.notifier.notify(events.VEHICLE_PARKED,
                             f"Vehicle {identifier} parked in {', '.join(_ids(assigned))}")
        return views

    def remove(self, identifier: str):
        """Free the vehicle's spots; unknown identifiers are ignored."""
        with self.lock:
            spots = self._active_vehicles.pop(identifier, None)
            if spots is None:
                log.debug("REMOVE id=%s not parked", identifier)
                return
            for spot in spots:
                spot.remove_vehicle()
            log.info("REMOVE id=%s spots=%s", identifier, _ids(spots))

        self.notifier.notify(events.VEHICLE_REMOVED,
                             f"Vehicle {identifier} removed from {', '.join(_ids(spots))}")

    def spots_by_type(self) -> Mapping[SpotType, Tuple[SpotView, ...]]:
        with self.lock:
            return MappingProxyType({
                spot_type: tuple(spot.snapshot() for spot in spots)
                for spot_type, spots in self._inventory.spots_by_type().items()})

    def assignments(self) -> Mapping[str, Tuple[SpotView, ...]]:
        with self.lock:
            return MappingProxyType({
                identifier: tuple(spot.snapshot() for spot in spots)
                for identifier, spots in self._active_vehicles.items()})

    def summary(self) -> ParkingLotSummary:
        with self.lock:
            return generate_summary(self._inventory)


def _ids(spots) -> List[str]:
    return [spot.spot_id for spot in spots]
