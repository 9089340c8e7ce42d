"""
Allocation strategies
=====================

Strategy Pattern - decides which spot(s) a vehicle gets without touching
spot state. The lot administrator takes any SpotAllocationStrategy, so other
policies can be dropped in without changing it.

FirstFitAllocationStrategy rules:
- Standard -> first available unconstrained spot
- Small    -> first available constrained spot, else first unconstrained
- Large    -> first pair of row-adjacent available unconstrained spots
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional, Sequence

from .exceptions import InvalidRequestError
from .models import ParkingSpot, SpotType, Vehicle, VehicleType, split_spot_id

log = logging.getLogger(__name__)

SpotsByType = Mapping[SpotType, Sequence[ParkingSpot]]


class SpotAllocationStrategy(ABC):
    """Strategy interface for matching vehicles to spots"""

    @abstractmethod
    def find(self, vehicle: Vehicle, spots_by_type: SpotsByType) -> Optional[List[ParkingSpot]]:
        """Return the spots to assign, in order, or None when nothing fits."""
        pass


class FirstFitAllocationStrategy(SpotAllocationStrategy):
    """Concrete Strategy - deterministic first-fit by creation, row and column order"""

    def find(self, vehicle: Vehicle, spots_by_type: SpotsByType) -> Optional[List[ParkingSpot]]:
        if vehicle is None:
            raise InvalidRequestError("Vehicle is None, cannot allocate parking spot")
        if spots_by_type is None:
            raise InvalidRequestError("spots_by_type must not be None")

        if vehicle.vehicle_type is VehicleType.STANDARD:
            spots = self._first_available(SpotType.UNCONSTRAINED, spots_by_type)
        elif vehicle.vehicle_type is VehicleType.SMALL:
            spots = (self._first_available(SpotType.CONSTRAINED, spots_by_type)
                     or self._first_available(SpotType.UNCONSTRAINED, spots_by_type))
        elif vehicle.vehicle_type is VehicleType.LARGE:
            spots = self._first_adjacent_pair(spots_by_type)
        else:
            raise InvalidRequestError(f"Unsupported vehicle type: {vehicle.vehicle_type!r}")

        log.debug("FIND vehicle=%s type=%s result=%s", vehicle.identifier,
                  vehicle.vehicle_type.value,
                  [s.spot_id for s in spots] if spots else None)
        return spots

    @staticmethod
    def _first_available(spot_type: SpotType, spots_by_type: SpotsByType) -> Optional[List[ParkingSpot]]:
        for spot in spots_by_type.get(spot_type, ()):
            if spot.is_available():
                return [spot]
        return None

    @staticmethod
    def _first_adjacent_pair(spots_by_type: SpotsByType) -> Optional[List[ParkingSpot]]:
        # row label -> [(column, spot)], rows kept in first-seen order
        rows: Dict[str, List[tuple]] = {}
        for spot in spots_by_type.get(SpotType.UNCONSTRAINED, ()):
            if not spot.is_available():
                continue
            row, column = split_spot_id(spot.spot_id)
            rows.setdefault(row, []).append((column, spot))

        for row_spots in rows.values():
            if len(row_spots) < 2:
                continue
            row_spots.sort(key=lambda entry: entry[0])
            for (prev_col, prev), (curr_col, curr) in zip(row_spots, row_spots[1:]):
                if curr_col == prev_col + 1:
                    return [prev, curr]
        return None
