"""
Lot summary: a frozen snapshot recomputed from the spots on every request.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping

from .models import ParkingSpot, SpotType, row_or_unknown


@dataclass(frozen=True)
class SpotStatus:
    total: int = 0
    available: int = 0
    occupied: int = 0

    def __post_init__(self):
        if self.total < 0 or self.available < 0 or self.occupied < 0:
            raise ValueError("Counts cannot be negative")

    def to_dict(self) -> dict:
        return {"total": self.total, "available": self.available, "occupied": self.occupied}


@dataclass(frozen=True)
class ParkingLotSummary:
    total_spots: int
    available_spots: int
    occupied_spots: int
    by_type: Mapping[SpotType, SpotStatus]
    by_row: Mapping[str, SpotStatus]
    is_full: bool
    is_empty: bool
    large_vehicle_count: int

    def __post_init__(self):
        if min(self.total_spots, self.available_spots,
               self.occupied_spots, self.large_vehicle_count) < 0:
            raise ValueError("Counts cannot be negative")
        # Copy into read-only mappings so the snapshot can't drift
        object.__setattr__(self, "by_type", MappingProxyType(dict(self.by_type)))
        object.__setattr__(self, "by_row", MappingProxyType(dict(self.by_row)))

    def to_dict(self) -> dict:
        return {
            "total": self.total_spots,
            "available": self.available_spots,
            "occupied": self.occupied_spots,
            "by_type": {t.value: s.to_dict() for t, s in self.by_type.items()},
            "by_row": {r: s.to_dict() for r, s in self.by_row.items()},
            "full": self.is_full,
            "empty": self.is_empty,
            "large_vehicles": self.large_vehicle_count,
        }


class _Counter:
    __slots__ = ("total", "available")

    def __init__(self):
        self.total = 0
        self.available = 0

    def add(self, available: bool):
        self.total += 1
        if available:
            self.available += 1

    def freeze(self) -> SpotStatus:
        return SpotStatus(self.total, self.available, self.total - self.available)


def generate_summary(spots: Iterable[ParkingSpot]) -> ParkingLotSummary:
    """Single pass over the spots, in the order given."""
    overall = _Counter()
    by_type: Dict[SpotType, _Counter] = {}
    by_row: Dict[str, _Counter] = {}
    large_vehicle_count = 0

    for spot in spots:
        if spot is None:
            continue
        available = spot.is_available()
        overall.add(available)
        by_type.setdefault(spot.spot_type, _Counter()).add(available)
        by_row.setdefault(row_or_unknown(spot.spot_id), _Counter()).add(available)
        if not available and spot.vehicle.is_large:
            large_vehicle_count += 1

    summary = overall.freeze()
    return ParkingLotSummary(
        total_spots=summary.total,
        available_spots=summary.available,
        occupied_spots=summary.occupied,
        by_type={t: c.freeze() for t, c in by_type.items()},
        by_row={r: c.freeze() for r, c in by_row.items()},
        is_full=summary.available == 0,
        is_empty=summary.occupied == 0,
        large_vehicle_count=large_vehicle_count,
    )


def format_summary(summary: ParkingLotSummary) -> str:
    lines: List[str] = ["=== Parking Lot Summary ==="]
    lines.append(f"Overall -> Total: {summary.total_spots}, "
                 f"Available: {summary.available_spots}, Occupied: {summary.occupied_spots}")
    for spot_type, status in summary.by_type.items():
        lines.append(f"[{spot_type.value}] -> Total: {status.total}, "
                     f"Available: {status.available}, Occupied: {status.occupied}")
    lines.append(f"Lot full? {summary.is_full}")
    lines.append(f"Lot empty? {summary.is_empty}")
    lines.append(f"Large vehicles parked: {summary.large_vehicle_count}")
    lines.append("=== Row Summary ===")
    for row, status in summary.by_row.items():
        lines.append(f"{row} -> Total: {status.total}, "
                     f"Available: {status.available}, Occupied: {status.occupied}")
    return "\n".join(lines)
