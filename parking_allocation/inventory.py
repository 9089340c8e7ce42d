"""
Spot inventory built once from a row count and a row template.

Spots are kept in row-major creation order and indexed by type; the row index
is implicit in each spot identifier.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .exceptions import InvalidRequestError, InvalidSpotTypeError
from .models import ParkingSpot, SpotType, make_spot_id

log = logging.getLogger(__name__)

RowTemplate = Union[str, Sequence[Union[str, SpotType]]]


def parse_row_template(row_template: RowTemplate) -> List[SpotType]:
    """Validate every token up front so a bad template creates nothing."""
    if isinstance(row_template, str):
        tokens = row_template.split(",")
    elif row_template is None:
        raise InvalidRequestError("Row template must not be None")
    else:
        tokens = list(row_template)

    spot_types = []
    for token in tokens:
        try:
            spot_types.append(SpotType.parse(token))
        except ValueError as e:
            raise InvalidSpotTypeError(str(token), e) from e
    return spot_types


class SpotInventory:

    def __init__(self, rows: int, row_template: RowTemplate):
        if isinstance(rows, bool) or not isinstance(rows, int) or rows <= 0:
            raise InvalidRequestError(f"Number of rows must be a positive integer, got {rows!r}")

        self._template: Tuple[SpotType, ...] = tuple(parse_row_template(row_template))
        self._spots: List[ParkingSpot] = []
        self._by_id: Dict[str, ParkingSpot] = {}
        self._by_type: Dict[SpotType, List[ParkingSpot]] = {}

        for row in range(1, rows + 1):
            for column, spot_type in enumerate(self._template, start=1):
                spot = ParkingSpot(make_spot_id(row, column), spot_type)
                self._spots.append(spot)
                self._by_id[spot.spot_id] = spot
                self._by_type.setdefault(spot_type, []).append(spot)

        # Frozen views handed out to readers
        self._by_type_view = MappingProxyType(
            {spot_type: tuple(spots) for spot_type, spots in self._by_type.items()})

        log.info("INVENTORY rows=%d columns=%d capacity=%d",
                 rows, len(self._template), len(self._spots))

    @property
    def capacity(self) -> int:
        return len(self._spots)

    def __len__(self) -> int:
        return len(self._spots)

    def __iter__(self) -> Iterator[ParkingSpot]:
        return iter(self._spots)

    def get(self, spot_id: str) -> Optional[ParkingSpot]:
        return self._by_id.get(spot_id)

    def spots_by_type(self) -> Mapping[SpotType, Tuple[ParkingSpot, ...]]:
        return self._by_type_view
