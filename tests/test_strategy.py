import pytest

from parking_allocation.exceptions import InvalidRequestError, MalformedSpotIdentifierError
from parking_allocation.inventory import SpotInventory
from parking_allocation.models import ParkingSpot, SpotType, Vehicle, VehicleType
from parking_allocation.strategy import FirstFitAllocationStrategy

strategy = FirstFitAllocationStrategy()

SMALL = Vehicle("M1", VehicleType.SMALL)
STANDARD = Vehicle("C1", VehicleType.STANDARD)
LARGE = Vehicle("V1", VehicleType.LARGE)
BLOCKER = Vehicle("X", VehicleType.STANDARD)


def occupy(inventory, *spot_ids):
    for spot_id in spot_ids:
        inventory.get(spot_id).assign_vehicle(BLOCKER)


def ids(spots):
    return [s.spot_id for s in spots] if spots is not None else None


def test_standard_takes_first_unconstrained():
    inventory = SpotInventory(1, "Constrained,Unconstrained,Unconstrained")
    assert ids(strategy.find(STANDARD, inventory.spots_by_type())) == ["R1-2"]


def test_standard_never_uses_constrained():
    inventory = SpotInventory(1, "Constrained,Unconstrained")
    occupy(inventory, "R1-2")
    assert strategy.find(STANDARD, inventory.spots_by_type()) is None


def test_small_prefers_constrained():
    inventory = SpotInventory(2, "Unconstrained,Constrained")
    assert ids(strategy.find(SMALL, inventory.spots_by_type())) == ["R1-2"]


def test_small_falls_back_to_unconstrained():
    inventory = SpotInventory(2, "Unconstrained,Constrained")
    occupy(inventory, "R1-2", "R2-2")
    assert ids(strategy.find(SMALL, inventory.spots_by_type())) == ["R1-1"]


def test_small_not_found_when_everything_taken():
    inventory = SpotInventory(1, "Unconstrained,Constrained")
    occupy(inventory, "R1-1", "R1-2")
    assert strategy.find(SMALL, inventory.spots_by_type()) is None


def test_large_skips_non_adjacent_pair():
    inventory = SpotInventory(1, "Unconstrained,Unconstrained,Constrained,Unconstrained")
    occupy(inventory, "R1-3")
    assert ids(strategy.find(LARGE, inventory.spots_by_type())) == ["R1-1", "R1-2"]


def test_large_rejects_gap_in_row():
    inventory = SpotInventory(1, "Unconstrained,Constrained,Unconstrained")
    assert strategy.find(LARGE, inventory.spots_by_type()) is None


def test_large_unavailable_without_two_unconstrained():
    inventory = SpotInventory(1, "Unconstrained,Constrained,Constrained")
    assert strategy.find(LARGE, inventory.spots_by_type()) is None


def test_large_does_not_span_rows():
    # R1-2 and R2-1 are consecutive in creation order but not in the same row
    inventory = SpotInventory(2, "Unconstrained,Unconstrained")
    occupy(inventory, "R1-1", "R2-2")
    assert strategy.find(LARGE, inventory.spots_by_type()) is None


def test_large_moves_to_next_row():
    inventory = SpotInventory(3, "Unconstrained,Unconstrained,Unconstrained")
    occupy(inventory, "R1-2", "R2-1")
    assert ids(strategy.find(LARGE, inventory.spots_by_type())) == ["R2-2", "R2-3"]


def test_large_orders_by_column_within_row():
    spots = [
        ParkingSpot("R1-3", SpotType.UNCONSTRAINED),
        ParkingSpot("R1-10", SpotType.UNCONSTRAINED),
        ParkingSpot("R1-2", SpotType.UNCONSTRAINED),
    ]
    found = strategy.find(LARGE, {SpotType.UNCONSTRAINED: spots})
    assert ids(found) == ["R1-2", "R1-3"]


def test_find_is_deterministic_and_side_effect_free():
    inventory = SpotInventory(2, "Unconstrained,Unconstrained,Constrained")
    first = strategy.find(LARGE, inventory.spots_by_type())
    second = strategy.find(LARGE, inventory.spots_by_type())
    assert first == second
    assert all(spot.is_available() for spot in inventory)


def test_malformed_identifier_is_not_a_miss():
    spots = [ParkingSpot("R1-1", SpotType.UNCONSTRAINED), ParkingSpot("bogus", SpotType.UNCONSTRAINED)]
    with pytest.raises(MalformedSpotIdentifierError):
        strategy.find(LARGE, {SpotType.UNCONSTRAINED: spots})


def test_missing_inputs_fail_fast():
    inventory = SpotInventory(1, "Unconstrained")
    with pytest.raises(InvalidRequestError):
        strategy.find(None, inventory.spots_by_type())
    with pytest.raises(InvalidRequestError):
        strategy.find(STANDARD, None)


def test_missing_type_bucket_means_not_found():
    assert strategy.find(STANDARD, {}) is None
    assert strategy.find(SMALL, {}) is None
    assert strategy.find(LARGE, {}) is None
