import pytest

from parking_allocation import ParkingLotAdmin


@pytest.fixture
def mixed_admin():
    """2 rows of U,U,C,U"""
    return ParkingLotAdmin(2, "Unconstrained,Unconstrained,Constrained,Unconstrained")


@pytest.fixture
def small_admin():
    return ParkingLotAdmin(1, "Unconstrained,Constrained")
