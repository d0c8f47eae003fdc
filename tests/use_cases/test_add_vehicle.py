"""Test suite for AddVehicle use case."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from showroom_lite.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from showroom_lite.domain.creators import VehicleVariant, create_mustang
from showroom_lite.domain.errors import ValidationError
from showroom_lite.domain.vehicle import Vehicle
from showroom_lite.ports.vehicle_repository import VehicleRepository
from showroom_lite.use_cases.add_vehicle import (
    AddVehicle,
    AddVehicleRequest,
    AddVehicleResponse,
)


@pytest.fixture()
def repo() -> InMemoryVehicleRepository:
    return InMemoryVehicleRepository()


@pytest.mark.parametrize(
    ("variant", "model"),
    [("mustang", "Mustang"), ("explorer", "Explorer"), ("escape", "Escape")],
)
def test_execute_creates_and_stores_variant(repo: InMemoryVehicleRepository, variant: str, model: str) -> None:
    result = AddVehicle(vehicle_repository=repo).execute(AddVehicleRequest(variant=variant))

    assert isinstance(result, AddVehicleResponse)
    assert result.vehicle.model == model
    assert repo.find(result.vehicle.id) == result.vehicle


def test_execute_twice_stores_two_independent_vehicles(repo: InMemoryVehicleRepository) -> None:
    use_case = AddVehicle(vehicle_repository=repo)

    first = use_case.execute(AddVehicleRequest(variant="escape")).vehicle
    second = use_case.execute(AddVehicleRequest(variant="escape")).vehicle

    assert first.id != second.id
    assert repo.count() == 2


def test_execute_unknown_variant_stores_nothing() -> None:
    mock_repository = Mock(spec=VehicleRepository)

    with pytest.raises(ValidationError, match="Unknown vehicle variant 'bronco'"):
        AddVehicle(vehicle_repository=mock_repository).execute(AddVehicleRequest(variant="bronco"))

    mock_repository.add_vehicle.assert_not_called()


def test_execute_uses_injected_creators(repo: InMemoryVehicleRepository) -> None:
    def create_black_mustang() -> Vehicle:
        vehicle = create_mustang()
        vehicle.color = "Black"
        return vehicle

    use_case = AddVehicle(
        vehicle_repository=repo,
        creators={VehicleVariant.MUSTANG: create_black_mustang},
    )

    result = use_case.execute(AddVehicleRequest(variant="mustang"))

    assert result.vehicle.color == "Black"
