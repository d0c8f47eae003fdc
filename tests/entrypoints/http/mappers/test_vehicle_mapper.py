from __future__ import annotations

from decimal import Decimal

from showroom_lite.domain.creators import create_escape, create_mustang
from showroom_lite.entrypoints.http.dtos.vehicles import VehicleListResponseDTO, VehicleResponseDTO
from showroom_lite.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from showroom_lite.use_cases.list_vehicles import ListVehiclesResponse


def test_to_vehicle_response_maps_all_fields() -> None:
    escape = create_escape()
    escape.fuel = Decimal("7.5")
    escape.start_engine()

    dto = VehicleMapper.to_vehicle_response(escape)

    assert isinstance(dto, VehicleResponseDTO)
    assert dto.id == escape.id
    assert dto.model == "Escape"
    assert dto.engine_type == "I4 Turbo"
    assert dto.horsepower == 250
    assert dto.fuel == "7.5"  # Decimal → str at boundary
    assert dto.is_engine_on is True


def test_to_list_response_keeps_order_and_error() -> None:
    vehicles = [create_mustang(), create_escape()]

    dto = VehicleMapper.to_list_response(
        ListVehiclesResponse(vehicles=vehicles),
        error="Engine is already running",
    )

    assert isinstance(dto, VehicleListResponseDTO)
    assert [v.id for v in dto.vehicles] == [v.id for v in vehicles]
    assert dto.total == 2
    assert dto.error == "Engine is already running"


def test_to_list_response_without_error() -> None:
    dto = VehicleMapper.to_list_response(ListVehiclesResponse(vehicles=[]))

    assert dto.vehicles == []
    assert dto.total == 0
    assert dto.error is None
