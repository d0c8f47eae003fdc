from __future__ import annotations

from showroom_lite.domain.vehicle import Vehicle
from showroom_lite.entrypoints.http.dtos.vehicles import (
    VehicleListResponseDTO,
    VehicleResponseDTO,
)
from showroom_lite.use_cases.list_vehicles import ListVehiclesResponse


class VehicleMapper:
    """Maps domain vehicles to REST DTOs."""

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """
        Converts domain Vehicle entity to REST response DTO.

        Handles Decimal → str conversion of the fuel level at the boundary.
        """
        return VehicleResponseDTO(
            id=vehicle.id,
            brand=vehicle.brand,
            model=vehicle.model,
            color=vehicle.color,
            year=vehicle.year,
            engine_type=vehicle.engine_type,
            horsepower=vehicle.horsepower,
            transmission=vehicle.transmission,
            warranty_years=vehicle.warranty_years,
            fuel=str(vehicle.fuel),
            is_engine_on=vehicle.is_engine_on,
        )

    @staticmethod
    def to_list_response(
        result: ListVehiclesResponse,
        error: str | None = None,
    ) -> VehicleListResponseDTO:
        return VehicleListResponseDTO(
            vehicles=[VehicleMapper.to_vehicle_response(v) for v in result.vehicles],
            total=result.total,
            error=error,
        )
