from __future__ import annotations

from dataclasses import dataclass

from showroom_lite.domain.vehicle import Vehicle
from showroom_lite.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class ListVehiclesResponse:
    vehicles: list[Vehicle]

    @property
    def total(self) -> int:
        return len(self.vehicles)


class ListVehicles:
    """List every vehicle on the showroom floor in the order it was added."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self) -> ListVehiclesResponse:
        return ListVehiclesResponse(vehicles=self._repository.list())
