from __future__ import annotations

import logging
from dataclasses import replace
from threading import RLock

from showroom_lite.domain.errors import ConflictError, NotFoundError
from showroom_lite.domain.vehicle import Vehicle
from showroom_lite.ports.vehicle_repository import VehicleMutation, VehicleRepository

logger = logging.getLogger(__name__)


class InMemoryVehicleRepository(VehicleRepository):
    """
    Process-local vehicle store.

    - Stores vehicles in insertion order (dict keyed by id)
    - One coarse lock guards every read and write
    - Mutations run on a copy that replaces the stored vehicle only on success
    """

    def __init__(self, vehicles: list[Vehicle] | None = None) -> None:
        self._vehicles: dict[str, Vehicle] = {}
        self._lock = RLock()

        for vehicle in vehicles or []:
            self.add_vehicle(vehicle)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        with self._lock:
            if vehicle.id in self._vehicles:
                raise ConflictError(
                    f"Vehicle with identifier '{vehicle.id}' already exists",
                    identifier=vehicle.id,
                )
            self._vehicles[vehicle.id] = replace(vehicle)

        logger.info(
            "Vehicle stored",
            extra={"vehicle_id": vehicle.id, "brand": vehicle.brand, "model": vehicle.model},
        )

    def find(self, vehicle_id: str) -> Vehicle:
        with self._lock:
            return replace(self._get(vehicle_id))

    def list(self) -> list[Vehicle]:
        with self._lock:
            return [replace(vehicle) for vehicle in self._vehicles.values()]

    def update(self, vehicle_id: str, mutation: VehicleMutation) -> Vehicle:
        with self._lock:
            working_copy = replace(self._get(vehicle_id))
            mutation(working_copy)
            self._vehicles[vehicle_id] = working_copy
            return replace(working_copy)

    def count(self) -> int:
        with self._lock:
            return len(self._vehicles)

    def _get(self, vehicle_id: str) -> Vehicle:
        vehicle = self._vehicles.get(vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=vehicle_id)
        return vehicle
