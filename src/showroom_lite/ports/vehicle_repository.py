from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from showroom_lite.domain.vehicle import Vehicle


VehicleMutation = Callable[[Vehicle], None]


class VehicleRepository(ABC):
    """
    Port for vehicle storage.

    Implementations hand out snapshots: callers never hold a reference to the
    stored vehicle, so every state change has to go through update().

    Contract:
        - list() preserves insertion order
        - ids are unique; add_vehicle() rejects a duplicate
        - update() applies the mutation atomically; if it raises, the stored
          vehicle is left unchanged
    """

    @abstractmethod
    def add_vehicle(self, vehicle: Vehicle) -> None:
        """
        Store a vehicle under its id.

        Raises:
            ConflictError: If a vehicle with the same id is already stored
        """
        ...

    @abstractmethod
    def find(self, vehicle_id: str) -> Vehicle:
        """
        Get a snapshot of a stored vehicle.

        Raises:
            NotFoundError: If no vehicle has the given id
        """
        ...

    @abstractmethod
    def list(self) -> list[Vehicle]:
        """Snapshots of all stored vehicles in insertion order."""
        ...

    @abstractmethod
    def update(self, vehicle_id: str, mutation: VehicleMutation) -> Vehicle:
        """
        Apply a state mutation to a stored vehicle.

        Args:
            vehicle_id: Id of the vehicle to change
            mutation: Callable invoked with the vehicle; may raise a DomainError

        Returns:
            Snapshot of the vehicle after the mutation

        Raises:
            NotFoundError: If no vehicle has the given id
        """
        ...

    @abstractmethod
    def count(self) -> int: ...
