from __future__ import annotations

import logging
from dataclasses import dataclass

from showroom_lite.domain.creators import CREATORS, Creator, VehicleVariant, create_vehicle
from showroom_lite.domain.vehicle import Vehicle
from showroom_lite.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddVehicleRequest:
    variant: str


@dataclass(frozen=True, slots=True)
class AddVehicleResponse:
    vehicle: Vehicle


class AddVehicle:
    """
    Create a vehicle of the requested variant and put it on the showroom floor.

    The use case does not know how any variant is configured; it looks the
    creator up in the registry and stores whatever it returns.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        creators: dict[VehicleVariant, Creator] = CREATORS,
    ) -> None:
        self._repository = vehicle_repository
        self._creators = creators

    def execute(self, request: AddVehicleRequest) -> AddVehicleResponse:
        """
        Raises:
            ValidationError: If the variant is unknown
            ConflictError: If the repository already holds the new vehicle's id
        """
        vehicle = create_vehicle(request.variant, creators=self._creators)
        self._repository.add_vehicle(vehicle)

        logger.info(
            "Vehicle added",
            extra={"variant": request.variant, "vehicle_id": vehicle.id},
        )

        return AddVehicleResponse(vehicle=vehicle)
