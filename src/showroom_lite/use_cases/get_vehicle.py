"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from showroom_lite.domain.errors import ValidationError
from showroom_lite.domain.vehicle import Vehicle
from showroom_lite.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class GetVehicleRequest:
    """Request to get a vehicle by ID."""

    vehicle_id: str


@dataclass(frozen=True, slots=True)
class GetVehicleResponse:
    """Response containing the requested vehicle."""

    vehicle: Vehicle


class GetVehicle:
    """
    Use case for retrieving a single vehicle by ID.

    Responsibilities:
    - Reject blank ids before touching the repository
    - Delegate to repository for data access (raises NotFoundError)
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleRequest) -> GetVehicleResponse:
        """
        Raises:
            ValidationError: If vehicle_id is blank
            NotFoundError: If no vehicle has the given id
        """
        if not request.vehicle_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle_id",
                        "message": "Must not be blank",
                        "code": "BLANK_ID",
                    }
                ]
            )

        return GetVehicleResponse(vehicle=self._repository.find(request.vehicle_id))
