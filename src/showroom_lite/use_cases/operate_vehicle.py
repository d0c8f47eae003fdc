from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from showroom_lite.domain.errors import DomainError, InvalidOperationError, NotFoundError
from showroom_lite.domain.vehicle import GAS_INCREMENT, Vehicle
from showroom_lite.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


class VehicleAction(str, Enum):
    START_ENGINE = "start_engine"
    STOP_ENGINE = "stop_engine"
    ADD_GAS = "add_gas"


@dataclass(frozen=True, slots=True)
class OperateVehicleRequest:
    vehicle_id: str
    action: VehicleAction


@dataclass(frozen=True, slots=True)
class OperateVehicleResult:
    """
    Outcome of a vehicle operation.

    Exactly one of vehicle / error is set. Expected failures (unknown id,
    illegal engine or tank state) are returned here instead of raised so the
    caller has to handle them explicitly.
    """

    vehicle: Vehicle | None = None
    error: DomainError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, vehicle: Vehicle) -> OperateVehicleResult:
        return cls(vehicle=vehicle)

    @classmethod
    def failure(cls, error: DomainError) -> OperateVehicleResult:
        return cls(error=error)


@dataclass(frozen=True, slots=True)
class OperateVehicle:
    """
    Start or stop a vehicle's engine, or add fuel to it.

    The change is applied through VehicleRepository.update(), so it runs
    under the repository lock and is discarded if the vehicle rejects it.
    """

    vehicle_repository: VehicleRepository
    gas_increment: Decimal = GAS_INCREMENT

    def execute(self, request: OperateVehicleRequest) -> OperateVehicleResult:
        mutation = self._mutation_for(request.action)

        try:
            vehicle = self.vehicle_repository.update(request.vehicle_id, mutation)
        except (NotFoundError, InvalidOperationError) as exc:
            logger.info(
                "Vehicle operation rejected",
                extra={
                    "vehicle_id": request.vehicle_id,
                    "action": request.action.value,
                    "error_code": exc.error_code,
                    "error_message": exc.message,
                },
            )
            return OperateVehicleResult.failure(exc)

        logger.info(
            "Vehicle operation applied",
            extra={
                "vehicle_id": vehicle.id,
                "action": request.action.value,
                "fuel": str(vehicle.fuel),
                "is_engine_on": vehicle.is_engine_on,
            },
        )
        return OperateVehicleResult.success(vehicle)

    def _mutation_for(self, action: VehicleAction):
        if action is VehicleAction.START_ENGINE:
            return Vehicle.start_engine
        if action is VehicleAction.STOP_ENGINE:
            return Vehicle.stop_engine
        return lambda vehicle: vehicle.add_gas(self.gas_increment)
