"""
Dependency injection for FastAPI routes.

The vehicle repository is owned by the app instance (created in build_app and
kept on app.state); use cases are cheap and built per request around it.
"""

from __future__ import annotations

from fastapi import Depends, Request

from showroom_lite.infra.config import Settings
from showroom_lite.ports.vehicle_repository import VehicleRepository
from showroom_lite.use_cases.add_vehicle import AddVehicle
from showroom_lite.use_cases.get_vehicle import GetVehicle
from showroom_lite.use_cases.list_vehicles import ListVehicles
from showroom_lite.use_cases.operate_vehicle import OperateVehicle


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_vehicle_repository(request: Request) -> VehicleRepository:
    """
    Returns the repository of the app serving this request.

    Every request of one app shares the same repository; separate apps
    (e.g. one per test) never share state.
    """
    return request.app.state.vehicle_repository


def get_list_vehicles_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> ListVehicles:
    return ListVehicles(vehicle_repository=repository)


def get_get_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicle:
    return GetVehicle(vehicle_repository=repository)


def get_add_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> AddVehicle:
    return AddVehicle(vehicle_repository=repository)


def get_operate_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
    settings: Settings = Depends(get_settings),
) -> OperateVehicle:
    """
    Factory function that returns a configured OperateVehicle use case.

    The fuel increment for add-gas comes from the app settings.
    """
    return OperateVehicle(
        vehicle_repository=repository,
        gas_increment=settings.gas_increment,
    )
