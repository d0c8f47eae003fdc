from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import RedirectResponse

from showroom_lite.domain.creators import VehicleVariant
from showroom_lite.domain.errors import ValidationError
from showroom_lite.entrypoints.http.dependencies import (
    get_add_vehicle_use_case,
    get_get_vehicle_use_case,
    get_list_vehicles_use_case,
    get_operate_vehicle_use_case,
)
from showroom_lite.entrypoints.http.dtos.vehicles import (
    VehicleListResponseDTO,
    VehicleResponseDTO,
)
from showroom_lite.entrypoints.http.error_responses import ErrorResponse
from showroom_lite.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from showroom_lite.use_cases.add_vehicle import AddVehicle, AddVehicleRequest
from showroom_lite.use_cases.get_vehicle import GetVehicle, GetVehicleRequest
from showroom_lite.use_cases.list_vehicles import ListVehicles
from showroom_lite.use_cases.operate_vehicle import (
    OperateVehicle,
    OperateVehicleRequest,
    VehicleAction,
)


router = APIRouter(tags=["Showroom"])

VEHICLE_ID_REQUIRED = "Vehicle id is required"


def redirect_home(error: str | None = None) -> RedirectResponse:
    """Redirect to the listing, carrying the failure message when there is one."""
    url = "/" if error is None else f"/?{urlencode({'error': error})}"
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


def _add(variant: str, use_case: AddVehicle) -> RedirectResponse:
    try:
        use_case.execute(AddVehicleRequest(variant=variant))
    except ValidationError as exc:
        return redirect_home(exc.message)
    return redirect_home()


def _operate(vehicle_id: str | None, action: VehicleAction, use_case: OperateVehicle) -> RedirectResponse:
    if vehicle_id is None or not vehicle_id.strip():
        return redirect_home(VEHICLE_ID_REQUIRED)
    result = use_case.execute(OperateVehicleRequest(vehicle_id=vehicle_id, action=action))
    if not result.ok:
        return redirect_home(result.error.message)
    return redirect_home()


# ==============================================================================
# Listing
# ==============================================================================


@router.get(
    "/",
    response_model=VehicleListResponseDTO,
    summary="List vehicles",
    description="""
    All vehicles on the showroom floor, in the order they were added.

    The actions below redirect here; when one fails its message arrives in
    the `error` query parameter and is echoed back in the response.
    """,
)
def list_vehicles(
    error: str | None = Query(default=None, description="Message to display"),
    use_case: ListVehicles = Depends(get_list_vehicles_use_case),
) -> VehicleListResponseDTO:
    return VehicleMapper.to_list_response(use_case.execute(), error=error)


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Get vehicle",
    responses={404: {"model": ErrorResponse, "description": "Vehicle not found"}},
)
def get_vehicle(
    vehicle_id: str,
    use_case: GetVehicle = Depends(get_get_vehicle_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(GetVehicleRequest(vehicle_id=vehicle_id))
    return VehicleMapper.to_vehicle_response(result.vehicle)


# ==============================================================================
# Adding vehicles
# ==============================================================================


@router.get("/add-mustang", response_class=RedirectResponse, status_code=302, summary="Add a Ford Mustang")
def add_mustang(use_case: AddVehicle = Depends(get_add_vehicle_use_case)) -> RedirectResponse:
    return _add(VehicleVariant.MUSTANG.value, use_case)


@router.get("/add-explorer", response_class=RedirectResponse, status_code=302, summary="Add a Ford Explorer")
def add_explorer(use_case: AddVehicle = Depends(get_add_vehicle_use_case)) -> RedirectResponse:
    return _add(VehicleVariant.EXPLORER.value, use_case)


@router.get("/add-escape", response_class=RedirectResponse, status_code=302, summary="Add a Ford Escape")
def add_escape(use_case: AddVehicle = Depends(get_add_vehicle_use_case)) -> RedirectResponse:
    return _add(VehicleVariant.ESCAPE.value, use_case)


@router.get(
    "/add/{variant}",
    response_class=RedirectResponse,
    status_code=302,
    summary="Add a vehicle by variant name",
    description="Unknown variants redirect to `/?error=<message>`.",
)
def add_variant(variant: str, use_case: AddVehicle = Depends(get_add_vehicle_use_case)) -> RedirectResponse:
    return _add(variant, use_case)


# ==============================================================================
# Vehicle actions
# ==============================================================================


@router.get("/start-engine", response_class=RedirectResponse, status_code=302, summary="Start the engine")
def start_engine(
    vehicle_id: str | None = Query(default=None, alias="id", description="Vehicle id as listed on /"),
    use_case: OperateVehicle = Depends(get_operate_vehicle_use_case),
) -> RedirectResponse:
    return _operate(vehicle_id, VehicleAction.START_ENGINE, use_case)


@router.get("/stop-engine", response_class=RedirectResponse, status_code=302, summary="Stop the engine")
def stop_engine(
    vehicle_id: str | None = Query(default=None, alias="id", description="Vehicle id as listed on /"),
    use_case: OperateVehicle = Depends(get_operate_vehicle_use_case),
) -> RedirectResponse:
    return _operate(vehicle_id, VehicleAction.STOP_ENGINE, use_case)


@router.get("/add-gas", response_class=RedirectResponse, status_code=302, summary="Add fuel")
def add_gas(
    vehicle_id: str | None = Query(default=None, alias="id", description="Vehicle id as listed on /"),
    use_case: OperateVehicle = Depends(get_operate_vehicle_use_case),
) -> RedirectResponse:
    return _operate(vehicle_id, VehicleAction.ADD_GAS, use_case)
