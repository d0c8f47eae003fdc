import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from showroom_lite.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from showroom_lite.entrypoints.http.exception_handlers import register_exception_handlers
from showroom_lite.entrypoints.http.routes.health import router as health_router
from showroom_lite.entrypoints.http.routes.vehicles import router as vehicles_router
from showroom_lite.infra.config import Settings, load_settings
from showroom_lite.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Showroom started", extra={"vehicle_count": app.state.vehicle_repository.count()})
    yield
    logger.info("Showroom stopped", extra={"vehicle_count": app.state.vehicle_repository.count()})


def build_app(
    settings: Settings | None = None,
    vehicle_repository: VehicleRepository | None = None,
) -> FastAPI:
    """
    Composition root.

    Each app owns its own repository; nothing is shared between app instances.

    Args:
        settings: Runtime settings (read from the environment when omitted)
        vehicle_repository: Store to serve (a fresh in-memory one when omitted)
    """
    app = FastAPI(
        title="Showroom Lite API",
        description="""
        In-memory vehicle showroom built with the Factory Method and Builder patterns.

        ## Features
        - List the vehicles on the showroom floor
        - Add preconfigured Ford Mustang, Explorer and Escape vehicles
        - Start/stop an engine and add fuel

        ## Error Handling
        Showroom actions redirect to `/`; a failed action passes its message
        in the `error` query parameter. JSON endpoints return structured
        errors with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings if settings is not None else load_settings()
    app.state.vehicle_repository = (
        vehicle_repository if vehicle_repository is not None else InMemoryVehicleRepository()
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(vehicles_router)

    return app


app = build_app()
