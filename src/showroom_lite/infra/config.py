from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from showroom_lite.domain.vehicle import GAS_INCREMENT


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    gas_increment: Decimal = GAS_INCREMENT


def load_settings() -> Settings:
    """
    Read settings from the environment.

    Variables:
        SHOWROOM_HOST: Bind host (default 127.0.0.1)
        SHOWROOM_PORT: Bind port (default 8000)
        SHOWROOM_LOG_LEVEL: Root log level (default INFO)
        SHOWROOM_GAS_INCREMENT: Fuel added per add-gas action (default 2.5)

    Raises:
        RuntimeError: If a variable is set to an invalid value
    """
    defaults = Settings()

    port_raw = os.getenv("SHOWROOM_PORT")
    try:
        port = int(port_raw) if port_raw else defaults.port
    except ValueError:
        raise RuntimeError(f"SHOWROOM_PORT must be an integer, got {port_raw!r}")

    increment_raw = os.getenv("SHOWROOM_GAS_INCREMENT")
    try:
        gas_increment = Decimal(increment_raw) if increment_raw else defaults.gas_increment
    except InvalidOperation:
        raise RuntimeError(f"SHOWROOM_GAS_INCREMENT must be a decimal, got {increment_raw!r}")
    if not gas_increment.is_finite() or gas_increment <= 0:
        raise RuntimeError(f"SHOWROOM_GAS_INCREMENT must be a finite amount > 0, got {increment_raw!r}")

    log_level = (os.getenv("SHOWROOM_LOG_LEVEL") or defaults.log_level).upper()
    if log_level not in logging.getLevelNamesMapping():
        raise RuntimeError(f"SHOWROOM_LOG_LEVEL must be a logging level name, got {log_level!r}")

    return Settings(
        host=os.getenv("SHOWROOM_HOST") or defaults.host,
        port=port,
        log_level=log_level,
        gas_increment=gas_increment,
    )
