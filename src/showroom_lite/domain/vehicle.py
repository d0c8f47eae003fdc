from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any
from uuid import uuid4

from showroom_lite.domain.errors import InvalidOperationError, ValidationError


FUEL_CAPACITY = Decimal("20")
INITIAL_FUEL = Decimal("5")
GAS_INCREMENT = Decimal("2.5")
MIN_FUEL_TO_START = Decimal("0.5")


def new_vehicle_id() -> str:
    return str(uuid4())


@dataclass(slots=True)
class Vehicle:
    """
    A car on the showroom floor.

    Static attributes are fixed by the builder that produced it. Only the fuel
    level and the engine flag change afterwards, and only through the state
    operations below.

    Invariants:
    - id is assigned once at construction and cannot be reassigned
    - 0 <= fuel <= FUEL_CAPACITY
    """

    brand: str
    model: str
    color: str
    year: int
    engine_type: str
    horsepower: int
    transmission: str
    warranty_years: int
    fuel: Decimal = INITIAL_FUEL
    is_engine_on: bool = False
    id: str = field(default_factory=new_vehicle_id)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and hasattr(self, "id"):
            raise AttributeError("Vehicle id is immutable")
        object.__setattr__(self, name, value)

    @property
    def needs_gas(self) -> bool:
        return self.fuel < MIN_FUEL_TO_START

    @property
    def is_tank_full(self) -> bool:
        return self.fuel >= FUEL_CAPACITY

    def start_engine(self) -> None:
        """
        Turn the engine on.

        Raises:
            InvalidOperationError: If the engine is already running or the
                fuel level is below MIN_FUEL_TO_START
        """
        if self.is_engine_on:
            raise InvalidOperationError(
                "Engine is already running", vehicle_id=self.id
            )
        if self.needs_gas:
            raise InvalidOperationError(
                "Not enough fuel to start the engine",
                vehicle_id=self.id,
                fuel=str(self.fuel),
            )
        self.is_engine_on = True

    def stop_engine(self) -> None:
        """
        Turn the engine off.

        Raises:
            InvalidOperationError: If the engine is already stopped
        """
        if not self.is_engine_on:
            raise InvalidOperationError(
                "Engine is already stopped", vehicle_id=self.id
            )
        self.is_engine_on = False

    def add_gas(self, amount: Decimal = GAS_INCREMENT) -> None:
        """
        Add fuel to the tank, capped at FUEL_CAPACITY.

        Raises:
            ValidationError: If amount is not positive
            InvalidOperationError: If the tank is already full
        """
        if amount <= 0:
            raise ValidationError("Fuel amount must be > 0", amount=str(amount))
        if self.is_tank_full:
            raise InvalidOperationError("Gas tank is already full", vehicle_id=self.id)
        self.fuel = min(self.fuel + amount, FUEL_CAPACITY)
