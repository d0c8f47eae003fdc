from __future__ import annotations

from datetime import date
from typing import Callable

from showroom_lite.domain.vehicle import Vehicle


STANDARD_WARRANTY_YEARS = 3
STANDARD_ENGINE_TYPE = "I4"
STANDARD_HORSEPOWER = 200
AUTOMATIC_TRANSMISSION = "Automatic"


class VehicleBuilder:
    """
    Fluent builder for Vehicle.

    Starts from the showroom defaults (a red Ford Mustang of the current year
    with the standard I4 engine, automatic transmission and 3-year warranty).
    Every setter returns the builder so calls can be chained; build() can be
    called any number of times and never resets the configuration.

    Usage:
        vehicle = (
            VehicleBuilder()
            .set_model("Escape")
            .set_engine_type("I4 Turbo")
            .set_horsepower(250)
            .build()
        )
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        """
        Args:
            today: Clock used by with_current_year() and the initial year
        """
        self._today = today
        self._brand = "Ford"
        self._model = "Mustang"
        self._color = "Red"
        self._year = today().year
        self._engine_type = STANDARD_ENGINE_TYPE
        self._horsepower = STANDARD_HORSEPOWER
        self._transmission = AUTOMATIC_TRANSMISSION
        self._warranty_years = STANDARD_WARRANTY_YEARS

    # ==========================================================================
    # Individual attributes
    # ==========================================================================

    def set_brand(self, brand: str) -> VehicleBuilder:
        self._brand = brand
        return self

    def set_model(self, model: str) -> VehicleBuilder:
        self._model = model
        return self

    def set_color(self, color: str) -> VehicleBuilder:
        self._color = color
        return self

    def set_year(self, year: int) -> VehicleBuilder:
        self._year = year
        return self

    def set_engine_type(self, engine_type: str) -> VehicleBuilder:
        self._engine_type = engine_type
        return self

    def set_horsepower(self, horsepower: int) -> VehicleBuilder:
        self._horsepower = horsepower
        return self

    def set_transmission(self, transmission: str) -> VehicleBuilder:
        self._transmission = transmission
        return self

    def set_warranty_years(self, warranty_years: int) -> VehicleBuilder:
        self._warranty_years = warranty_years
        return self

    # ==========================================================================
    # Defaults
    # ==========================================================================

    def with_current_year(self) -> VehicleBuilder:
        """Set the year to the calendar year at call time."""
        self._year = self._today().year
        return self

    def with_standard_warranty(self) -> VehicleBuilder:
        self._warranty_years = STANDARD_WARRANTY_YEARS
        return self

    def with_standard_engine(self) -> VehicleBuilder:
        self._engine_type = STANDARD_ENGINE_TYPE
        self._horsepower = STANDARD_HORSEPOWER
        return self

    def with_automatic_transmission(self) -> VehicleBuilder:
        self._transmission = AUTOMATIC_TRANSMISSION
        return self

    def with_all_defaults(self) -> VehicleBuilder:
        """
        Apply every default in a fixed order.

        Setters called afterwards override the defaults.
        """
        return (
            self.with_current_year()
            .with_standard_warranty()
            .with_standard_engine()
            .with_automatic_transmission()
        )

    # ==========================================================================
    # Build
    # ==========================================================================

    def build(self) -> Vehicle:
        """Return a new Vehicle with the current configuration and a fresh id."""
        return Vehicle(
            brand=self._brand,
            model=self._model,
            color=self._color,
            year=self._year,
            engine_type=self._engine_type,
            horsepower=self._horsepower,
            transmission=self._transmission,
            warranty_years=self._warranty_years,
        )
