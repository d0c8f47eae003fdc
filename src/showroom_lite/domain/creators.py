"""Vehicle creators.

One creator function per showroom variant, each driving VehicleBuilder with a
fixed configuration. New variants only need a new function and an entry in
CREATORS.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from showroom_lite.domain.errors import ValidationError
from showroom_lite.domain.vehicle import Vehicle
from showroom_lite.domain.vehicle_builder import VehicleBuilder


Creator = Callable[[], Vehicle]


class VehicleVariant(str, Enum):
    MUSTANG = "mustang"
    EXPLORER = "explorer"
    ESCAPE = "escape"


def create_mustang() -> Vehicle:
    return VehicleBuilder().with_all_defaults().build()


def create_explorer() -> Vehicle:
    return (
        VehicleBuilder()
        .with_all_defaults()
        .set_model("Explorer")
        .set_color("Blue")
        .set_engine_type("V6")
        .set_horsepower(300)
        .build()
    )


def create_escape() -> Vehicle:
    return (
        VehicleBuilder()
        .set_brand("Ford")
        .set_model("Escape")
        .set_color("Red")
        .set_engine_type("I4 Turbo")
        .set_horsepower(250)
        .with_current_year()
        .with_standard_warranty()
        .with_automatic_transmission()
        .build()
    )


CREATORS: dict[VehicleVariant, Creator] = {
    VehicleVariant.MUSTANG: create_mustang,
    VehicleVariant.EXPLORER: create_explorer,
    VehicleVariant.ESCAPE: create_escape,
}


def create_vehicle(variant: str, creators: dict[VehicleVariant, Creator] = CREATORS) -> Vehicle:
    """
    Create a new vehicle of the given variant.

    Args:
        variant: Variant name (case-insensitive), e.g. "escape"
        creators: Registry to look the variant up in

    Raises:
        ValidationError: If the variant is unknown
    """
    try:
        key = VehicleVariant(variant.lower())
        creator = creators[key]
    except (ValueError, KeyError):
        raise ValidationError(
            message=f"Unknown vehicle variant '{variant}'",
            errors=[
                {
                    "field": "variant",
                    "message": f"Must be one of {sorted(v.value for v in creators)}",
                    "code": "UNKNOWN_VARIANT",
                }
            ]
        )

    return creator()
