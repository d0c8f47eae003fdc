from pydantic import BaseModel, ConfigDict, Field


class VehicleResponseDTO(BaseModel):
    """A vehicle as shown on the showroom floor."""

    id: str
    brand: str
    model: str
    color: str
    year: int
    engine_type: str
    horsepower: int
    transmission: str
    warranty_years: int
    fuel: str = Field(description="Fuel level as decimal string", examples=["5"])
    is_engine_on: bool

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "brand": "Ford",
                "model": "Escape",
                "color": "Red",
                "year": 2026,
                "engine_type": "I4 Turbo",
                "horsepower": 250,
                "transmission": "Automatic",
                "warranty_years": 3,
                "fuel": "5",
                "is_engine_on": False,
            }
        }
    )


class VehicleListResponseDTO(BaseModel):
    """Showroom listing with the optional message echoed from a failed action."""

    vehicles: list[VehicleResponseDTO]
    total: int
    error: str | None = Field(
        default=None,
        description="Message of the last failed action, if any",
        examples=["Engine is already running"],
    )
