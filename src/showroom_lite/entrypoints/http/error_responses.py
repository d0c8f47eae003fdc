"""REST API error response models.

Documents the body produced by the exception handlers for the JSON endpoints.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error inside a validation failure."""

    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Vehicle with identifier 'abc' not found", "code": "NOT_FOUND"}

        Validation error:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [{"field": "id", "message": "Field required", "code": "missing"}]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier 'abc' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [{"field": "id", "message": "Field required", "code": "missing"}],
                },
            ]
        }
    )
