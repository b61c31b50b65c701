"""Request models for API validation."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any


class GreetRequest(BaseModel):
    """Request model for /api/greet endpoint."""

    name: Any = Field(
        default=None,
        description="Name to greet; any JSON value, rendered with str()"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada"
            }
        }
    )
