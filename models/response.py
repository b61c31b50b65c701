"""Response models for API endpoints."""
from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error response for rejected request bodies."""

    error: str = Field(..., description="Error message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Invalid request"
            }
        }
    )


class DataResponse(BaseModel):
    """Response model for /api/data endpoint."""

    message: str = Field(..., description="Fixed greeting from the server")
    timestamp: str = Field(..., description="Server time, ISO-8601 UTC")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Hello from the Flask server!",
                "timestamp": "2026-10-19T08:15:30.123Z"
            }
        }
    )


class GreetResponse(BaseModel):
    """Response model for /api/greet endpoint."""

    greeting: str = Field(..., description="Greeting with the submitted name")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "greeting": "Hello, Ada! The server received your name at 8:15:30 AM"
            }
        }
    )
