"""Data models for request/response validation."""
from models.request import GreetRequest
from models.response import (
    DataResponse,
    ErrorResponse,
    GreetResponse,
)

__all__ = [
    # Requests
    "GreetRequest",
    # Responses
    "DataResponse",
    "ErrorResponse",
    "GreetResponse",
]
