"""Environment variables configuration."""
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_FORMAT = "%(message)s"


class ServerConfig(BaseModel):
    """Process-wide settings handed to the app factory and the server."""

    host: str = Field(default=DEFAULT_HOST, description="Bind address")
    port: int = Field(
        default=DEFAULT_PORT,
        ge=0,
        le=65535,
        description="Listening port (0 picks an ephemeral port)"
    )
    log_level: str = Field(default="INFO", description="Logging level name")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="Logging format string")
    frontend_origin: str = Field(default="*", description="Allowed CORS origin for /api/*")


def load_config(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """Build a ServerConfig from the environment (os.environ by default)."""
    env = os.environ if environ is None else environ
    return ServerConfig(
        host=env.get("HOST", DEFAULT_HOST),
        port=env.get("PORT", DEFAULT_PORT),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        log_format=env.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        frontend_origin=env.get("FRONTEND_ORIGIN", "*"),
    )
