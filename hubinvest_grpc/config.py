"""Service configuration using Pydantic BaseSettings.

Read once by the process entry point; the server itself only takes
parameters. All settings can be overridden via environment variables.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_WORKSPACE_ENV = Path(__file__).resolve().parent.parent / ".env"


class ServiceConfig(BaseSettings):
    """Configuration for the HubInvestments gRPC edge."""

    model_config = SettingsConfigDict(
        env_file=str(_WORKSPACE_ENV),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service identity
    service_name: str = "hubinvest-grpc"
    grpc_port: int = Field(default=50051, ge=0, le=65535)

    # JWT configuration - HS256 shared secret
    jwt_secret_key: str = ""
    access_token_expire_minutes: int = Field(default=10, gt=0)

    # "local" verifies tokens in-process, "user-service" asks the User service
    token_validator: Literal["local", "user-service"] = "local"

    # User Service configuration
    user_service_host: str = "localhost"
    user_service_port: int = 50052

    # Container factory as "package.module:attribute"
    container_factory: str = ""

    # Prometheus /metrics port, 0 disables the exporter
    metrics_port: int = Field(default=0, ge=0, le=65535)

    shutdown_grace_seconds: float = Field(default=5.0, ge=0)
    log_level: str = "INFO"

    @property
    def user_service_address(self) -> str:
        return f"{self.user_service_host}:{self.user_service_port}"


# Global config instance - validated at import time
config = ServiceConfig()
