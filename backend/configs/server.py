"""
HTTP server configuration settings.

Bind address and CORS policy for the API.

Dependencies: pydantic_settings
System role: Server and CORS configuration
"""

from pydantic import Field

from backend.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """Server bind and CORS configuration."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=5000, description="Bind port")
    cors_origin: str = Field(
        default="*",
        description="Allowed CORS origins, comma-separated",
    )
    cors_credentials: bool = Field(default=True, description="Allow CORS credentials")

    @property
    def cors_origins(self) -> list[str]:
        """Split CORS_ORIGIN into a list, falling back to wildcard."""
        origins = [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]
        return origins or ["*"]
