"""Application settings and configuration."""

from functools import lru_cache
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="geothing", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    app_repository: str = Field(
        default="https://github.com/your-github-account/geothing",
        description="Source repository shown by the app info endpoint",
    )
    debug: bool = Field(default=False, description="Debug mode")
    testing: bool = Field(default=False, description="Testing mode")
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=9090, description="Port to bind to")
    api_prefix: str = Field(default="/goapi/v1", description="Secured API prefix")

    # Logging
    log_level: str = Field(default="INFO", description="Root logging level")
    log_json: bool = Field(default=False, description="Emit logs as JSON lines")

    # CORS
    allowed_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:9090",
        ],
        description="Allowed CORS origins",
    )

    # Security
    secret_key: str = Field(
        default="your-secret-key-change-in-production",
        description="Secret key for JWT tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(
        default=60, description="Access token expiration time in minutes"
    )

    # Development admin account used by the login endpoint
    admin_user: str = Field(default="goadmin", description="Admin login")
    admin_password: str = Field(
        default="change-this-admin-password", description="Admin password"
    )
    admin_email: str = Field(
        default="goadmin@yourdomain.org", description="Admin email"
    )
    admin_id: int = Field(default=960901, description="Admin user id")

    # PostgreSQL Database
    postgres_user: str = Field(default="geothing", description="PostgreSQL user")
    postgres_password: str = Field(
        default="supersecretpassword", description="PostgreSQL password"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_db: str = Field(default="geothing", description="PostgreSQL database")
    test_postgres_db: str = Field(
        default="geothing_test", description="PostgreSQL test database name"
    )
    postgres_pool_min_size: int = Field(default=2, description="Pool min size")
    postgres_pool_max_size: int = Field(default=10, description="Pool max size")
    db_command_timeout: float = Field(
        default=30.0, description="Per statement timeout in seconds"
    )
    db_schema: str = Field(
        default="geothing", description="Schema holding the thing tables"
    )
    db_srid: int = Field(
        default=2056, description="SRID of the projected position coordinates"
    )

    # Business rules
    min_name_length: int = Field(default=5, description="Minimum name length")
    thing_list_default_limit: int = Field(
        default=50, description="Default page size for things"
    )
    type_list_default_limit: int = Field(
        default=250, description="Default page size for type things"
    )

    @property
    def database_name(self) -> str:
        """Database used by the pool, switched to the test database in testing mode."""
        return self.test_postgres_db if self.testing else self.postgres_db


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
