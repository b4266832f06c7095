"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache
from typing import Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_REDIS_PORT = 6379


def split_address(address: str, default_host: str, default_port: int) -> Tuple[str, int]:
    """
    Split a "host:port" address into its parts.

    Either part may be omitted (":8080", "localhost"), in which case the
    default is used. An unparsable port also falls back to the default.
    """
    host, sep, port = address.strip().rpartition(":")
    if not sep:
        # No colon at all: the whole string is the host
        host, port = address.strip(), ""

    try:
        port_number = int(port) if port else default_port
    except ValueError:
        port_number = default_port

    return host or default_host, port_number


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Task Manager", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    # API Service
    task_manager_host: str = Field(default=":8080", alias="TASK_MANAGER_HOST")
    api_reload: bool = Field(default=False, alias="API_RELOAD")

    # Redis Settings (Primary Store)
    redis_host: str = Field(default="localhost:6379", alias="REDIS_HOST")
    redis_password: str = Field(default="", alias="REDIS_PASSWORD")
    redis_db: int = Field(default=0, alias="REDIS_DB")
    redis_socket_timeout: Optional[float] = Field(
        default=None, alias="REDIS_SOCKET_TIMEOUT"
    )  # None = wait for the server indefinitely
    redis_use_transactions: bool = Field(
        default=False, alias="REDIS_USE_TRANSACTIONS"
    )  # Wrap paired writes in MULTI/EXEC

    # Development toggles
    use_in_memory_store: bool = Field(
        default=False, alias="TASK_MANAGER_IN_MEMORY_STORE"
    )
    seed_demo_tasks: bool = Field(default=False, alias="SEED_DEMO_TASKS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: str = Field(default="logs/app.log", alias="LOG_FILE")

    @field_validator("redis_db", mode="before")
    @classmethod
    def _parse_redis_db(cls, value):
        """Fall back to database 0 when REDIS_DB is empty or not an integer."""
        if value is None or value == "":
            return 0
        try:
            return int(value)
        except (TypeError, ValueError):
            return 0

    @property
    def redis_address(self) -> Tuple[str, int]:
        """Redis (host, port) parsed from REDIS_HOST."""
        return split_address(self.redis_host, "localhost", DEFAULT_REDIS_PORT)

    @property
    def listen_address(self) -> Tuple[str, int]:
        """HTTP (host, port) parsed from TASK_MANAGER_HOST."""
        return split_address(self.task_manager_host, "0.0.0.0", 8080)

    @property
    def redis_url(self) -> str:
        """Redis connection URL with the password masked, for logging only."""
        host, port = self.redis_address
        auth = ":****@" if self.redis_password else ""
        return f"redis://{auth}{host}:{port}/{self.redis_db}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
