from functools import lru_cache
from typing import Annotated, Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    TODO_API_VERSION: str = "v1.0.x"
    API_NAME: str = "Todo List API"
    API_SUMMARY: str = "Create, categorize, prioritize and complete short text tasks"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    CORS_ENABLED: bool = False
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["*"]

    # Database Configuration
    REDIS_URL: str = "redis://localhost:6379"
    POSTGRES_URL: str = "postgresql://localhost:5432/todos"  # Assumes a local Postgres db named 'todos' exists

    TODO_STORE_BACKEND: Literal["postgres", "redis"] = "redis"
    TODO_STORE_NAMESPACE: str = "todos"

    # OpenTelemetry Settings
    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str = "todo-api"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",")]
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
