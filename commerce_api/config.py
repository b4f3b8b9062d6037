"""Application configuration."""

import logging
import sys
from collections.abc import Callable, MutableMapping
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Log event keys whose values are replaced before rendering
SENSITIVE_LOG_KEYS = frozenset({"password", "current_password", "new_password", "hashed_password"})


class Settings(BaseSettings):
    """Application settings, read from the environment and ``.env``."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # SQLite file by default; any SQLAlchemy URL works
    DATABASE_URL: str = "sqlite:///./commerce.db"

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "commerce API"
    VERSION: str = "0.1.0"

    # Credentials
    PASSWORD_PEPPER: str = ""
    LOGIN_ID_HEADER: str = "X-Loopers-LoginId"
    LOGIN_PASSWORD_HEADER: str = "X-Loopers-LoginPw"  # noqa: S105

    # Sign-up feature flags
    ALLOW_USER_REGISTRATIONS: bool = True
    REQUIRE_UNIQUE_EMAIL: bool = False

    @field_validator("LOGIN_ID_HEADER", "LOGIN_PASSWORD_HEADER", mode="after")
    @classmethod
    def strip_header_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Credential header names cannot be empty")
        return value

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


def redact_sensitive_fields(
    logger: Any,  # noqa: ANN401, ARG001
    method_name: str,  # noqa: ARG001
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """structlog processor: never let password material reach a log line."""
    for key in SENSITIVE_LOG_KEYS.intersection(event_dict):
        event_dict[key] = "[REDACTED]"
    return event_dict


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging: console output in development, JSON lines in production."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )
    processors: list[Callable[..., Any]] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        redact_sensitive_fields,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
