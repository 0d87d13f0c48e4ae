"""Runtime settings with typed configuration and fail-fast validation.

This module provides :class:`ClientSettings` (a ``pydantic_settings``
``BaseSettings``) read from ``SOURCEGRAPH_*`` environment variables. Invalid
values raise :class:`~sourcegraph_common.errors.SettingsError` at
construction time rather than surfacing later as request failures.

Examples
--------
>>> from sourcegraph_common.settings import load_settings
>>> settings = load_settings(base_url="https://example.com/api/")
>>> settings.timeout
30.0
"""

from __future__ import annotations

import logging
from typing import Final

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sourcegraph_common.errors import SettingsError
from sourcegraph_common.logging import get_logger

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "ClientSettings",
    "load_settings",
]

logger = get_logger(__name__)

DEFAULT_BASE_URL: Final[str] = "https://sourcegraph.com/api/"
DEFAULT_USER_AGENT: Final[str] = "sourcegraph-client/0.1.0"


class ClientSettings(BaseSettings):
    """Client configuration loaded from ``SOURCEGRAPH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SOURCEGRAPH_",
        extra="forbid",
        case_sensitive=False,
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API root; relative route paths are resolved against it",
    )
    token: str | None = Field(
        default=None,
        description="Opaque access token sent in the Authorization header",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header value")
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, value: str) -> str:
        # Route paths are appended to the base URL as-is.
        if not value.startswith(("http://", "https://")):
            msg = f"base_url must be an absolute http(s) URL, got {value!r}"
            raise ValueError(msg)
        return value if value.endswith("/") else f"{value}/"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"unknown log level {value!r}"
            raise ValueError(msg)
        return level


def load_settings(**overrides: object) -> ClientSettings:
    """Load :class:`ClientSettings`, applying keyword overrides over the environment.

    Parameters
    ----------
    **overrides : object
        Field values taking precedence over environment variables.

    Returns
    -------
    ClientSettings
        Validated settings.

    Raises
    ------
    SettingsError
        If any value fails validation or an unknown field is given.
    """
    try:
        return ClientSettings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        errors: list[dict[str, object]] = [
            {"field": ".".join(str(loc) for loc in error["loc"]), "issue": error["msg"]}
            for error in exc.errors()
        ]
        logger.log_failure(
            "Settings validation failed",
            exception=exc,
            operation="load_settings",
        )
        msg = f"Configuration validation failed: {exc.error_count()} error(s)"
        raise SettingsError(msg, errors=errors, cause=exc) from exc
