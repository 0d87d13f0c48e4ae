"""Shared infrastructure for the sourcegraph client: errors, logging, settings."""

from __future__ import annotations

from sourcegraph_common.errors import ErrorCode, SourcegraphError
from sourcegraph_common.logging import get_logger, setup_logging
from sourcegraph_common.settings import ClientSettings, load_settings

__all__ = [
    "ClientSettings",
    "ErrorCode",
    "SourcegraphError",
    "get_logger",
    "load_settings",
    "setup_logging",
]
