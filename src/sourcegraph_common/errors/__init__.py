"""Exception hierarchy and Problem Details support.

This package provides typed exceptions with RFC 9457 Problem Details
mapping and the stable error codes they carry.

Examples
--------
>>> from sourcegraph_common.errors import ErrorCode, SourcegraphError
>>> try:
...     raise SourcegraphError("Operation failed", code=ErrorCode.RUNTIME_ERROR)
... except SourcegraphError as e:
...     details = e.to_problem_details(instance="/repos")
...     assert details["type"] == "https://sourcegraph.com/problems/runtime-error"
"""

from __future__ import annotations

from sourcegraph_common.errors.codes import BASE_TYPE_URI, ErrorCode, get_type_uri
from sourcegraph_common.errors.exceptions import (
    APIError,
    InvalidSpecifierError,
    MalformedSpecifierError,
    NonStandardURIError,
    NoSchemeError,
    RepoForbiddenError,
    RepoNotExistError,
    RepoNotPersistedError,
    RepoRedirectError,
    RepoRenamedError,
    ResponseDecodeError,
    RouteError,
    SettingsError,
    SourcegraphError,
    SourcegraphErrorConfig,
    SpecifierError,
    TransportError,
    UnsupportedSpecifierError,
    is_forbidden,
    is_not_present,
    repo_error_from_message,
)

__all__ = [
    "BASE_TYPE_URI",
    "APIError",
    "ErrorCode",
    "InvalidSpecifierError",
    "MalformedSpecifierError",
    "NoSchemeError",
    "NonStandardURIError",
    "RepoForbiddenError",
    "RepoNotExistError",
    "RepoNotPersistedError",
    "RepoRedirectError",
    "RepoRenamedError",
    "ResponseDecodeError",
    "RouteError",
    "SettingsError",
    "SourcegraphError",
    "SourcegraphErrorConfig",
    "SpecifierError",
    "TransportError",
    "UnsupportedSpecifierError",
    "get_type_uri",
    "is_forbidden",
    "is_not_present",
    "repo_error_from_message",
]
