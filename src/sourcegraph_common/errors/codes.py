"""Error code registry and type URIs for Problem Details.

This module defines stable error codes and type URIs used in RFC 9457
Problem Details payloads produced by the client. Codes and URIs are frozen
after release so callers can match on them.

Examples
--------
>>> from sourcegraph_common.errors.codes import ErrorCode, get_type_uri
>>> code = ErrorCode.MALFORMED_SPECIFIER
>>> get_type_uri(code)
'https://sourcegraph.com/problems/malformed-specifier'
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

__all__ = [
    "BASE_TYPE_URI",
    "ErrorCode",
    "get_type_uri",
]


BASE_TYPE_URI: Final[str] = "https://sourcegraph.com/problems"


class ErrorCode(StrEnum):
    """Stable error codes for sourcegraph client exceptions.

    Codes follow kebab-case naming and are grouped by category:

    - Specifiers: identifiers that cannot be encoded or decoded.
    - Routing & transport: URL construction and request delivery.
    - API: error statuses and undecodable bodies returned by the server.
    - Repositories: repository-specific conditions reported by the server.
    - Configuration & runtime.
    """

    # Specifiers
    INVALID_SPECIFIER = "invalid-specifier"
    UNSUPPORTED_SPECIFIER = "unsupported-specifier"
    MALFORMED_SPECIFIER = "malformed-specifier"

    # Routing & transport
    ROUTE_ERROR = "route-error"
    TRANSPORT_ERROR = "transport-error"

    # API
    API_ERROR = "api-error"
    RESPONSE_DECODE_ERROR = "response-decode-error"

    # Repositories
    REPO_RENAMED = "repo-renamed"
    REPO_REDIRECT = "repo-redirect"
    REPO_NOT_EXIST = "repo-not-exist"
    REPO_NOT_PERSISTED = "repo-not-persisted"
    REPO_FORBIDDEN = "repo-forbidden"
    REPO_NON_STANDARD_URI = "repo-non-standard-uri"
    REPO_NO_SCHEME = "repo-no-scheme"

    # Configuration & runtime
    CONFIGURATION_ERROR = "configuration-error"
    RUNTIME_ERROR = "runtime-error"


def get_type_uri(code: ErrorCode) -> str:
    """Return the Problem Details type URI for an error code.

    Parameters
    ----------
    code : ErrorCode
        Error code enum value.

    Returns
    -------
    str
        Type URI (e.g., ``https://sourcegraph.com/problems/route-error``).
    """
    return f"{BASE_TYPE_URI}/{code.value}"
