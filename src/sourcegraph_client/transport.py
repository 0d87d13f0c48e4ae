"""HTTP transport seam and request/response records.

The client talks to the network only through :class:`SupportsHttp`, so tests
can substitute an in-memory transport. :class:`RequestsHttp` is the default
implementation backed by a :class:`requests.Session`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, cast

import requests

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sourcegraph_common.types import JsonValue

__all__ = [
    "APIRequest",
    "APIResponse",
    "RequestsHttp",
    "SupportsHttp",
    "SupportsResponse",
]


class SupportsResponse(Protocol):
    """Minimal HTTP response surface used by the client.

    Mirrors the attributes of :class:`requests.Response` that the client reads.
    """

    @property
    def status_code(self) -> int:
        """HTTP status code."""
        ...

    @property
    def headers(self) -> Mapping[str, str]:
        """Response headers."""
        ...

    @property
    def content(self) -> bytes:
        """Raw response body."""
        ...


class SupportsHttp(Protocol):
    """HTTP transport required by :class:`~sourcegraph_client.client.Client`."""

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        data: bytes | None = None,
        timeout: float | None = None,
    ) -> SupportsResponse:
        """Send one HTTP request and return the response.

        Parameters
        ----------
        method : str
            HTTP method (``GET``, ``PUT``, ``POST``).
        url : str
            Absolute request URL including the query string.
        headers : Mapping[str, str] | None, optional
            Request headers. Defaults to None.
        data : bytes | None, optional
            Encoded request body. Defaults to None.
        timeout : float | None, optional
            Timeout in seconds. Defaults to None (no timeout).

        Returns
        -------
        SupportsResponse
            Response produced by the transport. Error statuses are returned,
            not raised; only delivery failures raise.
        """
        ...


class RequestsHttp(SupportsHttp):
    """Transport that delegates to :mod:`requests`.

    Parameters
    ----------
    session : requests.Session | None, optional
        Session to send requests with (connection pooling, proxies).
        Defaults to a new session.
    """

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session or requests.Session()

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        data: bytes | None = None,
        timeout: float | None = None,
    ) -> SupportsResponse:
        """Send a request using :meth:`requests.Session.request`.

        Redirects are not followed so that repository redirects reach the
        caller as errors.

        Returns
        -------
        SupportsResponse
            Response returned by :mod:`requests`.
        """
        response = self._session.request(
            method,
            url,
            headers=dict(headers) if headers is not None else None,
            data=data,
            timeout=timeout,
            allow_redirects=False,
        )
        return cast("SupportsResponse", response)


@dataclass(frozen=True, slots=True)
class APIRequest:
    """A fully built request, ready to be sent by :meth:`Client.do`."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True, slots=True)
class APIResponse:
    """An HTTP response received from the API.

    Attributes
    ----------
    status_code : int
        HTTP status code.
    headers : dict[str, str]
        Response headers.
    body : bytes
        Raw response body.
    """

    status_code: int = 0
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> JsonValue:
        """Decode the body as JSON.

        Raises
        ------
        ValueError
            If the body is not valid JSON.
        """
        return cast("JsonValue", json.loads(self.body))
