"""HTTP client for the Sourcegraph API.

:class:`Client` builds URLs from named routes and options, sends requests
through a :class:`~sourcegraph_client.transport.SupportsHttp` transport, and
decodes responses into typed models. Service objects (``client.repos``,
``client.people``, ...) expose the API operations.

Examples
--------
>>> from sourcegraph_client import Client
>>> client = Client("https://sourcegraph.example.com/api/", token="secret")
>>> client.url("Repository", {"RepoURI": "github.com/a/b"})
'https://sourcegraph.example.com/api/repos/github.com/a/b'
"""

from __future__ import annotations

import json
import time
from functools import cache
from typing import TYPE_CHECKING, Any, Self, TypeVar
from urllib.parse import urlencode

from pydantic import TypeAdapter, ValidationError

from sourcegraph_client.models.base import APIModel
from sourcegraph_client.query import encode_options
from sourcegraph_client.router import DEFAULT_ROUTER, RouteName, Router
from sourcegraph_client.services.defs import HTTPDefsService
from sourcegraph_client.services.orgs import HTTPOrgsService
from sourcegraph_client.services.people import HTTPPeopleService
from sourcegraph_client.services.repo_status import HTTPRepoStatusService
from sourcegraph_client.services.repositories import HTTPRepositoriesService
from sourcegraph_client.transport import APIRequest, APIResponse, RequestsHttp
from sourcegraph_common.errors import (
    APIError,
    ResponseDecodeError,
    TransportError,
    repo_error_from_message,
)
from sourcegraph_common.logging import get_correlation_id, get_logger, setup_logging
from sourcegraph_common.settings import DEFAULT_BASE_URL, DEFAULT_USER_AGENT

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sourcegraph_client.query import Options
    from sourcegraph_client.transport import SupportsHttp
    from sourcegraph_common.settings import ClientSettings

__all__ = ["Client"]

T = TypeVar("T")

logger = get_logger(__name__)

_ERROR_KEYS = ("Error", "error", "Message", "message", "detail")


@cache
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def _error_message(response: APIResponse) -> str:
    """Extract the server's error text from a JSON envelope or a plain body."""
    text = response.text.strip()
    try:
        payload = json.loads(text) if text else None
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        for key in _ERROR_KEYS:
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return text or f"HTTP {response.status_code}"


class Client:
    """Client for the Sourcegraph API.

    Parameters
    ----------
    base_url : str, optional
        API root; route paths are appended to it. A trailing slash is added
        when missing. Defaults to :data:`DEFAULT_BASE_URL`.
    token : str | None, optional
        Access token sent as ``Authorization: token <token>``. Defaults to
        None (anonymous).
    user_agent : str, optional
        ``User-Agent`` header value. Defaults to :data:`DEFAULT_USER_AGENT`.
    timeout : float, optional
        Request timeout in seconds. Defaults to 30.0.
    headers : Mapping[str, str] | None, optional
        Extra headers sent with every request. Defaults to None.
    http : SupportsHttp | None, optional
        Transport. Defaults to a :class:`RequestsHttp` with its own session.
    router : Router | None, optional
        Route table. Defaults to :data:`DEFAULT_ROUTER`.

    Attributes
    ----------
    repos : HTTPRepositoriesService
        Repository operations.
    people : HTTPPeopleService
        People operations.
    orgs : HTTPOrgsService
        Organization operations.
    defs : HTTPDefsService
        Definition operations.
    repo_statuses : HTTPRepoStatusService
        Commit status operations.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        token: str | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
        http: SupportsHttp | None = None,
        router: Router | None = None,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.token = token
        self.user_agent = user_agent
        self.timeout = timeout
        self.headers: dict[str, str] = dict(headers or {})
        self._http: SupportsHttp = http or RequestsHttp()
        self.router = router or DEFAULT_ROUTER

        self.repos = HTTPRepositoriesService(self)
        self.people = HTTPPeopleService(self)
        self.orgs = HTTPOrgsService(self)
        self.defs = HTTPDefsService(self)
        self.repo_statuses = HTTPRepoStatusService(self)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *,
        http: SupportsHttp | None = None,
        configure_logging: bool = False,
    ) -> Self:
        """Build a client from validated settings.

        Parameters
        ----------
        settings : ClientSettings
            Settings, typically from :func:`~sourcegraph_common.settings.load_settings`.
        http : SupportsHttp | None, optional
            Transport override. Defaults to None.
        configure_logging : bool, optional
            Also configure root JSON logging at ``settings.log_level`` via
            :func:`~sourcegraph_common.logging.setup_logging`. Libraries
            embedding the client should leave this off. Defaults to False.

        Returns
        -------
        Self
            Configured client.
        """
        if configure_logging:
            setup_logging(settings.log_level)
        return cls(
            settings.base_url,
            token=settings.token,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
            http=http,
        )

    def url(
        self,
        route: RouteName | str,
        route_vars: Mapping[str, str] | None = None,
        options: Options | None = None,
    ) -> str:
        """Return the absolute URL for ``route`` with ``options`` as the query string.

        Raises
        ------
        RouteError
            If the route is unknown or a required variable is missing.
        """
        path = self.router.resolve(route, route_vars)
        query = urlencode(encode_options(options))
        url = f"{self.base_url}{path}"
        return f"{url}?{query}" if query else url

    def new_request(self, method: str, url: str, body: object = None) -> APIRequest:
        """Build a request with the client's default headers.

        Parameters
        ----------
        method : str
            HTTP method.
        url : str
            Absolute URL, or a path relative to ``base_url``.
        body : object, optional
            JSON body. API models are serialized with wire names and
            without null fields. Defaults to None (no body).

        Returns
        -------
        APIRequest
            The request, ready for :meth:`do`.
        """
        if not url.startswith(("http://", "https://")):
            url = f"{self.base_url}{url.lstrip('/')}"
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        correlation_id = get_correlation_id()
        if correlation_id:
            headers["X-Correlation-ID"] = correlation_id
        headers.update(self.headers)

        data: bytes | None = None
        if body is not None:
            payload = body.to_wire() if isinstance(body, APIModel) else body
            data = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"
        return APIRequest(method=method.upper(), url=url, headers=headers, body=data)

    def do(
        self, request: APIRequest, result_type: type[T] | None = None
    ) -> tuple[T | None, APIResponse]:
        """Send ``request`` and decode the response body as ``result_type``.

        Parameters
        ----------
        request : APIRequest
            Request built by :meth:`new_request`.
        result_type : type[T] | None, optional
            Type to decode the JSON body into (a model, or e.g.
            ``list[Repo]``). Defaults to None (body not decoded).

        Returns
        -------
        tuple[T | None, APIResponse]
            The decoded value (None when no type is given or the body is
            empty or ``null``) and the raw response.

        Raises
        ------
        TransportError
            If the request could not be delivered.
        APIError
            If the response status is not 2xx. Known repository
            conditions raise the matching subclass (e.g. ``RepoNotExistError``).
        ResponseDecodeError
            If the body does not decode into ``result_type``.
        """
        start = time.perf_counter()
        fields = {"method": request.method, "url": request.url}
        logger.debug(
            "API request started",
            extra={"operation": "api_request", "status": "started", **fields},
        )
        try:
            raw = self._http.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
                timeout=self.timeout,
            )
        except OSError as exc:
            error = TransportError(request.method, request.url, exc)
            logger.log_failure(
                "API request failed",
                exception=error,
                operation="api_request",
                duration_ms=(time.perf_counter() - start) * 1000.0,
                **fields,
            )
            raise error from exc

        response = APIResponse(
            status_code=raw.status_code,
            headers=dict(raw.headers),
            body=raw.content,
        )
        duration_ms = (time.perf_counter() - start) * 1000.0

        if not 200 <= response.status_code < 300:
            error = self._api_error(request, response)
            logger.log_failure(
                "API request returned an error",
                exception=error,
                operation="api_request",
                duration_ms=duration_ms,
                level=error.log_level,
                status_code=response.status_code,
                **fields,
            )
            raise error

        result: T | None = None
        # The server encodes nil slices and nil pointers as ``null``.
        if result_type is not None and response.body.strip() not in (b"", b"null"):
            try:
                result = _adapter(result_type).validate_json(response.body)
            except ValidationError as exc:
                decode_error = ResponseDecodeError(request.url, exc)
                logger.log_failure(
                    "API response could not be decoded",
                    exception=decode_error,
                    operation="api_request",
                    duration_ms=duration_ms,
                    status_code=response.status_code,
                    **fields,
                )
                raise decode_error from exc

        logger.log_success(
            "API request completed",
            operation="api_request",
            duration_ms=duration_ms,
            status_code=response.status_code,
            **fields,
        )
        return result, response

    def request(
        self,
        method: str,
        route: RouteName,
        route_vars: Mapping[str, str] | None = None,
        *,
        options: Options | None = None,
        body: object = None,
        result_type: type[T] | None = None,
    ) -> tuple[T | None, APIResponse]:
        """Resolve ``route``, send the request and decode the response.

        Shorthand for :meth:`url`, :meth:`new_request` and :meth:`do`.
        """
        url = self.url(route, route_vars, options)
        return self.do(self.new_request(method, url, body), result_type)

    @staticmethod
    def _api_error(request: APIRequest, response: APIResponse) -> APIError:
        message = _error_message(response)
        error = repo_error_from_message(message, response.status_code)
        if error is None:
            return APIError(
                message,
                status=response.status_code,
                method=request.method,
                url=request.url,
                body=response.text,
                response=response,
            )
        error.method = request.method
        error.url = request.url
        error.body = response.text
        error.response = response
        return error
