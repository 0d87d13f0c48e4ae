"""Shared plumbing for HTTP service implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sourcegraph_client.client import Client
    from sourcegraph_client.query import Options
    from sourcegraph_client.router import RouteName
    from sourcegraph_client.transport import APIResponse

__all__ = ["HTTPService"]

T = TypeVar("T")


class HTTPService:
    """Base class for services that call the API through a :class:`Client`.

    Parameters
    ----------
    client : Client
        Client used to build and send requests.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def _fetch(
        self,
        route: RouteName,
        route_vars: Mapping[str, str] | None,
        result_type: type[T],
        *,
        options: Options | None = None,
    ) -> T | None:
        result, _ = self._client.request(
            "GET", route, route_vars, options=options, result_type=result_type
        )
        return result

    def _fetch_list(
        self,
        route: RouteName,
        route_vars: Mapping[str, str] | None,
        result_type: type[list[T]],
        *,
        options: Options | None = None,
    ) -> list[T]:
        result, _ = self._client.request(
            "GET", route, route_vars, options=options, result_type=result_type
        )
        return result or []

    def _send(
        self,
        method: str,
        route: RouteName,
        route_vars: Mapping[str, str] | None,
        body: object = None,
    ) -> APIResponse:
        _, response = self._client.request(method, route, route_vars, body=body)
        return response
