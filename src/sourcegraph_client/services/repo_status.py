"""Commit status operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from sourcegraph_client.models.statuses import CombinedStatus, RepoStatus
from sourcegraph_client.router import RouteName
from sourcegraph_client.services.base import HTTPService

if TYPE_CHECKING:
    from sourcegraph_client.specs import RepoRevSpec

__all__ = ["HTTPRepoStatusService", "RepoStatusService"]


class RepoStatusService(Protocol):
    """Commit status endpoints."""

    def create(self, spec: RepoRevSpec, status: RepoStatus) -> RepoStatus | None:
        """Record a status for the commit at ``spec``."""
        ...

    def get_combined(self, spec: RepoRevSpec) -> CombinedStatus | None:
        """Fetch the combined status for the commit at ``spec``."""
        ...


class HTTPRepoStatusService(HTTPService, RepoStatusService):
    """:class:`RepoStatusService` over the HTTP API."""

    def create(self, spec: RepoRevSpec, status: RepoStatus) -> RepoStatus | None:
        result, _ = self._client.request(
            "POST",
            RouteName.REPO_STATUS_CREATE,
            spec.route_vars(),
            body=status,
            result_type=RepoStatus,
        )
        return result

    def get_combined(self, spec: RepoRevSpec) -> CombinedStatus | None:
        return self._fetch(RouteName.REPO_STATUS, spec.route_vars(), CombinedStatus)
