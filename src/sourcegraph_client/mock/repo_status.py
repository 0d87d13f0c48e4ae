"""In-memory stand-in for :class:`RepoStatusService`."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sourcegraph_client.services.repo_status import RepoStatusService

if TYPE_CHECKING:
    from sourcegraph_client.models.statuses import CombinedStatus, RepoStatus
    from sourcegraph_client.specs import RepoRevSpec

__all__ = ["MockRepoStatusService"]


@dataclass
class MockRepoStatusService(RepoStatusService):
    create_fn: Callable[[RepoRevSpec, RepoStatus], RepoStatus | None] | None = None
    get_combined_fn: Callable[[RepoRevSpec], CombinedStatus | None] | None = None

    def create(self, spec: RepoRevSpec, status: RepoStatus) -> RepoStatus | None:
        if self.create_fn is None:
            return None
        return self.create_fn(spec, status)

    def get_combined(self, spec: RepoRevSpec) -> CombinedStatus | None:
        if self.get_combined_fn is None:
            return None
        return self.get_combined_fn(spec)
