"""In-memory stand-in for :class:`OrgsService`."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sourcegraph_client.services.orgs import OrgsService
from sourcegraph_client.transport import APIResponse

if TYPE_CHECKING:
    from sourcegraph_client.models.orgs import Org, OrgSettings
    from sourcegraph_client.models.people import User
    from sourcegraph_client.services.orgs import OrgListMembersOptions
    from sourcegraph_client.specs import OrgSpec

__all__ = ["MockOrgsService"]


@dataclass
class MockOrgsService(OrgsService):
    get_fn: Callable[[OrgSpec], Org | None] | None = None
    list_members_fn: Callable[[OrgSpec, OrgListMembersOptions | None], list[User]] | None = None
    get_settings_fn: Callable[[OrgSpec], OrgSettings | None] | None = None
    update_settings_fn: Callable[[OrgSpec, OrgSettings], APIResponse] | None = None

    def get(self, org: OrgSpec) -> Org | None:
        if self.get_fn is None:
            return None
        return self.get_fn(org)

    def list_members(
        self, org: OrgSpec, options: OrgListMembersOptions | None = None
    ) -> list[User]:
        if self.list_members_fn is None:
            return []
        return self.list_members_fn(org, options)

    def get_settings(self, org: OrgSpec) -> OrgSettings | None:
        if self.get_settings_fn is None:
            return None
        return self.get_settings_fn(org)

    def update_settings(self, org: OrgSpec, settings: OrgSettings) -> APIResponse:
        if self.update_settings_fn is None:
            return APIResponse()
        return self.update_settings_fn(org, settings)
