"""Organization operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from sourcegraph_client.models.orgs import Org, OrgSettings
from sourcegraph_client.models.people import User
from sourcegraph_client.query import ListOptions
from sourcegraph_client.router import RouteName
from sourcegraph_client.services.base import HTTPService

if TYPE_CHECKING:
    from sourcegraph_client.specs import OrgSpec
    from sourcegraph_client.transport import APIResponse

__all__ = ["HTTPOrgsService", "OrgListMembersOptions", "OrgsService"]


class OrgListMembersOptions(ListOptions):
    pass


class OrgsService(Protocol):
    """Organization endpoints."""

    def get(self, org: OrgSpec) -> Org | None:
        """Fetch an organization."""
        ...

    def list_members(
        self, org: OrgSpec, options: OrgListMembersOptions | None = None
    ) -> list[User]:
        """List the members of an organization."""
        ...

    def get_settings(self, org: OrgSpec) -> OrgSettings | None:
        """Fetch an organization's settings."""
        ...

    def update_settings(self, org: OrgSpec, settings: OrgSettings) -> APIResponse:
        """Update an organization's settings."""
        ...


class HTTPOrgsService(HTTPService, OrgsService):
    """:class:`OrgsService` over the HTTP API."""

    def get(self, org: OrgSpec) -> Org | None:
        return self._fetch(RouteName.ORG, org.route_vars(), Org)

    def list_members(
        self, org: OrgSpec, options: OrgListMembersOptions | None = None
    ) -> list[User]:
        return self._fetch_list(
            RouteName.ORG_MEMBERS, org.route_vars(), list[User], options=options
        )

    def get_settings(self, org: OrgSpec) -> OrgSettings | None:
        return self._fetch(RouteName.ORG_SETTINGS, org.route_vars(), OrgSettings)

    def update_settings(self, org: OrgSpec, settings: OrgSettings) -> APIResponse:
        return self._send("PUT", RouteName.ORG_SETTINGS_UPDATE, org.route_vars(), settings)
