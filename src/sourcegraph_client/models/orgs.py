"""Organization payloads."""

from __future__ import annotations

from sourcegraph_client.models.people import PlanSettings, User
from sourcegraph_client.specs import OrgSpec

__all__ = ["Org", "OrgSettings"]


class Org(User):
    """An organization; it shares the user account fields."""

    def org_spec(self) -> OrgSpec:
        return OrgSpec(org=self.login, uid=self.uid)


class OrgSettings(PlanSettings):
    pass
