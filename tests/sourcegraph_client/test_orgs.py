"""Tests for the orgs service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sourcegraph_client.models import OrgSettings
from sourcegraph_client.services import OrgListMembersOptions
from sourcegraph_client.specs import OrgSpec

if TYPE_CHECKING:
    from sourcegraph_client import Client
    from tests.helpers.http import StubHttp


def test_get(client: Client, http: StubHttp) -> None:
    http.add("GET", "orgs/acme", {"Login": "acme", "UID": 9})
    org = client.orgs.get(OrgSpec(org="acme"))
    assert org is not None
    assert org.org_spec() == OrgSpec(org="acme", uid=9)


def test_get_by_uid(client: Client, http: StubHttp) -> None:
    http.add("GET", "orgs/$9", {"Login": "acme"})
    org = client.orgs.get(OrgSpec(uid=9))
    assert org is not None
    assert org.login == "acme"


def test_list_members(client: Client, http: StubHttp) -> None:
    http.add("GET", "orgs/acme/.members", [{"Login": "alice"}])
    members = client.orgs.list_members(OrgSpec(org="acme"), OrgListMembersOptions(page=3))
    assert [member.login for member in members] == ["alice"]
    assert http.last.query == {"Page": ["3"]}


def test_settings(client: Client, http: StubHttp) -> None:
    http.add("GET", "orgs/acme/.settings", {"PlanID": "team"})
    http.add("PUT", "orgs/acme/.settings", status=204)
    assert client.orgs.get_settings(OrgSpec(org="acme")) == OrgSettings(plan_id="team")

    response = client.orgs.update_settings(OrgSpec(org="acme"), OrgSettings(plan_id="free"))
    assert response.status_code == 204
    assert http.last.method == "PUT"
    assert http.last.json() == {"PlanID": "free"}


def test_list_members_null_body_is_empty(client: Client, http: StubHttp) -> None:
    http.add("GET", "orgs/acme/.members", body=b"null")
    assert client.orgs.list_members(OrgSpec(org="acme")) == []
