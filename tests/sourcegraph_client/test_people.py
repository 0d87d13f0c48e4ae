"""Tests for the people service."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sourcegraph_client.models import Person, PersonSettings, User
from sourcegraph_client.services import (
    PersonGetOptions,
    PersonListAuthorsOptions,
    PersonListOptions,
)
from sourcegraph_client.specs import GitHubUserSpec, PersonSpec
from sourcegraph_common.errors import UnsupportedSpecifierError

if TYPE_CHECKING:
    from sourcegraph_client import Client
    from tests.helpers.http import StubHttp

ALICE = PersonSpec(login="alice")


class TestHTTPPeopleService:
    def test_get_by_uid(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "people/$42", {"UID": 42, "Login": "alice", "Stat": {"defs": 3}})
        person = client.people.get(PersonSpec(uid=42), PersonGetOptions(stats=True))
        assert person == Person(uid=42, login="alice", stat={"defs": 3})
        assert http.last.query == {"Stats": ["true"]}

    def test_get_by_email(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "people/a@b.com", {"Login": "alice"})
        person = client.people.get(PersonSpec(email="a@b.com"))
        assert person is not None
        assert person.login == "alice"

    def test_settings(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "people/alice/.settings", {"PlanID": "pro", "BuildEmails": True})
        http.add("PUT", "people/alice/.settings")
        settings = client.people.get_settings(ALICE)
        assert settings == PersonSettings(plan_id="pro", build_emails=True)

        client.people.update_settings(ALICE, PersonSettings(build_emails=False))
        assert http.last.json() == {"BuildEmails": False}

    def test_list_emails(self, client: Client, http: StubHttp) -> None:
        http.add(
            "GET",
            "people/alice/.emails",
            [{"Email": "a@b.com", "Primary": True, "Verified": True}],
        )
        emails = client.people.list_emails(ALICE)
        assert emails[0].primary
        assert emails[0].verified

    def test_from_github(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "external-users/github/octocat", {"Login": "octocat"})
        person = client.people.get_or_create_from_github(GitHubUserSpec(login="octocat"))
        assert person is not None
        assert person.login == "octocat"

    def test_from_github_id_is_rejected_before_sending(
        self, client: Client, http: StubHttp
    ) -> None:
        with pytest.raises(UnsupportedSpecifierError):
            client.people.get_or_create_from_github(GitHubUserSpec(id=42))
        assert http.requests == []

    def test_write_operations(self, client: Client, http: StubHttp) -> None:
        http.add("PUT", "people/alice/.refresh-profile", status=202)
        http.add("PUT", "people/alice/.compute-stats", status=202)
        assert client.people.refresh_profile(ALICE).status_code == 202
        assert client.people.compute_stats(ALICE).status_code == 202

    def test_list(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "people", [{"Login": "alice"}, {"Login": "bob"}])
        users = client.people.list(PersonListOptions(name_or_login="a", sort="login"))
        assert users == [User(login="alice"), User(login="bob")]
        assert http.last.query == {"NameOrLogin": ["a"], "Sort": ["login"]}

    def test_list_null_body_is_empty(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "people", body=b"null")
        assert client.people.list() == []
        http.add("GET", "people/alice/.emails", body=b" null\n")
        assert client.people.list_emails(ALICE) == []

    def test_authors_and_clients(self, client: Client, http: StubHttp) -> None:
        http.add(
            "GET",
            "people/alice/.authors",
            [{"AuthorUID": 7, "RefCount": 4, "Author": {"Login": "bob"}}],
        )
        http.add("GET", "people/alice/.clients", [{"ClientEmail": "c@d.com", "RefCount": 1}])
        authors = client.people.list_authors(ALICE, PersonListAuthorsOptions(per_page=1))
        assert authors[0].author_uid == 7
        assert authors[0].author is not None
        assert authors[0].author.login == "bob"
        assert http.last.query == {"PerPage": ["1"]}
        assert client.people.list_clients(ALICE)[0].client_email == "c@d.com"

    def test_orgs(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "people/alice/.orgs", [{"Login": "acme", "IsOrganization": True}])
        orgs = client.people.list_orgs(ALICE)
        assert orgs[0].is_organization
        assert orgs[0].org_spec().path_component() == "acme"


def test_user_spec() -> None:
    assert User(login="alice", uid=3).spec() == PersonSpec(login="alice", uid=3)
