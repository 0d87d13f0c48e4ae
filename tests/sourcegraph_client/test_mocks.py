"""Tests for the service mocks."""

from __future__ import annotations

from sourcegraph_client.mock import (
    MockDefsService,
    MockOrgsService,
    MockPeopleService,
    MockRepositoriesService,
    MockRepoStatusService,
)
from sourcegraph_client.models import Def, Org, Person, Repository, RepoStatus
from sourcegraph_client.services import (
    DefsService,
    OrgsService,
    PeopleService,
    RepositoriesService,
    RepoStatusService,
)
from sourcegraph_client.specs import (
    DefSpec,
    OrgSpec,
    PersonSpec,
    RepoRevSpec,
    RepoSpec,
    RepositorySpec,
)
from sourcegraph_client.transport import APIResponse


def _find_person(repos: RepositoriesService, people: PeopleService) -> str:
    repo = repos.get(RepositorySpec(uri="r.com/x"))
    owner = people.get(PersonSpec(uid=repo.owner_user_id if repo else 0))
    return owner.login if owner else ""


def test_unset_methods_return_zero_values() -> None:
    repos = MockRepositoriesService()
    assert repos.get(RepositorySpec(uri="r.com/x")) is None
    assert repos.list() == []
    assert repos.refresh_profile(RepositorySpec(uri="r.com/x")) == APIResponse()

    people = MockPeopleService()
    assert people.list_orgs(PersonSpec(login="alice")) == []
    assert people.compute_stats(PersonSpec(login="alice")).status_code == 0

    assert MockOrgsService().get(OrgSpec(org="acme")) is None
    assert MockDefsService().list_versions(DefSpec("r.com/x", "t", "u", "p")) == []
    assert MockRepoStatusService().get_combined(RepoRevSpec(RepoSpec(uri="r.com/x"))) is None


def test_callables_receive_arguments() -> None:
    calls: list[tuple[object, ...]] = []

    def get_repo(spec: RepositorySpec, options: object) -> Repository:
        calls.append((spec, options))
        return Repository(uri=spec.uri, owner_user_id=7)

    def get_person(spec: PersonSpec, options: object) -> Person:
        calls.append((spec, options))
        return Person(uid=spec.uid, login="owner")

    repos = MockRepositoriesService(get_fn=get_repo)
    people = MockPeopleService(get_fn=get_person)

    assert _find_person(repos, people) == "owner"
    assert calls == [(RepositorySpec(uri="r.com/x"), None), (PersonSpec(uid=7), None)]


def test_mocks_implement_service_protocols() -> None:
    pairs = [
        (MockRepositoriesService, RepositoriesService),
        (MockPeopleService, PeopleService),
        (MockOrgsService, OrgsService),
        (MockDefsService, DefsService),
        (MockRepoStatusService, RepoStatusService),
    ]
    for mock, service in pairs:
        assert service in mock.__mro__


def test_other_mocks_delegate() -> None:
    orgs = MockOrgsService(list_members_fn=lambda org, options: [Org(login="alice")])
    assert orgs.list_members(OrgSpec(org="acme"))[0].login == "alice"

    defs = MockDefsService(list_fn=lambda options: [Def(name="Foo")])
    assert defs.list()[0].name == "Foo"

    statuses = MockRepoStatusService(create_fn=lambda spec, status: status)
    status = RepoStatus(state="pending")
    assert statuses.create(RepoRevSpec(RepoSpec(uri="r.com/x")), status) is status
