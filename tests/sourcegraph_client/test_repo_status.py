"""Tests for the commit status service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sourcegraph_client.models import RepoStatus
from sourcegraph_client.specs import RepoRevSpec, RepoSpec

if TYPE_CHECKING:
    from sourcegraph_client import Client
    from tests.helpers.http import StubHttp

REV = RepoRevSpec(RepoSpec(uri="r.com/x"), rev="abc")


def test_create(client: Client, http: StubHttp) -> None:
    http.add("POST", "repos/r.com/x@abc/.status", {"State": "success", "Context": "ci"})
    status = RepoStatus(state="success", context="ci", target_url="https://ci.test/1")
    created = client.repo_statuses.create(REV, status)
    assert created is not None
    assert created.state == "success"
    assert http.last.json() == {
        "State": "success",
        "TargetURL": "https://ci.test/1",
        "Description": "",
        "Context": "ci",
    }


def test_get_combined(client: Client, http: StubHttp) -> None:
    http.add(
        "GET",
        "repos/r.com/x@abc/.status",
        {
            "State": "failure",
            "CommitID": "abc",
            "Statuses": [{"State": "failure", "Context": "ci"}, {"State": "success"}],
        },
    )
    combined = client.repo_statuses.get_combined(REV)
    assert combined is not None
    assert combined.commit_id == "abc"
    assert [s.state for s in combined.statuses] == ["failure", "success"]


def test_get_combined_null_body(client: Client, http: StubHttp) -> None:
    http.add("GET", "repos/r.com/x@abc/.status", body=b"null")
    assert client.repo_statuses.get_combined(REV) is None
