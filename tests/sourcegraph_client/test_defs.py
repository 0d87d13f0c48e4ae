"""Tests for the defs service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sourcegraph_client.models import Def
from sourcegraph_client.services import DefGetOptions, DefListExamplesOptions, DefListOptions
from sourcegraph_client.specs import DefSpec

if TYPE_CHECKING:
    from sourcegraph_client import Client
    from tests.helpers.http import StubHttp

SPEC = DefSpec(repo="r.com/x", unit_type="t", unit="u", path="p", commit_id="c")
DEF_PATH = "repos/r.com/x@c/.defs/t/u/.def/p"


class TestGet:
    def test_get(self, client: Client, http: StubHttp) -> None:
        http.add(
            "GET",
            DEF_PATH,
            {"Repo": "r.com/x", "CommitID": "c", "UnitType": "t", "Unit": "u", "Path": "p"},
        )
        got = client.defs.get(SPEC, DefGetOptions(doc=True))
        assert got == Def(repo="r.com/x", commit_id="c", unit_type="t", unit="u", path="p")
        assert http.last.method == "GET"
        assert http.last.query == {"Doc": ["true"]}

    def test_spec_round_trip(self) -> None:
        got = Def(repo="r.com/x", commit_id="c", unit_type="t", unit="u", path="p")
        assert got.spec() == SPEC


class TestList:
    def test_list(self, client: Client, http: StubHttp) -> None:
        http.add("GET", ".defs", [{"Path": "p"}])
        options = DefListOptions(
            repository_uri="r1",
            sort="name",
            unit_types=["a", "b"],
            direction="asc",
            kinds=["a", "b"],
            exported=True,
            doc=True,
            per_page=1,
            page=2,
        )
        defs = client.defs.list(options)
        assert defs == [Def(path="p")]
        assert http.last.query == {
            "RepositoryURI": ["r1"],
            "Sort": ["name"],
            "UnitTypes": ["a,b"],
            "Direction": ["asc"],
            "Kinds": ["a,b"],
            "Exported": ["true"],
            "Doc": ["true"],
            "PerPage": ["1"],
            "Page": ["2"],
        }

    def test_examples(self, client: Client, http: StubHttp) -> None:
        http.add("GET", f"{DEF_PATH}/.examples", [{"SrcHTML": "<b>x</b>", "StartLine": 3}])
        examples = client.defs.list_examples(SPEC, DefListExamplesOptions(formatted=True))
        assert examples[0].src_html == "<b>x</b>"
        assert examples[0].start_line == 3
        assert http.last.query == {"Formatted": ["true"]}

    def test_authors(self, client: Client, http: StubHttp) -> None:
        http.add("GET", f"{DEF_PATH}/.authors", [{"Bytes": 120, "BytesProportion": 0.5}])
        authors = client.defs.list_authors(SPEC)
        assert authors[0].byte_count == 120
        assert authors[0].bytes_proportion == 0.5

    def test_clients_dependents_and_versions(self, client: Client, http: StubHttp) -> None:
        http.add("GET", f"{DEF_PATH}/.clients", [{}])
        http.add("GET", f"{DEF_PATH}/.dependents", [{"Repo": {"URI": "z.com/w"}, "Count": 2}])
        http.add("GET", f"{DEF_PATH}/.versions", [{"CommitID": "c1"}, {"CommitID": "c2"}])
        assert len(client.defs.list_clients(SPEC)) == 1
        assert client.defs.list_dependents(SPEC)[0].count == 2
        assert [d.commit_id for d in client.defs.list_versions(SPEC)] == ["c1", "c2"]

    def test_null_body_is_empty(self, client: Client, http: StubHttp) -> None:
        http.add("GET", f"{DEF_PATH}/.versions", body=b"null")
        assert client.defs.list_versions(SPEC) == []
