"""Tests for route expansion."""

from __future__ import annotations

import pytest

from sourcegraph_client.router import DEFAULT_ROUTER, ROUTES, RouteName, Router
from sourcegraph_client.specs import DefSpec, PersonSpec, RepoRevSpec, RepoSpec
from sourcegraph_common.errors import RouteError


class TestResolve:
    def test_repository_without_rev(self) -> None:
        path = DEFAULT_ROUTER.resolve(RouteName.REPOSITORY, {"RepoURI": "github.com/a/b"})
        assert path == "repos/github.com/a/b"

    def test_repository_with_rev(self) -> None:
        route_vars = RepoRevSpec(RepoSpec(uri="r.com/x"), rev="v1.0").route_vars()
        path = DEFAULT_ROUTER.resolve(RouteName.REPO_COMMIT, route_vars)
        assert path == "repos/r.com/x@v1.0/.commit"

    def test_empty_rev_is_absent(self) -> None:
        path = DEFAULT_ROUTER.resolve(RouteName.REPO_STATUS, {"RepoURI": "r.com/x", "Rev": ""})
        assert path == "repos/r.com/x/.status"

    def test_rid_sigil_is_kept(self) -> None:
        path = DEFAULT_ROUTER.resolve(RouteName.REPOSITORY, RepoSpec(rid=7).route_vars())
        assert path == "repos/R$7"

    def test_person_email(self) -> None:
        path = DEFAULT_ROUTER.resolve(
            RouteName.PERSON_EMAILS, PersonSpec(email="a@b.com").route_vars()
        )
        assert path == "people/a@b.com/.emails"

    def test_values_are_escaped(self) -> None:
        path = DEFAULT_ROUTER.resolve(RouteName.ORG, {"OrgSpec": "a b?c"})
        assert path == "orgs/a%20b%3Fc"

    def test_def_route(self) -> None:
        spec = DefSpec(repo="r.com/x", unit_type="GoPackage", unit="r.com/x/y", path="T/M")
        path = DEFAULT_ROUTER.resolve(RouteName.DEF_EXAMPLES, spec.route_vars())
        assert path == "repos/r.com/x/.defs/GoPackage/r.com/x/y/.def/T/M/.examples"

    def test_extra_variables_are_ignored(self) -> None:
        assert DEFAULT_ROUTER.resolve(RouteName.PEOPLE, {"Unused": "x"}) == "people"

    def test_accepts_route_name_string(self) -> None:
        assert DEFAULT_ROUTER.resolve("Repositories") == "repos"

    def test_missing_variable(self) -> None:
        with pytest.raises(RouteError, match="missing route variable 'RepoURI'"):
            DEFAULT_ROUTER.resolve(RouteName.REPOSITORY, {})

    def test_unknown_route(self) -> None:
        with pytest.raises(RouteError, match="unknown route"):
            DEFAULT_ROUTER.resolve("NoSuchRoute", {})


class TestRouter:
    def test_every_name_has_a_template(self) -> None:
        assert set(ROUTES) == set(RouteName)

    def test_custom_routes(self) -> None:
        router = Router({RouteName.PEOPLE: "v2/users"})
        assert router.resolve(RouteName.PEOPLE) == "v2/users"
        with pytest.raises(RouteError):
            router.template(RouteName.ORG)
