"""Named API routes and their expansion into URL paths.

Every endpoint the client calls is identified by a :class:`RouteName`. A
:class:`Router` maps names to path templates whose ``{Var}`` placeholders are
filled from the route variables produced by the specifiers in
:mod:`sourcegraph_client.specs`.

Examples
--------
>>> DEFAULT_ROUTER.resolve(RouteName.REPOSITORY, {"RepoURI": "github.com/a/b", "Rev": "v1"})
'repos/github.com/a/b@v1'
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final
from urllib.parse import quote

from sourcegraph_common.errors import RouteError

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["DEFAULT_ROUTER", "ROUTES", "RouteName", "Router"]

# Characters left unescaped in path variables. Repository URIs and def paths
# contain slashes; ``@`` and ``$`` appear in emails and numeric specifiers.
_SAFE_CHARS: Final[str] = "/@$:"

_OPTIONAL_VARS: Final[frozenset[str]] = frozenset({"Rev"})


class RouteName(StrEnum):
    """Names of the API routes."""

    REPOSITORIES = "Repositories"
    REPOSITORIES_CREATE = "RepositoriesCreate"
    REPOSITORIES_GET_OR_CREATE = "RepositoriesGetOrCreate"
    REPOSITORY = "Repository"
    REPOSITORY_SETTINGS = "RepositorySettings"
    REPOSITORY_SETTINGS_UPDATE = "RepositorySettingsUpdate"
    REPOSITORY_REFRESH_PROFILE = "RepositoryRefreshProfile"
    REPOSITORY_REFRESH_VCS_DATA = "RepositoryRefreshVCSData"
    REPOSITORY_COMPUTE_STATS = "RepositoryComputeStats"
    REPOSITORY_README = "RepositoryReadme"
    REPOSITORY_BADGES = "RepositoryBadges"
    REPOSITORY_COUNTERS = "RepositoryCounters"
    REPOSITORY_AUTHORS = "RepositoryAuthors"
    REPOSITORY_CLIENTS = "RepositoryClients"
    REPOSITORY_DEPENDENCIES = "RepositoryDependencies"
    REPOSITORY_DEPENDENTS = "RepositoryDependents"
    REPO_COMMITS = "RepoCommits"
    REPO_COMMIT = "RepoCommit"
    REPO_COMPARE_COMMITS = "RepoCompareCommits"
    REPO_BRANCHES = "RepoBranches"
    REPO_TAGS = "RepoTags"
    REPO_STATUS = "RepoStatus"
    REPO_STATUS_CREATE = "RepoStatusCreate"

    PEOPLE = "People"
    PERSON = "Person"
    PERSON_EMAILS = "PersonEmails"
    PERSON_SETTINGS = "PersonSettings"
    PERSON_SETTINGS_UPDATE = "PersonSettingsUpdate"
    PERSON_FROM_GITHUB = "PersonFromGitHub"
    PERSON_REFRESH_PROFILE = "PersonRefreshProfile"
    PERSON_COMPUTE_STATS = "PersonComputeStats"
    PERSON_AUTHORS = "PersonAuthors"
    PERSON_CLIENTS = "PersonClients"
    PERSON_ORGS = "PersonOrgs"
    PERSON_REPOSITORY_CONTRIBUTIONS = "PersonRepositoryContributions"
    PERSON_REPOSITORY_DEPENDENCIES = "PersonRepositoryDependencies"
    PERSON_REPOSITORY_DEPENDENTS = "PersonRepositoryDependents"

    ORG = "Org"
    ORG_MEMBERS = "OrgMembers"
    ORG_SETTINGS = "OrgSettings"
    ORG_SETTINGS_UPDATE = "OrgSettingsUpdate"

    DEFS = "Defs"
    DEF = "Def"
    DEF_EXAMPLES = "DefExamples"
    DEF_AUTHORS = "DefAuthors"
    DEF_CLIENTS = "DefClients"
    DEF_DEPENDENTS = "DefDependents"
    DEF_VERSIONS = "DefVersions"


_REPO = "repos/{RepoURI}"
_REPO_REV = "repos/{RepoURI}{Rev}"
_PERSON = "people/{PersonSpec}"
_ORG = "orgs/{OrgSpec}"
_DEF = "repos/{RepoURI}{Rev}/.defs/{UnitType}/{Unit}/.def/{Path}"

ROUTES: Final[Mapping[RouteName, str]] = MappingProxyType(
    {
        RouteName.REPOSITORIES: "repos",
        RouteName.REPOSITORIES_CREATE: "repos",
        RouteName.REPOSITORIES_GET_OR_CREATE: _REPO_REV,
        RouteName.REPOSITORY: _REPO_REV,
        RouteName.REPOSITORY_SETTINGS: f"{_REPO_REV}/.settings",
        RouteName.REPOSITORY_SETTINGS_UPDATE: f"{_REPO_REV}/.settings",
        RouteName.REPOSITORY_REFRESH_PROFILE: f"{_REPO_REV}/.refresh-profile",
        RouteName.REPOSITORY_REFRESH_VCS_DATA: f"{_REPO_REV}/.refresh-vcs-data",
        RouteName.REPOSITORY_COMPUTE_STATS: f"{_REPO_REV}/.compute-stats",
        RouteName.REPOSITORY_README: f"{_REPO_REV}/.readme",
        RouteName.REPOSITORY_BADGES: f"{_REPO_REV}/.badges",
        RouteName.REPOSITORY_COUNTERS: f"{_REPO_REV}/.counters",
        RouteName.REPOSITORY_AUTHORS: f"{_REPO_REV}/.authors",
        RouteName.REPOSITORY_CLIENTS: f"{_REPO_REV}/.clients",
        RouteName.REPOSITORY_DEPENDENCIES: f"{_REPO_REV}/.dependencies",
        RouteName.REPOSITORY_DEPENDENTS: f"{_REPO_REV}/.dependents",
        RouteName.REPO_COMMITS: f"{_REPO}/.commits",
        RouteName.REPO_COMMIT: f"{_REPO_REV}/.commit",
        RouteName.REPO_COMPARE_COMMITS: f"{_REPO_REV}/.commits/.compare",
        RouteName.REPO_BRANCHES: f"{_REPO}/.branches",
        RouteName.REPO_TAGS: f"{_REPO}/.tags",
        RouteName.REPO_STATUS: f"{_REPO_REV}/.status",
        RouteName.REPO_STATUS_CREATE: f"{_REPO_REV}/.status",
        RouteName.PEOPLE: "people",
        RouteName.PERSON: _PERSON,
        RouteName.PERSON_EMAILS: f"{_PERSON}/.emails",
        RouteName.PERSON_SETTINGS: f"{_PERSON}/.settings",
        RouteName.PERSON_SETTINGS_UPDATE: f"{_PERSON}/.settings",
        RouteName.PERSON_FROM_GITHUB: "external-users/github/{GitHubUserSpec}",
        RouteName.PERSON_REFRESH_PROFILE: f"{_PERSON}/.refresh-profile",
        RouteName.PERSON_COMPUTE_STATS: f"{_PERSON}/.compute-stats",
        RouteName.PERSON_AUTHORS: f"{_PERSON}/.authors",
        RouteName.PERSON_CLIENTS: f"{_PERSON}/.clients",
        RouteName.PERSON_ORGS: f"{_PERSON}/.orgs",
        RouteName.PERSON_REPOSITORY_CONTRIBUTIONS: f"{_PERSON}/.repo-contributions",
        RouteName.PERSON_REPOSITORY_DEPENDENCIES: f"{_PERSON}/.repo-dependencies",
        RouteName.PERSON_REPOSITORY_DEPENDENTS: f"{_PERSON}/.repo-dependents",
        RouteName.ORG: _ORG,
        RouteName.ORG_MEMBERS: f"{_ORG}/.members",
        RouteName.ORG_SETTINGS: f"{_ORG}/.settings",
        RouteName.ORG_SETTINGS_UPDATE: f"{_ORG}/.settings",
        RouteName.DEFS: ".defs",
        RouteName.DEF: _DEF,
        RouteName.DEF_EXAMPLES: f"{_DEF}/.examples",
        RouteName.DEF_AUTHORS: f"{_DEF}/.authors",
        RouteName.DEF_CLIENTS: f"{_DEF}/.clients",
        RouteName.DEF_DEPENDENTS: f"{_DEF}/.dependents",
        RouteName.DEF_VERSIONS: f"{_DEF}/.versions",
    }
)


class _Expansion(dict[str, str]):
    """Escaped route variables; optional variables expand to nothing when absent."""

    def __missing__(self, key: str) -> str:
        if key in _OPTIONAL_VARS:
            return ""
        raise KeyError(key)


def _escape(name: str, value: str) -> str:
    escaped = quote(value, safe=_SAFE_CHARS)
    if name == "Rev":
        return f"@{escaped}"
    return escaped


class Router:
    """Expands named routes into URL paths relative to the API root.

    Parameters
    ----------
    routes : Mapping[RouteName, str] | None, optional
        Path templates by route name. Defaults to :data:`ROUTES`.
    """

    def __init__(self, routes: Mapping[RouteName, str] | None = None) -> None:
        self._routes: Mapping[RouteName, str] = ROUTES if routes is None else dict(routes)

    def template(self, name: RouteName | str) -> str:
        """Return the path template registered for ``name``.

        Raises
        ------
        RouteError
            If no route has that name.
        """
        try:
            return self._routes[RouteName(name)]
        except (KeyError, ValueError) as exc:
            raise RouteError(str(name), "unknown route") from exc

    def resolve(self, name: RouteName | str, route_vars: Mapping[str, str] | None = None) -> str:
        """Expand route ``name`` with ``route_vars``.

        Parameters
        ----------
        name : RouteName | str
            Route to expand.
        route_vars : Mapping[str, str] | None, optional
            Values for the template's placeholders. Empty values count as
            absent; variables the template does not use are ignored.
            Defaults to None.

        Returns
        -------
        str
            Escaped path relative to the API root (no leading slash).

        Raises
        ------
        RouteError
            If the route is unknown or a required variable is absent.
        """
        template = self.template(name)
        expansion = _Expansion(
            {key: _escape(key, value) for key, value in (route_vars or {}).items() if value}
        )
        try:
            return template.format_map(expansion)
        except KeyError as exc:
            raise RouteError(str(name), f"missing route variable {exc.args[0]!r}") from exc


DEFAULT_ROUTER: Final[Router] = Router()
