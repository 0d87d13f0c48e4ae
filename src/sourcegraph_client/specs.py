"""Resource specifiers and their URL path encoding.

A specifier identifies a resource by one of several alternative fields (a
person by email, login or numeric UID; a repository by URI or numeric RID).
Each specifier encodes to a single path component and decodes back:

- text fields are used verbatim;
- numeric IDs are written behind a sigil (``$`` for people and orgs, ``R$``
  for repositories) so a decoder can tell them apart by prefix alone.

``route_vars()`` projects a specifier onto the named variables consumed by
:class:`~sourcegraph_client.router.Router`.

Examples
--------
>>> PersonSpec(uid=42).path_component()
'$42'
>>> parse_person_spec("$42")
PersonSpec(email='', login='', uid=42)
>>> RepoRevSpec(RepoSpec(uri="r.com/x"), rev="abc").route_vars()
{'RepoURI': 'r.com/x', 'Rev': 'abc'}
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, Self

from sourcegraph_common.errors import (
    InvalidSpecifierError,
    MalformedSpecifierError,
    UnsupportedSpecifierError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sourcegraph_common.types import RouteVars

__all__ = [
    "DefSpec",
    "GitHubUserSpec",
    "OrgSpec",
    "PersonSpec",
    "RepoRevSpec",
    "RepoSpec",
    "RepositorySpec",
    "RepositorySpec2",
    "parse_org_spec",
    "parse_person_spec",
    "parse_repo_spec",
    "unmarshal_repo_rev_spec",
    "unmarshal_repo_spec",
]

UID_SIGIL: Final[str] = "$"
RID_SIGIL: Final[str] = "R$"

# Same grammar as strconv.Atoi: optional sign, ASCII digits only.
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def _parse_decimal(path_component: str, digits: str, what: str) -> int:
    if _DECIMAL.fullmatch(digits) is None:
        raise MalformedSpecifierError(path_component, f"invalid numeric {what}")
    return int(digits)


@dataclass(frozen=True, slots=True)
class PersonSpec:
    """Specifies a person by email, login, or UID (in that order of precedence).

    At least one field must be set to encode the specifier.
    """

    email: str = ""
    login: str = ""
    uid: int = 0

    def path_component(self) -> str:
        """Return the URL path component that specifies the person.

        Returns
        -------
        str
            The email, else the login, else ``"$<uid>"``.

        Raises
        ------
        InvalidSpecifierError
            If no field is set.
        """
        if self.email:
            return self.email
        if self.login:
            return self.login
        if self.uid > 0:
            return f"{UID_SIGIL}{self.uid}"
        raise InvalidSpecifierError("PersonSpec")

    def route_vars(self) -> RouteVars:
        """Return ``{"PersonSpec": <path component>}``."""
        return {"PersonSpec": self.path_component()}

    @classmethod
    def parse(cls, path_component: str) -> Self:
        """Decode a string produced by :meth:`path_component`.

        Parameters
        ----------
        path_component : str
            Encoded person specifier.

        Returns
        -------
        Self
            ``uid`` for ``$``-prefixed input, ``email`` when the input
            contains ``@``, ``login`` otherwise.

        Raises
        ------
        MalformedSpecifierError
            If a ``$``-prefixed input is not followed by a decimal integer.
        """
        if path_component.startswith(UID_SIGIL):
            digits = path_component[len(UID_SIGIL) :]
            return cls(uid=_parse_decimal(path_component, digits, "UID"))
        if "@" in path_component:
            return cls(email=path_component)
        return cls(login=path_component)


def parse_person_spec(path_component: str) -> PersonSpec:
    """Parse a person path component; see :meth:`PersonSpec.parse`."""
    return PersonSpec.parse(path_component)


@dataclass(frozen=True, slots=True)
class RepoSpec:
    """Specifies a repository by URI or numeric RID (URI takes precedence)."""

    uri: str = ""
    rid: int = 0

    def path_component(self) -> str:
        """Return the URL path component that specifies the repository.

        Returns
        -------
        str
            The URI, else ``"R$<rid>"``.

        Raises
        ------
        InvalidSpecifierError
            If neither field is set.
        """
        if self.uri:
            return self.uri
        if self.rid > 0:
            return f"{RID_SIGIL}{self.rid}"
        raise InvalidSpecifierError("RepoSpec")

    def route_vars(self) -> RouteVars:
        """Return ``{"RepoURI": <path component>}``."""
        return {"RepoURI": self.path_component()}

    @classmethod
    def parse(cls, path_component: str) -> Self:
        """Decode a string produced by :meth:`path_component`.

        Parameters
        ----------
        path_component : str
            Encoded repository specifier.

        Returns
        -------
        Self
            ``rid`` for ``R$``-prefixed input, ``uri`` otherwise.

        Raises
        ------
        MalformedSpecifierError
            If the input is empty or an ``R$`` prefix is not followed by a
            decimal integer.
        """
        if not path_component:
            raise MalformedSpecifierError(path_component, "empty repository spec")
        if path_component.startswith(RID_SIGIL):
            digits = path_component[len(RID_SIGIL) :]
            return cls(rid=_parse_decimal(path_component, digits, "RID"))
        return cls(uri=path_component)

    @classmethod
    def from_route_vars(cls, route_vars: Mapping[str, str]) -> Self:
        """Decode the ``RepoURI`` variable produced by :meth:`route_vars`."""
        return cls.parse(route_vars.get("RepoURI", ""))


# Name used by the API while it transitions away from RepositorySpec.
RepositorySpec2 = RepoSpec


def parse_repo_spec(path_component: str) -> RepoSpec:
    """Parse a repository path component; see :meth:`RepoSpec.parse`."""
    return RepoSpec.parse(path_component)


def unmarshal_repo_spec(route_vars: Mapping[str, str]) -> RepoSpec:
    """Decode route variables produced by :meth:`RepoSpec.route_vars`."""
    return RepoSpec.from_route_vars(route_vars)


@dataclass(frozen=True, slots=True)
class RepoRevSpec:
    """Specifies a repository at a revision.

    ``rev`` is a commit ID, branch or tag resolved by the server; empty means
    the repository's default branch.
    """

    repo: RepoSpec = field(default_factory=RepoSpec)
    rev: str = ""

    @property
    def uri(self) -> str:
        """Return the repository URI."""
        return self.repo.uri

    @property
    def rid(self) -> int:
        """Return the repository's numeric ID."""
        return self.repo.rid

    def path_component(self) -> str:
        """Return the repository's path component (the revision is not part of it)."""
        return self.repo.path_component()

    def route_vars(self) -> RouteVars:
        """Return the repository's route variables plus ``Rev`` when set.

        Returns
        -------
        RouteVars
            ``{"RepoURI": ...}`` with ``"Rev"`` only for a non-empty revision.

        Raises
        ------
        InvalidSpecifierError
            If the embedded repository spec is empty.
        """
        route_vars = self.repo.route_vars()
        if self.rev:
            route_vars["Rev"] = self.rev
        return route_vars

    @classmethod
    def from_route_vars(cls, route_vars: Mapping[str, str]) -> Self:
        """Decode route variables produced by :meth:`route_vars`.

        Raises
        ------
        MalformedSpecifierError
            If ``RepoURI`` is missing, empty or malformed.
        """
        return cls(repo=RepoSpec.from_route_vars(route_vars), rev=route_vars.get("Rev", ""))


def unmarshal_repo_rev_spec(route_vars: Mapping[str, str]) -> RepoRevSpec:
    """Decode route variables produced by :meth:`RepoRevSpec.route_vars`."""
    return RepoRevSpec.from_route_vars(route_vars)


@dataclass(frozen=True, slots=True)
class RepositorySpec:
    """Specifies a repository at a commit, by URI.

    Older endpoints take this shape instead of :class:`RepoRevSpec`. An empty
    ``commit_id`` selects the default branch; otherwise it is resolved as a
    revision (commit ID, branch, tag).
    """

    uri: str
    commit_id: str = ""

    def route_vars(self) -> RouteVars:
        """Return ``{"RepoURI": uri}`` plus ``Rev`` when ``commit_id`` is set.

        Raises
        ------
        InvalidSpecifierError
            If ``uri`` is empty.
        """
        if not self.uri:
            raise InvalidSpecifierError("RepositorySpec")
        route_vars = {"RepoURI": self.uri}
        if self.commit_id:
            route_vars["Rev"] = self.commit_id
        return route_vars


@dataclass(frozen=True, slots=True)
class GitHubUserSpec:
    """Specifies a GitHub user by login.

    GitHub numeric IDs have no path encoding; a spec with ``id`` set cannot be
    sent to the API.
    """

    login: str = ""
    id: int = 0

    def path_component(self) -> str:
        """Return the GitHub login.

        Raises
        ------
        UnsupportedSpecifierError
            If ``id`` is set.
        InvalidSpecifierError
            If ``login`` is empty.
        """
        if self.id != 0:
            raise UnsupportedSpecifierError("GitHubUserSpec", "ID not supported via HTTP API")
        if self.login:
            return self.login
        raise InvalidSpecifierError("GitHubUserSpec")

    def route_vars(self) -> RouteVars:
        """Return ``{"GitHubUserSpec": <login>}``."""
        return {"GitHubUserSpec": self.path_component()}


@dataclass(frozen=True, slots=True)
class OrgSpec:
    """Specifies an organization by login or UID (login takes precedence)."""

    org: str = ""
    uid: int = 0

    def path_component(self) -> str:
        """Return the org login, else ``"$<uid>"``.

        Raises
        ------
        InvalidSpecifierError
            If neither field is set.
        """
        if self.org:
            return self.org
        if self.uid > 0:
            return f"{UID_SIGIL}{self.uid}"
        raise InvalidSpecifierError("OrgSpec")

    def route_vars(self) -> RouteVars:
        """Return ``{"OrgSpec": <path component>}``."""
        return {"OrgSpec": self.path_component()}

    @classmethod
    def parse(cls, path_component: str) -> Self:
        """Decode a string produced by :meth:`path_component`.

        Raises
        ------
        MalformedSpecifierError
            If the input is empty or a ``$`` prefix is not followed by a
            decimal integer.
        """
        if not path_component:
            raise MalformedSpecifierError(path_component, "empty org spec")
        if path_component.startswith(UID_SIGIL):
            digits = path_component[len(UID_SIGIL) :]
            return cls(uid=_parse_decimal(path_component, digits, "UID"))
        return cls(org=path_component)


def parse_org_spec(path_component: str) -> OrgSpec:
    """Parse an org path component; see :meth:`OrgSpec.parse`."""
    return OrgSpec.parse(path_component)


@dataclass(frozen=True, slots=True)
class DefSpec:
    """Specifies a definition within a source unit of a repository."""

    repo: str
    unit_type: str
    unit: str
    path: str
    commit_id: str = ""

    def route_vars(self) -> RouteVars:
        """Return the def's route variables, with ``Rev`` when ``commit_id`` is set.

        Raises
        ------
        InvalidSpecifierError
            If any of ``repo``, ``unit_type``, ``unit`` or ``path`` is empty.
        """
        if not (self.repo and self.unit_type and self.unit and self.path):
            raise InvalidSpecifierError("DefSpec")
        route_vars = {
            "RepoURI": self.repo,
            "UnitType": self.unit_type,
            "Unit": self.unit,
            "Path": self.path,
        }
        if self.commit_id:
            route_vars["Rev"] = self.commit_id
        return route_vars
