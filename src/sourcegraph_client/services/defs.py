"""Definition operations."""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Protocol

from pydantic import Field

from sourcegraph_client.models.defs import (
    AugmentedDefAuthor,
    AugmentedDefClient,
    AugmentedDefDependent,
    Def,
    Example,
)
from sourcegraph_client.query import ListOptions, Options, comma_field
from sourcegraph_client.router import RouteName
from sourcegraph_client.services.base import HTTPService

if TYPE_CHECKING:
    from sourcegraph_client.specs import DefSpec

__all__ = [
    "DefGetOptions",
    "DefListAuthorsOptions",
    "DefListClientsOptions",
    "DefListDependentsOptions",
    "DefListExamplesOptions",
    "DefListOptions",
    "DefListVersionsOptions",
    "DefsService",
    "HTTPDefsService",
]


class DefGetOptions(Options):
    doc: bool = False
    """Include formatted documentation."""


class DefListOptions(ListOptions):
    """Filters for listing defs across repositories."""

    repository_uri: str = Field(default="", alias="RepositoryURI")
    sort: str = ""
    unit_types: list[str] = comma_field()
    direction: str = ""
    kinds: list[str] = comma_field()
    exported: bool = False
    doc: bool = False


class DefListExamplesOptions(ListOptions):
    formatted: bool = False


class DefListAuthorsOptions(ListOptions):
    pass


class DefListClientsOptions(ListOptions):
    pass


class DefListDependentsOptions(ListOptions):
    pass


class DefListVersionsOptions(ListOptions):
    pass


class DefsService(Protocol):
    """Definition endpoints."""

    def get(self, spec: DefSpec, options: DefGetOptions | None = None) -> Def | None:
        """Fetch a def."""
        ...

    def list(self, options: DefListOptions | None = None) -> builtins.list[Def]:
        """List defs matching the filters in ``options``."""
        ...

    def list_examples(
        self, spec: DefSpec, options: DefListExamplesOptions | None = None
    ) -> builtins.list[Example]:
        """List usage examples of a def."""
        ...

    def list_authors(
        self, spec: DefSpec, options: DefListAuthorsOptions | None = None
    ) -> builtins.list[AugmentedDefAuthor]:
        """List people who authored a def."""
        ...

    def list_clients(
        self, spec: DefSpec, options: DefListClientsOptions | None = None
    ) -> builtins.list[AugmentedDefClient]:
        """List people who reference a def."""
        ...

    def list_dependents(
        self, spec: DefSpec, options: DefListDependentsOptions | None = None
    ) -> builtins.list[AugmentedDefDependent]:
        """List repositories that reference a def."""
        ...

    def list_versions(
        self, spec: DefSpec, options: DefListVersionsOptions | None = None
    ) -> builtins.list[Def]:
        """List the versions of a def across commits."""
        ...


class HTTPDefsService(HTTPService, DefsService):
    """:class:`DefsService` over the HTTP API."""

    def get(self, spec: DefSpec, options: DefGetOptions | None = None) -> Def | None:
        return self._fetch(RouteName.DEF, spec.route_vars(), Def, options=options)

    def list(self, options: DefListOptions | None = None) -> builtins.list[Def]:
        return self._fetch_list(RouteName.DEFS, None, list[Def], options=options)

    def list_examples(
        self, spec: DefSpec, options: DefListExamplesOptions | None = None
    ) -> builtins.list[Example]:
        return self._fetch_list(
            RouteName.DEF_EXAMPLES, spec.route_vars(), list[Example], options=options
        )

    def list_authors(
        self, spec: DefSpec, options: DefListAuthorsOptions | None = None
    ) -> builtins.list[AugmentedDefAuthor]:
        return self._fetch_list(
            RouteName.DEF_AUTHORS, spec.route_vars(), list[AugmentedDefAuthor], options=options
        )

    def list_clients(
        self, spec: DefSpec, options: DefListClientsOptions | None = None
    ) -> builtins.list[AugmentedDefClient]:
        return self._fetch_list(
            RouteName.DEF_CLIENTS, spec.route_vars(), list[AugmentedDefClient], options=options
        )

    def list_dependents(
        self, spec: DefSpec, options: DefListDependentsOptions | None = None
    ) -> builtins.list[AugmentedDefDependent]:
        return self._fetch_list(
            RouteName.DEF_DEPENDENTS,
            spec.route_vars(),
            list[AugmentedDefDependent],
            options=options,
        )

    def list_versions(
        self, spec: DefSpec, options: DefListVersionsOptions | None = None
    ) -> builtins.list[Def]:
        return self._fetch_list(
            RouteName.DEF_VERSIONS, spec.route_vars(), list[Def], options=options
        )
