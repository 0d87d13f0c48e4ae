"""In-memory stand-in for :class:`DefsService`."""

from __future__ import annotations

import builtins
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sourcegraph_client.services.defs import DefsService

if TYPE_CHECKING:
    from sourcegraph_client.models.defs import (
        AugmentedDefAuthor,
        AugmentedDefClient,
        AugmentedDefDependent,
        Def,
        Example,
    )
    from sourcegraph_client.services.defs import (
        DefGetOptions,
        DefListAuthorsOptions,
        DefListClientsOptions,
        DefListDependentsOptions,
        DefListExamplesOptions,
        DefListOptions,
        DefListVersionsOptions,
    )
    from sourcegraph_client.specs import DefSpec

__all__ = ["MockDefsService"]


@dataclass
class MockDefsService(DefsService):
    """Defs service whose methods delegate to optional ``<method>_fn`` callables."""

    get_fn: Callable[[DefSpec, DefGetOptions | None], Def | None] | None = None
    list_fn: Callable[[DefListOptions | None], builtins.list[Def]] | None = None
    list_examples_fn: (
        Callable[[DefSpec, DefListExamplesOptions | None], builtins.list[Example]] | None
    ) = None
    list_authors_fn: (
        Callable[[DefSpec, DefListAuthorsOptions | None], builtins.list[AugmentedDefAuthor]]
        | None
    ) = None
    list_clients_fn: (
        Callable[[DefSpec, DefListClientsOptions | None], builtins.list[AugmentedDefClient]]
        | None
    ) = None
    list_dependents_fn: (
        Callable[
            [DefSpec, DefListDependentsOptions | None], builtins.list[AugmentedDefDependent]
        ]
        | None
    ) = None
    list_versions_fn: (
        Callable[[DefSpec, DefListVersionsOptions | None], builtins.list[Def]] | None
    ) = None

    def get(self, spec: DefSpec, options: DefGetOptions | None = None) -> Def | None:
        if self.get_fn is None:
            return None
        return self.get_fn(spec, options)

    def list(self, options: DefListOptions | None = None) -> builtins.list[Def]:
        if self.list_fn is None:
            return []
        return self.list_fn(options)

    def list_examples(
        self, spec: DefSpec, options: DefListExamplesOptions | None = None
    ) -> builtins.list[Example]:
        if self.list_examples_fn is None:
            return []
        return self.list_examples_fn(spec, options)

    def list_authors(
        self, spec: DefSpec, options: DefListAuthorsOptions | None = None
    ) -> builtins.list[AugmentedDefAuthor]:
        if self.list_authors_fn is None:
            return []
        return self.list_authors_fn(spec, options)

    def list_clients(
        self, spec: DefSpec, options: DefListClientsOptions | None = None
    ) -> builtins.list[AugmentedDefClient]:
        if self.list_clients_fn is None:
            return []
        return self.list_clients_fn(spec, options)

    def list_dependents(
        self, spec: DefSpec, options: DefListDependentsOptions | None = None
    ) -> builtins.list[AugmentedDefDependent]:
        if self.list_dependents_fn is None:
            return []
        return self.list_dependents_fn(spec, options)

    def list_versions(
        self, spec: DefSpec, options: DefListVersionsOptions | None = None
    ) -> builtins.list[Def]:
        if self.list_versions_fn is None:
            return []
        return self.list_versions_fn(spec, options)
