"""In-memory stand-in for :class:`PeopleService`."""

from __future__ import annotations

import builtins
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sourcegraph_client.services.people import PeopleService
from sourcegraph_client.transport import APIResponse

if TYPE_CHECKING:
    from sourcegraph_client.models.orgs import Org
    from sourcegraph_client.models.people import (
        AugmentedPersonUsageByClient,
        AugmentedPersonUsageOfAuthor,
        EmailAddr,
        Person,
        PersonSettings,
        User,
    )
    from sourcegraph_client.services.people import (
        PersonGetOptions,
        PersonListAuthorsOptions,
        PersonListClientsOptions,
        PersonListOptions,
        PersonListOrgsOptions,
    )
    from sourcegraph_client.specs import GitHubUserSpec, PersonSpec

__all__ = ["MockPeopleService"]


@dataclass
class MockPeopleService(PeopleService):
    """People service whose methods delegate to optional ``<method>_fn`` callables."""

    get_fn: Callable[[PersonSpec, PersonGetOptions | None], Person | None] | None = None
    get_settings_fn: Callable[[PersonSpec], PersonSettings | None] | None = None
    update_settings_fn: Callable[[PersonSpec, PersonSettings], APIResponse] | None = None
    list_emails_fn: Callable[[PersonSpec], builtins.list[EmailAddr]] | None = None
    get_or_create_from_github_fn: (
        Callable[[GitHubUserSpec, PersonGetOptions | None], Person | None] | None
    ) = None
    refresh_profile_fn: Callable[[PersonSpec], APIResponse] | None = None
    compute_stats_fn: Callable[[PersonSpec], APIResponse] | None = None
    list_fn: Callable[[PersonListOptions | None], builtins.list[User]] | None = None
    list_authors_fn: (
        Callable[
            [PersonSpec, PersonListAuthorsOptions | None],
            builtins.list[AugmentedPersonUsageByClient],
        ]
        | None
    ) = None
    list_clients_fn: (
        Callable[
            [PersonSpec, PersonListClientsOptions | None],
            builtins.list[AugmentedPersonUsageOfAuthor],
        ]
        | None
    ) = None
    list_orgs_fn: (
        Callable[[PersonSpec, PersonListOrgsOptions | None], builtins.list[Org]] | None
    ) = None

    def get(self, person: PersonSpec, options: PersonGetOptions | None = None) -> Person | None:
        if self.get_fn is None:
            return None
        return self.get_fn(person, options)

    def get_settings(self, person: PersonSpec) -> PersonSettings | None:
        if self.get_settings_fn is None:
            return None
        return self.get_settings_fn(person)

    def update_settings(self, person: PersonSpec, settings: PersonSettings) -> APIResponse:
        if self.update_settings_fn is None:
            return APIResponse()
        return self.update_settings_fn(person, settings)

    def list_emails(self, person: PersonSpec) -> builtins.list[EmailAddr]:
        if self.list_emails_fn is None:
            return []
        return self.list_emails_fn(person)

    def get_or_create_from_github(
        self, user: GitHubUserSpec, options: PersonGetOptions | None = None
    ) -> Person | None:
        if self.get_or_create_from_github_fn is None:
            return None
        return self.get_or_create_from_github_fn(user, options)

    def refresh_profile(self, person: PersonSpec) -> APIResponse:
        if self.refresh_profile_fn is None:
            return APIResponse()
        return self.refresh_profile_fn(person)

    def compute_stats(self, person: PersonSpec) -> APIResponse:
        if self.compute_stats_fn is None:
            return APIResponse()
        return self.compute_stats_fn(person)

    def list(self, options: PersonListOptions | None = None) -> builtins.list[User]:
        if self.list_fn is None:
            return []
        return self.list_fn(options)

    def list_authors(
        self, person: PersonSpec, options: PersonListAuthorsOptions | None = None
    ) -> builtins.list[AugmentedPersonUsageByClient]:
        if self.list_authors_fn is None:
            return []
        return self.list_authors_fn(person, options)

    def list_clients(
        self, person: PersonSpec, options: PersonListClientsOptions | None = None
    ) -> builtins.list[AugmentedPersonUsageOfAuthor]:
        if self.list_clients_fn is None:
            return []
        return self.list_clients_fn(person, options)

    def list_orgs(
        self, member: PersonSpec, options: PersonListOrgsOptions | None = None
    ) -> builtins.list[Org]:
        if self.list_orgs_fn is None:
            return []
        return self.list_orgs_fn(member, options)
