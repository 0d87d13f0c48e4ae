"""People operations."""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Protocol

from sourcegraph_client.models.orgs import Org
from sourcegraph_client.models.people import (
    AugmentedPersonUsageByClient,
    AugmentedPersonUsageOfAuthor,
    EmailAddr,
    Person,
    PersonSettings,
    User,
)
from sourcegraph_client.query import ListOptions, Options
from sourcegraph_client.router import RouteName
from sourcegraph_client.services.base import HTTPService

if TYPE_CHECKING:
    from sourcegraph_client.specs import GitHubUserSpec, PersonSpec
    from sourcegraph_client.transport import APIResponse

__all__ = [
    "HTTPPeopleService",
    "PeopleService",
    "PersonGetOptions",
    "PersonListAuthorsOptions",
    "PersonListClientsOptions",
    "PersonListOptions",
    "PersonListOrgsOptions",
]


class PersonGetOptions(Options):
    stats: bool = False
    """Include statistics about the person in ``Person.stat``."""


class PersonListOptions(ListOptions):
    name_or_login: str = ""
    """Only return people whose login or name matches."""
    sort: str = ""
    direction: str = ""


class PersonListAuthorsOptions(PersonListOptions):
    pass


class PersonListClientsOptions(PersonListOptions):
    pass


class PersonListOrgsOptions(ListOptions):
    pass


class PeopleService(Protocol):
    """People-related endpoints."""

    def get(self, person: PersonSpec, options: PersonGetOptions | None = None) -> Person | None:
        """Fetch a person."""
        ...

    def get_settings(self, person: PersonSpec) -> PersonSettings | None:
        """Fetch a person's configuration settings."""
        ...

    def update_settings(self, person: PersonSpec, settings: PersonSettings) -> APIResponse:
        """Update a person's configuration settings."""
        ...

    def list_emails(self, person: PersonSpec) -> builtins.list[EmailAddr]:
        """List a person's email addresses."""
        ...

    def get_or_create_from_github(
        self, user: GitHubUserSpec, options: PersonGetOptions | None = None
    ) -> Person | None:
        """Fetch the person for a GitHub user, creating them if needed."""
        ...

    def refresh_profile(self, person: PersonSpec) -> APIResponse:
        """Refresh profile information from external sources (asynchronously)."""
        ...

    def compute_stats(self, person: PersonSpec) -> APIResponse:
        """Recompute statistics about the person (asynchronously)."""
        ...

    def list(self, options: PersonListOptions | None = None) -> builtins.list[User]:
        """List people."""
        ...

    def list_authors(
        self, person: PersonSpec, options: PersonListAuthorsOptions | None = None
    ) -> builtins.list[AugmentedPersonUsageByClient]:
        """List people who authored code that ``person`` uses."""
        ...

    def list_clients(
        self, person: PersonSpec, options: PersonListClientsOptions | None = None
    ) -> builtins.list[AugmentedPersonUsageOfAuthor]:
        """List people who use code that ``person`` authored."""
        ...

    def list_orgs(
        self, member: PersonSpec, options: PersonListOrgsOptions | None = None
    ) -> builtins.list[Org]:
        """List organizations a person is a member of."""
        ...


class HTTPPeopleService(HTTPService, PeopleService):
    """:class:`PeopleService` over the HTTP API."""

    def get(self, person: PersonSpec, options: PersonGetOptions | None = None) -> Person | None:
        return self._fetch(RouteName.PERSON, person.route_vars(), Person, options=options)

    def get_settings(self, person: PersonSpec) -> PersonSettings | None:
        return self._fetch(RouteName.PERSON_SETTINGS, person.route_vars(), PersonSettings)

    def update_settings(self, person: PersonSpec, settings: PersonSettings) -> APIResponse:
        return self._send(
            "PUT", RouteName.PERSON_SETTINGS_UPDATE, person.route_vars(), settings
        )

    def list_emails(self, person: PersonSpec) -> builtins.list[EmailAddr]:
        return self._fetch_list(RouteName.PERSON_EMAILS, person.route_vars(), list[EmailAddr])

    def get_or_create_from_github(
        self, user: GitHubUserSpec, options: PersonGetOptions | None = None
    ) -> Person | None:
        return self._fetch(RouteName.PERSON_FROM_GITHUB, user.route_vars(), Person, options=options)

    def refresh_profile(self, person: PersonSpec) -> APIResponse:
        return self._send("PUT", RouteName.PERSON_REFRESH_PROFILE, person.route_vars())

    def compute_stats(self, person: PersonSpec) -> APIResponse:
        return self._send("PUT", RouteName.PERSON_COMPUTE_STATS, person.route_vars())

    def list(self, options: PersonListOptions | None = None) -> builtins.list[User]:
        return self._fetch_list(RouteName.PEOPLE, None, list[User], options=options)

    def list_authors(
        self, person: PersonSpec, options: PersonListAuthorsOptions | None = None
    ) -> builtins.list[AugmentedPersonUsageByClient]:
        return self._fetch_list(
            RouteName.PERSON_AUTHORS,
            person.route_vars(),
            list[AugmentedPersonUsageByClient],
            options=options,
        )

    def list_clients(
        self, person: PersonSpec, options: PersonListClientsOptions | None = None
    ) -> builtins.list[AugmentedPersonUsageOfAuthor]:
        return self._fetch_list(
            RouteName.PERSON_CLIENTS,
            person.route_vars(),
            list[AugmentedPersonUsageOfAuthor],
            options=options,
        )

    def list_orgs(
        self, member: PersonSpec, options: PersonListOrgsOptions | None = None
    ) -> builtins.list[Org]:
        return self._fetch_list(
            RouteName.PERSON_ORGS, member.route_vars(), list[Org], options=options
        )
