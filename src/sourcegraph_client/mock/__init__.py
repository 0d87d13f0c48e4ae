"""Configurable service mocks for testing code that uses the client.

Examples
--------
>>> from sourcegraph_client.mock import MockPeopleService
>>> from sourcegraph_client.models import Person
>>> from sourcegraph_client.specs import PersonSpec
>>> people = MockPeopleService(get_fn=lambda spec, options: Person(login=spec.login))
>>> people.get(PersonSpec(login="alice")).login
'alice'
"""

from __future__ import annotations

from sourcegraph_client.mock.defs import MockDefsService
from sourcegraph_client.mock.orgs import MockOrgsService
from sourcegraph_client.mock.people import MockPeopleService
from sourcegraph_client.mock.repo_status import MockRepoStatusService
from sourcegraph_client.mock.repositories import MockRepositoriesService

__all__ = [
    "MockDefsService",
    "MockOrgsService",
    "MockPeopleService",
    "MockRepoStatusService",
    "MockRepositoriesService",
]
