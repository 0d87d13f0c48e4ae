"""API services: one Protocol and one HTTP implementation per resource."""

from __future__ import annotations

from sourcegraph_client.services.defs import (
    DefGetOptions,
    DefListAuthorsOptions,
    DefListClientsOptions,
    DefListDependentsOptions,
    DefListExamplesOptions,
    DefListOptions,
    DefListVersionsOptions,
    DefsService,
    HTTPDefsService,
)
from sourcegraph_client.services.orgs import HTTPOrgsService, OrgListMembersOptions, OrgsService
from sourcegraph_client.services.people import (
    HTTPPeopleService,
    PeopleService,
    PersonGetOptions,
    PersonListAuthorsOptions,
    PersonListClientsOptions,
    PersonListOptions,
    PersonListOrgsOptions,
)
from sourcegraph_client.services.repo_status import HTTPRepoStatusService, RepoStatusService
from sourcegraph_client.services.repositories import (
    HTTPRepositoriesService,
    RepositoriesService,
    RepositoryCompareCommitsOptions,
    RepositoryGetCommitOptions,
    RepositoryGetOptions,
    RepositoryListAuthorsOptions,
    RepositoryListBranchesOptions,
    RepositoryListByClientOptions,
    RepositoryListByContributorOptions,
    RepositoryListByRefdAuthorOptions,
    RepositoryListClientsOptions,
    RepositoryListCommitsOptions,
    RepositoryListDependenciesOptions,
    RepositoryListDependentsOptions,
    RepositoryListOptions,
    RepositoryListTagsOptions,
)

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
    "HTTPOrgsService",
    "HTTPPeopleService",
    "HTTPRepoStatusService",
    "HTTPRepositoriesService",
    "OrgListMembersOptions",
    "OrgsService",
    "PeopleService",
    "PersonGetOptions",
    "PersonListAuthorsOptions",
    "PersonListClientsOptions",
    "PersonListOptions",
    "PersonListOrgsOptions",
    "RepoStatusService",
    "RepositoriesService",
    "RepositoryCompareCommitsOptions",
    "RepositoryGetCommitOptions",
    "RepositoryGetOptions",
    "RepositoryListAuthorsOptions",
    "RepositoryListBranchesOptions",
    "RepositoryListByClientOptions",
    "RepositoryListByContributorOptions",
    "RepositoryListByRefdAuthorOptions",
    "RepositoryListClientsOptions",
    "RepositoryListCommitsOptions",
    "RepositoryListDependenciesOptions",
    "RepositoryListDependentsOptions",
    "RepositoryListOptions",
    "RepositoryListTagsOptions",
]
