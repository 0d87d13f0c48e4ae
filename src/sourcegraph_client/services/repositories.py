"""Repository operations: metadata, settings, VCS data and usage listings."""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Protocol

from sourcegraph_client.models.repos import (
    AugmentedRepoAuthor,
    AugmentedRepoClient,
    AugmentedRepoContribution,
    AugmentedRepoDependency,
    AugmentedRepoDependent,
    AugmentedRepoUsageByClient,
    AugmentedRepoUsageOfAuthor,
    Badge,
    Branch,
    Commit,
    CommitsComparison,
    Counter,
    Repo,
    Repository,
    RepositorySettings,
    Tag,
    TreeEntry,
)
from sourcegraph_client.query import ListOptions, Options, comma_field
from sourcegraph_client.router import RouteName
from sourcegraph_client.services.base import HTTPService

if TYPE_CHECKING:
    from sourcegraph_client.models.repos import NewRepositorySpec
    from sourcegraph_client.specs import PersonSpec, RepoRevSpec, RepoSpec, RepositorySpec
    from sourcegraph_client.transport import APIResponse

__all__ = [
    "HTTPRepositoriesService",
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


class RepositoryGetOptions(Options):
    stats: bool = False
    """Include repository statistics in ``Repository.stat``."""
    resolve_revision: bool = False
    """Fill ``Repository.commit_id`` with the resolved revision."""


class RepositoryListOptions(ListOptions):
    name: str = ""
    query: str = ""
    """Search query; when set, ``sort`` and ``direction`` are ignored."""
    uris: list[str] = comma_field(alias="URIs")
    built_only: bool = False
    sort: str = ""
    direction: str = ""
    no_fork: bool = False
    owner: str = ""


class RepositoryListCommitsOptions(ListOptions):
    head: str = ""


class RepositoryGetCommitOptions(Options):
    pass


class RepositoryCompareCommitsOptions(Options):
    head_rev: str = ""
    """Revision compared against the base revision."""


class RepositoryListBranchesOptions(ListOptions):
    pass


class RepositoryListTagsOptions(ListOptions):
    pass


class RepositoryListAuthorsOptions(ListOptions):
    pass


class RepositoryListClientsOptions(ListOptions):
    pass


class RepositoryListDependenciesOptions(ListOptions):
    pass


class RepositoryListDependentsOptions(ListOptions):
    pass


class RepositoryListByContributorOptions(ListOptions):
    no_fork: bool = False


class RepositoryListByClientOptions(ListOptions):
    pass


class RepositoryListByRefdAuthorOptions(ListOptions):
    pass


class RepositoriesService(Protocol):
    """Repository-related endpoints."""

    def get(
        self, repo: RepositorySpec, options: RepositoryGetOptions | None = None
    ) -> Repository | None:
        """Fetch a repository."""
        ...

    def get_or_create(
        self, repo: RepositorySpec, options: RepositoryGetOptions | None = None
    ) -> Repository | None:
        """Fetch a repository, creating it when its URI names a recognized host.

        For an unknown URI on a host such as github.com, the server fetches the
        repository's information from the host and creates it.
        """
        ...

    def get_settings(self, repo: RepositorySpec) -> RepositorySettings | None:
        """Fetch a repository's configuration settings."""
        ...

    def update_settings(self, repo: RepositorySpec, settings: RepositorySettings) -> APIResponse:
        """Update a repository's configuration settings."""
        ...

    def refresh_profile(self, repo: RepositorySpec) -> APIResponse:
        """Refresh repository metadata from its external host.

        The server performs the refresh asynchronously and does not report
        completion.
        """
        ...

    def refresh_vcs_data(self, repo: RepositorySpec) -> APIResponse:
        """Fetch new commits, branches, tags and blobs (asynchronously)."""
        ...

    def compute_stats(self, repo: RepositorySpec) -> APIResponse:
        """Recompute repository statistics (asynchronously)."""
        ...

    def create(self, new_repo: NewRepositorySpec) -> Repo | None:
        """Add the repository at a clone URL.

        Returns the existing repository when one with the same clone URL or
        URI exists.
        """
        ...

    def get_readme(self, repo: RepositorySpec) -> TreeEntry | None:
        """Fetch the formatted README file."""
        ...

    def list(self, options: RepositoryListOptions | None = None) -> builtins.list[Repository]:
        """List repositories."""
        ...

    def list_commits(
        self, repo: RepoSpec, options: RepositoryListCommitsOptions | None = None
    ) -> builtins.list[Commit]:
        """List commits."""
        ...

    def get_commit(
        self, rev: RepoRevSpec, options: RepositoryGetCommitOptions | None = None
    ) -> Commit | None:
        """Fetch the commit at a revision."""
        ...

    def compare_commits(
        self, base: RepoRevSpec, options: RepositoryCompareCommitsOptions | None = None
    ) -> CommitsComparison | None:
        """Compare ``base`` with the head revision given in ``options``."""
        ...

    def list_branches(
        self, repo: RepoSpec, options: RepositoryListBranchesOptions | None = None
    ) -> builtins.list[Branch]:
        """List branches."""
        ...

    def list_tags(
        self, repo: RepoSpec, options: RepositoryListTagsOptions | None = None
    ) -> builtins.list[Tag]:
        """List tags."""
        ...

    def list_badges(self, repo: RepositorySpec) -> builtins.list[Badge]:
        """List the badges available for a repository."""
        ...

    def list_counters(self, repo: RepositorySpec) -> builtins.list[Counter]:
        """List the counters available for a repository."""
        ...

    def list_authors(
        self, repo: RepositorySpec, options: RepositoryListAuthorsOptions | None = None
    ) -> builtins.list[AugmentedRepoAuthor]:
        """List people who committed code to a repository."""
        ...

    def list_clients(
        self, repo: RepositorySpec, options: RepositoryListClientsOptions | None = None
    ) -> builtins.list[AugmentedRepoClient]:
        """List people who reference defs defined in a repository."""
        ...

    def list_dependencies(
        self, repo: RepositorySpec, options: RepositoryListDependenciesOptions | None = None
    ) -> builtins.list[AugmentedRepoDependency]:
        """List repositories containing defs that a repository references."""
        ...

    def list_dependents(
        self, repo: RepositorySpec, options: RepositoryListDependentsOptions | None = None
    ) -> builtins.list[AugmentedRepoDependent]:
        """List repositories that reference defs defined in a repository."""
        ...

    def list_by_contributor(
        self, person: PersonSpec, options: RepositoryListByContributorOptions | None = None
    ) -> builtins.list[AugmentedRepoContribution]:
        """List repositories a person has committed code to."""
        ...

    def list_by_client(
        self, person: PersonSpec, options: RepositoryListByClientOptions | None = None
    ) -> builtins.list[AugmentedRepoUsageByClient]:
        """List repositories containing defs that a person references."""
        ...

    def list_by_refd_author(
        self, person: PersonSpec, options: RepositoryListByRefdAuthorOptions | None = None
    ) -> builtins.list[AugmentedRepoUsageOfAuthor]:
        """List repositories that reference code a person authored."""
        ...


class HTTPRepositoriesService(HTTPService, RepositoriesService):
    """:class:`RepositoriesService` over the HTTP API."""

    def get(
        self, repo: RepositorySpec, options: RepositoryGetOptions | None = None
    ) -> Repository | None:
        return self._fetch(RouteName.REPOSITORY, repo.route_vars(), Repository, options=options)

    def get_or_create(
        self, repo: RepositorySpec, options: RepositoryGetOptions | None = None
    ) -> Repository | None:
        result, _ = self._client.request(
            "PUT",
            RouteName.REPOSITORIES_GET_OR_CREATE,
            repo.route_vars(),
            options=options,
            result_type=Repository,
        )
        return result

    def get_settings(self, repo: RepositorySpec) -> RepositorySettings | None:
        return self._fetch(RouteName.REPOSITORY_SETTINGS, repo.route_vars(), RepositorySettings)

    def update_settings(self, repo: RepositorySpec, settings: RepositorySettings) -> APIResponse:
        return self._send(
            "PUT", RouteName.REPOSITORY_SETTINGS_UPDATE, repo.route_vars(), settings
        )

    def refresh_profile(self, repo: RepositorySpec) -> APIResponse:
        return self._send("PUT", RouteName.REPOSITORY_REFRESH_PROFILE, repo.route_vars())

    def refresh_vcs_data(self, repo: RepositorySpec) -> APIResponse:
        return self._send("PUT", RouteName.REPOSITORY_REFRESH_VCS_DATA, repo.route_vars())

    def compute_stats(self, repo: RepositorySpec) -> APIResponse:
        return self._send("PUT", RouteName.REPOSITORY_COMPUTE_STATS, repo.route_vars())

    def create(self, new_repo: NewRepositorySpec) -> Repo | None:
        result, _ = self._client.request(
            "POST", RouteName.REPOSITORIES_CREATE, body=new_repo, result_type=Repo
        )
        return result

    def get_readme(self, repo: RepositorySpec) -> TreeEntry | None:
        return self._fetch(RouteName.REPOSITORY_README, repo.route_vars(), TreeEntry)

    def list(self, options: RepositoryListOptions | None = None) -> builtins.list[Repository]:
        return self._fetch_list(RouteName.REPOSITORIES, None, list[Repository], options=options)

    def list_commits(
        self, repo: RepoSpec, options: RepositoryListCommitsOptions | None = None
    ) -> builtins.list[Commit]:
        return self._fetch_list(
            RouteName.REPO_COMMITS, repo.route_vars(), list[Commit], options=options
        )

    def get_commit(
        self, rev: RepoRevSpec, options: RepositoryGetCommitOptions | None = None
    ) -> Commit | None:
        return self._fetch(RouteName.REPO_COMMIT, rev.route_vars(), Commit, options=options)

    def compare_commits(
        self, base: RepoRevSpec, options: RepositoryCompareCommitsOptions | None = None
    ) -> CommitsComparison | None:
        return self._fetch(
            RouteName.REPO_COMPARE_COMMITS, base.route_vars(), CommitsComparison, options=options
        )

    def list_branches(
        self, repo: RepoSpec, options: RepositoryListBranchesOptions | None = None
    ) -> builtins.list[Branch]:
        return self._fetch_list(
            RouteName.REPO_BRANCHES, repo.route_vars(), list[Branch], options=options
        )

    def list_tags(
        self, repo: RepoSpec, options: RepositoryListTagsOptions | None = None
    ) -> builtins.list[Tag]:
        return self._fetch_list(RouteName.REPO_TAGS, repo.route_vars(), list[Tag], options=options)

    def list_badges(self, repo: RepositorySpec) -> builtins.list[Badge]:
        return self._fetch_list(RouteName.REPOSITORY_BADGES, repo.route_vars(), list[Badge])

    def list_counters(self, repo: RepositorySpec) -> builtins.list[Counter]:
        return self._fetch_list(RouteName.REPOSITORY_COUNTERS, repo.route_vars(), list[Counter])

    def list_authors(
        self, repo: RepositorySpec, options: RepositoryListAuthorsOptions | None = None
    ) -> builtins.list[AugmentedRepoAuthor]:
        return self._fetch_list(
            RouteName.REPOSITORY_AUTHORS,
            repo.route_vars(),
            list[AugmentedRepoAuthor],
            options=options,
        )

    def list_clients(
        self, repo: RepositorySpec, options: RepositoryListClientsOptions | None = None
    ) -> builtins.list[AugmentedRepoClient]:
        return self._fetch_list(
            RouteName.REPOSITORY_CLIENTS,
            repo.route_vars(),
            list[AugmentedRepoClient],
            options=options,
        )

    def list_dependencies(
        self, repo: RepositorySpec, options: RepositoryListDependenciesOptions | None = None
    ) -> builtins.list[AugmentedRepoDependency]:
        return self._fetch_list(
            RouteName.REPOSITORY_DEPENDENCIES,
            repo.route_vars(),
            list[AugmentedRepoDependency],
            options=options,
        )

    def list_dependents(
        self, repo: RepositorySpec, options: RepositoryListDependentsOptions | None = None
    ) -> builtins.list[AugmentedRepoDependent]:
        return self._fetch_list(
            RouteName.REPOSITORY_DEPENDENTS,
            repo.route_vars(),
            list[AugmentedRepoDependent],
            options=options,
        )

    def list_by_contributor(
        self, person: PersonSpec, options: RepositoryListByContributorOptions | None = None
    ) -> builtins.list[AugmentedRepoContribution]:
        return self._fetch_list(
            RouteName.PERSON_REPOSITORY_CONTRIBUTIONS,
            person.route_vars(),
            list[AugmentedRepoContribution],
            options=options,
        )

    def list_by_client(
        self, person: PersonSpec, options: RepositoryListByClientOptions | None = None
    ) -> builtins.list[AugmentedRepoUsageByClient]:
        return self._fetch_list(
            RouteName.PERSON_REPOSITORY_DEPENDENCIES,
            person.route_vars(),
            list[AugmentedRepoUsageByClient],
            options=options,
        )

    def list_by_refd_author(
        self, person: PersonSpec, options: RepositoryListByRefdAuthorOptions | None = None
    ) -> builtins.list[AugmentedRepoUsageOfAuthor]:
        return self._fetch_list(
            RouteName.PERSON_REPOSITORY_DEPENDENTS,
            person.route_vars(),
            list[AugmentedRepoUsageOfAuthor],
            options=options,
        )
