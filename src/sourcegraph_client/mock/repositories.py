"""In-memory stand-in for :class:`RepositoriesService`."""

from __future__ import annotations

import builtins
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sourcegraph_client.services.repositories import RepositoriesService
from sourcegraph_client.transport import APIResponse

if TYPE_CHECKING:
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
        NewRepositorySpec,
        Repo,
        Repository,
        RepositorySettings,
        Tag,
        TreeEntry,
    )
    from sourcegraph_client.services.repositories import (
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
    from sourcegraph_client.specs import PersonSpec, RepoRevSpec, RepoSpec, RepositorySpec

__all__ = ["MockRepositoriesService"]


@dataclass
class MockRepositoriesService(RepositoriesService):
    """Repositories service whose methods delegate to optional callables.

    Each operation ``x`` calls ``x_fn`` with the same arguments when it is set,
    and otherwise returns an empty result (None, an empty list, or an empty
    :class:`APIResponse`).
    """

    get_fn: Callable[[RepositorySpec, RepositoryGetOptions | None], Repository | None] | None = None
    get_or_create_fn: (
        Callable[[RepositorySpec, RepositoryGetOptions | None], Repository | None] | None
    ) = None
    get_settings_fn: Callable[[RepositorySpec], RepositorySettings | None] | None = None
    update_settings_fn: Callable[[RepositorySpec, RepositorySettings], APIResponse] | None = None
    refresh_profile_fn: Callable[[RepositorySpec], APIResponse] | None = None
    refresh_vcs_data_fn: Callable[[RepositorySpec], APIResponse] | None = None
    compute_stats_fn: Callable[[RepositorySpec], APIResponse] | None = None
    create_fn: Callable[[NewRepositorySpec], Repo | None] | None = None
    get_readme_fn: Callable[[RepositorySpec], TreeEntry | None] | None = None
    list_fn: Callable[[RepositoryListOptions | None], builtins.list[Repository]] | None = None
    list_commits_fn: (
        Callable[[RepoSpec, RepositoryListCommitsOptions | None], builtins.list[Commit]] | None
    ) = None
    get_commit_fn: (
        Callable[[RepoRevSpec, RepositoryGetCommitOptions | None], Commit | None] | None
    ) = None
    compare_commits_fn: (
        Callable[[RepoRevSpec, RepositoryCompareCommitsOptions | None], CommitsComparison | None]
        | None
    ) = None
    list_branches_fn: (
        Callable[[RepoSpec, RepositoryListBranchesOptions | None], builtins.list[Branch]] | None
    ) = None
    list_tags_fn: (
        Callable[[RepoSpec, RepositoryListTagsOptions | None], builtins.list[Tag]] | None
    ) = None
    list_badges_fn: Callable[[RepositorySpec], builtins.list[Badge]] | None = None
    list_counters_fn: Callable[[RepositorySpec], builtins.list[Counter]] | None = None
    list_authors_fn: (
        Callable[
            [RepositorySpec, RepositoryListAuthorsOptions | None],
            builtins.list[AugmentedRepoAuthor],
        ]
        | None
    ) = None
    list_clients_fn: (
        Callable[
            [RepositorySpec, RepositoryListClientsOptions | None],
            builtins.list[AugmentedRepoClient],
        ]
        | None
    ) = None
    list_dependencies_fn: (
        Callable[
            [RepositorySpec, RepositoryListDependenciesOptions | None],
            builtins.list[AugmentedRepoDependency],
        ]
        | None
    ) = None
    list_dependents_fn: (
        Callable[
            [RepositorySpec, RepositoryListDependentsOptions | None],
            builtins.list[AugmentedRepoDependent],
        ]
        | None
    ) = None
    list_by_contributor_fn: (
        Callable[
            [PersonSpec, RepositoryListByContributorOptions | None],
            builtins.list[AugmentedRepoContribution],
        ]
        | None
    ) = None
    list_by_client_fn: (
        Callable[
            [PersonSpec, RepositoryListByClientOptions | None],
            builtins.list[AugmentedRepoUsageByClient],
        ]
        | None
    ) = None
    list_by_refd_author_fn: (
        Callable[
            [PersonSpec, RepositoryListByRefdAuthorOptions | None],
            builtins.list[AugmentedRepoUsageOfAuthor],
        ]
        | None
    ) = None

    def get(
        self, repo: RepositorySpec, options: RepositoryGetOptions | None = None
    ) -> Repository | None:
        if self.get_fn is None:
            return None
        return self.get_fn(repo, options)

    def get_or_create(
        self, repo: RepositorySpec, options: RepositoryGetOptions | None = None
    ) -> Repository | None:
        if self.get_or_create_fn is None:
            return None
        return self.get_or_create_fn(repo, options)

    def get_settings(self, repo: RepositorySpec) -> RepositorySettings | None:
        if self.get_settings_fn is None:
            return None
        return self.get_settings_fn(repo)

    def update_settings(self, repo: RepositorySpec, settings: RepositorySettings) -> APIResponse:
        if self.update_settings_fn is None:
            return APIResponse()
        return self.update_settings_fn(repo, settings)

    def refresh_profile(self, repo: RepositorySpec) -> APIResponse:
        if self.refresh_profile_fn is None:
            return APIResponse()
        return self.refresh_profile_fn(repo)

    def refresh_vcs_data(self, repo: RepositorySpec) -> APIResponse:
        if self.refresh_vcs_data_fn is None:
            return APIResponse()
        return self.refresh_vcs_data_fn(repo)

    def compute_stats(self, repo: RepositorySpec) -> APIResponse:
        if self.compute_stats_fn is None:
            return APIResponse()
        return self.compute_stats_fn(repo)

    def create(self, new_repo: NewRepositorySpec) -> Repo | None:
        if self.create_fn is None:
            return None
        return self.create_fn(new_repo)

    def get_readme(self, repo: RepositorySpec) -> TreeEntry | None:
        if self.get_readme_fn is None:
            return None
        return self.get_readme_fn(repo)

    def list(self, options: RepositoryListOptions | None = None) -> builtins.list[Repository]:
        if self.list_fn is None:
            return []
        return self.list_fn(options)

    def list_commits(
        self, repo: RepoSpec, options: RepositoryListCommitsOptions | None = None
    ) -> builtins.list[Commit]:
        if self.list_commits_fn is None:
            return []
        return self.list_commits_fn(repo, options)

    def get_commit(
        self, rev: RepoRevSpec, options: RepositoryGetCommitOptions | None = None
    ) -> Commit | None:
        if self.get_commit_fn is None:
            return None
        return self.get_commit_fn(rev, options)

    def compare_commits(
        self, base: RepoRevSpec, options: RepositoryCompareCommitsOptions | None = None
    ) -> CommitsComparison | None:
        if self.compare_commits_fn is None:
            return None
        return self.compare_commits_fn(base, options)

    def list_branches(
        self, repo: RepoSpec, options: RepositoryListBranchesOptions | None = None
    ) -> builtins.list[Branch]:
        if self.list_branches_fn is None:
            return []
        return self.list_branches_fn(repo, options)

    def list_tags(
        self, repo: RepoSpec, options: RepositoryListTagsOptions | None = None
    ) -> builtins.list[Tag]:
        if self.list_tags_fn is None:
            return []
        return self.list_tags_fn(repo, options)

    def list_badges(self, repo: RepositorySpec) -> builtins.list[Badge]:
        if self.list_badges_fn is None:
            return []
        return self.list_badges_fn(repo)

    def list_counters(self, repo: RepositorySpec) -> builtins.list[Counter]:
        if self.list_counters_fn is None:
            return []
        return self.list_counters_fn(repo)

    def list_authors(
        self, repo: RepositorySpec, options: RepositoryListAuthorsOptions | None = None
    ) -> builtins.list[AugmentedRepoAuthor]:
        if self.list_authors_fn is None:
            return []
        return self.list_authors_fn(repo, options)

    def list_clients(
        self, repo: RepositorySpec, options: RepositoryListClientsOptions | None = None
    ) -> builtins.list[AugmentedRepoClient]:
        if self.list_clients_fn is None:
            return []
        return self.list_clients_fn(repo, options)

    def list_dependencies(
        self, repo: RepositorySpec, options: RepositoryListDependenciesOptions | None = None
    ) -> builtins.list[AugmentedRepoDependency]:
        if self.list_dependencies_fn is None:
            return []
        return self.list_dependencies_fn(repo, options)

    def list_dependents(
        self, repo: RepositorySpec, options: RepositoryListDependentsOptions | None = None
    ) -> builtins.list[AugmentedRepoDependent]:
        if self.list_dependents_fn is None:
            return []
        return self.list_dependents_fn(repo, options)

    def list_by_contributor(
        self, person: PersonSpec, options: RepositoryListByContributorOptions | None = None
    ) -> builtins.list[AugmentedRepoContribution]:
        if self.list_by_contributor_fn is None:
            return []
        return self.list_by_contributor_fn(person, options)

    def list_by_client(
        self, person: PersonSpec, options: RepositoryListByClientOptions | None = None
    ) -> builtins.list[AugmentedRepoUsageByClient]:
        if self.list_by_client_fn is None:
            return []
        return self.list_by_client_fn(person, options)

    def list_by_refd_author(
        self, person: PersonSpec, options: RepositoryListByRefdAuthorOptions | None = None
    ) -> builtins.list[AugmentedRepoUsageOfAuthor]:
        if self.list_by_refd_author_fn is None:
            return []
        return self.list_by_refd_author_fn(person, options)
