"""Typed payloads exchanged with the API."""

from __future__ import annotations

from sourcegraph_client.models.base import APIModel
from sourcegraph_client.models.defs import (
    AugmentedDefAuthor,
    AugmentedDefClient,
    AugmentedDefDependent,
    Def,
    DefDoc,
    Example,
)
from sourcegraph_client.models.orgs import Org, OrgSettings
from sourcegraph_client.models.people import (
    AugmentedPersonUsageByClient,
    AugmentedPersonUsageOfAuthor,
    EmailAddr,
    Person,
    PersonSettings,
    PersonUsageByClient,
    PersonUsageOfAuthor,
    PlanSettings,
    User,
)
from sourcegraph_client.models.repos import (
    GIT,
    HG,
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
    RepoStatType,
    RepoUsageByClient,
    RepoUsageOfAuthor,
    Signature,
    Tag,
    TreeEntry,
    map_by_uri,
    uri_is_github,
    uri_is_google_code,
)
from sourcegraph_client.models.statuses import CombinedStatus, RepoStatus

__all__ = [
    "GIT",
    "HG",
    "APIModel",
    "AugmentedDefAuthor",
    "AugmentedDefClient",
    "AugmentedDefDependent",
    "AugmentedPersonUsageByClient",
    "AugmentedPersonUsageOfAuthor",
    "AugmentedRepoAuthor",
    "AugmentedRepoClient",
    "AugmentedRepoContribution",
    "AugmentedRepoDependency",
    "AugmentedRepoDependent",
    "AugmentedRepoUsageByClient",
    "AugmentedRepoUsageOfAuthor",
    "Badge",
    "Branch",
    "CombinedStatus",
    "Commit",
    "CommitsComparison",
    "Counter",
    "Def",
    "DefDoc",
    "EmailAddr",
    "Example",
    "NewRepositorySpec",
    "Org",
    "OrgSettings",
    "Person",
    "PersonSettings",
    "PersonUsageByClient",
    "PersonUsageOfAuthor",
    "PlanSettings",
    "Repo",
    "RepoStatType",
    "RepoStatus",
    "RepoUsageByClient",
    "RepoUsageOfAuthor",
    "Repository",
    "RepositorySettings",
    "Signature",
    "Tag",
    "TreeEntry",
    "User",
    "map_by_uri",
    "uri_is_github",
    "uri_is_google_code",
]
