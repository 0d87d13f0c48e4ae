"""Repository payloads: repos, commits, branches, badges and usage records."""

from __future__ import annotations

import html
from enum import StrEnum
from typing import TYPE_CHECKING, Final
from urllib.parse import urlsplit

from pydantic import Field

from sourcegraph_client.models.base import APIModel
from sourcegraph_client.models.people import User
from sourcegraph_client.specs import RepoSpec, RepositorySpec

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "GIT",
    "HG",
    "AugmentedRepoAuthor",
    "AugmentedRepoClient",
    "AugmentedRepoContribution",
    "AugmentedRepoDependency",
    "AugmentedRepoDependent",
    "AugmentedRepoUsageByClient",
    "AugmentedRepoUsageOfAuthor",
    "Badge",
    "Branch",
    "Commit",
    "CommitsComparison",
    "Counter",
    "NewRepositorySpec",
    "Repo",
    "RepoStatType",
    "RepoUsageByClient",
    "RepoUsageOfAuthor",
    "Repository",
    "RepositorySettings",
    "Signature",
    "Tag",
    "TreeEntry",
    "map_by_uri",
    "uri_is_github",
    "uri_is_google_code",
]

GIT: Final[str] = "git"
HG: Final[str] = "hg"


class RepoStatType(StrEnum):
    """Names of per-repository statistics (keys of ``Repo.stat``)."""

    XREFS = "xrefs"
    AUTHORS = "authors"
    CLIENTS = "clients"
    DEPENDENCIES = "dependencies"
    DEPENDENTS = "dependents"
    DEFS = "defs"
    EXPORTED_DEFS = "exported-defs"


def uri_is_github(uri: str) -> bool:
    """Return True if the repository URI names a GitHub repository."""
    return uri.lower().startswith("github.com/")


def uri_is_google_code(uri: str) -> bool:
    """Return True if the repository URI names a Google Code repository."""
    return uri.lower().startswith("code.google.com/p/")


class Repo(APIModel):
    """A code repository."""

    rid: int = Field(default=0, alias="RID")
    """Numeric primary key."""
    uri: str = Field(default="", alias="URI")
    """Normalized identifier based on the primary clone URL (``github.com/user/repo``)."""
    name: str = ""
    """Base name, typically the directory the repository clones into."""
    owner_user_id: int = Field(default=0, alias="OwnerUserID")
    owner_github_user_id: int | None = Field(default=None, alias="OwnerGitHubUserID")
    description: str = ""
    vcs: str = Field(default="", alias="VCS")
    """``git`` or ``hg``."""
    clone_url: str = Field(default="", alias="CloneURL")
    redirect_clone_url: str | None = Field(default=None, alias="ActualCloneURL")
    """Set when ``clone_url`` redirects elsewhere."""
    homepage_url: str | None = Field(default=None, alias="HomepageURL")
    default_branch: str = ""
    language: str = ""
    github_stars: int = Field(default=0, alias="GitHubStars")
    github_id: int | None = Field(default=None, alias="GitHubID")
    disabled: bool = False
    deprecated: bool = False
    fork: bool = False
    mirror: bool = False
    private: bool = False
    stat: dict[str, int] = Field(default_factory=dict)
    """Statistics keyed by :class:`RepoStatType`; only filled when requested."""

    @property
    def actual_clone_url(self) -> str:
        """The most direct clone URL, following any redirect."""
        return self.redirect_clone_url or self.clone_url

    def is_github_repository(self) -> bool:
        """Return True if the repository is hosted on GitHub.

        The clone URL host decides when there is one; otherwise the URI prefix.
        """
        clone_url = self.actual_clone_url
        if not clone_url:
            return uri_is_github(self.uri)
        try:
            host = urlsplit(clone_url).hostname or ""
        except ValueError:
            return False
        return host.lower() == "github.com"

    def repo_spec(self) -> RepoSpec:
        return RepoSpec(uri=self.uri, rid=self.rid)


def map_by_uri(repos: Iterable[Repo]) -> dict[str, Repo]:
    """Index ``repos`` by URI (later entries win)."""
    return {repo.uri: repo for repo in repos}


class Repository(Repo):
    """A repository as returned by ``Repositories.get``.

    ``commit_id`` is the resolved revision the stats and notices apply to; it
    is only filled when the request asked to resolve the revision.
    """

    commit_id: str = Field(default="", alias="CommitID")
    no_vcs_data: bool = Field(default=False, alias="NoVCSData")
    unsupported: bool = False
    notice_title: str = ""
    notice_body: str = ""

    def spec(self) -> RepositorySpec:
        return RepositorySpec(uri=self.uri, commit_id=self.commit_id)


class RepositorySettings(APIModel):
    enabled: bool | None = None


class NewRepositorySpec(APIModel):
    """Request body for creating a repository from its clone URL."""

    type: str = GIT
    clone_url: str = Field(alias="CloneURL")


class Signature(APIModel):
    name: str = ""
    email: str = ""
    date: str = ""


class Commit(APIModel):
    id: str = Field(default="", alias="ID")
    author: Signature = Field(default_factory=Signature)
    committer: Signature | None = None
    message: str = ""
    parents: list[str] = Field(default_factory=list)


class CommitsComparison(APIModel):
    """Result of comparing a base revision with a head revision."""

    head: Commit | None = None
    base: Commit | None = None
    commits: list[Commit] = Field(default_factory=list)
    defs_added: list[dict[str, object]] = Field(default_factory=list)
    defs_changed: list[dict[str, object]] = Field(default_factory=list)
    defs_removed: list[dict[str, object]] = Field(default_factory=list)


class Branch(APIModel):
    name: str = ""
    head: str = ""
    commit: Commit | None = None


class Tag(APIModel):
    name: str = ""
    commit_id: str = Field(default="", alias="CommitID")


class TreeEntry(APIModel):
    """A file or directory in a repository tree (e.g., the formatted README)."""

    name: str = ""
    type: str = ""
    size: int = 0
    mod_time: str | None = None
    contents: str = ""
    entries: list[TreeEntry] = Field(default_factory=list)


def _image_html(image_url: str, name: str) -> str:
    return f'<img src="{html.escape(image_url)}" alt="{html.escape(name)}">'


class Badge(APIModel):
    name: str = ""
    description: str = ""
    image_url: str = Field(default="", alias="ImageURL")
    uncounted_image_url: str = Field(default="", alias="UncountedImageURL")
    markdown: str = ""

    def html(self) -> str:
        """Return an ``<img>`` tag for the badge with escaped attributes."""
        return _image_html(self.image_url, self.name)


class Counter(APIModel):
    name: str = ""
    description: str = ""
    image_url: str = Field(default="", alias="ImageURL")
    uncounted_image_url: str = Field(default="", alias="UncountedImageURL")
    markdown: str = ""

    def html(self) -> str:
        """Return an ``<img>`` tag for the counter with escaped attributes."""
        return _image_html(self.image_url, self.name)


class AugmentedRepoAuthor(APIModel):
    """A person who committed code to a repository, with their user record."""

    user: User | None = None
    uid: int | None = Field(default=None, alias="UID")
    email: str | None = None
    last_commit_date: str | None = None
    last_commit_id: str | None = Field(default=None, alias="LastCommitID")


class AugmentedRepoClient(APIModel):
    """A person who references defs defined in a repository."""

    user: User | None = None
    uid: int | None = Field(default=None, alias="UID")
    email: str | None = None
    ref_count: int = 0


class AugmentedRepoDependency(APIModel):
    repo: Repo | None = None
    to_repo: str = ""


class AugmentedRepoDependent(APIModel):
    repo: Repo | None = None
    from_repo: str = ""


class AugmentedRepoContribution(APIModel):
    """A repository a person has committed code to."""

    repo: Repo | None = None
    repo_uri: str = Field(default="", alias="RepoURI")
    author_stats: dict[str, object] = Field(default_factory=dict)


class RepoUsageByClient(APIModel):
    def_repo: str = ""
    ref_count: int = 0


class AugmentedRepoUsageByClient(APIModel):
    """A repository containing defs that a person references."""

    def_repo: Repo | None = None
    repo_usage_by_client: RepoUsageByClient | None = None


class RepoUsageOfAuthor(APIModel):
    repo: str = ""
    ref_count: int = 0


class AugmentedRepoUsageOfAuthor(APIModel):
    """A repository that references code a person authored."""

    repo: Repo | None = None
    repo_usage_of_author: RepoUsageOfAuthor | None = None
