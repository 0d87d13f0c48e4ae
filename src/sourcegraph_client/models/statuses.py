"""Commit status payloads."""

from __future__ import annotations

from pydantic import Field

from sourcegraph_client.models.base import APIModel

__all__ = ["CombinedStatus", "RepoStatus"]


class RepoStatus(APIModel):
    """A status reported for a commit by an external system (a CI build, say).

    ``state`` is one of ``pending``, ``success``, ``error`` or ``failure``.
    """

    state: str = ""
    target_url: str = Field(default="", alias="TargetURL")
    description: str = ""
    context: str = ""
    created_at: str | None = None
    updated_at: str | None = None


class CombinedStatus(APIModel):
    """The latest status of each context for a commit, with an overall state."""

    state: str = ""
    commit_id: str = Field(default="", alias="CommitID")
    statuses: list[RepoStatus] = Field(default_factory=list)
