"""Definition payloads: defs, usage examples, and people and repos related to defs."""

from __future__ import annotations

from pydantic import Field

from sourcegraph_client.models.base import APIModel
from sourcegraph_client.models.people import User
from sourcegraph_client.models.repos import Repo
from sourcegraph_client.specs import DefSpec

__all__ = [
    "AugmentedDefAuthor",
    "AugmentedDefClient",
    "AugmentedDefDependent",
    "Def",
    "DefDoc",
    "Example",
]


class DefDoc(APIModel):
    format: str = ""
    data: str = ""


class Def(APIModel):
    """A definition (function, type, variable, ...) within a source unit."""

    repo: str = ""
    commit_id: str = Field(default="", alias="CommitID")
    unit_type: str = ""
    unit: str = ""
    path: str = ""
    sid: int = Field(default=0, alias="SID")
    name: str = ""
    kind: str = ""
    file: str = ""
    def_start: int = 0
    def_end: int = 0
    exported: bool = False
    local: bool = False
    test: bool = False
    docs: list[DefDoc] = Field(default_factory=list)
    doc_html: str | None = Field(default=None, alias="DocHTML")
    stat: dict[str, int] = Field(default_factory=dict)

    def spec(self) -> DefSpec:
        return DefSpec(
            repo=self.repo,
            commit_id=self.commit_id,
            unit_type=self.unit_type,
            unit=self.unit,
            path=self.path,
        )


class Example(APIModel):
    """A reference to a def, with the highlighted source around it."""

    def_repo: str = ""
    def_unit_type: str = ""
    def_unit: str = ""
    def_path: str = ""
    repo: str = ""
    commit_id: str = Field(default="", alias="CommitID")
    unit_type: str = ""
    unit: str = ""
    file: str = ""
    start: int = 0
    end: int = 0
    src_html: str = Field(default="", alias="SrcHTML")
    start_line: int = 0
    end_line: int = 0


class AugmentedDefAuthor(APIModel):
    user: User | None = None
    uid: int | None = Field(default=None, alias="UID")
    email: str | None = None
    byte_count: int = Field(default=0, alias="Bytes")
    bytes_proportion: float = 0.0
    last_commit_date: str | None = None
    last_commit_id: str | None = Field(default=None, alias="LastCommitID")


class AugmentedDefClient(APIModel):
    user: User | None = None
    uid: int | None = Field(default=None, alias="UID")
    email: str | None = None
    ref_count: int = 0
    last_commit_date: str | None = None
    last_commit_id: str | None = Field(default=None, alias="LastCommitID")


class AugmentedDefDependent(APIModel):
    repo: Repo | None = None
    count: int = 0
