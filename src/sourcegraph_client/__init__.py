"""Typed client for the Sourcegraph API.

Examples
--------
>>> from sourcegraph_client import Client, RepositorySpec
>>> client = Client(token="secret")  # doctest: +SKIP
>>> client.repos.get(RepositorySpec(uri="github.com/gorilla/mux"))  # doctest: +SKIP
"""

from __future__ import annotations

from sourcegraph_client.client import Client
from sourcegraph_client.query import ListOptions, Options, encode_options
from sourcegraph_client.router import DEFAULT_ROUTER, RouteName, Router
from sourcegraph_client.specs import (
    DefSpec,
    GitHubUserSpec,
    OrgSpec,
    PersonSpec,
    RepoRevSpec,
    RepoSpec,
    RepositorySpec,
    RepositorySpec2,
    parse_org_spec,
    parse_person_spec,
    parse_repo_spec,
    unmarshal_repo_rev_spec,
    unmarshal_repo_spec,
)
from sourcegraph_client.transport import APIRequest, APIResponse, RequestsHttp, SupportsHttp
from sourcegraph_common.errors import (
    APIError,
    InvalidSpecifierError,
    MalformedSpecifierError,
    RepoForbiddenError,
    RepoNotExistError,
    RepoNotPersistedError,
    RepoRedirectError,
    RepoRenamedError,
    SourcegraphError,
    TransportError,
    UnsupportedSpecifierError,
    is_forbidden,
    is_not_present,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ROUTER",
    "APIError",
    "APIRequest",
    "APIResponse",
    "Client",
    "DefSpec",
    "GitHubUserSpec",
    "InvalidSpecifierError",
    "ListOptions",
    "MalformedSpecifierError",
    "Options",
    "OrgSpec",
    "PersonSpec",
    "RepoForbiddenError",
    "RepoNotExistError",
    "RepoNotPersistedError",
    "RepoRedirectError",
    "RepoRenamedError",
    "RepoRevSpec",
    "RepoSpec",
    "RepositorySpec",
    "RepositorySpec2",
    "RequestsHttp",
    "RouteName",
    "Router",
    "SourcegraphError",
    "SupportsHttp",
    "TransportError",
    "UnsupportedSpecifierError",
    "encode_options",
    "is_forbidden",
    "is_not_present",
    "parse_org_spec",
    "parse_person_spec",
    "parse_repo_spec",
    "unmarshal_repo_rev_spec",
    "unmarshal_repo_spec",
]
