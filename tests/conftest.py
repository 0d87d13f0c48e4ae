"""Shared pytest fixtures: a stub transport and a client wired to it."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from sourcegraph_client import Client
from sourcegraph_common.logging import set_correlation_id
from tests.helpers.http import BASE_URL, StubHttp


@pytest.fixture
def http() -> StubHttp:
    return StubHttp()


@pytest.fixture
def client(http: StubHttp) -> Client:
    return Client(BASE_URL, token="t0k3n", http=http)


@pytest.fixture(autouse=True)
def _clear_correlation_id() -> Iterator[None]:
    set_correlation_id(None)
    yield
    set_correlation_id(None)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SOURCEGRAPH_BASE_URL",
        "SOURCEGRAPH_TOKEN",
        "SOURCEGRAPH_TIMEOUT",
        "SOURCEGRAPH_USER_AGENT",
        "SOURCEGRAPH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
