"""Tests for request building, sending and response decoding."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from sourcegraph_client import Client
from sourcegraph_client.models import Repo
from sourcegraph_client.query import ListOptions
from sourcegraph_client.router import RouteName
from sourcegraph_client.transport import APIResponse, RequestsHttp
from sourcegraph_common.errors import (
    APIError,
    ErrorCode,
    RepoNotExistError,
    RepoRedirectError,
    ResponseDecodeError,
    RouteError,
    TransportError,
    is_not_present,
)
from sourcegraph_common.logging import CorrelationContext
from sourcegraph_common.settings import DEFAULT_USER_AGENT, load_settings
from tests.helpers.http import BASE_URL

if TYPE_CHECKING:
    from _pytest.logging import LogCaptureFixture

    from tests.helpers.http import StubHttp


class TestURL:
    def test_base_url_gets_trailing_slash(self) -> None:
        assert Client("https://sg.test/api").base_url == "https://sg.test/api/"

    def test_route_and_options(self, client: Client) -> None:
        url = client.url(
            RouteName.REPO_BRANCHES, {"RepoURI": "r.com/x"}, ListOptions(per_page=5)
        )
        assert url == f"{BASE_URL}repos/r.com/x/.branches?PerPage=5"

    def test_no_query_without_options(self, client: Client) -> None:
        assert client.url(RouteName.PEOPLE) == f"{BASE_URL}people"

    def test_route_errors_propagate(self, client: Client) -> None:
        with pytest.raises(RouteError):
            client.url(RouteName.REPOSITORY, {})


class TestNewRequest:
    def test_default_headers(self, client: Client) -> None:
        request = client.new_request("get", "people")
        assert request.method == "GET"
        assert request.url == f"{BASE_URL}people"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"] == DEFAULT_USER_AGENT
        assert request.headers["Authorization"] == "token t0k3n"
        assert request.body is None
        assert "Content-Type" not in request.headers

    def test_anonymous_client_sends_no_authorization(self, http: StubHttp) -> None:
        request = Client(BASE_URL, http=http).new_request("GET", "people")
        assert "Authorization" not in request.headers

    def test_absolute_url_is_kept(self, client: Client) -> None:
        request = client.new_request("GET", "https://other.test/x")
        assert request.url == "https://other.test/x"

    def test_model_body_uses_wire_names(self, client: Client) -> None:
        request = client.new_request("POST", "repos", Repo(uri="r.com/x"))
        assert request.headers["Content-Type"] == "application/json"
        assert request.body is not None
        assert b'"URI": "r.com/x"' in request.body
        assert b"ActualCloneURL" not in request.body

    def test_correlation_id_header(self, client: Client) -> None:
        with CorrelationContext("req-42"):
            request = client.new_request("GET", "people")
        assert request.headers["X-Correlation-ID"] == "req-42"

    def test_custom_headers_win(self, http: StubHttp) -> None:
        client = Client(BASE_URL, http=http, headers={"User-Agent": "custom"})
        assert client.new_request("GET", "people").headers["User-Agent"] == "custom"


class TestDo:
    def test_decodes_result(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "repos/r.com/x", {"URI": "r.com/x", "RID": 3})
        repo, response = client.request(
            "GET", RouteName.REPOSITORY, {"RepoURI": "r.com/x"}, result_type=Repo
        )
        assert repo == Repo(uri="r.com/x", rid=3)
        assert response.status_code == 200
        assert http.last.timeout == client.timeout

    def test_empty_body_decodes_to_none(self, client: Client, http: StubHttp) -> None:
        http.add("PUT", "repos/r.com/x/.refresh-profile")
        result, response = client.request(
            "PUT", RouteName.REPOSITORY_REFRESH_PROFILE, {"RepoURI": "r.com/x"}, result_type=Repo
        )
        assert result is None
        assert response.body == b""

    def test_null_body_decodes_to_none(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "repos/r.com/x", body=b"null")
        http.add("GET", "repos", body=b"null")
        repo, _ = client.request(
            "GET", RouteName.REPOSITORY, {"RepoURI": "r.com/x"}, result_type=Repo
        )
        repos, _ = client.request("GET", RouteName.REPOSITORIES, result_type=list[Repo])
        assert repo is None
        assert repos is None

    def test_error_status(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "people/alice", {"Error": "boom"}, status=500)
        with pytest.raises(APIError) as exc_info:
            client.request("GET", RouteName.PERSON, {"PersonSpec": "alice"})
        error = exc_info.value
        assert error.message == "boom"
        assert error.status == 500
        assert error.method == "GET"
        assert error.url == f"{BASE_URL}people/alice"
        assert isinstance(error.response, APIResponse)
        assert error.log_level == logging.ERROR

    def test_plain_text_error_body(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "people", body=b"service unavailable\n", status=503)
        with pytest.raises(APIError, match="service unavailable"):
            client.request("GET", RouteName.PEOPLE)

    def test_repository_sentinel(self, client: Client, http: StubHttp) -> None:
        http.add(
            "GET",
            "repos/r.com/x",
            {"Error": "repository does not exist on external host"},
            status=404,
        )
        with pytest.raises(RepoNotExistError) as exc_info:
            client.request("GET", RouteName.REPOSITORY, {"RepoURI": "r.com/x"})
        assert is_not_present(exc_info.value)
        assert exc_info.value.url == f"{BASE_URL}repos/r.com/x"

    def test_redirect_is_an_error(self, client: Client, http: StubHttp) -> None:
        http.add(
            "GET",
            "repos/r.com/old",
            {"Error": "the repository requested exists at another URI (r.com/new)"},
            status=301,
        )
        with pytest.raises(RepoRedirectError) as exc_info:
            client.request("GET", RouteName.REPOSITORY, {"RepoURI": "r.com/old"})
        assert exc_info.value.redirect_uri == "r.com/new"
        assert exc_info.value.status == 301

    def test_transport_failure(self, client: Client, http: StubHttp) -> None:
        http.error = ConnectionError("refused")
        with pytest.raises(TransportError) as exc_info:
            client.request("GET", RouteName.PEOPLE)
        assert exc_info.value.code is ErrorCode.TRANSPORT_ERROR
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_undecodable_body(self, client: Client, http: StubHttp) -> None:
        http.add("GET", "repos/r.com/x", body=b"<html>")
        with pytest.raises(ResponseDecodeError):
            client.request("GET", RouteName.REPOSITORY, {"RepoURI": "r.com/x"}, result_type=Repo)

    def test_logs_completion(
        self, client: Client, http: StubHttp, caplog: LogCaptureFixture
    ) -> None:
        http.add("GET", "people", [])
        caplog.set_level(logging.DEBUG, logger="sourcegraph_client.client")
        client.request("GET", RouteName.PEOPLE)
        completed = [r for r in caplog.records if r.getMessage() == "API request completed"]
        assert len(completed) == 1
        record = completed[0]
        assert record.__dict__["operation"] == "api_request"
        assert record.__dict__["status"] == "success"
        assert record.__dict__["status_code"] == 200
        assert record.__dict__["duration_ms"] >= 0

    def test_logs_client_errors_as_warnings(
        self, client: Client, http: StubHttp, caplog: LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="sourcegraph_client.client")
        with pytest.raises(APIError):
            client.request("GET", RouteName.PEOPLE)
        failed = [r for r in caplog.records if r.__dict__.get("status") == "error"]
        assert failed
        assert failed[0].levelno == logging.WARNING
        assert failed[0].__dict__["error_type"] == "APIError"


class TestFromSettings:
    def test_settings_are_applied(self, http: StubHttp, clean_env: None) -> None:
        settings = load_settings(base_url="https://sg.test/api", token="abc", timeout=5)
        client = Client.from_settings(settings, http=http)
        assert client.base_url == "https://sg.test/api/"
        assert client.token == "abc"
        assert client.timeout == 5.0

    def test_configure_logging_applies_log_level(
        self, http: StubHttp, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        levels: list[int | str] = []
        monkeypatch.setattr("sourcegraph_client.client.setup_logging", levels.append)
        settings = load_settings(log_level="debug")
        Client.from_settings(settings, http=http)
        assert levels == []
        Client.from_settings(settings, http=http, configure_logging=True)
        assert levels == ["DEBUG"]


class _RecordingSession:
    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    def request(self, method: str, url: str, **kwargs: object) -> object:
        self.calls.append({"method": method, "url": url, **kwargs})
        return APIResponse(status_code=204)


def test_requests_adapter_does_not_follow_redirects() -> None:
    session = _RecordingSession()
    http = RequestsHttp(session)  # type: ignore[arg-type]
    http.request("GET", "https://sg.test/api/people", headers={"A": "b"}, timeout=2.0)
    call = session.calls[0]
    assert call["allow_redirects"] is False
    assert call["headers"] == {"A": "b"}
    assert call["timeout"] == 2.0
