"""Tests for the error hierarchy and repository error mapping."""

from __future__ import annotations

import logging

import pytest

from sourcegraph_common.errors import (
    APIError,
    ErrorCode,
    NonStandardURIError,
    NoSchemeError,
    RepoForbiddenError,
    RepoNotExistError,
    RepoNotPersistedError,
    RepoRedirectError,
    RepoRenamedError,
    RouteError,
    SourcegraphError,
    SourcegraphErrorConfig,
    get_type_uri,
    is_forbidden,
    is_not_present,
    repo_error_from_message,
)


class TestSourcegraphError:
    def test_defaults(self) -> None:
        error = SourcegraphError("boom")
        assert error.code is ErrorCode.RUNTIME_ERROR
        assert error.http_status == 500
        assert error.log_level == logging.ERROR
        assert error.context == {}

    def test_str(self) -> None:
        assert str(RouteError("Org", "unknown route")) == (
            "RouteError[route-error]: route 'Org': unknown route"
        )

    def test_str_names_the_cause(self) -> None:
        error = SourcegraphError("boom", cause=ValueError("bad"))
        assert str(error).endswith("(caused by: ValueError)")
        assert isinstance(error.__cause__, ValueError)

    def test_config_and_keywords_conflict(self) -> None:
        with pytest.raises(TypeError):
            SourcegraphError("boom", config=SourcegraphErrorConfig(), http_status=400)

    def test_problem_details(self) -> None:
        problem = RouteError("Org", "unknown route").to_problem_details(instance="/orgs")
        assert problem["type"] == get_type_uri(ErrorCode.ROUTE_ERROR)
        assert problem["title"] == "RouteError"
        assert problem["status"] == 500
        assert problem["code"] == "route-error"
        assert problem["extensions"] == {"route": "Org"}


class TestAPIError:
    def test_fields(self) -> None:
        error = APIError("nope", status=404, method="GET", url="https://x/y", body="{}")
        assert (error.status, error.method, error.url, error.body) == (
            404,
            "GET",
            "https://x/y",
            "{}",
        )
        assert error.log_level == logging.WARNING
        assert error.context == {"method": "GET", "url": "https://x/y"}

    def test_server_errors_log_as_errors(self) -> None:
        assert APIError("down", status=502).log_level == logging.ERROR


class TestRepositoryErrors:
    @pytest.mark.parametrize(
        ("error_type", "status"),
        [
            (RepoNotExistError, 404),
            (RepoNotPersistedError, 404),
            (RepoForbiddenError, 403),
            (NonStandardURIError, 404),
            (NoSchemeError, 400),
        ],
    )
    def test_message_maps_back(self, error_type: type[APIError], status: int) -> None:
        error = repo_error_from_message(error_type.MESSAGE, status)  # type: ignore[attr-defined]
        assert type(error) is error_type
        assert error is not None
        assert error.status == status

    def test_redirect_round_trip(self) -> None:
        original = RepoRedirectError("github.com/new/x")
        recovered = repo_error_from_message(f"wrapped: {original.message}", 301)
        assert isinstance(recovered, RepoRedirectError)
        assert recovered.redirect_uri == "github.com/new/x"

    def test_redirect_from_unrelated_message(self) -> None:
        assert RepoRedirectError.from_message("something else") is None

    def test_unknown_message(self) -> None:
        assert repo_error_from_message("boom", 500) is None

    def test_renamed(self) -> None:
        error = RepoRenamedError("a.com/old", "a.com/new")
        assert error.code is ErrorCode.REPO_RENAMED
        assert "a.com/new" in error.message

    def test_predicates(self) -> None:
        assert is_not_present(RepoNotExistError())
        assert is_not_present(NonStandardURIError())
        assert not is_not_present(RepoForbiddenError())
        assert is_forbidden(RepoForbiddenError())
        assert not is_forbidden(ValueError("x"))

    def test_repository_errors_are_api_errors(self) -> None:
        assert isinstance(NoSchemeError(), APIError)
