"""Typed exception hierarchy with Problem Details support.

All client exceptions inherit from :class:`SourcegraphError`, which carries
structured fields (code, http_status, log_level, context) and converts to an
RFC 9457 Problem Details payload.

Examples
--------
>>> from sourcegraph_common.errors import ErrorCode, MalformedSpecifierError
>>> try:
...     raise MalformedSpecifierError("$abc", "invalid numeric UID")
... except MalformedSpecifierError as e:
...     assert e.code == ErrorCode.MALFORMED_SPECIFIER
...     assert e.value == "$abc"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final, Self, cast

from sourcegraph_common.errors.codes import ErrorCode, get_type_uri
from sourcegraph_common.problem_details import build_problem_details

if TYPE_CHECKING:
    from sourcegraph_common.problem_details import ProblemDetails
    from sourcegraph_common.types import JsonValue

__all__ = [
    "APIError",
    "InvalidSpecifierError",
    "MalformedSpecifierError",
    "NoSchemeError",
    "NonStandardURIError",
    "RepoForbiddenError",
    "RepoNotExistError",
    "RepoNotPersistedError",
    "RepoRedirectError",
    "RepoRenamedError",
    "ResponseDecodeError",
    "RouteError",
    "SettingsError",
    "SourcegraphError",
    "SourcegraphErrorConfig",
    "SpecifierError",
    "TransportError",
    "UnsupportedSpecifierError",
    "is_forbidden",
    "is_not_present",
    "repo_error_from_message",
]


@dataclass(slots=True)
class SourcegraphErrorConfig:
    """Configuration options used when instantiating :class:`SourcegraphError`."""

    code: ErrorCode = ErrorCode.RUNTIME_ERROR
    http_status: int = 500
    log_level: int = logging.ERROR
    cause: Exception | None = None
    context: Mapping[str, object] | None = None


class SourcegraphError(Exception):
    """Base exception for all sourcegraph client errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    config : SourcegraphErrorConfig | None, optional
        Structured configuration (code, http_status, log_level, cause,
        context). When omitted, the keyword arguments below are used.
        Defaults to None.
    code : ErrorCode, optional
        Error code enum value. Defaults to ``RUNTIME_ERROR``.
    http_status : int, optional
        HTTP status used in Problem Details payloads. Defaults to 500.
    log_level : int, optional
        Logging level callers should use when reporting the error.
        Defaults to ``logging.ERROR``.
    cause : Exception | None, optional
        Underlying exception, chained as ``__cause__``. Defaults to None.
    context : Mapping[str, object] | None, optional
        Additional structured context. Defaults to None.

    Raises
    ------
    TypeError
        If ``config`` is combined with individual keyword fields.

    Examples
    --------
    >>> error = SourcegraphError("Operation failed", http_status=502)
    >>> error.to_problem_details(instance="/repos")["status"]
    502
    """

    def __init__(
        self,
        message: str,
        *,
        config: SourcegraphErrorConfig | None = None,
        code: ErrorCode | None = None,
        http_status: int | None = None,
        log_level: int | None = None,
        cause: Exception | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        if config is not None and any(
            field is not None for field in (code, http_status, log_level, cause, context)
        ):
            msg = "SourcegraphError received both 'config' and individual keyword arguments"
            raise TypeError(msg)
        resolved = config or SourcegraphErrorConfig(
            code=code or ErrorCode.RUNTIME_ERROR,
            http_status=500 if http_status is None else http_status,
            log_level=logging.ERROR if log_level is None else log_level,
            cause=cause,
            context=context,
        )
        super().__init__(message)
        self.message = message
        self.code = resolved.code
        self.http_status = resolved.http_status
        self.log_level = resolved.log_level
        self.context: dict[str, object] = dict(resolved.context) if resolved.context else {}
        if resolved.cause is not None:
            self.__cause__ = resolved.cause

    def to_problem_details(
        self,
        instance: str | None = None,
        title: str | None = None,
    ) -> ProblemDetails:
        """Convert to an RFC 9457 Problem Details payload.

        Parameters
        ----------
        instance : str | None, optional
            URI identifying the specific occurrence. Defaults to
            ``urn:sourcegraph:error``.
        title : str | None, optional
            Short summary. Defaults to the exception class name.

        Returns
        -------
        ProblemDetails
            Validated payload with type, title, status, detail, instance,
            code and (when present) the context as ``extensions``.
        """
        return build_problem_details(
            problem_type=get_type_uri(self.code),
            title=title or self.__class__.__name__,
            status=self.http_status,
            detail=self.message,
            instance=instance or "urn:sourcegraph:error",
            code=self.code.value,
            extensions=cast("Mapping[str, JsonValue] | None", self.context or None),
        )

    def __str__(self) -> str:
        """Return ``ClassName[code]: message`` with the cause type when chained.

        Returns
        -------
        str
            Formatted error string.
        """
        base = f"{self.__class__.__name__}[{self.code.value}]: {self.message}"
        if self.__cause__:
            base += f" (caused by: {type(self.__cause__).__name__})"
        return base


class SpecifierError(SourcegraphError):
    """Base class for errors encoding or decoding resource specifiers."""


class InvalidSpecifierError(SpecifierError):
    """A specifier has none of its identifying fields set.

    This is a caller bug: encoding such a specifier would address an empty or
    wrong resource, so it is never defaulted.

    Parameters
    ----------
    kind : str
        Specifier type name (e.g., ``"PersonSpec"``).
    """

    def __init__(self, kind: str) -> None:
        super().__init__(
            f"empty {kind}",
            code=ErrorCode.INVALID_SPECIFIER,
            http_status=400,
            context={"specifier": kind},
        )
        self.kind = kind


class UnsupportedSpecifierError(SpecifierError):
    """A specifier uses a field combination the path scheme cannot encode.

    Parameters
    ----------
    kind : str
        Specifier type name.
    reason : str
        What cannot be encoded.
    """

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__(
            f"{kind}: {reason}",
            code=ErrorCode.UNSUPPORTED_SPECIFIER,
            http_status=400,
            context={"specifier": kind},
        )
        self.kind = kind
        self.reason = reason


class MalformedSpecifierError(SpecifierError):
    """A path component does not decode to any specifier shape.

    Parameters
    ----------
    value : str
        The offending path component.
    reason : str
        Why decoding failed.
    cause : Exception | None, optional
        Underlying parse error. Defaults to None.
    """

    def __init__(self, value: str, reason: str, cause: Exception | None = None) -> None:
        super().__init__(
            f"{reason}: {value!r}",
            code=ErrorCode.MALFORMED_SPECIFIER,
            http_status=400,
            log_level=logging.WARNING,
            cause=cause,
            context={"value": value},
        )
        self.value = value


class RouteError(SourcegraphError):
    """A named route cannot be expanded into a URL.

    Parameters
    ----------
    route : str
        Route name being resolved.
    reason : str
        Why expansion failed (unknown route, missing variable).
    """

    def __init__(self, route: str, reason: str) -> None:
        super().__init__(
            f"route {route!r}: {reason}",
            code=ErrorCode.ROUTE_ERROR,
            http_status=500,
            context={"route": route},
        )
        self.route = route


class TransportError(SourcegraphError):
    """The HTTP request could not be delivered or no response was received.

    Parameters
    ----------
    method : str
        HTTP method of the failed request.
    url : str
        Request URL.
    cause : Exception
        Exception raised by the transport.
    """

    def __init__(self, method: str, url: str, cause: Exception) -> None:
        super().__init__(
            f"{method} {url}: {cause}",
            code=ErrorCode.TRANSPORT_ERROR,
            http_status=503,
            cause=cause,
            context={"method": method, "url": url},
        )
        self.method = method
        self.url = url


class APIError(SourcegraphError):
    """The API responded with an error status.

    Parameters
    ----------
    message : str
        Error message, usually taken from the response body.
    status : int
        HTTP status code of the response.
    method : str, optional
        HTTP method of the request. Defaults to ``""``.
    url : str, optional
        Request URL. Defaults to ``""``.
    body : str, optional
        Raw response body. Defaults to ``""``.
    response : object | None, optional
        The :class:`~sourcegraph_client.transport.APIResponse` that carried
        the error. Defaults to None.
    code : ErrorCode, optional
        Error code. Defaults to ``API_ERROR``.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int,
        method: str = "",
        url: str = "",
        body: str = "",
        response: object | None = None,
        code: ErrorCode = ErrorCode.API_ERROR,
    ) -> None:
        super().__init__(
            message,
            code=code,
            http_status=status,
            log_level=logging.WARNING if status < 500 else logging.ERROR,
            context={"method": method, "url": url} if url else None,
        )
        self.status = status
        self.method = method
        self.url = url
        self.body = body
        self.response = response


class ResponseDecodeError(SourcegraphError):
    """A successful response body could not be decoded into the expected type.

    Parameters
    ----------
    url : str
        Request URL.
    cause : Exception
        JSON or validation error raised while decoding.
    """

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(
            f"cannot decode response from {url}: {cause}",
            code=ErrorCode.RESPONSE_DECODE_ERROR,
            http_status=502,
            cause=cause,
            context={"url": url},
        )
        self.url = url


class SettingsError(SourcegraphError):
    """Runtime settings failed validation.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    errors : list[dict[str, object]] | None, optional
        Validation error records with field/issue details. Defaults to None.
    cause : Exception | None, optional
        Underlying validation error. Defaults to None.
    context : Mapping[str, object] | None, optional
        Additional context. Defaults to None.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, object]] | None = None,
        cause: Exception | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        combined_context: dict[str, object] = dict(context or {})
        if errors:
            combined_context.setdefault("validation_errors", [dict(error) for error in errors])
        super().__init__(
            message,
            code=ErrorCode.CONFIGURATION_ERROR,
            http_status=500,
            log_level=logging.CRITICAL,
            cause=cause,
            context=combined_context,
        )


# Repository conditions reported by the API. They subclass APIError so callers
# that only care about "the server said no" can catch one type.


class RepoRenamedError(APIError):
    """A repository was renamed from ``old_uri`` to ``new_uri``."""

    def __init__(self, old_uri: str, new_uri: str, *, status: int = 301) -> None:
        super().__init__(
            f"repository URI {old_uri!r} was renamed to {new_uri!r}; use the new name",
            status=status,
            code=ErrorCode.REPO_RENAMED,
        )
        self.old_uri = old_uri
        self.new_uri = new_uri


_REDIRECT_MESSAGE: Final[str] = "the repository requested exists at another URI ({uri})"
_REDIRECT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"the repository requested exists at another URI \(([^()]*)\)"
)


class RepoRedirectError(APIError):
    """The requested repository exists at another URI."""

    def __init__(self, redirect_uri: str, *, status: int = 301) -> None:
        super().__init__(
            _REDIRECT_MESSAGE.format(uri=redirect_uri),
            status=status,
            code=ErrorCode.REPO_REDIRECT,
        )
        self.redirect_uri = redirect_uri

    @classmethod
    def from_message(cls, message: str, *, status: int = 301) -> Self | None:
        """Recover a redirect error from its rendered message.

        Parameters
        ----------
        message : str
            Error text, possibly embedded in a larger message.
        status : int, optional
            Status to attach to the recovered error. Defaults to 301.

        Returns
        -------
        Self | None
            The redirect error, or None when ``message`` is not a redirect.
        """
        match = _REDIRECT_PATTERN.search(message)
        if match is None:
            return None
        return cls(match.group(1), status=status)


class RepoNotExistError(APIError):
    """No such repository exists on the external host."""

    MESSAGE: ClassVar[str] = "repository does not exist on external host"

    def __init__(self, *, status: int = 404) -> None:
        super().__init__(self.MESSAGE, status=status, code=ErrorCode.REPO_NOT_EXIST)


class RepoNotPersistedError(APIError):
    """The repository is not stored locally; it must be added explicitly."""

    MESSAGE: ClassVar[str] = (
        "repository is not persisted locally, but it might exist remotely "
        "(explicitly add it to check)"
    )

    def __init__(self, *, status: int = 404) -> None:
        super().__init__(self.MESSAGE, status=status, code=ErrorCode.REPO_NOT_PERSISTED)


class RepoForbiddenError(APIError):
    """The server refuses to serve the repository (e.g., a takedown)."""

    MESSAGE: ClassVar[str] = "repository is unavailable"

    def __init__(self, *, status: int = 403) -> None:
        super().__init__(self.MESSAGE, status=status, code=ErrorCode.REPO_FORBIDDEN)


class NonStandardURIError(RepoNotPersistedError):
    """The clone URL cannot be inferred because the host is not standard."""

    MESSAGE: ClassVar[str] = (
        "cannot infer repository clone URL because repository host is not standard; "
        "try adding it explicitly"
    )

    def __init__(self, *, status: int = 404) -> None:
        APIError.__init__(self, self.MESSAGE, status=status, code=ErrorCode.REPO_NON_STANDARD_URI)


class NoSchemeError(APIError):
    """A clone URL has no scheme component (e.g., ``https://``)."""

    MESSAGE: ClassVar[str] = "clone URL has no scheme"

    def __init__(self, *, status: int = 400) -> None:
        super().__init__(self.MESSAGE, status=status, code=ErrorCode.REPO_NO_SCHEME)


_SENTINEL_ERRORS: Final[tuple[type[APIError], ...]] = (
    RepoNotExistError,
    RepoNotPersistedError,
    RepoForbiddenError,
    NonStandardURIError,
    NoSchemeError,
)


def repo_error_from_message(message: str, status: int) -> APIError | None:
    """Map an API error message to the matching repository error.

    Parameters
    ----------
    message : str
        Error text returned by the API.
    status : int
        HTTP status of the response.

    Returns
    -------
    APIError | None
        A repository error carrying ``status``, or None when the message is
        not a known repository condition.
    """
    redirect = RepoRedirectError.from_message(message, status=status)
    if redirect is not None:
        return redirect
    text = message.strip()
    for error_type in _SENTINEL_ERRORS:
        if text == getattr(error_type, "MESSAGE", None):
            return error_type(status=status)  # type: ignore[call-arg]
    return None


def is_not_present(err: BaseException) -> bool:
    """Return True if ``err`` says the repository does not exist or is not persisted.

    Returns
    -------
    bool
        Whether ``err`` is a :class:`RepoNotExistError` or
        :class:`RepoNotPersistedError` (including :class:`NonStandardURIError`).
    """
    return isinstance(err, (RepoNotExistError, RepoNotPersistedError))


def is_forbidden(err: BaseException) -> bool:
    """Return True if ``err`` is a :class:`RepoForbiddenError`."""
    return isinstance(err, RepoForbiddenError)
