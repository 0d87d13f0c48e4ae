"""RFC 9457 Problem Details payloads for client errors.

Errors raised by the client convert themselves to Problem Details through
:func:`build_problem_details`, which validates every payload against the
packaged JSON Schema before handing it back.

Examples
--------
>>> problem = build_problem_details(
...     problem_type="https://sourcegraph.com/problems/route-error",
...     title="RouteError",
...     status=500,
...     detail="unknown route 'nope'",
...     instance="urn:sourcegraph:route",
... )
>>> problem["status"]
500
"""

from __future__ import annotations

import json
from functools import cache
from importlib import resources
from typing import TYPE_CHECKING, TypedDict, cast

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sourcegraph_common.types import JsonValue

__all__ = [
    "ProblemDetails",
    "ProblemDetailsValidationError",
    "build_problem_details",
    "render_problem",
    "validate_problem_details",
]


_SCHEMA_RESOURCE = ("schema", "problem_details.json")


class ProblemDetails(TypedDict, total=False):
    """TypedDict for RFC 9457 Problem Details payloads.

    This is a partial TypedDict (total=False); required keys are enforced by
    schema validation rather than by the type checker.
    """

    type: str
    title: str
    status: int
    detail: str
    instance: str
    code: str
    extensions: dict[str, JsonValue]


class ProblemDetailsValidationError(Exception):
    """Raised when a Problem Details payload fails schema validation.

    Parameters
    ----------
    message : str
        Human-readable error message describing the validation failure.
    validation_errors : list[str] | None, optional
        Specific validation messages from the schema validator. Defaults to None.
    """

    def __init__(self, message: str, validation_errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.validation_errors = validation_errors or []


@cache
def _load_validator() -> Draft202012Validator:
    """Load the packaged schema and return a cached validator.

    Returns
    -------
    Draft202012Validator
        Validator bound to the Problem Details schema.

    Raises
    ------
    ProblemDetailsValidationError
        If the schema resource is missing, is not JSON, or is not a valid
        JSON Schema 2020-12 document.
    """
    resource = resources.files("sourcegraph_common").joinpath(*_SCHEMA_RESOURCE)
    try:
        schema: dict[str, object] = json.loads(resource.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Failed to load Problem Details schema: {exc}"
        raise ProblemDetailsValidationError(msg) from exc
    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as exc:
        msg = f"Invalid Problem Details schema: {exc}"
        raise ProblemDetailsValidationError(msg) from exc
    return Draft202012Validator(schema)


def validate_problem_details(payload: Mapping[str, JsonValue]) -> None:
    """Validate a Problem Details payload against the packaged schema.

    Parameters
    ----------
    payload : Mapping[str, JsonValue]
        Payload to validate. Must contain ``type``, ``title``, ``status``,
        ``detail`` and ``instance``.

    Raises
    ------
    ProblemDetailsValidationError
        If the payload does not conform. ``validation_errors`` lists the
        violated constraints and the JSON path where they occurred.
    """
    validator = _load_validator()
    try:
        validator.validate(payload)
    except ValidationError as exc:
        errors = [exc.message]
        if exc.absolute_path:
            errors.append(f"at path: {'.'.join(str(p) for p in exc.absolute_path)}")
        msg = f"Problem Details validation failed: {'; '.join(errors)}"
        raise ProblemDetailsValidationError(msg, validation_errors=errors) from exc


def build_problem_details(
    *,
    problem_type: str,
    title: str,
    status: int,
    detail: str,
    instance: str,
    code: str | None = None,
    extensions: Mapping[str, JsonValue] | None = None,
) -> ProblemDetails:
    """Build and validate an RFC 9457 Problem Details payload.

    Parameters
    ----------
    problem_type : str
        Type URI identifying the problem class.
    title : str
        Short human-readable summary.
    status : int
        HTTP status code associated with the problem.
    detail : str
        Human-readable explanation of this occurrence.
    instance : str
        URI identifying this occurrence.
    code : str | None, optional
        Stable kebab-case error code. Defaults to None.
    extensions : Mapping[str, JsonValue] | None, optional
        Additional structured context. Omitted when empty. Defaults to None.

    Returns
    -------
    ProblemDetails
        Validated payload.
    """
    payload: dict[str, object] = {
        "type": problem_type,
        "title": title,
        "status": status,
        "detail": detail,
        "instance": instance,
    }
    if code is not None:
        payload["code"] = code
    if extensions:
        payload["extensions"] = dict(extensions)

    validate_problem_details(cast("Mapping[str, JsonValue]", payload))
    return cast("ProblemDetails", payload)


def render_problem(problem: ProblemDetails | dict[str, object]) -> str:
    """Render Problem Details as a minified JSON string.

    Parameters
    ----------
    problem : ProblemDetails | dict[str, object]
        Payload to serialize.

    Returns
    -------
    str
        JSON text without a trailing newline; non-ASCII characters are kept.
    """
    return json.dumps(problem, default=str, ensure_ascii=False)
