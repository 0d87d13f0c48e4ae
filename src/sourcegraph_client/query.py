"""Query-string encoding for request options.

Options are pydantic models whose field aliases are the wire names
(``PerPage``, ``NameOrLogin``). :func:`encode_options` flattens a model into
ordered query pairs following the API's conventions:

- zero values (``None``, ``""``, ``0``, ``False``, empty lists) are omitted;
- booleans are sent as ``true``;
- lists repeat the key, or are comma-joined when the field is declared with
  :func:`comma_field`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

__all__ = ["ListOptions", "Options", "comma_field", "encode_options"]

_COMMA: Final[str] = "comma"


def comma_field(*, alias: str | None = None) -> Any:
    """Declare a list option sent as a single comma-separated value.

    Parameters
    ----------
    alias : str | None, optional
        Wire name when it differs from the PascalCase field name.
        Defaults to None.

    Returns
    -------
    Any
        A pydantic ``FieldInfo`` defaulting to an empty list.
    """
    return Field(default_factory=list, alias=alias, json_schema_extra={_COMMA: True})


class Options(BaseModel):
    """Base class for request options encoded into the query string."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="forbid",
    )


class ListOptions(Options):
    """Pagination parameters shared by list endpoints.

    Values are passed through; the client does not follow pages.
    """

    per_page: int | None = Field(default=None, ge=0)
    page: int | None = Field(default=None, ge=0)


def _is_comma(options: Options, name: str) -> bool:
    extra = type(options).model_fields[name].json_schema_extra
    return isinstance(extra, dict) and bool(extra.get(_COMMA))


def _format_scalar(value: object) -> str:
    if value is True:
        return "true"
    return str(value)


def encode_options(options: Options | None) -> list[tuple[str, str]]:
    """Encode ``options`` as query-string pairs.

    Parameters
    ----------
    options : Options | None
        Options model, or None for no query string.

    Returns
    -------
    list[tuple[str, str]]
        ``(wire name, value)`` pairs in field declaration order.

    Examples
    --------
    >>> encode_options(ListOptions(per_page=10))
    [('PerPage', '10')]
    """
    if options is None:
        return []
    pairs: list[tuple[str, str]] = []
    for name, field in type(options).model_fields.items():
        value = getattr(options, name)
        if not value:
            continue
        key = field.alias or name
        if isinstance(value, Sequence) and not isinstance(value, str):
            items = [_format_scalar(item) for item in value]
            if _is_comma(options, name):
                pairs.append((key, ",".join(items)))
            else:
                pairs.extend((key, item) for item in items)
        else:
            pairs.append((key, _format_scalar(value)))
    return pairs
