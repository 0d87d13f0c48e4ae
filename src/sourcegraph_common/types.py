"""Type aliases shared by the sourcegraph packages.

This module has no dependencies so it can be imported from anywhere without
creating import cycles.
"""

from __future__ import annotations

from typing import TypeAlias

__all__ = [
    "JsonPrimitive",
    "JsonValue",
    "RouteVars",
]


# Primitive JSON types (leaf values)
JsonPrimitive: TypeAlias = "str | int | float | bool | None"

# JSON value can be primitive or nested (dict/list)
JsonValue: TypeAlias = "JsonPrimitive | dict[str, JsonValue] | list[JsonValue]"

# Named string parameters consumed by the router
RouteVars: TypeAlias = "dict[str, str]"
