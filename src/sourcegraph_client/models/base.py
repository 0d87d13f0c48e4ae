"""Base class for API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal

__all__ = ["APIModel"]


class APIModel(BaseModel):
    """Payload exchanged with the API.

    Wire names are PascalCase (``CloneURL``, ``DefaultBranch``); Python
    attributes are snake_case. Fields added by newer servers are kept as
    extras rather than rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, object]:
        """Return the JSON-compatible payload with wire names and no null fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
