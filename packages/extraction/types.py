"""Shared type definitions for the extraction package."""

from __future__ import annotations

from typing import NamedTuple


class OptionRow(NamedTuple):
    """One option recovered from an endpoint explain document.

    Attributes:
        name: Option name.
        value: Option value, or None when the line carries no value token.
            An empty string is a real (empty) value.
        description: Option description, or None when the line carries no
            description token.
    """

    name: str
    value: str | None = None
    description: str | None = None

    def as_dict(self) -> dict[str, str | None]:
        """Return the row keyed by field name."""
        return {"name": self.name, "value": self.value, "description": self.description}
