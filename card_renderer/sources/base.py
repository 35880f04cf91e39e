"""Abstract aspiration source and the record it returns.

WHY: The card endpoint receives an aspiration id, but where aspirations
live (the hosted Supabase table, a JSON export, test fixtures) is not the
renderer's concern. A small source interface keeps the lookup swappable.

HOW: AspirationSource is an ABC with one async ``fetch()`` method that
returns an Aspiration or raises ContentLookupError. Aspiration.from_dict
parses the row shape shared by every backend ({id, content, created_at}).

RULES:
- fetch() never returns None; a missing row is a ContentLookupError
- content is returned as stored; trimming/emptiness is checked by the pipeline
- created_at is optional and only used for decorations
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from card_layout.errors import ContentLookupError


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO 8601 timestamp, tolerating a trailing "Z"."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


@dataclass
class Aspiration:
    """One stored aspiration row."""

    id: str
    content: str | None
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Aspiration:
        if "id" not in data:
            raise ContentLookupError("Aspiration record has no id")
        content = data.get("content")
        return cls(
            id=str(data["id"]),
            content=None if content is None else str(content),
            created_at=parse_timestamp(data.get("created_at")),
        )


class AspirationSource(ABC):
    """Abstract base for aspiration lookups by id."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend name, e.g. 'Supabase'."""

    @abstractmethod
    async def fetch(self, aspiration_id: str, authorization: str | None = None) -> Aspiration:
        """Resolve an aspiration by id.

        Args:
            aspiration_id: Identifier sent by the client.
            authorization: The caller's Authorization header, for backends
                           that enforce row-level security.

        Raises:
            ContentLookupError: If the aspiration cannot be resolved.
        """
