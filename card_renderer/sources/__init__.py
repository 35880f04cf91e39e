"""Aspiration sources: where the card endpoint resolves ids to text.

WHY: The server needs exactly one source at a time, chosen by
configuration. build_source() is that single decision point.

HOW: Supabase when SUPABASE_URL is set, else a JSON export when
ASPIRATIONS_FILE is set, else an empty in-memory source (requests must then
send content directly).
"""

from __future__ import annotations

from card_renderer import config
from card_renderer.sources.base import Aspiration, AspirationSource
from card_renderer.sources.local import InMemorySource, JsonFileSource
from card_renderer.sources.supabase import SupabaseSource

__all__ = [
    "Aspiration",
    "AspirationSource",
    "InMemorySource",
    "JsonFileSource",
    "SupabaseSource",
    "build_source",
]


def build_source() -> AspirationSource:
    """Create the aspiration source selected by the environment."""
    if config.SUPABASE_URL:
        return SupabaseSource()
    if config.ASPIRATIONS_FILE:
        return JsonFileSource(config.ASPIRATIONS_FILE)
    return InMemorySource()
