"""Configuration constants and .env loading for the card service.

WHY: Centralizes all configurable values so they are easy to find,
update, and override: default preset and style, where aspirations are
read from, and which origins may call the API.

HOW: python-dotenv loads the .env file on import. Constants are read from
the environment with defaults. load_supabase_settings() provides a clear
error when the hosted store is only partly configured.

RULES:
- Supabase credentials come from .env via python-dotenv, never hardcoded
- All defaults can be overridden via environment variables
- CORS_ALLOW_ORIGINS is a comma-separated list ("*" allows any origin)
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the service is started from)
load_dotenv()

# ---------------------------------------------------------------------------
# Rendering defaults
# ---------------------------------------------------------------------------

DEFAULT_CARD_PRESET = os.getenv("CARD_PRESET", "square")
DEFAULT_CARD_STYLE = os.getenv("CARD_STYLE", "ngl")

# ---------------------------------------------------------------------------
# Aspiration sources
# ---------------------------------------------------------------------------

SUPABASE_URL = os.getenv("SUPABASE_URL", "").strip()
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "").strip()
SUPABASE_TABLE = os.getenv("SUPABASE_TABLE", "aspirations")
ASPIRATIONS_FILE = os.getenv("ASPIRATIONS_FILE", "").strip()

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

CORS_ALLOW_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
CORS_ALLOW_HEADERS: list[str] = [
    "authorization",
    "x-client-info",
    "apikey",
    "content-type",
]
API_HOST = os.getenv("CARD_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("CARD_API_PORT", "8000"))


def load_supabase_settings() -> tuple[str, str]:
    """Return (url, anon_key) for the hosted aspiration store.

    RULES:
    - Raises ValueError if either value is missing or empty
    - Never returns a default/placeholder value
    """
    url = os.getenv("SUPABASE_URL", "").strip()
    key = os.getenv("SUPABASE_ANON_KEY", "").strip()
    if not url or not key:
        raise ValueError(
            "Supabase not configured. "
            "Add SUPABASE_URL and SUPABASE_ANON_KEY to the .env file."
        )
    return url, key
