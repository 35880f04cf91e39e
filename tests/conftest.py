"""Shared test fixtures for the card layout and card service test suites.

WHY: Several test modules need the same sample aspirations: a short one,
one long enough to hit the smallest font tier, and one long enough to be
truncated. Centralizing them here keeps the expected numbers in one place.

HOW: Plain module constants for the texts, pytest fixtures for an
in-memory aspiration source with deterministic ids and timestamps.

RULES:
- LONG_TEXT is 599 sanitized chars: font 26, budget 70, 10 lines.
- OVERFLOW_TEXT wraps to 25 lines on the square preset (18 kept).
- Aspiration ids are hardcoded for test reproducibility.
"""

from datetime import datetime, timezone

import pytest

from card_renderer.sources import Aspiration, InMemorySource

SHORT_TEXT = "Hi"

# 75 x "harapan" -> 7 * 75 + 74 = 599 chars, 8 words (63 chars) per line
LONG_TEXT = " ".join(["harapan"] * 75)

# 200 x "harapan" -> 25 lines of 8 words at budget 70
OVERFLOW_TEXT = " ".join(["harapan"] * 200)

HOSTILE_TEXT = "<script>alert(\"pwned\")</script> Tom & Jerry's <b>bold</b> &amp; more"

CREATED_AT = datetime(2024, 5, 17, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def sample_aspirations():
    """Stored aspirations keyed by deterministic ids."""
    return [
        Aspiration(
            id="asp-1",
            content="Semoga perpustakaan buka sampai sore.",
            created_at=CREATED_AT,
        ),
        Aspiration(id="asp-empty", content="   ", created_at=None),
        Aspiration(id="asp-null", content=None, created_at=None),
        Aspiration(id="asp-long", content=OVERFLOW_TEXT, created_at=CREATED_AT),
    ]


@pytest.fixture
def memory_source(sample_aspirations):
    """In-memory source pre-loaded with sample_aspirations."""
    return InMemorySource(sample_aspirations)
