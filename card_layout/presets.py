"""Configuration presets for card rendering.

WHY: Different share targets need different canvases. Centralizing the
canvas geometry and font tiers as importable constants lets callers pick a
format by name without knowing the numbers, and keeps every stage of the
pipeline free of hard-coded literals.

HOW: Each preset is a frozen CardConfig. The PRESETS dict maps preset names
to their configs. "instagram" is an alias for the square 1080 format.

RULES:
- Presets are frozen dataclasses; build a new CardConfig to customize.
- Font tiers step down only once the sanitized length strictly exceeds
  the threshold (length == threshold keeps the larger font).
- The "instagram" key is an alias for "square".
"""

from typing import Dict

from .models import CardConfig, FontTier

# Instagram feed post: 1080x1080, 80 unit margin on each side
PRESET_SQUARE: CardConfig = CardConfig(
    canvas_size=1080,
    content_width=920,
    font_tiers=(
        FontTier(threshold=120, font_size=38),
        FontTier(threshold=220, font_size=34),
        FontTier(threshold=360, font_size=30),
        FontTier(threshold=500, font_size=26),
    ),
    default_font_size=42,
    char_width_ratio=0.5,
    min_wrap_chars=20,
    max_lines=18,
    line_height_ratio=1.4,
)

# Smaller square for link previews and chat thumbnails (tiers scaled by 2/3)
PRESET_COMPACT: CardConfig = CardConfig(
    canvas_size=720,
    content_width=600,
    font_tiers=(
        FontTier(threshold=120, font_size=25),
        FontTier(threshold=220, font_size=23),
        FontTier(threshold=360, font_size=20),
        FontTier(threshold=500, font_size=17),
    ),
    default_font_size=28,
    char_width_ratio=0.5,
    min_wrap_chars=20,
    max_lines=16,
    line_height_ratio=1.4,
)

# Preset lookup by name
PRESETS: Dict[str, CardConfig] = {
    "square": PRESET_SQUARE,
    "compact": PRESET_COMPACT,
    "instagram": PRESET_SQUARE,  # Alias
}

DEFAULT_PRESET = "square"
