"""Social card layout library for aspiration quote cards.

WHY: Aspirations are shared on Instagram as square SVG cards. Turning an
arbitrary-length, user-authored string into a card needs deterministic
layout decisions (font size, line breaks, truncation and vertical
centering). This package provides a clean library API for that, free of
storage, auth or network concerns, so the HTTP service, the CLI and tests
all share one implementation.

HOW: The public entry points are layout_card(text, preset) and
render_card(text, preset, style). They resolve the preset name to a
CardConfig (or use a custom config), run the pipeline in core.py, and for
render_card emit the SVG with the chosen decoration set.

RULES:
- render_card() is the ONLY public API for producing SVG output.
- Preset names: "square" (default), "compact", "instagram" (alias for square).
- Style names: "ngl" (default), "minimal", "gradient".
- Pure and synchronous: no I/O, no caching, safe to call concurrently.
- Python 3.9.6 compatible (no slots=True, no match/case, no X | Y unions).
"""

from datetime import datetime
from typing import Optional

from .core import (
    build_layout,
    compute_layout,
    sanitize,
    select_font_size,
    truncate_lines,
    wrap_budget,
    wrap_text,
)
from .decorations import DECORATIONS, DEFAULT_STYLE, DecorationSet
from .errors import (
    CardRenderError,
    ContentLookupError,
    EmptyContentError,
    MissingInputError,
)
from .markup import render_svg
from .models import CardConfig, CardLayout, FontTier, Layout, RenderedCard
from .presets import DEFAULT_PRESET, PRESET_COMPACT, PRESET_SQUARE, PRESETS

__version__ = "0.1.0"

__all__ = [
    "layout_card",
    "render_card",
    "resolve_config",
    "resolve_decorations",
    "sanitize",
    "select_font_size",
    "wrap_budget",
    "wrap_text",
    "truncate_lines",
    "compute_layout",
    "render_svg",
    "CardConfig",
    "CardLayout",
    "FontTier",
    "Layout",
    "RenderedCard",
    "CardRenderError",
    "ContentLookupError",
    "EmptyContentError",
    "MissingInputError",
    "DECORATIONS",
    "DEFAULT_STYLE",
    "PRESETS",
    "DEFAULT_PRESET",
    "PRESET_SQUARE",
    "PRESET_COMPACT",
]


def resolve_config(preset: str = DEFAULT_PRESET, config: Optional[CardConfig] = None) -> CardConfig:
    """Return config if given, else the named preset.

    Raises:
        ValueError: If preset name is not recognized and no config is provided.
    """
    if config is not None:
        return config
    if preset not in PRESETS:
        raise ValueError(
            "Unknown preset '{}'. Available: {}".format(
                preset, ", ".join(PRESETS.keys())
            )
        )
    return PRESETS[preset]


def resolve_decorations(style: str = DEFAULT_STYLE) -> DecorationSet:
    """Instantiate the decoration set registered under style.

    Raises:
        ValueError: If the style name is not registered.
    """
    if style not in DECORATIONS:
        raise ValueError(
            "Unknown style '{}'. Available: {}".format(
                style, ", ".join(DECORATIONS.keys())
            )
        )
    return DECORATIONS[style]()


def layout_card(
    text: Optional[str],
    preset: str = DEFAULT_PRESET,
    config: Optional[CardConfig] = None,
) -> CardLayout:
    """Compute the layout (font size, lines, placement) for one text.

    Args:
        text: Raw aspiration text.
        preset: Preset name ("square", "compact", "instagram").
        config: Optional custom CardConfig. If provided, preset is ignored.

    Returns:
        CardLayout with sanitized text, font size, lines and Layout.

    Raises:
        MissingInputError: If text is None.
        EmptyContentError: If text is empty or whitespace-only.
        ValueError: If preset is unknown and no config is given.
    """
    cfg = resolve_config(preset, config)
    return build_layout(text, cfg)


def render_card(
    text: Optional[str],
    preset: str = DEFAULT_PRESET,
    config: Optional[CardConfig] = None,
    style: str = DEFAULT_STYLE,
    created_at: Optional[datetime] = None,
) -> RenderedCard:
    """Lay out and render one aspiration as an SVG card.

    WHY: This is the single public entry point for card rendering. The
    HTTP service, CLI and tests call this instead of reaching into the
    individual stages.

    HOW: Resolves the preset and decoration set first (so unknown names fail
    fast), runs the layout pipeline, then emits the SVG.

    RULES:
    - Missing or empty text raises before any layout work happens.
    - created_at only feeds decorations (e.g. a date footer).

    Args:
        text: Raw aspiration text.
        preset: Preset name. Default: "square".
        config: Optional custom CardConfig. If provided, preset is ignored.
        style: Decoration style name. Default: "ngl".
        created_at: Optional creation timestamp of the aspiration.

    Returns:
        RenderedCard with the SVG document and its layout.
    """
    cfg = resolve_config(preset, config)
    decorations = resolve_decorations(style)
    card = build_layout(text, cfg)
    svg = render_svg(card, decorations, created_at)
    return RenderedCard(svg=svg, layout=card, style=style)
