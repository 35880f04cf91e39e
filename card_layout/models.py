"""Data models for the card layout pipeline.

WHY: Every stage of the pipeline (sanitize, font selection, wrapping,
truncation, layout, SVG emission) needs the same handful of values: the
canvas geometry, the font tiers, and the per-call results. Keeping them as
small frozen dataclasses makes the configuration explicit and lets callers
test the pipeline deterministically across canvas sizes.

HOW: CardConfig is the configuration structure passed into the pipeline.
FontTier is one (threshold, font size) step. Layout holds the vertical
placement, CardLayout bundles every computed value the emitter needs, and
RenderedCard is the final result returned to callers.

RULES:
- CardConfig validates itself on construction (ValueError on bad tiers).
- All models are frozen except RenderedCard/CardLayout line lists, which
  are built fresh per call and never shared across calls.
- Python 3.9.6 compatible (no slots=True, no match/case, no X | Y unions).
"""

from dataclasses import dataclass, field
from typing import List, Tuple

SVG_MEDIA_TYPE = "image/svg+xml"

# Longest entity the sanitizer produces ("&quot;", "&apos;")
MAX_ENTITY_LEN = 6


@dataclass(frozen=True)
class FontTier:
    """One step of the font-size step function.

    Attributes:
        threshold: Sanitized text length. Longer texts use this tier.
        font_size: Font size used once the length strictly exceeds threshold.
    """
    threshold: int
    font_size: int


@dataclass(frozen=True)
class CardConfig:
    """Canvas geometry and typography limits for one card format.

    Attributes:
        canvas_size: Width and height of the square canvas, in SVG units.
        content_width: Horizontal space available to a text line.
        font_tiers: Tiers ordered by increasing threshold.
        default_font_size: Size used below the first tier threshold.
        char_width_ratio: Approximate glyph width as a fraction of font size.
        min_wrap_chars: Floor for the per-line character budget. Must be at
            least MAX_ENTITY_LEN.
        max_lines: Maximum number of rendered lines.
        line_height_ratio: Line height as a multiple of the font size.
        ellipsis: Three-character marker appended to a truncated block.
    """
    canvas_size: int
    content_width: int
    font_tiers: Tuple[FontTier, ...]
    default_font_size: int
    char_width_ratio: float = 0.5
    min_wrap_chars: int = 20
    max_lines: int = 18
    line_height_ratio: float = 1.4
    ellipsis: str = "..."

    def __post_init__(self):
        if self.canvas_size <= 0 or self.content_width <= 0:
            raise ValueError("canvas_size and content_width must be positive")
        if self.content_width > self.canvas_size:
            raise ValueError(
                "content_width ({}) cannot exceed canvas_size ({})".format(
                    self.content_width, self.canvas_size
                )
            )
        if self.char_width_ratio <= 0 or self.line_height_ratio <= 0:
            raise ValueError("char_width_ratio and line_height_ratio must be positive")
        if self.min_wrap_chars < MAX_ENTITY_LEN:
            raise ValueError(
                "min_wrap_chars must be at least {} so XML entities are never split "
                "(got {})".format(MAX_ENTITY_LEN, self.min_wrap_chars)
            )
        if self.max_lines < 1:
            raise ValueError("max_lines must be at least 1")
        if len(self.ellipsis) != 3:
            raise ValueError("ellipsis must be exactly three characters")

        previous = FontTier(threshold=-1, font_size=self.default_font_size)
        for tier in self.font_tiers:
            if tier.threshold <= previous.threshold:
                raise ValueError(
                    "Font tier thresholds must be strictly increasing "
                    "(got {} after {})".format(tier.threshold, previous.threshold)
                )
            if tier.font_size >= previous.font_size or tier.font_size <= 0:
                raise ValueError(
                    "Font tier sizes must be positive and strictly decreasing "
                    "(got {} after {})".format(tier.font_size, previous.font_size)
                )
            previous = tier


@dataclass(frozen=True)
class Layout:
    """Vertical placement of the content block.

    Attributes:
        line_height: Distance between consecutive baselines.
        content_height: line_height * number of lines.
        start_y: Baseline of the first line, centering the block on the canvas.
    """
    line_height: int
    content_height: int
    start_y: int


@dataclass
class CardLayout:
    """Everything the SVG emitter needs, computed once per call."""
    sanitized: str
    font_size: int
    wrap_chars: int
    lines: List[str]
    truncated: bool
    layout: Layout
    config: CardConfig


@dataclass
class RenderedCard:
    """A finished card: the SVG document plus the layout it was built from."""
    svg: str
    layout: CardLayout
    style: str
    media_type: str = field(default=SVG_MEDIA_TYPE)
