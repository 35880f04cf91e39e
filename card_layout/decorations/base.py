"""Abstract decoration set and the geometry it draws against.

WHY: The ornamental parts of a card (background, shapes, emoji, header)
are orthogonal to the text layout math. Modelling them as a swappable
decoration set keeps the layout pipeline decoration-agnostic and collapses
the near-duplicate card designs into one emitter with pluggable styles.

HOW: DecorationSet is an ABC with a ``name``, a ``key``, text style
attributes, and two hooks returning SVG element strings: ``background()``
(drawn before the text) and ``foreground()`` (drawn after it).
DecorationContext carries the computed layout values so decorations can
follow the content block, plus ``scale()`` for shapes designed on the
1080 reference canvas.

To add a new style:
1. Create a new module in decorations/
2. Subclass DecorationSet
3. Implement name, background() and foreground()
4. Register it in DECORATIONS in decorations/__init__.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ..models import CardLayout

REFERENCE_CANVAS = 1080


@dataclass(frozen=True)
class DecorationContext:
    """Layout values a decoration set may position itself against."""
    canvas_size: int
    content_width: int
    font_size: int
    line_height: int
    content_height: int
    start_y: int
    created_at: Optional[datetime] = None

    @classmethod
    def from_layout(cls, card: CardLayout, created_at: Optional[datetime] = None) -> "DecorationContext":
        return cls(
            canvas_size=card.config.canvas_size,
            content_width=card.config.content_width,
            font_size=card.font_size,
            line_height=card.layout.line_height,
            content_height=card.layout.content_height,
            start_y=card.layout.start_y,
            created_at=created_at,
        )

    @property
    def center(self) -> int:
        return self.canvas_size // 2

    @property
    def margin(self) -> int:
        """Left edge of the content column."""
        return (self.canvas_size - self.content_width) // 2

    @property
    def ratio(self) -> float:
        return self.canvas_size / REFERENCE_CANVAS

    def scale(self, value: float) -> int:
        """Scale a length from the 1080 reference canvas to this canvas."""
        return int(round(value * self.ratio))

    @property
    def date_label(self) -> str:
        """Creation date for footers, or "" when no timestamp was given."""
        if self.created_at is None:
            return ""
        return "{} {}".format(self.created_at.day, self.created_at.strftime("%B %Y"))


class DecorationSet(ABC):
    """Abstract base for all card decoration styles."""

    key = ""
    font_family = "'Inter', 'SF Pro Display', -apple-system, Arial, sans-serif"
    text_fill = "#2D3436"
    font_weight = "600"
    letter_spacing = "0.3"

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable style name, e.g. 'NGL Pointing Characters'."""

    @abstractmethod
    def background(self, ctx: DecorationContext) -> List[str]:
        """SVG elements drawn underneath the text."""

    @abstractmethod
    def foreground(self, ctx: DecorationContext) -> List[str]:
        """SVG elements drawn on top of the text."""
