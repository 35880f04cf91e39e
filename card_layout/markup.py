"""SVG emitter: turns a computed CardLayout into the final document.

WHY: Downstream code rasterizes or shares the card as an SVG image. The
emitter is the last stage of the pipeline and only formats values that
earlier stages computed. It never re-sanitizes or re-wraps text.

HOW: Builds a fixed-size square <svg> with the decoration set's background
elements, one <text> element anchored at the canvas centre with a <tspan>
per line (first at dy=0, then one line_height apart), and the decoration
set's foreground elements.

RULES:
- width, height and viewBox always equal config.canvas_size.
- Lines are embedded verbatim; they are already sanitized.
- created_at only reaches the decoration set, never the layout.
"""

from datetime import datetime
from typing import List, Optional

from .decorations.base import DecorationContext, DecorationSet
from .models import CardLayout

SVG_NS = "http://www.w3.org/2000/svg"


def render_tspans(lines: List[str], x: int, line_height: int) -> str:
    """Render one <tspan> per line, each one line_height below the last."""
    return "".join(
        '<tspan x="{}" dy="{}" xml:space="preserve">{}</tspan>'.format(
            x, 0 if i == 0 else line_height, line
        )
        for i, line in enumerate(lines)
    )


def render_svg(
    card: CardLayout,
    decorations: DecorationSet,
    created_at: Optional[datetime] = None,
) -> str:
    """Emit the complete SVG document for a laid-out card.

    Args:
        card: Output of the layout pipeline.
        decorations: Decoration set instance drawing the static ornaments.
        created_at: Optional timestamp, used only by decorations.

    Returns:
        The SVG document as a string.
    """
    size = card.config.canvas_size
    ctx = DecorationContext.from_layout(card, created_at)

    parts = [
        '<svg width="{0}" height="{0}" viewBox="0 0 {0} {0}" xmlns="{1}">'.format(size, SVG_NS),
    ]
    parts.extend(decorations.background(ctx))
    parts.append(
        '<text x="{}" y="{}" text-anchor="middle" font-family="{}" font-size="{}" '
        'fill="{}" letter-spacing="{}" font-weight="{}">{}</text>'.format(
            ctx.center,
            card.layout.start_y,
            decorations.font_family,
            card.font_size,
            decorations.text_fill,
            decorations.letter_spacing,
            decorations.font_weight,
            render_tspans(card.lines, ctx.center, card.layout.line_height),
        )
    )
    parts.extend(decorations.foreground(ctx))
    parts.append("</svg>")
    return "\n".join(parts)
