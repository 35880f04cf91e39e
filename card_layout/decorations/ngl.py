"""NGL-style card: gradient backdrop, content card and pointing characters.

WHY: This is the flagship Instagram design: a coral-to-teal gradient,
floating emoji, a white content card with a coral "ASPIRASI SISWA" header
bar, and two cartoon characters pointing at the aspiration text.

HOW: Shapes are laid out on the 1080 reference canvas and scaled through
ctx.scale(). Elements that follow the text (characters, arrows, quotes,
stars, footer dots) are positioned from start_y and content_height.

RULES:
- The content card is content_height + 200 (reference units) tall.
- The created_at timestamp is not used by this style.
"""

from typing import List

from .base import DecorationContext, DecorationSet

CORAL = "#FF6B6B"
TEAL = "#4ECDC4"
SUN = "#FFE66D"
MINT = "#95E1D3"

# (x, y, font-size, opacity, glyph) on the reference canvas
_FLOATING_EMOJI = (
    (180, 250, 50, 0.6, "\U0001F4AD"),
    (850, 280, 45, 0.6, "✨"),
    (120, 820, 48, 0.6, "\U0001F4AB"),
    (900, 850, 52, 0.6, "\U0001F31F"),
    (300, 180, 40, 0.5, "\U0001F4A1"),
    (750, 900, 42, 0.5, "\U0001F3AF"),
)

# (cx, cy, r, fill, opacity)
_CIRCLES = (
    (150, 150, 100, SUN, 0.3),
    (930, 200, 120, CORAL, 0.25),
    (100, 900, 90, TEAL, 0.3),
    (950, 880, 110, MINT, 0.25),
)


def _transform(ctx: DecorationContext, x: int, y: int, flip: bool = False) -> str:
    r = ctx.ratio
    if flip:
        return "translate({}, {}) scale({:g}, {:g})".format(x, y, -r, r)
    if r == 1:
        return "translate({}, {})".format(x, y)
    return "translate({}, {}) scale({:g})".format(x, y, r)


def _character(transform: str, body: str, head: str, arm: str, arm_stroke: str,
               marks: str, mark_y: int) -> str:
    return "\n".join([
        '<g transform="{}">'.format(transform),
        '<ellipse cx="0" cy="80" rx="35" ry="45" fill="{}" />'.format(body),
        '<circle cx="0" cy="20" r="28" fill="{}" />'.format(head),
        '<circle cx="-8" cy="18" r="3" fill="#333" />',
        '<circle cx="8" cy="18" r="3" fill="#333" />',
        '<path d="M -10 26 Q 0 32 10 26" stroke="#333" stroke-width="2" fill="none" stroke-linecap="round"/>',
        '<path d="M 35 60 L 80 60 L 85 55 L 90 60 L 85 65 L 80 60" fill="{}" stroke="{}" stroke-width="2"/>'.format(arm, arm_stroke),
        '<text x="50" y="{}" font-size="24" fill="{}">!</text>'.format(mark_y, marks),
        '<text x="65" y="{}" font-size="20" fill="{}">!</text>'.format(mark_y - 5, marks),
        "</g>",
    ])


def _arrow(ctx: DecorationContext, x: int, direction: int, color: str) -> List[str]:
    """Three strokes forming an arrow that points at the first line."""
    s = ctx.scale
    tip_x = x + direction * s(30)
    y0 = ctx.start_y - s(50)
    tip_y = ctx.start_y - s(20)
    style = 'stroke="{}" stroke-width="{}" stroke-linecap="round"'.format(color, s(4))
    return [
        '<path d="M {} {} L {} {}" {}/>'.format(x, y0, tip_x, tip_y, style),
        '<path d="M {} {} L {} {}" {}/>'.format(tip_x, tip_y, tip_x - direction * s(5), ctx.start_y - s(35), style),
        '<path d="M {} {} L {} {}" {}/>'.format(tip_x, tip_y, tip_x - direction * s(15), ctx.start_y - s(25), style),
    ]


class NGLDecorations(DecorationSet):
    """Gradient card with pointing characters, arrows and emoji."""

    key = "ngl"

    @property
    def name(self) -> str:
        return "NGL Pointing Characters"

    def background(self, ctx: DecorationContext) -> List[str]:
        s = ctx.scale
        size = ctx.canvas_size
        card_x = ctx.margin
        card_y = s(200)
        middle = ctx.start_y + ctx.content_height // 2

        parts = [
            "<defs>",
            '<linearGradient id="bg" x1="0" y1="0" x2="0" y2="1">',
            '<stop offset="0%" stop-color="{}" />'.format(CORAL),
            '<stop offset="100%" stop-color="{}" />'.format(TEAL),
            "</linearGradient>",
            '<linearGradient id="cardBg" x1="0" y1="0" x2="0" y2="1">',
            '<stop offset="0%" stop-color="#FFFFFF" />',
            '<stop offset="100%" stop-color="#F8F9FA" />',
            "</linearGradient>",
            '<filter id="softShadow">',
            '<feDropShadow dx="0" dy="{}" stdDeviation="{}" flood-color="#000" flood-opacity="0.15"/>'.format(s(10), s(20)),
            "</filter>",
            "</defs>",
            '<rect width="{0}" height="{0}" fill="url(#bg)" />'.format(size),
        ]
        for cx, cy, r, fill, opacity in _CIRCLES:
            parts.append('<circle cx="{}" cy="{}" r="{}" fill="{}" opacity="{}" />'.format(
                s(cx), s(cy), s(r), fill, opacity))
        for x, y, font_size, opacity, glyph in _FLOATING_EMOJI:
            parts.append('<text x="{}" y="{}" font-size="{}" opacity="{}">{}</text>'.format(
                s(x), s(y), s(font_size), opacity, glyph))

        parts.extend([
            '<rect x="{}" y="{}" width="{}" height="{}" rx="{}" fill="url(#cardBg)" filter="url(#softShadow)" />'.format(
                card_x, card_y, ctx.content_width, ctx.content_height + s(200), s(40)),
            '<rect x="{}" y="{}" width="{}" height="{}" rx="{}" fill="{}" />'.format(
                card_x, card_y, ctx.content_width, s(100), s(40), CORAL),
            '<text x="{}" y="{}" font-family="{}" font-size="{}" font-weight="800" fill="#FFFFFF" text-anchor="middle">'
            "\U0001F4AC ASPIRASI SISWA</text>".format(
                ctx.center, s(265), self.font_family, s(38)),
            _character(_transform(ctx, s(100), middle - s(80)),
                       SUN, "#FFD93D", "#FFCB74", "#FFB84D", CORAL, 30),
            _character(_transform(ctx, s(980), middle + s(40), flip=True),
                       MINT, TEAL, "#81D8D0", TEAL, TEAL, 35),
            '<g opacity="0.7">',
        ])
        parts.extend(_arrow(ctx, s(150), 1, CORAL))
        parts.extend(_arrow(ctx, s(930), -1, TEAL))
        parts.extend([
            "</g>",
            '<text x="{}" y="{}" font-family="Georgia, serif" font-size="{}" fill="{}" opacity="0.2" font-weight="bold">'
            "“</text>".format(s(150), ctx.start_y - s(10), s(80), CORAL),
        ])
        return parts

    def foreground(self, ctx: DecorationContext) -> List[str]:
        s = ctx.scale
        bottom = ctx.start_y + ctx.content_height
        return [
            '<text x="{}" y="{}" font-family="Georgia, serif" font-size="{}" fill="{}" opacity="0.2" font-weight="bold" text-anchor="end">'
            "”</text>".format(s(930), bottom + s(50), s(80), TEAL),
            '<g transform="translate({}, {})">'.format(ctx.center, bottom + s(120)),
            '<circle cx="{}" cy="0" r="{}" fill="{}" />'.format(-s(30), s(5), CORAL),
            '<circle cx="0" cy="0" r="{}" fill="{}" />'.format(s(5), SUN),
            '<circle cx="{}" cy="0" r="{}" fill="{}" />'.format(s(30), s(5), TEAL),
            "</g>",
            '<text x="{}" y="{}" font-size="{}" opacity="0.6">⭐</text>'.format(
                s(250), ctx.start_y - s(80), s(35)),
            '<text x="{}" y="{}" font-size="{}" opacity="0.6">✨</text>'.format(
                s(830), ctx.start_y - s(70), s(30)),
            '<text x="{}" y="{}" font-size="{}" opacity="0.6">\U0001F4AB</text>'.format(
                s(200), bottom + s(140), s(32)),
            '<text x="{}" y="{}" font-size="{}" opacity="0.6">\U0001F31F</text>'.format(
                s(880), bottom + s(150), s(35)),
        ]
