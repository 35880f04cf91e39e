"""Gradient card: diagonal gradient, translucent card, header and footer dots.

The header bar sits just above the content block and the footer dots just
below it, so both move with the text. The creation date, when given, is
printed under the dots.
"""

from typing import List

from .base import DecorationContext, DecorationSet

VIOLET = "#6C5CE7"
CYAN = "#00CEC9"
PINK = "#FD79A8"


class GradientDecorations(DecorationSet):
    """Violet-to-cyan backdrop with a header bar above the text."""

    key = "gradient"
    text_fill = "#2D3436"

    @property
    def name(self) -> str:
        return "Gradient Header"

    def background(self, ctx: DecorationContext) -> List[str]:
        s = ctx.scale
        header_h = s(80)
        top = ctx.start_y - ctx.line_height - s(40) - header_h
        return [
            "<defs>",
            '<linearGradient id="bg" x1="0" y1="0" x2="1" y2="1">',
            '<stop offset="0%" stop-color="{}" />'.format(VIOLET),
            '<stop offset="100%" stop-color="{}" />'.format(CYAN),
            "</linearGradient>",
            "</defs>",
            '<rect width="{0}" height="{0}" fill="url(#bg)" />'.format(ctx.canvas_size),
            '<rect x="{}" y="{}" width="{}" height="{}" rx="{}" fill="#FFFFFF" opacity="0.92" />'.format(
                ctx.margin, top, ctx.content_width, ctx.content_height + header_h + s(120), s(36)),
            '<rect x="{}" y="{}" width="{}" height="{}" rx="{}" fill="{}" />'.format(
                ctx.margin, top, ctx.content_width, header_h, s(36), VIOLET),
            '<text x="{}" y="{}" font-family="{}" font-size="{}" font-weight="800" fill="#FFFFFF" text-anchor="middle">'
            "ASPIRASI SISWA</text>".format(ctx.center, top + s(52), self.font_family, s(34)),
        ]

    def foreground(self, ctx: DecorationContext) -> List[str]:
        s = ctx.scale
        dots_y = ctx.start_y + ctx.content_height + s(20)
        parts = ['<g transform="translate({}, {})">'.format(ctx.center, dots_y)]
        for offset, color in ((-s(30), VIOLET), (0, PINK), (s(30), CYAN)):
            parts.append('<circle cx="{}" cy="0" r="{}" fill="{}" />'.format(offset, s(6), color))
        parts.append("</g>")
        if ctx.date_label:
            parts.append(
                '<text x="{}" y="{}" font-family="{}" font-size="{}" fill="#FFFFFF" text-anchor="middle">{}</text>'.format(
                    ctx.center, ctx.canvas_size - s(50), self.font_family, s(26), ctx.date_label)
            )
        return parts
