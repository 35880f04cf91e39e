"""Minimal card: flat paper background, outlined card, quote marks."""

from typing import List

from .base import DecorationContext, DecorationSet

PAPER = "#FDFBF7"
INK = "#2D3436"
ACCENT = "#E17055"


class MinimalDecorations(DecorationSet):
    """Quiet style for link previews; shows the creation date when known."""

    key = "minimal"
    font_family = "Georgia, 'Times New Roman', serif"
    text_fill = INK
    font_weight = "400"
    letter_spacing = "0"

    @property
    def name(self) -> str:
        return "Minimal Quote"

    def background(self, ctx: DecorationContext) -> List[str]:
        s = ctx.scale
        top = ctx.start_y - ctx.line_height - s(60)
        return [
            '<rect width="{0}" height="{0}" fill="{1}" />'.format(ctx.canvas_size, PAPER),
            '<rect x="{}" y="{}" width="{}" height="{}" rx="{}" fill="#FFFFFF" stroke="#DFE6E9" stroke-width="{}" />'.format(
                ctx.margin, top, ctx.content_width, ctx.content_height + s(120), s(32), s(2)),
            '<text x="{}" y="{}" font-family="Georgia, serif" font-size="{}" fill="{}" opacity="0.35">“</text>'.format(
                ctx.margin + s(20), top + s(70), s(90), ACCENT),
        ]

    def foreground(self, ctx: DecorationContext) -> List[str]:
        s = ctx.scale
        bottom = ctx.start_y + ctx.content_height
        parts = [
            '<text x="{}" y="{}" font-family="Georgia, serif" font-size="{}" fill="{}" opacity="0.35" text-anchor="end">”</text>'.format(
                ctx.margin + ctx.content_width - s(20), bottom + s(30), s(90), ACCENT),
        ]
        if ctx.date_label:
            parts.append(
                '<text x="{}" y="{}" font-family="{}" font-size="{}" fill="#636E72" text-anchor="middle">{}</text>'.format(
                    ctx.center, ctx.canvas_size - s(60), self.font_family, s(28), ctx.date_label)
            )
        return parts
