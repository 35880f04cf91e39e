"""Core card layout logic: sanitizing, font selection, wrapping, truncation.

WHY: This module contains the whole text layout pipeline, from a raw,
untrusted aspiration string to the lines, font size and vertical placement
needed to draw it on a fixed square canvas. It is the only part of the
system with real algorithmic content; the SVG emitter only formats the
values computed here.

HOW: The pipeline has five stages, each a pure function:
  1. sanitize()          escape XML-significant characters.
  2. select_font_size()  step function from sanitized length to font size.
  3. wrap_text()         greedy word wrap with forced chunking of long tokens.
  4. truncate_lines()    cap the line count, ellipsis on the last line.
  5. compute_layout()    line height, block height, centered baseline.
build_layout() runs them in order for one string and one CardConfig.

RULES:
- ALL functions receive limits explicitly (config or arguments); no
  global state, so concurrent calls with different presets are safe.
- Width calculations use the *sanitized* length, never the raw length.
- Chunking and truncation never cut an XML entity in half (budgets of at
  least MAX_ENTITY_LEN; CardConfig enforces that floor).
- Characters XML 1.0 forbids become spaces before sanitizing.
- Empty or whitespace-only input raises EmptyContentError before any layout.
"""

import logging
import math
import re
from typing import List, Optional

from .errors import EmptyContentError, MissingInputError
from .models import CardConfig, CardLayout, Layout

logger = logging.getLogger(__name__)

# =============================================================================
# Sanitizer
# =============================================================================

XML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}

ESCAPE_RE = re.compile(r"[&<>\"']")
ENTITY_RE = re.compile(r"&(?:amp|lt|gt|quot|apos);")

# Code points XML 1.0 does not allow in character data
INVALID_XML_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def sanitize(raw: str) -> str:
    """Escape & < > " ' in a single left-to-right pass.

    re.sub scans the input once and never rescans replacement text, so an
    already-escaped sequence like "&amp;" becomes "&amp;amp;" rather than
    being corrupted.
    """
    return ESCAPE_RE.sub(lambda m: XML_ESCAPES[m.group(0)], raw)


# =============================================================================
# Font Size Selection
# =============================================================================

def select_font_size(sanitized_length: int, config: CardConfig) -> int:
    """Pick the font size for a sanitized text length.

    WHY: Short aspirations should fill the card with big type; long ones
    need smaller type to fit within the line limit.

    HOW: Walks the tiers in increasing threshold order and keeps the size
    of the last tier whose threshold the length strictly exceeds.

    RULES:
    - length == threshold keeps the larger font (steps down only on ">").
    - Below the first threshold, config.default_font_size is used.

    Args:
        sanitized_length: Length of the sanitized text.
        config: Card configuration with font tiers.

    Returns:
        Font size in SVG units.
    """
    font_size = config.default_font_size
    for tier in config.font_tiers:
        if sanitized_length > tier.threshold:
            font_size = tier.font_size
    return font_size


def wrap_budget(font_size: int, config: CardConfig) -> int:
    """Translate a font size into a per-line character budget.

    Uses the approximate glyph width (font_size * char_width_ratio) and
    never returns less than config.min_wrap_chars.
    """
    per_char = font_size * config.char_width_ratio
    return max(config.min_wrap_chars, int(math.floor(config.content_width / per_char)))


# =============================================================================
# Line Wrapping
# =============================================================================

def _chunk_token(token: str, max_chars: int) -> List[str]:
    """Split an oversized token into chunks of at most max_chars characters.

    A boundary that would land inside an XML entity is moved back to the
    entity's "&", so the chunk before it is shorter than max_chars.
    """
    chunks = []  # type: List[str]
    start = 0
    while len(token) - start > max_chars:
        end = start + max_chars
        amp = token.rfind("&", start, end)
        if amp > start:
            match = ENTITY_RE.match(token, amp)
            if match and match.end() > end:
                end = amp
        chunks.append(token[start:end])
        start = end
    chunks.append(token[start:])
    return chunks


def wrap_text(text: str, max_chars: int) -> List[str]:
    """Greedily wrap text into lines of at most max_chars characters.

    WHY: SVG has no automatic line breaking, so the card needs explicit
    lines sized to the approximate width of the canvas.

    HOW: Splits on whitespace runs and accumulates tokens into the current
    line. When appending " token" would overflow, the current line is
    committed. A token that alone exceeds max_chars is chunked: all but the
    last chunk become committed lines, the last chunk seeds the new line.

    RULES:
    - Every emitted line has length <= max_chars.
    - Force-chunking keeps entities whole when max_chars >= MAX_ENTITY_LEN.
    - Re-joining lines with single spaces reproduces the word sequence,
      except where a token was force-chunked (chunks are not spaced).
    - Empty or whitespace-only text yields [].

    Args:
        text: Sanitized text.
        max_chars: Character budget per line (must be >= 1).

    Returns:
        List of lines.
    """
    if max_chars < 1:
        raise ValueError("max_chars must be at least 1 (got {})".format(max_chars))

    lines = []  # type: List[str]
    current = ""
    for word in text.split():
        candidate = current + " " + word if current else word
        if len(candidate) <= max_chars:
            current = candidate
            continue

        if current:
            lines.append(current)
        if len(word) > max_chars:
            chunks = _chunk_token(word, max_chars)
            lines.extend(chunks[:-1])
            current = chunks[-1]
        else:
            current = word

    if current:
        lines.append(current)
    return lines


# =============================================================================
# Truncation
# =============================================================================

def truncate_lines(
    lines: List[str],
    max_lines: int,
    max_chars: int,
    ellipsis: str = "...",
) -> List[str]:
    """Cap a line sequence at max_lines, ending it with an ellipsis.

    WHY: Very long aspirations cannot fit on the card even at the smallest
    font size; the overflow is cut and marked so readers know it continues.

    HOW: Keeps the first max_lines lines. The new last line loses its
    trailing periods, is cut to max_chars - 3 characters and gets the
    three-character ellipsis appended.

    RULES:
    - Returns the input unchanged (as a new list) when it already fits.
    - max_chars - 3 < 0 clamps to 0: the last line is the ellipsis alone.
    - A partial XML entity left at the cut is dropped.

    Args:
        lines: Wrapped lines.
        max_lines: Maximum number of lines (must be >= 1).
        max_chars: Character budget per line.
        ellipsis: Marker appended to the truncated line.

    Returns:
        At most max_lines lines.
    """
    if max_lines < 1:
        raise ValueError("max_lines must be at least 1 (got {})".format(max_lines))
    if len(lines) <= max_lines:
        return list(lines)

    kept = list(lines[:max_lines])
    last = kept[-1].rstrip(".")
    keep = max(0, max_chars - len(ellipsis))
    cut = last[:keep]

    amp = cut.rfind("&")
    if amp != -1:
        match = ENTITY_RE.match(last, amp)
        if match and match.end() > len(cut):
            cut = cut[:amp]

    kept[-1] = cut + ellipsis
    return kept


# =============================================================================
# Layout
# =============================================================================

def compute_layout(
    line_count: int,
    font_size: int,
    canvas_size: int,
    line_height_ratio: float = 1.4,
) -> Layout:
    """Compute line height, block height and the first baseline.

    The first baseline sits one line height below the top of the block, so
    start_y = canvas_size // 2 - content_height // 2 + line_height.
    """
    line_height = int(math.floor(font_size * line_height_ratio))
    content_height = line_height * line_count
    start_y = canvas_size // 2 - content_height // 2 + line_height
    return Layout(
        line_height=line_height,
        content_height=content_height,
        start_y=start_y,
    )


# =============================================================================
# Pipeline
# =============================================================================

def build_layout(raw: Optional[str], config: CardConfig) -> CardLayout:
    """Run sanitize -> font size -> wrap -> truncate -> layout for one text.

    Raises:
        MissingInputError: raw is None.
        EmptyContentError: raw is empty or whitespace-only after trimming.
    """
    if raw is None:
        raise MissingInputError("Aspiration content is required")

    text = INVALID_XML_RE.sub(" ", str(raw)).strip()
    if not text:
        raise EmptyContentError("Aspiration not found or empty")

    safe = sanitize(text)
    font_size = select_font_size(len(safe), config)
    max_chars = wrap_budget(font_size, config)

    wrapped = wrap_text(safe, max_chars)
    lines = truncate_lines(wrapped, config.max_lines, max_chars, config.ellipsis)
    truncated = len(wrapped) > len(lines)

    layout = compute_layout(
        len(lines), font_size, config.canvas_size, config.line_height_ratio
    )
    logger.debug(
        "Laid out %d chars: font=%d budget=%d lines=%d truncated=%s",
        len(safe), font_size, max_chars, len(lines), truncated,
    )

    return CardLayout(
        sanitized=safe,
        font_size=font_size,
        wrap_chars=max_chars,
        lines=lines,
        truncated=truncated,
        layout=layout,
        config=config,
    )
