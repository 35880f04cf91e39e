"""Decoration style registry: pluggable card designs.

WHY: The CLI and the HTTP API need a single lookup to find a decoration
set by name. A central dict makes it trivial to add new styles: create the
DecorationSet subclass, import it here, add one line.

HOW: DECORATIONS maps string keys to decoration set *classes* (not
instances). Callers instantiate as needed: ``DECORATIONS["ngl"]()``.

RULES:
- Keys are the ``key`` attribute of each class (used in CLI flags and API)
- Every decoration set listed here must be importable without side effects
"""

from typing import Dict, Type

from .base import DecorationContext, DecorationSet
from .gradient import GradientDecorations
from .minimal import MinimalDecorations
from .ngl import NGLDecorations

DECORATIONS: Dict[str, Type[DecorationSet]] = {
    "ngl": NGLDecorations,
    "minimal": MinimalDecorations,
    "gradient": GradientDecorations,
}

DEFAULT_STYLE = "ngl"

__all__ = [
    "DECORATIONS",
    "DEFAULT_STYLE",
    "DecorationContext",
    "DecorationSet",
]
