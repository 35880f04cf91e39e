"""Aspiration card service: HTTP front end for the card layout library.

WHY: The web app asks for a shareable Instagram image of a student's
aspiration by its id. Something has to resolve that id to text, run the
layout library, and answer with an SVG (or a structured error).

HOW: Three pieces: configuration (.env), aspiration sources (lookup by
id), and a FastAPI server. All layout work is delegated to card_layout.

RULES:
- No layout logic lives here; card_layout is the single implementation
- Sources only read; nothing generated is ever persisted
"""

__version__ = "0.1.0"
