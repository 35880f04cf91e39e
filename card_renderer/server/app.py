"""FastAPI application serving aspiration cards as SVG images.

WHY: The web app (and anyone sharing an aspiration) needs an HTTP endpoint
that turns an aspiration id, or raw text, into a ready-to-share Instagram
card. FastAPI provides request validation, CORS and OpenAPI docs.

HOW: POST /designs resolves the text (by id through the configured
aspiration source, or straight from the body), runs card_layout's
render_card(), and answers with the SVG as ``image/svg+xml``. Discovery
endpoints list presets and styles; /health is a liveness check.

RULES:
- Every error response body is {"error": "<message>"} (ErrorResponse)
- CardRenderError subclasses carry their own status code (400, 404)
- Unknown preset/style and malformed bodies answer 400
- No layout logic here; no generated card is stored
- The aspiration source is a module-level singleton created at import
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from card_layout import DECORATIONS, PRESETS, render_card
from card_layout.errors import CardRenderError, MissingInputError
from card_layout.models import SVG_MEDIA_TYPE
from card_renderer import __version__
from card_renderer.config import (
    API_HOST,
    API_PORT,
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_ORIGINS,
    DEFAULT_CARD_PRESET,
    DEFAULT_CARD_STYLE,
)
from card_renderer.server.models import (
    DesignRequest,
    ErrorResponse,
    HealthResponse,
    PresetInfo,
    StyleInfo,
)
from card_renderer.sources import build_source

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App and source setup
# ---------------------------------------------------------------------------

aspiration_source = build_source()

app = FastAPI(
    title="Aspiration Card API",
    description=(
        "Renders student aspirations as square SVG cards for Instagram. "
        "Send an aspiration id (or the text itself) and receive an "
        "image/svg+xml document."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=CORS_ALLOW_HEADERS,
)


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(CardRenderError)
async def _card_error_handler(request: Request, exc: CardRenderError) -> JSONResponse:
    logger.info("Card request failed (%s): %s", type(exc).__name__, exc.message)
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return _error_response(400, "Invalid request body: {}".format(message))


@app.exception_handler(StarletteHTTPException)
async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error while rendering card")
    return _error_response(500, "Internal server error")


# ---------------------------------------------------------------------------
# Endpoints: Designs
# ---------------------------------------------------------------------------


@app.post(
    "/designs",
    tags=["designs"],
    summary="Render an aspiration card",
    description=(
        "Resolve the aspiration by id (or use the supplied content), lay it "
        "out on a square canvas and return the SVG document."
    ),
    response_class=Response,
    responses={
        200: {"content": {SVG_MEDIA_TYPE: {}}, "description": "The rendered SVG card"},
        400: {"model": ErrorResponse, "description": "Missing or empty content, unknown preset/style"},
        404: {"model": ErrorResponse, "description": "Aspiration not found"},
    },
)
async def create_design(request: Request, body: DesignRequest) -> Response:
    preset = body.preset or DEFAULT_CARD_PRESET
    style = body.style or DEFAULT_CARD_STYLE
    created_at = body.created_at

    if body.aspiration_id:
        aspiration = await aspiration_source.fetch(
            body.aspiration_id,
            authorization=request.headers.get("Authorization"),
        )
        text = aspiration.content or ""
        created_at = created_at or aspiration.created_at
    elif body.content is not None:
        text = body.content
    else:
        raise MissingInputError("aspirationId is required")

    try:
        card = render_card(text, preset=preset, style=style, created_at=created_at)
    except ValueError as exc:
        return _error_response(400, str(exc))

    logger.info(
        "Rendered %s/%s card: %d line(s), font %d%s",
        preset, style, len(card.layout.lines), card.layout.font_size,
        " (truncated)" if card.layout.truncated else "",
    )
    return Response(content=card.svg, media_type=card.media_type)


# ---------------------------------------------------------------------------
# Endpoints: Discovery
# ---------------------------------------------------------------------------


@app.get(
    "/presets",
    response_model=List[PresetInfo],
    tags=["discovery"],
    summary="List canvas presets",
)
async def list_presets() -> List[PresetInfo]:
    return [
        PresetInfo(key=key, canvas_size=cfg.canvas_size, max_lines=cfg.max_lines)
        for key, cfg in sorted(PRESETS.items())
    ]


@app.get(
    "/styles",
    response_model=List[StyleInfo],
    tags=["discovery"],
    summary="List decoration styles",
)
async def list_styles() -> List[StyleInfo]:
    return [
        StyleInfo(key=key, name=style_cls().name)
        for key, style_cls in sorted(DECORATIONS.items())
    ]


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the card-api console script."""
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
