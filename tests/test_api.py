"""Tests for the FastAPI card rendering API.

WHY: Validates that every endpoint behaves correctly: happy paths, error
cases, and edge cases. Uses FastAPI TestClient for synchronous in-process
testing against an in-memory aspiration source.

HOW: The module-level aspiration source is swapped for the memory_source
fixture, so no Supabase request is ever made. Tests post JSON bodies to
/designs and check status codes, content types, SVG bodies and the
{"error": ...} payload.

RULES:
- All tests use the FastAPI TestClient (synchronous)
- Supabase is never called (the source is monkeypatched)
- Every error response must be {"error": "<message>"}
- Tests cover: happy paths, 400 bad request, 404 not found, 500 fallback
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest
from fastapi.testclient import TestClient

from card_layout.markup import SVG_NS
from card_renderer import __version__
from card_renderer.server.app import app
from card_renderer.sources import Aspiration, AspirationSource


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


class RecordingSource(AspirationSource):
    """Source that remembers the Authorization header it was given."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    @property
    def name(self) -> str:
        return "Recording"

    async def fetch(self, aspiration_id, authorization=None):
        self.calls.append((aspiration_id, authorization))
        return Aspiration(id=aspiration_id, content="Terima kasih, guru!")


class BrokenSource(AspirationSource):
    """Source that fails with an unexpected exception."""

    @property
    def name(self) -> str:
        return "Broken"

    async def fetch(self, aspiration_id, authorization=None):
        raise RuntimeError("database exploded")


@pytest.fixture
def client(monkeypatch, memory_source):
    """TestClient with the in-memory sample aspirations as the source."""
    monkeypatch.setattr("card_renderer.server.app.aspiration_source", memory_source)
    return TestClient(app)


def _tspan_texts(svg: str) -> list[str]:
    root = ET.fromstring(svg)
    return [t.text for t in root.iter("{%s}tspan" % SVG_NS)]


# ---------------------------------------------------------------------------
# POST /designs
# ---------------------------------------------------------------------------


class TestCreateDesign:
    """Tests for POST /designs."""

    def test_render_inline_content(self, client):
        """Raw content renders straight to an SVG document."""
        resp = client.post("/designs", json={"content": "Hi"})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("image/svg+xml")
        assert ">Hi</tspan>" in resp.text
        assert ET.fromstring(resp.text).attrib["width"] == "1080"

    def test_render_by_id(self, client):
        """A stored aspiration is resolved by id."""
        resp = client.post("/designs", json={"aspirationId": "asp-1"})
        assert resp.status_code == 200
        assert _tspan_texts(resp.text) == ["Semoga perpustakaan buka sampai sore."]

    def test_snake_case_id_accepted(self, client):
        resp = client.post("/designs", json={"aspiration_id": "asp-1"})
        assert resp.status_code == 200

    def test_id_takes_precedence_over_content(self, client):
        resp = client.post("/designs", json={"aspirationId": "asp-1", "content": "Ignored"})
        assert resp.status_code == 200
        assert "Ignored" not in resp.text

    def test_stored_timestamp_feeds_date_footer(self, client):
        resp = client.post("/designs", json={"aspirationId": "asp-1", "style": "minimal"})
        assert resp.status_code == 200
        assert "17 May 2024" in resp.text

    def test_request_timestamp_overrides_stored(self, client):
        resp = client.post("/designs", json={
            "aspirationId": "asp-1",
            "style": "gradient",
            "createdAt": "2025-01-03T10:00:00Z",
        })
        assert resp.status_code == 200
        assert "3 January 2025" in resp.text
        assert "17 May 2024" not in resp.text

    def test_long_aspiration_is_truncated(self, client):
        resp = client.post("/designs", json={"aspirationId": "asp-long"})
        assert resp.status_code == 200
        texts = _tspan_texts(resp.text)
        assert len(texts) == 18
        assert texts[-1].endswith("...")

    def test_hostile_content_is_escaped(self, client):
        resp = client.post("/designs", json={"content": "<script>alert(1)</script>"})
        assert resp.status_code == 200
        assert "<script>" not in resp.text
        assert "&lt;script&gt;" in resp.text

    def test_compact_preset(self, client):
        resp = client.post("/designs", json={"content": "Hi", "preset": "compact"})
        assert resp.status_code == 200
        assert 'width="720"' in resp.text

    def test_missing_id_and_content_returns_400(self, client):
        resp = client.post("/designs", json={})
        assert resp.status_code == 400
        assert resp.json() == {"error": "aspirationId is required"}

    def test_whitespace_content_returns_400(self, client):
        resp = client.post("/designs", json={"content": "   "})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Aspiration not found or empty"}

    @pytest.mark.parametrize("aspiration_id", ["asp-empty", "asp-null"])
    def test_empty_stored_content_returns_400(self, client, aspiration_id):
        resp = client.post("/designs", json={"aspirationId": aspiration_id})
        assert resp.status_code == 400
        assert "empty" in resp.json()["error"]

    def test_unknown_id_returns_404(self, client):
        resp = client.post("/designs", json={"aspirationId": "nope"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "Aspiration not found: nope"}

    def test_unknown_style_returns_400(self, client):
        resp = client.post("/designs", json={"content": "Hi", "style": "baroque"})
        assert resp.status_code == 400
        assert "Unknown style" in resp.json()["error"]

    def test_unknown_preset_returns_400(self, client):
        resp = client.post("/designs", json={"content": "Hi", "preset": "poster"})
        assert resp.status_code == 400
        assert "Unknown preset" in resp.json()["error"]

    def test_invalid_json_returns_400(self, client):
        resp = client.post(
            "/designs",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["error"].startswith("Invalid request body")

    def test_wrong_field_type_returns_400(self, client):
        resp = client.post("/designs", json={"content": "Hi", "createdAt": "yesterday"})
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_authorization_is_forwarded(self, monkeypatch):
        source = RecordingSource()
        monkeypatch.setattr("card_renderer.server.app.aspiration_source", source)
        resp = TestClient(app).post(
            "/designs",
            json={"aspirationId": "abc"},
            headers={"Authorization": "Bearer user-jwt"},
        )
        assert resp.status_code == 200
        assert source.calls == [("abc", "Bearer user-jwt")]

    def test_unexpected_error_returns_500(self, monkeypatch):
        monkeypatch.setattr("card_renderer.server.app.aspiration_source", BrokenSource())
        resp = TestClient(app, raise_server_exceptions=False).post(
            "/designs", json={"aspirationId": "abc"},
        )
        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal server error"}


# ---------------------------------------------------------------------------
# Discovery and health
# ---------------------------------------------------------------------------


class TestDiscovery:
    """Tests for GET /presets, GET /styles and GET /health."""

    def test_list_presets(self, client):
        resp = client.get("/presets")
        assert resp.status_code == 200
        body = resp.json()
        assert [p["key"] for p in body] == ["compact", "instagram", "square"]
        square = next(p for p in body if p["key"] == "square")
        assert square == {"key": "square", "canvas_size": 1080, "max_lines": 18}

    def test_list_styles(self, client):
        resp = client.get("/styles")
        assert resp.status_code == 200
        assert [s["key"] for s in resp.json()] == ["gradient", "minimal", "ngl"]
        assert all(s["name"] for s in resp.json())

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}

    def test_unknown_route_uses_error_payload(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Not Found"}


class TestCORS:

    def test_preflight(self, client):
        resp = client.options(
            "/designs",
            headers={
                "Origin": "https://aspirasi.example.sch.id",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "authorization, content-type",
            },
        )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] in ("*", "https://aspirasi.example.sch.id")
        assert "POST" in resp.headers["access-control-allow-methods"]
