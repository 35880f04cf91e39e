"""Tests for aspiration sources (in-memory, JSON file, Supabase REST).

WHY: The card endpoint trusts sources to either return an Aspiration or
raise ContentLookupError. They never return None or leak a raw HTTP error.

HOW: Async fetches run through asyncio.run() inside sync tests. The
Supabase source talks to an httpx.MockTransport, so no network is used.
"""

import asyncio
import json
from datetime import datetime, timezone

import httpx
import pytest

from card_layout.errors import ContentLookupError
from card_renderer.sources import (
    Aspiration,
    InMemorySource,
    JsonFileSource,
    SupabaseSource,
)
from card_renderer.sources.base import parse_timestamp

from conftest import CREATED_AT


class TestAspirationRecord:

    def test_from_dict(self):
        asp = Aspiration.from_dict({
            "id": 42,
            "content": "Lebih banyak ekstrakurikuler",
            "created_at": "2024-05-17T08:30:00Z",
        })
        assert asp.id == "42"
        assert asp.content == "Lebih banyak ekstrakurikuler"
        assert asp.created_at == CREATED_AT

    def test_missing_optional_fields(self):
        asp = Aspiration.from_dict({"id": "a"})
        assert asp.content is None
        assert asp.created_at is None

    def test_missing_id_raises(self):
        with pytest.raises(ContentLookupError):
            Aspiration.from_dict({"content": "x"})

    def test_parse_timestamp(self):
        assert parse_timestamp("2024-05-17T08:30:00+00:00") == CREATED_AT
        assert parse_timestamp("not a date") is None
        assert parse_timestamp(None) is None
        naive = datetime(2024, 1, 1)
        assert parse_timestamp(naive) is naive


class TestInMemorySource:

    def test_fetch_existing(self, memory_source):
        asp = asyncio.run(memory_source.fetch("asp-1"))
        assert asp.content.startswith("Semoga")

    def test_fetch_missing_raises(self, memory_source):
        with pytest.raises(ContentLookupError, match="not found"):
            asyncio.run(memory_source.fetch("nope"))

    def test_lookup_error_is_builtin_lookup_error(self, memory_source):
        with pytest.raises(LookupError):
            asyncio.run(memory_source.fetch("nope"))

    def test_empty_source(self):
        with pytest.raises(ContentLookupError):
            asyncio.run(InMemorySource().fetch("asp-1"))


class TestJsonFileSource:

    def test_loads_rows(self, tmp_path):
        path = tmp_path / "aspirations.json"
        path.write_text(json.dumps([
            {"id": "1", "content": "Satu", "created_at": "2024-05-17T08:30:00Z"},
            {"id": "2", "content": "Dua"},
            "ignored",
        ]), encoding="utf-8")

        source = JsonFileSource(path)

        assert asyncio.run(source.fetch("2")).content == "Dua"
        assert asyncio.run(source.fetch("1")).created_at == CREATED_AT
        assert "aspirations.json" in source.name

    def test_skips_rows_without_id(self, tmp_path, caplog):
        path = tmp_path / "aspirations.json"
        path.write_text(json.dumps([
            {"content": "Tanpa id"},
            {"id": "3", "content": "Tiga"},
        ]), encoding="utf-8")

        with caplog.at_level("WARNING", logger="card_renderer.sources.local"):
            source = JsonFileSource(path)

        assert asyncio.run(source.fetch("3")).content == "Tiga"
        assert "Skipping row 0" in caplog.text

    def test_rejects_non_list(self, tmp_path):
        path = tmp_path / "aspirations.json"
        path.write_text(json.dumps({"id": "1"}), encoding="utf-8")
        with pytest.raises(ValueError, match="JSON list"):
            JsonFileSource(path)


def _supabase(handler):
    return SupabaseSource(
        url="https://example.supabase.co/",
        anon_key="anon-key",
        table="aspirations",
        transport=httpx.MockTransport(handler),
    )


class TestSupabaseSource:

    def test_fetch_row(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            seen["apikey"] = request.headers.get("apikey")
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(200, json=[{
                "id": "42",
                "content": "Perbanyak tempat sampah",
                "created_at": "2024-05-17T08:30:00+00:00",
            }])

        asp = asyncio.run(_supabase(handler).fetch("42"))

        assert asp.content == "Perbanyak tempat sampah"
        assert asp.created_at == datetime(2024, 5, 17, 8, 30, tzinfo=timezone.utc)
        assert seen["path"] == "/rest/v1/aspirations"
        assert seen["params"]["id"] == "eq.42"
        assert seen["params"]["select"] == "id,content,created_at"
        assert seen["apikey"] == "anon-key"
        assert seen["auth"] == "Bearer anon-key"

    def test_forwards_caller_authorization(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(200, json=[{"id": "1", "content": "x"}])

        asyncio.run(_supabase(handler).fetch("1", authorization="Bearer user-jwt"))
        assert seen["auth"] == "Bearer user-jwt"

    def test_no_rows_raises(self):
        source = _supabase(lambda request: httpx.Response(200, json=[]))
        with pytest.raises(ContentLookupError, match="not found"):
            asyncio.run(source.fetch("missing"))

    def test_http_error_raises(self):
        source = _supabase(lambda request: httpx.Response(401, text="JWT expired"))
        with pytest.raises(ContentLookupError, match="401"):
            asyncio.run(source.fetch("1"))

    def test_non_json_body_raises(self):
        source = _supabase(lambda request: httpx.Response(200, text="<html>gateway</html>"))
        with pytest.raises(ContentLookupError, match="unreadable"):
            asyncio.run(source.fetch("1"))

    def test_object_body_raises(self):
        source = _supabase(lambda request: httpx.Response(200, json={"message": "odd"}))
        with pytest.raises(ContentLookupError, match="unexpected response"):
            asyncio.run(source.fetch("1"))

    def test_network_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ContentLookupError, match="Could not reach"):
            asyncio.run(_supabase(handler).fetch("1"))

    def test_requires_settings(self, monkeypatch):
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
        with pytest.raises(ValueError, match="Supabase not configured"):
            SupabaseSource()
