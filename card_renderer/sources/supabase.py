"""Async lookup of aspirations in the hosted Supabase table.

WHY: Aspirations are stored in a Supabase (PostgREST) table. The card
endpoint gets only an id and must fetch the row's content and timestamp,
honouring the caller's row-level security by forwarding their token.

HOW: Uses httpx.AsyncClient for non-blocking HTTP against
``{SUPABASE_URL}/rest/v1/{table}`` with an ``id=eq.<id>`` filter. The anon
key is always sent as ``apikey``; the Authorization header is the caller's
when present, else the anon key as a Bearer token.

RULES:
- Non-2xx responses, non-list bodies and empty results raise ContentLookupError
- Network errors (httpx.HTTPError) are wrapped in ContentLookupError
- One short-lived client per fetch; nothing is cached between calls
- ``transport`` exists so tests can inject httpx.MockTransport
"""

from __future__ import annotations

import logging

import httpx

from card_layout.errors import ContentLookupError
from card_renderer.config import SUPABASE_TABLE, load_supabase_settings
from card_renderer.sources.base import Aspiration, AspirationSource

logger = logging.getLogger(__name__)

_TIMEOUT_S = 10.0


class SupabaseSource(AspirationSource):
    """Reads aspirations through the Supabase REST API."""

    def __init__(
        self,
        url: str | None = None,
        anon_key: str | None = None,
        table: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if url is None or anon_key is None:
            env_url, env_key = load_supabase_settings()
            url = url or env_url
            anon_key = anon_key or env_key
        self._base_url = url.rstrip("/") + "/rest/v1"
        self._anon_key = anon_key
        self._table = table or SUPABASE_TABLE
        self._transport = transport

    @property
    def name(self) -> str:
        return "Supabase"

    def _headers(self, authorization: str | None) -> dict[str, str]:
        return {
            "apikey": self._anon_key,
            "Authorization": authorization or f"Bearer {self._anon_key}",
            "Accept": "application/json",
        }

    async def fetch(self, aspiration_id: str, authorization: str | None = None) -> Aspiration:
        params = {
            "id": f"eq.{aspiration_id}",
            "select": "id,content,created_at",
            "limit": "1",
        }
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._headers(authorization),
                timeout=httpx.Timeout(_TIMEOUT_S),
                transport=self._transport,
            ) as client:
                resp = await client.get(f"/{self._table}", params=params)
        except httpx.HTTPError as exc:
            logger.warning("Supabase request for aspiration %s failed: %s", aspiration_id, exc)
            raise ContentLookupError(
                "Could not reach aspiration store: {}".format(exc)
            ) from exc

        if resp.status_code != 200:
            logger.warning(
                "Supabase returned %s for aspiration %s: %s",
                resp.status_code, aspiration_id, resp.text,
            )
            raise ContentLookupError(
                "Aspiration lookup failed ({}): {}".format(resp.status_code, resp.text)
            )

        try:
            rows = resp.json()
        except ValueError as exc:
            logger.warning("Supabase sent a non-JSON body for aspiration %s", aspiration_id)
            raise ContentLookupError(
                "Aspiration lookup returned an unreadable response"
            ) from exc
        if not isinstance(rows, list):
            raise ContentLookupError(
                "Aspiration lookup returned an unexpected response: {}".format(type(rows).__name__)
            )
        if not rows or not isinstance(rows[0], dict):
            raise ContentLookupError("Aspiration not found: {}".format(aspiration_id))
        return Aspiration.from_dict(rows[0])
