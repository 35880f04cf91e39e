"""In-process aspiration sources: a plain dict and a JSON export file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from card_layout.errors import ContentLookupError
from card_renderer.sources.base import Aspiration, AspirationSource

logger = logging.getLogger(__name__)


class InMemorySource(AspirationSource):
    """Dict-backed source for tests, demos and offline rendering."""

    def __init__(self, aspirations: list[Aspiration] | None = None) -> None:
        self._aspirations: dict[str, Aspiration] = {}
        for aspiration in aspirations or []:
            self.add(aspiration)

    @property
    def name(self) -> str:
        return "In-memory"

    def add(self, aspiration: Aspiration) -> None:
        self._aspirations[aspiration.id] = aspiration

    async def fetch(self, aspiration_id: str, authorization: str | None = None) -> Aspiration:
        aspiration = self._aspirations.get(str(aspiration_id))
        if aspiration is None:
            raise ContentLookupError("Aspiration not found: {}".format(aspiration_id))
        return aspiration


class JsonFileSource(InMemorySource):
    """Source loaded from a JSON export: a list of {id, content, created_at}.

    The file is read once at construction; later edits are not picked up.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        with open(self.path, "r", encoding="utf-8") as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise ValueError(
                "Aspirations file must contain a JSON list: {}".format(self.path)
            )
        aspirations = []
        for index, row in enumerate(rows):
            if not isinstance(row, dict) or "id" not in row:
                logger.warning("Skipping row %d of %s: not an object with an id", index, self.path)
                continue
            aspirations.append(Aspiration.from_dict(row))
        super().__init__(aspirations)
        logger.info("Loaded %d aspirations from %s", len(self._aspirations), self.path)

    @property
    def name(self) -> str:
        return "JSON file ({})".format(self.path.name)
