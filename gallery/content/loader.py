"""Fetch the site document once and parse it into models.

The source is either an http(s) URL or a local file path. Failures are logged
and swallowed: the caller gets ``None`` and keeps its pre-load state.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import aiohttp

from gallery.content.models import SiteDocument

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "content.json"
DEFAULT_TIMEOUT = 10.0


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


class ContentLoader:
    """Load ``content.json`` (or a configured source) into a SiteDocument."""

    def __init__(self, config: dict[str, Any]) -> None:
        self.source: str = config.get("source") or DEFAULT_SOURCE
        loader = config.get("loader", {}) or {}
        self.timeout: float = float(loader.get("timeout", DEFAULT_TIMEOUT))

    async def load(self, source: Optional[str] = None) -> Optional[SiteDocument]:
        """Fetch, decode and parse the document. Returns None on any failure."""
        source = source or self.source
        try:
            if is_url(source):
                payload = await self._fetch_url(source)
            else:
                payload = self._read_file(source)
            document = SiteDocument.from_dict(payload)
        except Exception as e:
            logger.error("Error loading content: %s", e)
            return None

        logger.info(
            "Loaded %d gallery items for %r from %s",
            len(document.gallery_items),
            document.site_name,
            source,
        )
        return document

    async def _fetch_url(self, url: str) -> dict[str, Any]:
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as resp:
                resp.raise_for_status()
                # Static hosts often serve JSON as text/plain
                return await resp.json(content_type=None)

    def _read_file(self, path: str) -> dict[str, Any]:
        with open(Path(path), "r", encoding="utf-8") as f:
            return json.load(f)
