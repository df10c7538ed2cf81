"""Top-level gallery controller.

Owns the loaded state, performs startup rendering and hands events to the
search controller.

Usage:
    app = GalleryApp(load_config("gallery.yaml"))
    await app.start()
    app.search.on_input(InputEvent("rag"))
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml

from gallery.content.loader import ContentLoader
from gallery.content.models import GalleryState, SiteDocument
from gallery.render.cards import render_hero
from gallery.render.page import FOOTER_ID, HERO_ID, SITE_NAME_ID, render_footer
from gallery.search.controller import SearchController, mount_gallery
from gallery.search.dom import PageDocument

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "gallery.yaml"


def load_config(path: str = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load the YAML configuration. A missing or empty file yields ``{}``."""
    config_path = Path(path)
    if not config_path.exists():
        logger.debug("Config %s not found; using defaults", path)
        return {}
    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)
    return config or {}


class GalleryApp:
    """Load the site document once and keep the page in sync with it."""

    def __init__(
        self,
        config: dict[str, Any],
        page: Optional[PageDocument] = None,
        loader: Optional[ContentLoader] = None,
    ) -> None:
        self.config = config
        self.page = page or PageDocument.from_config(config)
        self.loader = loader or ContentLoader(config)
        self.search = SearchController(self.page, config)
        self._state = GalleryState.empty()

    @property
    def state(self) -> GalleryState:
        return self._state

    async def start(self, source: Optional[str] = None, now: Optional[datetime] = None) -> bool:
        """Fetch the document and render site name, hero, gallery and footer.

        Returns False (leaving the page untouched) when loading fails.
        """
        document = await self.loader.load(source)
        if document is None:
            return False
        self._state = GalleryState.from_document(document)
        self.search.bind(self._state)
        self.render_document(document, now)
        return True

    def render_document(self, document: SiteDocument, now: Optional[datetime] = None) -> None:
        self.page.set_text(SITE_NAME_ID, document.site_name)
        self.page.set_inner_html(HERO_ID, render_hero(document.main_content))
        mount_gallery(self.page, self._state.items, now)
        self.page.set_text(FOOTER_ID, render_footer(document.site_name, self._copyright_year(now)))
        logger.info("Rendered %s with %d items", document.site_name, len(self._state.items))

    def _copyright_year(self, now: Optional[datetime]) -> int:
        site = self.config.get("site", {}) or {}
        year = site.get("copyright_year")
        if year:
            return int(year)
        return (now or datetime.now(timezone.utc)).year
