"""Search event handlers: input, focus, blur, click and suggestion selection.

Handlers take typed events and mutate a :class:`PageDocument`; rendering
itself stays in :mod:`gallery.render`.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from bs4 import Tag

from gallery.content.models import ContentItem, GalleryState
from gallery.render.cards import render_gallery
from gallery.render.page import DROPDOWN_ID, GRID_ID, NO_RESULTS_ID, SEARCH_INPUT_ID
from gallery.render.suggestions import SUGGESTION_LIMIT, render_suggestions
from gallery.search.dom import PageDocument
from gallery.search.filters import filter_items, suggestion_candidates

logger = logging.getLogger(__name__)

DEFAULT_BLUR_DELAY_MS = 200
SHOW_CLASS = "show"


@dataclass(frozen=True)
class InputEvent:
    value: str


@dataclass(frozen=True)
class FocusEvent:
    pass


@dataclass(frozen=True)
class BlurEvent:
    pass


@dataclass(frozen=True)
class ClickEvent:
    """A click somewhere on the page; ``target`` is the clicked element."""

    target: Optional[Tag]


def mount_gallery(
    page: PageDocument,
    items: Sequence[ContentItem],
    now: Optional[datetime] = None,
) -> None:
    """Render ``items`` into the grid, or clear it and show the placeholder."""
    if not items:
        page.set_inner_html(GRID_ID, "")
        page.set_displayed(NO_RESULTS_ID, True)
        return
    page.set_displayed(NO_RESULTS_ID, False)
    page.set_inner_html(GRID_ID, render_gallery(items, now))


def mount_suggestions(
    page: PageDocument,
    items: Sequence[ContentItem],
    now: Optional[datetime] = None,
) -> None:
    """Render dropdown rows and show it, or hide it when there is nothing to show."""
    if not items:
        page.remove_class(DROPDOWN_ID, SHOW_CLASS)
        return
    page.set_inner_html(DROPDOWN_ID, render_suggestions(items, now))
    page.add_class(DROPDOWN_ID, SHOW_CLASS)


class SearchController:
    """Keep the grid and the suggestion dropdown in step with search input."""

    def __init__(
        self,
        page: PageDocument,
        config: dict[str, Any],
        state: Optional[GalleryState] = None,
    ) -> None:
        self.page = page
        search = config.get("search", {}) or {}
        self.suggestion_limit: int = int(search.get("suggestion_limit", SUGGESTION_LIMIT))
        self.blur_delay: float = float(search.get("blur_delay_ms", DEFAULT_BLUR_DELAY_MS)) / 1000
        self.state = state or GalleryState.empty()

    def bind(self, state: GalleryState) -> None:
        """Swap in a newly loaded state."""
        self.state = state

    @property
    def items(self) -> tuple[ContentItem, ...]:
        return self.state.items

    @property
    def dropdown_open(self) -> bool:
        return self.page.has_class(DROPDOWN_ID, SHOW_CLASS)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_input(self, event: InputEvent, now: Optional[datetime] = None) -> list[ContentItem]:
        """Re-filter on every keystroke and refresh grid and dropdown."""
        query = event.value.lower()
        filtered = filter_items(self.items, query)
        mount_gallery(self.page, filtered, now)
        mount_suggestions(
            self.page,
            suggestion_candidates(self.items, filtered, query, self.suggestion_limit),
            now,
        )
        return filtered

    def on_focus(self, event: FocusEvent, now: Optional[datetime] = None) -> None:
        if self.items:
            mount_suggestions(self.page, self.items[: self.suggestion_limit], now)

    def on_blur(self, event: BlurEvent) -> Optional[asyncio.TimerHandle]:
        """Hide the dropdown after the blur delay so a pending click still lands."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.hide_suggestions()
            return None
        return loop.call_later(self.blur_delay, self.hide_suggestions)

    def on_click(self, event: ClickEvent, now: Optional[datetime] = None) -> None:
        target = event.target
        row = self._suggestion_row(target)
        if row is not None:
            self.select_suggestion(row.get("data-title", ""), now)
            return
        if not self.page.contains(SEARCH_INPUT_ID, target) and not self.page.contains(
            DROPDOWN_ID, target
        ):
            self.hide_suggestions()

    def select_suggestion(self, title: str, now: Optional[datetime] = None) -> list[ContentItem]:
        """Fill the search field with ``title`` and filter the grid by it."""
        self.page.set_value(SEARCH_INPUT_ID, title)
        self.hide_suggestions()
        filtered = filter_items(self.items, title)
        mount_gallery(self.page, filtered, now)
        logger.debug("Selected suggestion %r (%d matches)", title, len(filtered))
        return filtered

    def hide_suggestions(self) -> None:
        self.page.remove_class(DROPDOWN_ID, SHOW_CLASS)

    def _suggestion_row(self, target: Optional[Tag]) -> Optional[Tag]:
        if target is None or not self.page.contains(DROPDOWN_ID, target):
            return None
        if "suggestion-item" in target.get("class", []):
            return target
        return target.find_parent(class_="suggestion-item")
