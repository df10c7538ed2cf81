"""Search filtering over the loaded item list."""

from __future__ import annotations

import logging
from typing import Sequence

from gallery.content.models import ContentItem

logger = logging.getLogger(__name__)


def filter_items(items: Sequence[ContentItem], query: str) -> list[ContentItem]:
    """Items whose title or description contains ``query``, case-insensitively.

    Always returns a new list; an empty query keeps every item.
    """
    needle = query.lower()
    result = [item for item in items if item.matches(needle)]
    logger.debug("filter %r: %d → %d items", needle, len(items), len(result))
    return result


def suggestion_candidates(
    items: Sequence[ContentItem],
    filtered: Sequence[ContentItem],
    query: str,
    limit: int,
) -> list[ContentItem]:
    """Rows for the dropdown: filtered matches while typing, else the first items."""
    source = filtered if query else items
    return list(source[:limit])
