"""Search suggestion dropdown rows."""

from __future__ import annotations

from datetime import datetime
from html import escape
from typing import Optional, Sequence

from gallery.content.models import ContentItem
from gallery.render.timeago import get_time_ago

SUGGESTION_LIMIT = 5

SEARCH_ICON = (
    '<svg class="suggestion-icon" width="16" height="16" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2.5">'
    '<circle cx="11" cy="11" r="8"></circle>'
    '<path d="m21 21-4.35-4.35"></path>'
    "</svg>"
)


def render_suggestion(item: ContentItem, now: Optional[datetime] = None) -> str:
    time_info = get_time_ago(item.publish_date, now)
    return (
        f'<div class="suggestion-item" data-title="{escape(item.title)}">'
        f"{SEARCH_ICON}"
        '<div class="suggestion-content">'
        f'<div class="suggestion-title">{escape(item.title)}</div>'
        f'<div class="suggestion-description">{escape(item.description)}</div>'
        f'<div class="suggestion-time {time_info.css_class}">{escape(time_info.text)}</div>'
        "</div>"
        "</div>"
    )


def render_suggestions(items: Sequence[ContentItem], now: Optional[datetime] = None) -> str:
    """Render dropdown rows. Callers truncate to the suggestion limit."""
    return "".join(render_suggestion(item, now) for item in items)
