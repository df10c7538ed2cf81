"""Hero banner and gallery grid markup."""

from __future__ import annotations

from datetime import datetime
from html import escape
from typing import Optional, Sequence

from gallery.content.models import Button, ContentItem, MainContent
from gallery.render.timeago import get_time_ago

CLOCK_ICON = (
    '<svg class="time-icon {time_class}" width="20" height="20" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2.5">'
    '<circle cx="12" cy="12" r="10"></circle>'
    '<polyline points="12 6 12 12 16 14"></polyline>'
    "</svg>"
)


def render_button(button: Optional[Button], extra_class: str = "") -> str:
    """Render a call-to-action link, or ``""`` when there is no button text."""
    if button is None or not button.text:
        return ""
    classes = f"btn {button.css_class}"
    if extra_class:
        classes = f"{classes} {extra_class}"
    return f'<a href="{escape(button.link)}" class="{classes}">{escape(button.text)}</a>'


def render_hero(content: MainContent) -> str:
    return (
        f'<h1 class="hero-title">{escape(content.title)}</h1>'
        f'<p class="hero-description">{escape(content.description)}</p>'
        f"{render_button(content.button)}"
    )


def render_card(item: ContentItem, now: Optional[datetime] = None) -> str:
    """One gallery card: size class, age label and optional action link."""
    time_info = get_time_ago(item.publish_date, now)
    time_class = time_info.css_class
    return (
        f'<div class="gallery-item item-size-{escape(item.size)}">'
        '<div class="item-content-wrapper">'
        '<div class="item-header">'
        f"{CLOCK_ICON.format(time_class=time_class)}"
        f'<span class="time-text {time_class}">{escape(time_info.text)}</span>'
        "</div>"
        f'<h3 class="item-title">{escape(item.title)}</h3>'
        f'<p class="item-description">{escape(item.description)}</p>'
        "</div>"
        f'{render_button(item.button, "item-button") if item.has_action else ""}'
        "</div>"
    )


def render_gallery(items: Sequence[ContentItem], now: Optional[datetime] = None) -> str:
    """Render the grid contents. An empty sequence renders ``""``."""
    return "".join(render_card(item, now) for item in items)
