"""Pure renderers: data in, markup string out."""

from gallery.render.cards import render_button, render_card, render_gallery, render_hero
from gallery.render.page import render_footer, render_page_shell
from gallery.render.suggestions import SUGGESTION_LIMIT, render_suggestions
from gallery.render.timeago import TimeAgo, get_time_ago

__all__ = [
    "render_button",
    "render_card",
    "render_gallery",
    "render_hero",
    "render_footer",
    "render_page_shell",
    "render_suggestions",
    "SUGGESTION_LIMIT",
    "TimeAgo",
    "get_time_ago",
]
