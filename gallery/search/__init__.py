"""Search filtering, page document and event handlers."""

from gallery.search.controller import (
    BlurEvent,
    ClickEvent,
    FocusEvent,
    InputEvent,
    SearchController,
    mount_gallery,
    mount_suggestions,
)
from gallery.search.dom import PageDocument
from gallery.search.filters import filter_items

__all__ = [
    "BlurEvent",
    "ClickEvent",
    "FocusEvent",
    "InputEvent",
    "SearchController",
    "mount_gallery",
    "mount_suggestions",
    "PageDocument",
    "filter_items",
]
