"""Data models for the site document and the gallery state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

DEFAULT_SIZE = "medium"


def _publish_date(value: Any) -> str:
    """Raw timestamp as text; JSON numbers are epoch milliseconds."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, timezone.utc).isoformat()
        except (OverflowError, OSError, ValueError):
            return ""
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Button:
    """Call-to-action link attached to the hero or to a gallery item."""

    text: str
    link: str = "#"
    primary: bool = False

    @property
    def css_class(self) -> str:
        return "btn-primary" if self.primary else "btn-secondary"

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional[Button]:
        if not data:
            return None
        return cls(
            text=data.get("text") or "",
            link=data.get("link") or "#",
            primary=bool(data.get("primary", False)),
        )


@dataclass(frozen=True)
class ContentItem:
    """A single gallery entry.

    ``publish_date`` keeps the raw timestamp from the document; it is parsed
    each time an age label is computed.
    """

    title: str
    description: str
    publish_date: str
    size: str = DEFAULT_SIZE
    button: Optional[Button] = None

    @property
    def has_action(self) -> bool:
        return self.button is not None and bool(self.button.text)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title or description."""
        needle = query.lower()
        return needle in self.title.lower() or needle in self.description.lower()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContentItem:
        return cls(
            title=str(data.get("title", "")),
            description=str(data.get("description", "")),
            publish_date=_publish_date(data.get("publishDate")),
            size=str(data.get("size") or DEFAULT_SIZE),
            button=Button.from_dict(data.get("button")),
        )


@dataclass(frozen=True)
class MainContent:
    """Hero banner fields."""

    title: str
    description: str
    button: Optional[Button] = None

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> MainContent:
        data = data or {}
        return cls(
            title=str(data.get("title", "")),
            description=str(data.get("description", "")),
            button=Button.from_dict(data.get("button")),
        )


@dataclass(frozen=True)
class SiteDocument:
    """The whole JSON document: site name, hero and gallery items."""

    site_name: str
    main_content: MainContent
    gallery_items: tuple[ContentItem, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SiteDocument:
        """Build from the decoded JSON payload.

        Raises ``KeyError``/``TypeError`` when ``galleryItems`` is missing or
        not a list of objects.
        """
        raw_items = data["galleryItems"]
        if not isinstance(raw_items, list):
            raise TypeError("galleryItems must be a list")
        return cls(
            site_name=str(data.get("siteName", "")),
            main_content=MainContent.from_dict(data.get("mainContent")),
            gallery_items=tuple(ContentItem.from_dict(raw) for raw in raw_items),
        )


@dataclass(frozen=True)
class GalleryState:
    """Loaded document plus its item list. Replaced, never mutated."""

    document: Optional[SiteDocument] = None
    items: tuple[ContentItem, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> GalleryState:
        return cls()

    @classmethod
    def from_document(cls, document: SiteDocument) -> GalleryState:
        return cls(document=document, items=document.gallery_items)

    @property
    def loaded(self) -> bool:
        return self.document is not None
