"""Site document models and the JSON content loader."""

from gallery.content.loader import ContentLoader
from gallery.content.models import Button, ContentItem, GalleryState, MainContent, SiteDocument

__all__ = ["ContentLoader", "Button", "ContentItem", "GalleryState", "MainContent", "SiteDocument"]
