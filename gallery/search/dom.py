"""In-memory page document the handlers mount rendered fragments into."""

from __future__ import annotations

import logging
from typing import Any, Optional

from bs4 import BeautifulSoup, Tag

from gallery.render.page import render_page_shell

logger = logging.getLogger(__name__)

PAGE_PARSER = "lxml"
# Fragments are parsed without lxml's implicit <html><body> wrapper
FRAGMENT_PARSER = "html.parser"


class PageDocument:
    """A BeautifulSoup tree addressed by element id.

    Mirrors the handful of DOM operations the gallery needs: replace inner
    markup, set text and input values, toggle classes and display, and test
    whether an element sits inside another.
    """

    def __init__(self, markup: str) -> None:
        self.soup = BeautifulSoup(markup, PAGE_PARSER)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> PageDocument:
        return cls(render_page_shell(config))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, element_id: str) -> Tag:
        el = self.soup.find(id=element_id)
        if el is None:
            raise KeyError(f"No element with id {element_id!r}")
        return el

    def select(self, selector: str) -> list[Tag]:
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    def contains(self, container_id: str, target: Optional[Tag]) -> bool:
        """True when ``target`` is the container or one of its descendants."""
        if target is None:
            return False
        container = self.get(container_id)
        if target is container:
            return True
        return any(parent is container for parent in target.parents)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def set_inner_html(self, element_id: str, markup: str) -> None:
        el = self.get(element_id)
        el.clear()
        if not markup:
            return
        fragment = BeautifulSoup(markup, FRAGMENT_PARSER)
        for child in list(fragment.contents):
            el.append(child.extract())

    def inner_html(self, element_id: str) -> str:
        return self.get(element_id).decode_contents()

    def set_text(self, element_id: str, text: str) -> None:
        self.get(element_id).string = text

    def text(self, element_id: str) -> str:
        return self.get(element_id).get_text()

    def set_value(self, element_id: str, value: str) -> None:
        self.get(element_id)["value"] = value

    def value(self, element_id: str) -> str:
        return self.get(element_id).get("value", "")

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def has_class(self, element_id: str, css_class: str) -> bool:
        return css_class in self.get(element_id).get("class", [])

    def add_class(self, element_id: str, css_class: str) -> None:
        el = self.get(element_id)
        classes = list(el.get("class", []))
        if css_class not in classes:
            classes.append(css_class)
        el["class"] = classes

    def remove_class(self, element_id: str, css_class: str) -> None:
        el = self.get(element_id)
        el["class"] = [c for c in el.get("class", []) if c != css_class]

    def set_displayed(self, element_id: str, displayed: bool) -> None:
        self.get(element_id)["style"] = "display: block" if displayed else "display: none"

    def is_displayed(self, element_id: str) -> bool:
        style = self.get(element_id).get("style", "").replace(" ", "")
        return "display:none" not in style

    def to_html(self) -> str:
        return str(self.soup)
