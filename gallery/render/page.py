"""Static page shell carrying the element ids the search handlers bind to."""

from __future__ import annotations

from html import escape
from typing import Any

DEFAULT_STYLESHEET = "styles.css"

SITE_NAME_ID = "siteName"
HERO_ID = "heroSection"
SEARCH_INPUT_ID = "searchInput"
DROPDOWN_ID = "suggestionsDropdown"
GRID_ID = "galleryGrid"
NO_RESULTS_ID = "noResults"
FOOTER_ID = "footerText"


def render_footer(site_name: str, year: int) -> str:
    return f"© {year} {site_name}. All rights reserved."


def render_page_shell(config: dict[str, Any]) -> str:
    """Return the pre-load page: every region present, nothing populated."""
    site = config.get("site", {}) or {}
    stylesheet = site.get("stylesheet", DEFAULT_STYLESHEET)
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Gallery</title>
    <link rel="stylesheet" href="{escape(stylesheet)}" />
  </head>
  <body>
    <header class="site-header">
      <div class="logo" id="{SITE_NAME_ID}"></div>
      <div class="search-container">
        <input type="text" id="{SEARCH_INPUT_ID}" class="search-input" placeholder="Search..." autocomplete="off" value="" />
        <div id="{DROPDOWN_ID}" class="suggestions-dropdown"></div>
      </div>
    </header>
    <main>
      <section id="{HERO_ID}" class="hero"></section>
      <section class="gallery">
        <div id="{GRID_ID}" class="gallery-grid"></div>
        <div id="{NO_RESULTS_ID}" class="no-results" style="display: none">No results found</div>
      </section>
    </main>
    <footer class="site-footer">
      <p id="{FOOTER_ID}"></p>
    </footer>
  </body>
</html>
"""
