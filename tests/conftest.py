"""Shared fixtures: a fixed clock and a small site document."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import pytest

from gallery.content.models import ContentItem, SiteDocument

NOW = datetime(2025, 6, 10, 12, 0, tzinfo=timezone.utc)


def iso_ago(**delta) -> str:
    """ISO timestamp ``delta`` before NOW."""
    return (NOW - timedelta(**delta)).isoformat()


def make_payload() -> Dict[str, Any]:
    return {
        "siteName": "Northwind Studio",
        "mainContent": {
            "title": "Stories & launches",
            "description": "Everything we shipped lately.",
            "button": {"text": "Get in touch", "link": "#contact", "primary": True},
        },
        "galleryItems": [
            {
                "title": "Design system 2.0",
                "description": "Tokens, components and documentation.",
                "publishDate": iso_ago(minutes=5),
                "size": "large",
                "button": {"text": "Read more", "link": "/posts/design", "primary": True},
            },
            {
                "title": "Field notes: Lisbon",
                "description": "Workshops with the design team.",
                "publishDate": iso_ago(days=2),
                "size": "medium",
                "button": {"text": "", "link": "/posts/lisbon"},
            },
            {
                "title": "Accessibility audit",
                "description": "Reviewing forty screens.",
                "publishDate": iso_ago(days=10),
                "size": "small",
                "button": {"text": "Report", "link": "/audit.pdf", "primary": False},
            },
        ],
    }


@pytest.fixture
def payload() -> Dict[str, Any]:
    return make_payload()


@pytest.fixture
def document(payload) -> SiteDocument:
    return SiteDocument.from_dict(payload)


@pytest.fixture
def items(document) -> tuple[ContentItem, ...]:
    return document.gallery_items


@pytest.fixture
def content_file(tmp_path, payload):
    """Write the sample document to disk and return its path."""
    path = tmp_path / "content.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)
