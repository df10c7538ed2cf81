"""Tests for the pure renderers: time-ago labels, hero, cards, suggestions."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from bs4 import BeautifulSoup

from gallery.content.models import Button, ContentItem, MainContent
from gallery.render.cards import render_button, render_gallery, render_hero
from gallery.render.page import render_footer, render_page_shell
from gallery.render.suggestions import render_suggestions
from gallery.render.timeago import INVALID_DATE, get_time_ago

from tests.conftest import NOW, iso_ago


def parse(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


# --- Time-ago Tests ---

class TestTimeAgo:
    def test_minutes(self):
        result = get_time_ago(iso_ago(minutes=5), NOW)
        assert result.text == "5 minutes ago"
        assert result.is_new is True

    def test_singular_minute(self):
        assert get_time_ago(iso_ago(minutes=1), NOW).text == "1 minute ago"

    def test_just_now_is_zero_minutes(self):
        assert get_time_ago(NOW, NOW).text == "0 minutes ago"

    def test_minutes_floor(self):
        assert get_time_ago(iso_ago(minutes=59, seconds=59), NOW).text == "59 minutes ago"

    def test_hours(self):
        assert get_time_ago(iso_ago(hours=1), NOW).text == "1 hour ago"
        result = get_time_ago(iso_ago(hours=23, minutes=30), NOW)
        assert result.text == "23 hours ago"
        assert result.is_new is True

    def test_days_within_three_are_new(self):
        result = get_time_ago(iso_ago(days=3), NOW)
        assert result.text == "3 days ago"
        assert result.is_new is True
        assert get_time_ago(iso_ago(days=1), NOW).text == "1 day ago"

    def test_days_after_three_are_old(self):
        result = get_time_ago(iso_ago(days=4), NOW)
        assert result.text == "4 days ago"
        assert result.is_new is False

    def test_seven_days_still_relative(self):
        result = get_time_ago(iso_ago(days=7, hours=23), NOW)
        assert result.text == "7 days ago"
        assert result.is_new is False

    def test_older_than_a_week_is_absolute(self):
        result = get_time_ago(iso_ago(days=10), NOW)
        assert result.text == "May 31, 2025"
        assert result.is_new is False

    def test_absolute_date_has_no_zero_padding(self):
        result = get_time_ago("2025-01-05T08:00:00Z", NOW)
        assert result.text == "Jan 5, 2025"

    def test_month_only_timestamp_starts_on_the_first(self):
        result = get_time_ago("2025-03", NOW)
        assert result.text == "Mar 1, 2025"
        assert result.is_new is False

    def test_year_only_timestamp_starts_on_january_first(self):
        result = get_time_ago("2025", NOW)
        assert result.text == "Jan 1, 2025"
        assert result.is_new is False

    def test_month_abbreviations_are_english(self):
        assert get_time_ago("2024-12-25T00:00:00Z", NOW).text == "Dec 25, 2024"
        assert get_time_ago("2024-09-03T00:00:00Z", NOW).text == "Sep 3, 2024"

    def test_naive_timestamp_is_utc(self):
        assert get_time_ago("2025-06-10T11:55:00", NOW).text == "5 minutes ago"

    def test_offset_timestamp(self):
        assert get_time_ago("2025-06-10T13:55:00+02:00", NOW).text == "5 minutes ago"

    def test_future_timestamp_counts_negative_minutes(self):
        result = get_time_ago(NOW + timedelta(minutes=5), NOW)
        assert result.text == "-5 minutes ago"
        assert result.is_new is True

    @pytest.mark.parametrize("value", ["garbage", "", None])
    def test_invalid_date(self, value):
        result = get_time_ago(value, NOW)
        assert result.text == INVALID_DATE
        assert result.is_new is False

    def test_defaults_to_wall_clock(self):
        recent = datetime.now(timezone.utc) - timedelta(minutes=2)
        assert get_time_ago(recent).is_new is True


# --- Hero & Button Tests ---

class TestHero:
    def test_hero_with_primary_button(self):
        hero = MainContent(
            title="Welcome",
            description="Latest work",
            button=Button(text="Contact", link="#contact", primary=True),
        )
        soup = parse(render_hero(hero))
        assert soup.select_one(".hero-title").get_text() == "Welcome"
        assert soup.select_one(".hero-description").get_text() == "Latest work"
        link = soup.select_one("a.btn")
        assert link["href"] == "#contact"
        assert "btn-primary" in link["class"]

    def test_hero_without_button(self):
        soup = parse(render_hero(MainContent(title="Hi", description="There")))
        assert soup.select_one("a") is None

    def test_button_without_text_renders_nothing(self):
        assert render_button(Button(text="", link="/x")) == ""
        assert render_button(None) == ""

    def test_secondary_button(self):
        link = parse(render_button(Button(text="More", link="/m"), "item-button")).a
        assert link["class"] == ["btn", "btn-secondary", "item-button"]

    def test_text_is_escaped(self):
        markup = render_hero(MainContent(title="<script>x</script>", description="a & b"))
        assert "<script>" not in markup
        assert parse(markup).select_one(".hero-title").get_text() == "<script>x</script>"


# --- Gallery Tests ---

class TestGallery:
    def test_empty_renders_nothing(self):
        assert render_gallery([], NOW) == ""

    def test_one_card_per_item(self, items):
        soup = parse(render_gallery(items, NOW))
        cards = soup.select(".gallery-item")
        assert len(cards) == 3
        assert [c.select_one(".item-title").get_text() for c in cards] == [
            "Design system 2.0",
            "Field notes: Lisbon",
            "Accessibility audit",
        ]

    def test_size_class(self, items):
        cards = parse(render_gallery(items, NOW)).select(".gallery-item")
        assert "item-size-large" in cards[0]["class"]
        assert "item-size-small" in cards[2]["class"]

    def test_recency_classes(self, items):
        cards = parse(render_gallery(items, NOW)).select(".gallery-item")
        assert "new" in cards[0].select_one(".time-text")["class"]
        assert "new" in cards[0].select_one("svg.time-icon")["class"]
        assert cards[0].select_one(".time-text").get_text() == "5 minutes ago"
        assert "old" in cards[2].select_one(".time-text")["class"]

    def test_call_to_action_only_with_text(self, items):
        cards = parse(render_gallery(items, NOW)).select(".gallery-item")
        assert cards[0].select_one("a.item-button")["href"] == "/posts/design"
        assert cards[1].select_one("a") is None
        assert "btn-secondary" in cards[2].select_one("a.item-button")["class"]

    def test_default_size(self):
        item = ContentItem.from_dict({"title": "t", "description": "d", "publishDate": ""})
        card = parse(render_gallery([item], NOW)).select_one(".gallery-item")
        assert "item-size-medium" in card["class"]
        assert card.select_one(".time-text").get_text() == INVALID_DATE


# --- Suggestion Tests ---

class TestSuggestions:
    def test_empty_renders_nothing(self):
        assert render_suggestions([], NOW) == ""

    def test_rows(self, items):
        rows = parse(render_suggestions(items[:2], NOW)).select(".suggestion-item")
        assert len(rows) == 2
        assert rows[0]["data-title"] == "Design system 2.0"
        assert rows[0].select_one(".suggestion-icon") is not None
        assert rows[0].select_one(".suggestion-description").get_text() == (
            "Tokens, components and documentation."
        )
        assert rows[1].select_one(".suggestion-time").get_text() == "2 days ago"
        assert "new" in rows[1].select_one(".suggestion-time")["class"]

    def test_data_title_round_trips_special_characters(self):
        item = ContentItem(title='Cats & "Dogs"', description="d", publish_date=iso_ago(hours=2))
        row = parse(render_suggestions([item], NOW)).select_one(".suggestion-item")
        assert row["data-title"] == 'Cats & "Dogs"'


# --- Page Tests ---

class TestPage:
    def test_shell_has_all_regions(self):
        soup = BeautifulSoup(render_page_shell({}), "lxml")
        for element_id in (
            "siteName",
            "heroSection",
            "searchInput",
            "suggestionsDropdown",
            "galleryGrid",
            "noResults",
            "footerText",
        ):
            assert soup.find(id=element_id) is not None
        assert soup.find("link", rel="stylesheet")["href"] == "styles.css"

    def test_custom_stylesheet(self):
        soup = BeautifulSoup(render_page_shell({"site": {"stylesheet": "theme.css"}}), "lxml")
        assert soup.find("link", rel="stylesheet")["href"] == "theme.css"

    def test_footer(self):
        assert render_footer("Northwind", 2025) == "© 2025 Northwind. All rights reserved."
