"""Tests for the style settings adapter."""

import logging

import pytest

from itinerary.adapters.styles import NO_STYLE, RESET, StyleStore
from itinerary.domain.models import StyleDirective

SETTINGS = """\
[Airport]
Color = 32
Bold = true
[City]
Italic = true
Underline = yes
this line is ignored
[Date]
Strikethrough = true
Color=1;34
"""


@pytest.fixture
def store():
    return StyleStore.load(SETTINGS.splitlines(keepends=True))


class TestStyleStoreLoad:
    """Test suite for parsing settings text."""

    def test_sections_set_their_fields(self, store):
        assert store.lookup("Airport") == StyleDirective(color="32", bold=True)
        assert store.lookup("Date") == StyleDirective(color="1;34", strikethrough=True)

    def test_boolean_is_true_only_for_literal_true(self, store):
        city = store.lookup("City")
        assert city.italic is True
        assert city.underline is False

    def test_unknown_category_has_no_effect(self, store):
        assert store.lookup("OffsetNeg") == NO_STYLE
        assert store.lookup("OffsetNeg").is_empty

    def test_key_outside_section_goes_to_empty_category(self):
        store = StyleStore.load(["Bold = true", "[Time]", "Italic = true"])
        assert store.lookup("") == StyleDirective(bold=True)
        assert store.lookup("Time") == StyleDirective(italic=True)

    def test_lines_with_several_equals_signs_are_skipped(self):
        store = StyleStore.load(["[Time]", "Color = 1=2", "Bold = true"])
        assert store.lookup("Time") == StyleDirective(bold=True)

    def test_unknown_keys_are_ignored(self):
        store = StyleStore.load(["[Time]", "Blink = true"])
        assert store.lookup("Time") == NO_STYLE

    def test_later_section_with_same_name_extends_it(self):
        store = StyleStore.load(["[Time]", "Bold = true", "[Date]", "[Time]", "Color = 35"])
        assert store.lookup("Time") == StyleDirective(color="35", bold=True)


class TestStyleStoreRender:
    """Test suite for escape-sequence rendering."""

    def test_render_wraps_color_and_flags(self, store):
        rendered = store.render("JFK", store.lookup("Airport"))
        assert rendered == "\033[32m\033[1mJFK\033[0m"

    def test_fragments_follow_fixed_order(self):
        directive = StyleDirective(
            color="36", bold=True, italic=True, underline=True, strikethrough=True
        )
        rendered = StyleStore().render("x", directive)
        assert rendered == "\033[36m\033[1m\033[3m\033[4m\033[9mx\033[0m"

    def test_no_effect_directive_still_resets(self):
        assert StyleStore().render("x", NO_STYLE) == "x" + RESET

    def test_plain_mode_returns_text_unchanged(self, store):
        for category in ("Airport", "City", "Date", "Nothing"):
            rendered = store.render("text", store.lookup(category), styled=False)
            assert rendered == "text"
            assert "\033" not in rendered

    def test_render_category(self, store):
        assert store.render_category("05 Mar 2024", "Date") == (
            "\033[1;34m\033[9m05 Mar 2024\033[0m"
        )

    def test_render_category_plain_mode(self, store):
        assert store.render_category("05 Mar 2024", "Date", styled=False) == "05 Mar 2024"


class TestStyleStoreFromPath:
    """Test suite for loading settings from disk."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "user_settings.txt"
        path.write_text(SETTINGS, encoding="utf-8")

        store = StyleStore.from_path(path)

        assert store.lookup("Airport").bold is True

    def test_missing_file_yields_empty_store(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            store = StyleStore.from_path(tmp_path / "nope.txt")

        assert store.lookup("Airport") == NO_STYLE
        assert "Settings not found" in caplog.text
