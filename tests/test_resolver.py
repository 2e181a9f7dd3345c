"""Tests for token resolution."""

import pytest

from itinerary.adapters.reference import ReferenceTable
from itinerary.adapters.styles import StyleStore
from itinerary.domain.models import AirportRecord, DiagnosticKind
from itinerary.text.diagnostics import DiagnosticCollector
from itinerary.text.grammar import scan_airport_tokens, scan_datetime_tokens
from itinerary.text.resolver import (
    UTC_OFFSET_TEXT,
    TokenResolver,
    format_offset,
    offset_category,
)

JFK = AirportRecord(
    name="John F Kennedy Intl",
    iso_country="US",
    municipality="New York",
    icao_code="KJFK",
    iata_code="JFK",
    coordinates="-73.77, 40.64",
)
LHR = AirportRecord(
    name="Heathrow",
    iso_country="GB",
    municipality="London",
    icao_code="EGLL",
    iata_code="LHR",
    coordinates="-0.46, 51.47",
)

STYLES = StyleStore.load(
    [
        "[Airport]",
        "Color = 32",
        "[City]",
        "Bold = true",
        "[Date]",
        "Color = 33",
        "[Time]",
        "Underline = true",
        "[OffsetPos]",
        "Color = 34",
        "[OffsetNeg]",
        "Color = 31",
    ]
)


@pytest.fixture
def table():
    return ReferenceTable(records=(JFK, LHR))


@pytest.fixture
def plain(table):
    return TokenResolver(reference_table=table, style_store=STYLES, styled=False)


@pytest.fixture
def styled(table):
    return TokenResolver(reference_table=table, style_store=STYLES, styled=True)


def _token(scan, text):
    tokens = list(scan(text))
    assert len(tokens) == 1
    return tokens[0]


class TestAirportTokens:
    """Test suite for airport token resolution."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("#JFK", "John F Kennedy Intl"),
            ("##KJFK", "John F Kennedy Intl"),
            ("*#LHR", "London"),
            ("*##EGLL", "London"),
        ],
    )
    def test_plain_resolution(self, plain, text, expected):
        assert plain.resolve_airport_token(_token(scan_airport_tokens, text)) == expected

    def test_iata_and_icao_are_not_mixed(self, plain):
        # "EGL" is not an IATA code even though it prefixes an ICAO code
        assert plain.resolve_airport_token(_token(scan_airport_tokens, "#EGL")) == "#EGL"

    def test_first_record_wins(self):
        duplicate = AirportRecord("Other JFK", "US", "Elsewhere", "KJFX", "JFK", "0 0")
        resolver = TokenResolver(
            reference_table=ReferenceTable(records=(JFK, duplicate)),
            style_store=STYLES,
        )
        assert resolver.resolve_airport_token(_token(scan_airport_tokens, "#JFK")) == (
            "John F Kennedy Intl"
        )

    def test_styled_resolution_uses_airport_and_city(self, styled):
        name = styled.resolve_airport_token(_token(scan_airport_tokens, "#JFK"))
        city = styled.resolve_airport_token(_token(scan_airport_tokens, "*#JFK"))

        assert name == "\033[32mJohn F Kennedy Intl\033[0m"
        assert city == "\033[1mNew York\033[0m"

    def test_unresolved_code_is_kept_and_reported_once(self, plain):
        token = _token(scan_airport_tokens, "#ZZZ")

        for _ in range(3):
            assert plain.resolve_airport_token(token) == "#ZZZ"

        diagnostics = plain.diagnostics.diagnostics
        assert len(diagnostics) == 1
        assert diagnostics[0].kind is DiagnosticKind.UNRESOLVED_AIRPORT
        assert diagnostics[0].literal == "#ZZZ"

    def test_unresolved_code_is_not_styled(self, styled):
        assert styled.resolve_airport_token(_token(scan_airport_tokens, "*##ZZZZ")) == (
            "*##ZZZZ"
        )

    def test_substitute_airports(self, plain):
        line = plain.substitute_airports("Depart #JFK (*#JFK) for ##EGLL or #ZZZ")
        assert line == "Depart John F Kennedy Intl (New York) for Heathrow or #ZZZ"


class TestDateTimeTokens:
    """Test suite for date/time token resolution."""

    def _resolve(self, resolver, text):
        return resolver.resolve_datetime_token(_token(scan_datetime_tokens, text))

    def test_date(self, plain):
        assert self._resolve(plain, "D(2024-03-05T10:00Z)") == "05 Mar 2024"

    def test_date_pads_year_to_four_digits(self, plain):
        assert self._resolve(plain, "D(0999-03-05T10:00Z)") == "05 Mar 0999"

    def test_twelve_hour_time(self, plain):
        assert self._resolve(plain, "T12(2024-03-05T14:30+05:00)") == "02:30PM (+05:00)"
        assert self._resolve(plain, "T12(2024-03-05T00:05-02:00)") == "12:05AM (-02:00)"

    def test_twenty_four_hour_time(self, plain):
        assert self._resolve(plain, "T24(2024-03-05T14:30-05:00)") == "14:30 (-05:00)"

    def test_utc_marker_renders_historical_offset(self, plain):
        # Documented quirk: a "Z" value renders as "(-07:00)", not "(+00:00)"
        assert self._resolve(plain, "T24(2024-03-05T10:00Z)") == "10:00 (-07:00)"
        assert UTC_OFFSET_TEXT == "(-07:00)"

    def test_numeric_zero_offset_renders_as_positive(self, plain):
        assert self._resolve(plain, "T24(2024-03-05T10:00+00:00)") == "10:00 (+00:00)"

    def test_unicode_minus_matches_ascii_hyphen(self, plain):
        unicode_minus = self._resolve(plain, "T24(2024-03-05T10:00−05:00)")
        ascii_hyphen = self._resolve(plain, "T24(2024-03-05T10:00-05:00)")
        assert unicode_minus == ascii_hyphen == "10:00 (-05:00)"

    def test_unparseable_value_is_kept_and_reported_once(self, plain):
        for _ in range(2):
            assert self._resolve(plain, "D(2024-13-05T10:00Z)") == "D(2024-13-05T10:00Z)"
        assert self._resolve(plain, "T24(soon)") == "T24(soon)"

        diagnostics = plain.diagnostics.diagnostics
        assert [d.literal for d in diagnostics] == ["2024-13-05T10:00Z", "soon"]
        assert all(d.kind is DiagnosticKind.UNPARSEABLE_DATETIME for d in diagnostics)
        assert all(d.reason for d in diagnostics)

    def test_styled_date(self, styled):
        assert self._resolve(styled, "D(2024-03-05T10:00Z)") == (
            "\033[33m05 Mar 2024\033[0m"
        )

    def test_styled_time_with_negative_offset(self, styled):
        assert self._resolve(styled, "T24(2024-03-05T14:30-05:00)") == (
            "\033[4m14:30\033[0m \033[31m(-05:00)\033[0m"
        )

    def test_styled_time_with_positive_offset(self, styled):
        assert self._resolve(styled, "T12(2024-03-05T14:30+01:00)") == (
            "\033[4m02:30PM\033[0m \033[34m(+01:00)\033[0m"
        )

    def test_styled_utc_uses_negative_offset_style(self, styled):
        assert self._resolve(styled, "T24(2024-03-05T10:00Z)").endswith(
            "\033[31m(-07:00)\033[0m"
        )

    def test_substitute_datetimes(self, plain):
        line = plain.substitute_datetimes("On D(2024-03-05T10:00Z) at T24(2024-03-05T10:00+01:00)")
        assert line == "On 05 Mar 2024 at 10:00 (+01:00)"


def test_format_offset_half_hours():
    from itinerary.text.grammar import parse_datetime_value

    value = "2024-03-05T10:00-09:30"
    assert format_offset(value, parse_datetime_value(value)) == "(-09:30)"


def test_offset_category():
    assert offset_category("(-05:00)") == "OffsetNeg"
    assert offset_category("(+05:00)") == "OffsetPos"


def test_resolver_shares_collector():
    collector = DiagnosticCollector()
    resolver = TokenResolver(
        reference_table=ReferenceTable(), style_store=StyleStore(), diagnostics=collector
    )
    resolver.substitute_airports("#ABC #ABC ##ABCD")
    assert [d.literal for d in collector.diagnostics] == ["#ABC", "##ABCD"]
