"""Tests for value rendering.

Covers:
- Numbers, scientific notation, currency and percentage
- Booleans and text content
- Date-time parts, 12-hour clock coupling and part order
- Durations (total hours, signed remainders)
- Malformed attributes falling back to defaults
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

# Add project root to path (tests/ods/ -> tests/ -> project root)
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from services.engine_config import reload_engine_settings
from services.ods_engine import (
    FormatCalendarStyle,
    FormatNumberStyle,
    FormatPart,
    FormatPartType,
    ValueFormat,
    ValueType,
    create_boolean_format,
    create_currency_suffix,
    create_datetime_format,
    create_percentage_format,
    create_time_format,
    format_float,
)


SAMPLE_DATE = datetime(2024, 3, 7, 13, 5, 9)  # a Thursday


def _format(value_type, *parts):
    v = ValueFormat.new_named("test", value_type)
    for part in parts:
        v.push_part(part)
    return v


@pytest.fixture
def settings_env(monkeypatch):
    """Reloads engine settings from a patched environment, restores afterwards."""
    def apply(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return reload_engine_settings()

    yield apply
    monkeypatch.undo()
    reload_engine_settings()


class TestNumbers:
    """format_float with number-like parts."""

    def test_decimal_places(self):
        v = _format(ValueType.NUMBER, FormatPart.new_number(2, False))
        assert v.format_float(1.234567) == "1.23"
        assert v.format_float(-0.5) == "-0.50"

    @pytest.mark.parametrize("places", range(0, 9))
    @pytest.mark.parametrize("value", [1.234567891, -98.7654321, 0.0])
    def test_fraction_digits_match_decimal_places(self, places, value):
        v = _format(ValueType.NUMBER, FormatPart.new_number(places, False))
        text = v.format_float(value)

        integer, _, fraction = text.partition(".")
        assert len(fraction) == places
        assert fraction.isdigit() or places == 0
        assert float(text) == round(value, places)

    def test_binary_rounding(self):
        # 1.005 is slightly below 1.005 in binary
        v = _format(ValueType.NUMBER, FormatPart.new_number(2, False))
        assert v.format_float(1.005) == "1.00"

    def test_zero_places(self):
        v = _format(ValueType.NUMBER, FormatPart.new_number(0, False))
        assert v.format_float(2.5) == "2"
        assert v.format_float(3.5) == "4"

    def test_missing_decimal_places(self):
        v = _format(ValueType.NUMBER, FormatPart.new(FormatPartType.NUMBER))
        assert v.format_float(1.6) == "2"

    @pytest.mark.parametrize("raw", ["abc", "", "-3", "1.5"])
    def test_malformed_decimal_places(self, raw):
        part = FormatPart.new(FormatPartType.NUMBER)
        part.set_attr("number:decimal-places", raw)
        v = _format(ValueType.NUMBER, part)
        assert v.format_float(7.25) == "7"

    def test_decimal_places_clamped_by_settings(self, settings_env):
        settings_env(ODS_MAX_DECIMAL_PLACES="3")
        v = _format(ValueType.NUMBER, FormatPart.new_number(10, False))
        assert v.format_float(0.5) == "0.500"

    def test_scientific(self):
        v = _format(ValueType.NUMBER, FormatPart.new_scientific(2))
        assert v.format_float(1234.5) == "1.23e+03"

    def test_scientific_default_precision(self):
        v = _format(ValueType.NUMBER, FormatPart.new(FormatPartType.SCIENTIFIC_NUMBER))
        assert v.format_float(1234.5) == "1.234500e+03"

    def test_currency_suffix(self):
        v = create_currency_suffix("eur", "AT", "de", "€")
        assert v.format_float(1234.5) == "1234.50 €"

    def test_percentage(self):
        v = create_percentage_format("p2", 2)
        assert v.format_float(12.5) == "12.50%"

    def test_grouping_is_not_rendered(self):
        v = _format(ValueType.NUMBER, FormatPart.new_number_fix(0, True))
        assert v.format_float(1234567.0) == "1234567"

    def test_unrelated_parts_are_skipped(self):
        v = _format(
            ValueType.NUMBER,
            FormatPart.new_day(FormatNumberStyle.LONG),
            FormatPart.new_boolean(),
            FormatPart.new_fraction(4, 1, 1, 1, False),
            FormatPart.new_number(1, False),
        )
        assert v.format_float(2.25) == "2.2"

    def test_module_function_matches_method(self):
        v = _format(ValueType.NUMBER, FormatPart.new_number(3, False))
        assert format_float(v, 3.14159) == v.format_float(3.14159) == "3.142"


class TestBooleanAndText:
    """format_boolean and format_str."""

    def test_boolean(self):
        v = create_boolean_format("b")
        assert v.format_boolean(True) == "true"
        assert v.format_boolean(False) == "false"

    def test_text_content(self):
        v = _format(
            ValueType.TEXT,
            FormatPart.new_text("<"),
            FormatPart.new_text_content(),
            FormatPart.new_text(">"),
        )
        assert v.format_str("abc") == "<abc>"

    def test_text_content_ignored_for_numbers(self):
        v = _format(ValueType.TEXT, FormatPart.new_text_content())
        assert v.format_float(1.0) == ""


class TestDegenerateFormats:
    """Formats without value parts."""

    def test_no_parts_renders_empty(self):
        v = ValueFormat.new_named("empty", ValueType.TEXT)
        assert v.format_boolean(True) == ""
        assert v.format_float(1.5) == ""
        assert v.format_str("abc") == ""
        assert v.format_datetime(SAMPLE_DATE) == ""
        assert v.format_time_duration(timedelta(hours=1)) == ""

    def test_text_only_renders_literal(self):
        v = _format(ValueType.TEXT, FormatPart.new_text("X"))
        assert v.format_boolean(False) == "X"
        assert v.format_float(1.5) == "X"
        assert v.format_str("abc") == "X"
        assert v.format_datetime(SAMPLE_DATE) == "X"
        assert v.format_time_duration(timedelta(minutes=5)) == "X"

    def test_rendering_leaves_format_untouched(self):
        v = create_datetime_format("dt")
        before = v.model_dump()
        v.format_datetime(SAMPLE_DATE)
        v.format_float(1.0)
        assert v.model_dump() == before


class TestDateTime:
    """format_datetime."""

    def test_datetime_factory(self):
        v = create_datetime_format("dt")
        assert v.format_datetime(datetime(2024, 3, 7, 9, 5, 3)) == "2024-03-07 09:05:03"

    def test_part_order_is_preserved(self):
        v = _format(
            ValueType.DATETIME,
            FormatPart.new_day(FormatNumberStyle.LONG),
            FormatPart.new_text("."),
            FormatPart.new_month(FormatNumberStyle.LONG, False),
        )
        assert v.format_datetime(SAMPLE_DATE) == "07.03"

        reversed_format = _format(
            ValueType.DATETIME,
            FormatPart.new_month(FormatNumberStyle.LONG, False),
            FormatPart.new_text("."),
            FormatPart.new_day(FormatNumberStyle.LONG),
        )
        assert reversed_format.format_datetime(SAMPLE_DATE) == "03.07"

    def test_short_styles(self):
        v = _format(
            ValueType.DATETIME,
            FormatPart.new_day(FormatNumberStyle.SHORT),
            FormatPart.new_text("/"),
            FormatPart.new_month(FormatNumberStyle.SHORT, False),
            FormatPart.new_text("/"),
            FormatPart.new_year(FormatNumberStyle.SHORT),
        )
        assert v.format_datetime(SAMPLE_DATE) == "7/3/24"

    def test_textual_month(self):
        long_month = _format(ValueType.DATETIME, FormatPart.new_month(FormatNumberStyle.LONG, True))
        short_month = _format(ValueType.DATETIME, FormatPart.new_month(FormatNumberStyle.SHORT, True))
        assert long_month.format_datetime(SAMPLE_DATE) == "March"
        assert short_month.format_datetime(SAMPLE_DATE) == "Mar"

    def test_day_of_week(self):
        long_dow = _format(
            ValueType.DATETIME,
            FormatPart.new_day_of_week(FormatNumberStyle.LONG, FormatCalendarStyle.DEFAULT),
        )
        short_dow = _format(
            ValueType.DATETIME,
            FormatPart.new_day_of_week(FormatNumberStyle.SHORT, FormatCalendarStyle.DEFAULT),
        )
        assert long_dow.format_datetime(SAMPLE_DATE) == "Thursday"
        assert short_dow.format_datetime(SAMPLE_DATE) == "Thu"

    def test_week_of_year(self):
        v = _format(ValueType.DATETIME, FormatPart.new_week_of_year(FormatCalendarStyle.DEFAULT))
        assert v.format_datetime(SAMPLE_DATE) == "10"

    def test_24_hour_clock_without_am_pm(self):
        v = _format(ValueType.DATETIME, FormatPart.new_hours(FormatNumberStyle.LONG))
        assert v.format_datetime(SAMPLE_DATE) == "13"

    def test_am_pm_switches_to_12_hour_clock(self):
        v = _format(
            ValueType.DATETIME,
            FormatPart.new_hours(FormatNumberStyle.LONG),
            FormatPart.new_text(" "),
            FormatPart.new_am_pm(),
        )
        assert v.format_datetime(SAMPLE_DATE) == "01 PM"

    def test_am_pm_anywhere_in_format(self):
        v = _format(
            ValueType.DATETIME,
            FormatPart.new_am_pm(),
            FormatPart.new_text(" "),
            FormatPart.new_hours(FormatNumberStyle.SHORT),
        )
        assert v.format_datetime(datetime(2024, 3, 7, 0, 30)) == "AM 12"

    def test_era_and_quarter_render_nothing(self):
        v = _format(
            ValueType.DATETIME,
            FormatPart.new_era(FormatNumberStyle.LONG, FormatCalendarStyle.GREGORIAN),
            FormatPart.new_quarter(FormatNumberStyle.LONG, FormatCalendarStyle.DEFAULT),
            FormatPart.new_text("|"),
        )
        assert v.format_datetime(SAMPLE_DATE) == "|"


class TestDurations:
    """format_time_duration."""

    def _hms(self):
        return create_time_format("t")

    def test_hours_and_minutes(self):
        v = _format(
            ValueType.TIME_DURATION,
            FormatPart.new_hours(FormatNumberStyle.LONG),
            FormatPart.new_text(":"),
            FormatPart.new_minutes(FormatNumberStyle.LONG),
        )
        assert v.format_time_duration(timedelta(minutes=90)) == "1:30"
        assert v.format_time_duration(timedelta(minutes=60)) == "1:0"

    def test_hours_are_not_clamped_to_a_day(self):
        v = _format(ValueType.TIME_DURATION, FormatPart.new_hours(FormatNumberStyle.LONG))
        assert v.format_time_duration(timedelta(hours=26)) == "26"

    def test_all_units(self):
        assert self._hms().format_time_duration(timedelta(seconds=3725)) == "1:2:5"

    def test_fractional_seconds_dropped(self):
        assert self._hms().format_time_duration(timedelta(seconds=59.9)) == "0:0:59"

    def test_negative_duration(self):
        assert self._hms().format_time_duration(timedelta(minutes=-90)) == "-1:-30:0"
        assert self._hms().format_time_duration(timedelta(seconds=-30)) == "0:0:-30"
        print("\n✓ Negative durations keep their sign in every unit")
