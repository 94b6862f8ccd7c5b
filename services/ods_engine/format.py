"""Value formats - named, typed display formats made of ordered parts.

Example:
    v = ValueFormat.new_named("dt0", ValueType.DATETIME)
    v.push_day(FormatNumberStyle.LONG)
    v.push_text(".")
    v.push_month(FormatNumberStyle.LONG, False)
    v.push_text(".")
    v.push_year(FormatNumberStyle.LONG)

    v = ValueFormat.new_named("n3", ValueType.NUMBER)
    v.part_number().decimal_places(3).grouping().push()

All part attributes are stored as strings under their XML attribute names,
so the serializer can write them out untouched.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import render
from .schemas import (
    AttrMap,
    FormatCalendarStyle,
    FormatNumberStyle,
    FormatPartType,
    Locale,
    StyleMap,
    StyleOrigin,
    StyleUse,
    TransliterationStyle,
    ValueType,
    parse_language,
    parse_region,
    parse_script,
)

LocaleLike = Union[Locale, str]


def _as_locale(locale: LocaleLike) -> Locale:
    if isinstance(locale, Locale):
        return locale
    return Locale.parse(locale)


def _bool_string(value: bool) -> str:
    return "true" if value else "false"


def _parse_bool(value: Optional[str]) -> Optional[bool]:
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def color_string(color: Tuple[int, int, int]) -> str:
    """RGB triple as #rrggbb."""
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


# =============================================================================
# FORMAT PART
# =============================================================================

class FormatPart(BaseModel):
    """One structural part of a value format."""
    part_type: FormatPartType
    attr: AttrMap = Field(default_factory=AttrMap)
    content: Optional[str] = None  # Only used by text, currency-symbol and fill-character

    @classmethod
    def new(cls, part_type: FormatPartType) -> "FormatPart":
        return cls(part_type=part_type)

    @classmethod
    def new_with_content(cls, part_type: FormatPartType, content: str) -> "FormatPart":
        return cls(part_type=part_type, content=content)

    def set_attr(self, name: str, value: str) -> None:
        self.attr.set_attr(name, value)

    def attr_def(self, name: str, default: str) -> str:
        """Returns a property or a default."""
        return self.attr.attr_def(name, default)

    def set_content(self, content: str) -> None:
        self.content = content

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def new_boolean(cls) -> "FormatPart":
        return cls.new(FormatPartType.BOOLEAN)

    @classmethod
    def new_number(cls, decimal: int, grouping: bool) -> "FormatPart":
        """Number with up to `decimal` decimal places."""
        return (
            PartNumberBuilder()
            .min_integer_digits(1)
            .decimal_places(decimal)
            .min_decimal_places(0)
            .grouping(grouping)
            .build()
        )

    @classmethod
    def new_number_fix(cls, decimal: int, grouping: bool) -> "FormatPart":
        """Number with exactly `decimal` decimal places."""
        return (
            PartNumberBuilder()
            .min_integer_digits(1)
            .fixed_decimal_places(decimal)
            .grouping(grouping)
            .build()
        )

    @classmethod
    def new_fill_character(cls, fill: str) -> "FormatPart":
        return PartFillCharacterBuilder().fill_char(fill).build()

    @classmethod
    def new_fraction(
        cls,
        denominator: int,
        min_den_digits: int,
        min_int_digits: int,
        min_num_digits: int,
        grouping: bool,
        max_denominator: Optional[int] = None,
    ) -> "FormatPart":
        builder = (
            PartFractionBuilder()
            .denominator(denominator)
            .min_denominator_digits(min_den_digits)
            .min_integer_digits(min_int_digits)
            .min_numerator_digits(min_num_digits)
            .grouping(grouping)
        )
        if max_denominator is not None:
            builder.max_denominator(max_denominator)
        return builder.build()

    @classmethod
    def new_scientific(cls, dec_places: int) -> "FormatPart":
        return PartScientificBuilder().decimal_places(dec_places).build()

    @classmethod
    def new_loc_currency(cls, locale: LocaleLike, symbol: str) -> "FormatPart":
        return PartCurrencyBuilder().locale(locale).symbol(symbol).build()

    @classmethod
    def new_currency(cls, country: str, language: str, symbol: str) -> "FormatPart":
        return PartCurrencyBuilder().country(country).language(language).symbol(symbol).build()

    @classmethod
    def new_day(
        cls,
        style: FormatNumberStyle,
        calendar: FormatCalendarStyle = FormatCalendarStyle.DEFAULT,
    ) -> "FormatPart":
        return PartDayBuilder().style(style).calendar(calendar).build()

    @classmethod
    def new_month(
        cls,
        style: FormatNumberStyle,
        textual: bool,
        possessive: bool = False,
        calendar: FormatCalendarStyle = FormatCalendarStyle.DEFAULT,
    ) -> "FormatPart":
        return (
            PartMonthBuilder()
            .style(style)
            .textual(textual)
            .possessive_form(possessive)
            .calendar(calendar)
            .build()
        )

    @classmethod
    def new_year(
        cls,
        style: FormatNumberStyle,
        calendar: FormatCalendarStyle = FormatCalendarStyle.DEFAULT,
    ) -> "FormatPart":
        return PartYearBuilder().style(style).calendar(calendar).build()

    @classmethod
    def new_era(cls, style: FormatNumberStyle, calendar: FormatCalendarStyle) -> "FormatPart":
        return PartEraBuilder().style(style).calendar(calendar).build()

    @classmethod
    def new_day_of_week(cls, style: FormatNumberStyle, calendar: FormatCalendarStyle) -> "FormatPart":
        return PartDayOfWeekBuilder().style(style).calendar(calendar).build()

    @classmethod
    def new_week_of_year(cls, calendar: FormatCalendarStyle) -> "FormatPart":
        return PartWeekOfYearBuilder().calendar(calendar).build()

    @classmethod
    def new_quarter(cls, style: FormatNumberStyle, calendar: FormatCalendarStyle) -> "FormatPart":
        return PartQuarterBuilder().style(style).calendar(calendar).build()

    @classmethod
    def new_hours(cls, style: FormatNumberStyle) -> "FormatPart":
        return PartHoursBuilder().style(style).build()

    @classmethod
    def new_minutes(cls, style: FormatNumberStyle) -> "FormatPart":
        return PartMinutesBuilder().style(style).build()

    @classmethod
    def new_seconds(cls, style: FormatNumberStyle, dec_places: int) -> "FormatPart":
        return PartSecondsBuilder().style(style).decimal_places(dec_places).build()

    @classmethod
    def new_am_pm(cls) -> "FormatPart":
        return cls.new(FormatPartType.AM_PM)

    @classmethod
    def new_embedded_text(cls, position: int) -> "FormatPart":
        return PartEmbeddedTextBuilder().position(position).build()

    @classmethod
    def new_text(cls, text: str) -> "FormatPart":
        return cls.new_with_content(FormatPartType.TEXT, text)

    @classmethod
    def new_text_content(cls) -> "FormatPart":
        return cls.new(FormatPartType.TEXT_CONTENT)


# =============================================================================
# PART BUILDERS
# =============================================================================

class PartBuilder:
    """Fluent builder for one format part.

    Setters return the builder. build() hands out a copy of the part, push()
    appends a copy to the value format the builder was created from, so the
    builder can be changed and pushed again.
    """
    part_type: FormatPartType = FormatPartType.TEXT

    def __init__(
        self,
        value_format: Optional["ValueFormat"] = None,
        part_type: Optional[FormatPartType] = None,
    ):
        self._value_format = value_format
        self._part = FormatPart.new(part_type or self.part_type)

    def _set(self, name: str, value: str):
        self._part.set_attr(name, value)
        return self

    def _flag(self, name: str, flag: bool):
        if flag:
            self._part.set_attr(name, "true")
        else:
            self._part.attr.clear_attr(name)
        return self

    def build(self) -> FormatPart:
        return self._part.model_copy(deep=True)

    def push(self) -> None:
        if self._value_format is None:
            raise ValueError("Part builder is not bound to a value format")
        self._value_format.push_part(self.build())


class _StyleMixin:
    def style(self, style: FormatNumberStyle):
        return self._set("number:style", FormatNumberStyle(style).value)

    def long_style(self):
        return self.style(FormatNumberStyle.LONG)

    def short_style(self):
        return self.style(FormatNumberStyle.SHORT)


class _CalendarMixin:
    def calendar(self, calendar: FormatCalendarStyle):
        calendar = FormatCalendarStyle(calendar)
        if calendar == FormatCalendarStyle.DEFAULT:
            self._part.attr.clear_attr("number:calendar")
            return self
        return self._set("number:calendar", calendar.value)


class _DecimalPlacesMixin:
    def decimal_places(self, places: int):
        return self._set("number:decimal-places", str(places))


class _DigitsMixin:
    def min_integer_digits(self, digits: int):
        return self._set("number:min-integer-digits", str(digits))

    def grouping(self, flag: bool = True):
        return self._flag("number:grouping", flag)


class PartNumberBuilder(_DecimalPlacesMixin, _DigitsMixin, PartBuilder):
    part_type = FormatPartType.NUMBER

    def min_decimal_places(self, places: int):
        return self._set("number:min-decimal-places", str(places))

    def fixed_decimal_places(self, places: int):
        """Shows exactly this many decimal places, padding with zeros."""
        self.decimal_places(places)
        return self.min_decimal_places(places)

    def display_factor(self, factor: float):
        return self._set("number:display-factor", str(factor))

    def decimal_replacement(self, replacement: str):
        return self._set("number:decimal-replacement", replacement)


class PartFillCharacterBuilder(PartBuilder):
    part_type = FormatPartType.FILL_CHARACTER

    def fill_char(self, fill: str):
        self._part.set_content(fill)
        return self


class PartScientificBuilder(_DecimalPlacesMixin, _DigitsMixin, PartBuilder):
    part_type = FormatPartType.SCIENTIFIC_NUMBER

    def min_exponent_digits(self, digits: int):
        return self._set("number:min-exponent-digits", str(digits))


class PartFractionBuilder(_DigitsMixin, PartBuilder):
    part_type = FormatPartType.FRACTION

    def denominator(self, denominator: int):
        return self._set("number:denominator-value", str(denominator))

    def max_denominator(self, denominator: int):
        return self._set("number:max-denominator-value", str(denominator))

    def min_denominator_digits(self, digits: int):
        return self._set("number:min-denominator-digits", str(digits))

    def min_numerator_digits(self, digits: int):
        return self._set("number:min-numerator-digits", str(digits))


class PartCurrencyBuilder(PartBuilder):
    part_type = FormatPartType.CURRENCY_SYMBOL

    def locale(self, locale: LocaleLike):
        locale = _as_locale(locale)
        self._set("number:language", locale.language)
        if locale.region:
            self._set("number:country", locale.region)
        if locale.script:
            self._set("number:script", locale.script)
        return self

    def country(self, country: str):
        return self._set("number:country", country)

    def language(self, language: str):
        return self._set("number:language", language)

    def symbol(self, symbol: str):
        self._part.set_content(symbol)
        return self


class PartDayBuilder(_StyleMixin, _CalendarMixin, PartBuilder):
    part_type = FormatPartType.DAY


class PartMonthBuilder(_StyleMixin, _CalendarMixin, PartBuilder):
    part_type = FormatPartType.MONTH

    def textual(self, flag: bool = True):
        return self._set("number:textual", _bool_string(flag))

    def possessive_form(self, flag: bool = True):
        return self._flag("number:possessive-form", flag)


class PartYearBuilder(_StyleMixin, _CalendarMixin, PartBuilder):
    part_type = FormatPartType.YEAR


class PartEraBuilder(_StyleMixin, _CalendarMixin, PartBuilder):
    part_type = FormatPartType.ERA


class PartDayOfWeekBuilder(_StyleMixin, _CalendarMixin, PartBuilder):
    part_type = FormatPartType.DAY_OF_WEEK


class PartWeekOfYearBuilder(_StyleMixin, _CalendarMixin, PartBuilder):
    part_type = FormatPartType.WEEK_OF_YEAR


class PartQuarterBuilder(_StyleMixin, _CalendarMixin, PartBuilder):
    part_type = FormatPartType.QUARTER


class PartHoursBuilder(_StyleMixin, PartBuilder):
    part_type = FormatPartType.HOURS


class PartMinutesBuilder(_StyleMixin, PartBuilder):
    part_type = FormatPartType.MINUTES


class PartSecondsBuilder(_StyleMixin, _DecimalPlacesMixin, PartBuilder):
    part_type = FormatPartType.SECONDS


class PartEmbeddedTextBuilder(PartBuilder):
    part_type = FormatPartType.EMBEDDED_TEXT

    def position(self, position: int):
        return self._set("number:position", str(position))


class PartTextBuilder(PartBuilder):
    part_type = FormatPartType.TEXT

    def text(self, text: str):
        self._part.set_content(text)
        return self


# =============================================================================
# VALUE FORMAT
# =============================================================================

class ValueFormat(BaseModel):
    """Actual textual formatting of values.

    The value type is never EMPTY. This is checked on construction and on
    every assignment.
    """
    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    value_type: ValueType = ValueType.TEXT
    origin: StyleOrigin = StyleOrigin.STYLES
    styleuse: StyleUse = StyleUse.DEFAULT

    # Properties of the format (number:language, style:volatile, ...)
    attr: AttrMap = Field(default_factory=AttrMap)
    # Text properties for the formatted text (fo:color, ...)
    textstyle: AttrMap = Field(default_factory=AttrMap)

    parts: List[FormatPart] = []
    stylemaps: Optional[List[StyleMap]] = None

    @field_validator("value_type")
    @classmethod
    def _not_empty(cls, value_type: ValueType) -> ValueType:
        if value_type == ValueType.EMPTY:
            raise ValueError("A value format can't have the value type 'empty'")
        return value_type

    @classmethod
    def new(cls, name: str, value_type: ValueType) -> "ValueFormat":
        return cls(name=name, value_type=value_type)

    @classmethod
    def new_named(cls, name: str, value_type: ValueType) -> "ValueFormat":
        return cls.new(name, value_type)

    @classmethod
    def new_with_locale(cls, name: str, locale: LocaleLike, value_type: ValueType) -> "ValueFormat":
        """New format with number:language/country/script taken from the locale."""
        locale = _as_locale(locale)
        v = cls(name=name, value_type=value_type)
        v.set_language(locale.language)
        if locale.region:
            v.set_country(locale.region)
        if locale.script:
            v.set_script(locale.script)
        return v

    def format_ref(self) -> str:
        """Name used by cell styles to reference this format."""
        return self.name

    def set_value_type(self, value_type: ValueType) -> None:
        self.value_type = value_type

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def set_title(self, title: str) -> None:
        self.attr.set_attr("number:title", title)

    def title(self) -> Optional[str]:
        return self.attr.attr("number:title")

    def set_display_name(self, name: str) -> None:
        """Name as it should appear in the user interface."""
        self.attr.set_attr("style:display-name", name)

    def display_name(self) -> Optional[str]:
        return self.attr.attr("style:display-name")

    def set_country(self, country: str) -> None:
        """Country code for locale-dependent formatting. System settings if unset."""
        region = parse_region(country)
        if region is None:
            raise ValueError(f"Invalid country code: {country}")
        self.attr.set_attr("number:country", region)

    def country(self) -> Optional[str]:
        return parse_region(self.attr.attr_def("number:country", ""))

    def set_language(self, language: str) -> None:
        lang = parse_language(language)
        if lang is None:
            raise ValueError(f"Invalid language code: {language}")
        self.attr.set_attr("number:language", lang)

    def language(self) -> Optional[str]:
        return parse_language(self.attr.attr_def("number:language", ""))

    def set_script(self, script: str) -> None:
        value = parse_script(script)
        if value is None:
            raise ValueError(f"Invalid script code: {script}")
        self.attr.set_attr("number:script", value)

    def script(self) -> Optional[str]:
        return parse_script(self.attr.attr_def("number:script", ""))

    def set_transliteration_country(self, country: str) -> None:
        region = parse_region(country)
        if region is None:
            raise ValueError(f"Invalid country code: {country}")
        self.attr.set_attr("number:transliteration-country", region)

    def transliteration_country(self) -> Optional[str]:
        return parse_region(self.attr.attr_def("number:transliteration-country", ""))

    def set_transliteration_language(self, language: str) -> None:
        lang = parse_language(language)
        if lang is None:
            raise ValueError(f"Invalid language code: {language}")
        self.attr.set_attr("number:transliteration-language", lang)

    def transliteration_language(self) -> Optional[str]:
        return parse_language(self.attr.attr_def("number:transliteration-language", ""))

    def set_transliteration_format(self, digit_one: str) -> None:
        """The "1" digit of the number system to use, e.g. "١"."""
        if len(digit_one) != 1:
            raise ValueError(f"Expected a single character, got {digit_one!r}")
        self.attr.set_attr("number:transliteration-format", digit_one)

    def transliteration_format(self) -> Optional[str]:
        value = self.attr.attr("number:transliteration-format")
        return value[0] if value else None

    def set_transliteration_style(self, style: TransliterationStyle) -> None:
        self.attr.set_attr("number:transliteration-style", TransliterationStyle(style).value)

    def transliteration_style(self) -> Optional[TransliterationStyle]:
        value = self.attr.attr("number:transliteration-style")
        try:
            return TransliterationStyle(value)
        except ValueError:
            return None

    def set_volatile(self, volatile: bool) -> None:
        """Whether consumers keep this style when it's unused."""
        self.attr.set_attr("style:volatile", _bool_string(volatile))

    def volatile(self) -> Optional[bool]:
        return _parse_bool(self.attr.attr("style:volatile"))

    def set_fill_character(self, fill: str) -> None:
        if len(fill) != 1:
            raise ValueError(f"Expected a single character, got {fill!r}")
        self.attr.set_attr("number:fill-character", fill)

    def fill_character(self) -> Optional[str]:
        value = self.attr.attr("number:fill-character")
        return value[0] if value else None

    def set_automatic_order(self, automatic: bool) -> None:
        """Reorder date/currency parts to the locale's default order."""
        self.attr.set_attr("number:automatic-order", _bool_string(automatic))

    def automatic_order(self) -> Optional[bool]:
        return _parse_bool(self.attr.attr("number:automatic-order"))

    # -------------------------------------------------------------------------
    # Text style
    # -------------------------------------------------------------------------

    def set_color(self, color: Tuple[int, int, int]) -> None:
        self.textstyle.set_attr("fo:color", color_string(color))

    def set_font_name(self, name: str) -> None:
        self.textstyle.set_attr("style:font-name", name)

    def set_font_size(self, size_pt: float) -> None:
        self.textstyle.set_attr("fo:font-size", f"{size_pt}pt")

    def set_font_weight(self, weight: str) -> None:
        self.textstyle.set_attr("fo:font-weight", weight)

    def set_font_bold(self) -> None:
        self.set_font_weight("bold")

    def set_font_style(self, style: str) -> None:
        self.textstyle.set_attr("fo:font-style", style)

    def set_font_italic(self) -> None:
        self.set_font_style("italic")

    # -------------------------------------------------------------------------
    # Parts
    # -------------------------------------------------------------------------

    def push_part(self, part: FormatPart) -> None:
        self.parts.append(part)

    def push_parts(self, parts: List[FormatPart]) -> None:
        """Appends all parts and empties the given list."""
        moved = list(parts)
        parts.clear()
        self.parts.extend(moved)

    def parts_mut(self) -> List[FormatPart]:
        return self.parts

    def push_boolean(self) -> None:
        self.push_part(FormatPart.new_boolean())

    def push_number(self, decimal: int, grouping: bool) -> None:
        self.push_part(FormatPart.new_number(decimal, grouping))

    def push_number_fix(self, decimal: int, grouping: bool) -> None:
        self.push_part(FormatPart.new_number_fix(decimal, grouping))

    def push_fill_character(self, fill: str) -> None:
        self.push_part(FormatPart.new_fill_character(fill))

    def push_fraction(
        self,
        denominator: int,
        min_den_digits: int,
        min_int_digits: int,
        min_num_digits: int,
        grouping: bool,
        max_denominator: Optional[int] = None,
    ) -> None:
        self.push_part(FormatPart.new_fraction(
            denominator,
            min_den_digits,
            min_int_digits,
            min_num_digits,
            grouping,
            max_denominator,
        ))

    def push_scientific(self, dec_places: int) -> None:
        self.push_part(FormatPart.new_scientific(dec_places))

    def push_loc_currency(self, locale: LocaleLike, symbol: str) -> None:
        self.push_part(FormatPart.new_loc_currency(locale, symbol))

    def push_currency(self, country: str, language: str, symbol: str) -> None:
        self.push_part(FormatPart.new_currency(country, language, symbol))

    def push_day(
        self,
        style: FormatNumberStyle,
        calendar: FormatCalendarStyle = FormatCalendarStyle.DEFAULT,
    ) -> None:
        self.push_part(FormatPart.new_day(style, calendar))

    def push_month(
        self,
        style: FormatNumberStyle,
        textual: bool,
        possessive: bool = False,
        calendar: FormatCalendarStyle = FormatCalendarStyle.DEFAULT,
    ) -> None:
        self.push_part(FormatPart.new_month(style, textual, possessive, calendar))

    def push_year(
        self,
        style: FormatNumberStyle,
        calendar: FormatCalendarStyle = FormatCalendarStyle.DEFAULT,
    ) -> None:
        self.push_part(FormatPart.new_year(style, calendar))

    def push_era(self, style: FormatNumberStyle, calendar: FormatCalendarStyle) -> None:
        self.push_part(FormatPart.new_era(style, calendar))

    def push_day_of_week(self, style: FormatNumberStyle, calendar: FormatCalendarStyle) -> None:
        self.push_part(FormatPart.new_day_of_week(style, calendar))

    def push_week_of_year(self, calendar: FormatCalendarStyle) -> None:
        self.push_part(FormatPart.new_week_of_year(calendar))

    def push_quarter(self, style: FormatNumberStyle, calendar: FormatCalendarStyle) -> None:
        self.push_part(FormatPart.new_quarter(style, calendar))

    def push_hours(self, style: FormatNumberStyle) -> None:
        self.push_part(FormatPart.new_hours(style))

    def push_minutes(self, style: FormatNumberStyle) -> None:
        self.push_part(FormatPart.new_minutes(style))

    def push_seconds(self, style: FormatNumberStyle, dec_places: int) -> None:
        self.push_part(FormatPart.new_seconds(style, dec_places))

    def push_am_pm(self) -> None:
        self.push_part(FormatPart.new_am_pm())

    def push_embedded_text(self, position: int) -> None:
        self.push_part(FormatPart.new_embedded_text(position))

    def push_text(self, text: str) -> None:
        self.push_part(FormatPart.new_text(text))

    def push_text_content(self) -> None:
        self.push_part(FormatPart.new_text_content())

    # Fluent builders

    def part_number(self) -> PartNumberBuilder:
        return PartNumberBuilder(self)

    def part_fill_character(self) -> PartFillCharacterBuilder:
        return PartFillCharacterBuilder(self)

    def part_scientific(self) -> PartScientificBuilder:
        return PartScientificBuilder(self)

    def part_fraction(self) -> PartFractionBuilder:
        return PartFractionBuilder(self)

    def part_currency(self) -> PartCurrencyBuilder:
        return PartCurrencyBuilder(self)

    def part_day(self) -> PartDayBuilder:
        return PartDayBuilder(self)

    def part_month(self) -> PartMonthBuilder:
        return PartMonthBuilder(self)

    def part_year(self) -> PartYearBuilder:
        return PartYearBuilder(self)

    def part_era(self) -> PartEraBuilder:
        return PartEraBuilder(self)

    def part_day_of_week(self) -> PartDayOfWeekBuilder:
        return PartDayOfWeekBuilder(self)

    def part_week_of_year(self) -> PartWeekOfYearBuilder:
        return PartWeekOfYearBuilder(self)

    def part_quarter(self) -> PartQuarterBuilder:
        return PartQuarterBuilder(self)

    def part_hours(self) -> PartHoursBuilder:
        return PartHoursBuilder(self)

    def part_minutes(self) -> PartMinutesBuilder:
        return PartMinutesBuilder(self)

    def part_seconds(self) -> PartSecondsBuilder:
        return PartSecondsBuilder(self)

    def part_am_pm(self) -> PartBuilder:
        return PartBuilder(self, FormatPartType.AM_PM)

    def part_boolean(self) -> PartBuilder:
        return PartBuilder(self, FormatPartType.BOOLEAN)

    def part_embedded_text(self) -> PartEmbeddedTextBuilder:
        return PartEmbeddedTextBuilder(self)

    def part_text(self, text: str) -> PartTextBuilder:
        return PartTextBuilder(self).text(text)

    def part_text_content(self) -> PartBuilder:
        return PartBuilder(self, FormatPartType.TEXT_CONTENT)

    # -------------------------------------------------------------------------
    # Style maps
    # -------------------------------------------------------------------------

    def push_stylemap(self, stylemap: StyleMap) -> None:
        self.stylemaps_mut().append(stylemap)

    def stylemaps_mut(self) -> List[StyleMap]:
        if self.stylemaps is None:
            self.stylemaps = []
        return self.stylemaps

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def format_boolean(self, value: bool) -> str:
        return render.format_boolean(self, value)

    def format_float(self, value: float) -> str:
        return render.format_float(self, value)

    def format_str(self, value: str) -> str:
        return render.format_str(self, value)

    def format_datetime(self, value: datetime) -> str:
        return render.format_datetime(self, value)

    def format_time_duration(self, value: timedelta) -> str:
        return render.format_time_duration(self, value)


# =============================================================================
# FACTORIES
# =============================================================================

def create_boolean_format(name: str) -> ValueFormat:
    v = ValueFormat.new_named(name, ValueType.BOOLEAN)
    v.push_boolean()
    return v


def create_number_format(name: str, decimal: int, grouping: bool) -> ValueFormat:
    v = ValueFormat.new_named(name, ValueType.NUMBER)
    v.push_number(decimal, grouping)
    return v


def create_number_format_fixed(name: str, decimal: int, grouping: bool) -> ValueFormat:
    """Number format with a fixed number of decimal places."""
    v = ValueFormat.new_named(name, ValueType.NUMBER)
    v.push_number_fix(decimal, grouping)
    return v


def create_percentage_format(name: str, decimal: int) -> ValueFormat:
    v = ValueFormat.new_named(name, ValueType.PERCENTAGE)
    v.push_number_fix(decimal, False)
    v.push_text("%")
    return v


def create_currency_prefix(name: str, country: str, language: str, symbol: str) -> ValueFormat:
    v = ValueFormat.new_named(name, ValueType.CURRENCY)
    v.push_currency(country, language, symbol)
    v.push_text(" ")
    v.push_number_fix(2, True)
    return v


def create_currency_suffix(name: str, country: str, language: str, symbol: str) -> ValueFormat:
    v = ValueFormat.new_named(name, ValueType.CURRENCY)
    v.push_number_fix(2, True)
    v.push_text(" ")
    v.push_currency(country, language, symbol)
    return v


def _push_ymd(v: ValueFormat, sep: str) -> None:
    v.push_year(FormatNumberStyle.LONG)
    v.push_text(sep)
    v.push_month(FormatNumberStyle.LONG, False)
    v.push_text(sep)
    v.push_day(FormatNumberStyle.LONG)


def _push_dmy(v: ValueFormat) -> None:
    v.push_day(FormatNumberStyle.LONG)
    v.push_text(".")
    v.push_month(FormatNumberStyle.LONG, False)
    v.push_text(".")
    v.push_year(FormatNumberStyle.LONG)


def _push_mdy(v: ValueFormat) -> None:
    v.push_month(FormatNumberStyle.LONG, False)
    v.push_text("/")
    v.push_day(FormatNumberStyle.LONG)
    v.push_text("/")
    v.push_year(FormatNumberStyle.LONG)


def _push_hms(v: ValueFormat) -> None:
    v.push_hours(FormatNumberStyle.LONG)
    v.push_text(":")
    v.push_minutes(FormatNumberStyle.LONG)
    v.push_text(":")
    v.push_seconds(FormatNumberStyle.LONG, 0)


def create_date_iso_format(name: str) -> ValueFormat:
    """YYYY-MM-DD"""
    v = ValueFormat.new_named(name, ValueType.DATETIME)
    _push_ymd(v, "-")
    return v


def create_date_dmy_format(name: str) -> ValueFormat:
    """DD.MM.YYYY"""
    v = ValueFormat.new_named(name, ValueType.DATETIME)
    _push_dmy(v)
    return v


def create_date_mdy_format(name: str) -> ValueFormat:
    """MM/DD/YYYY"""
    v = ValueFormat.new_named(name, ValueType.DATETIME)
    _push_mdy(v)
    return v


def create_datetime_format(name: str) -> ValueFormat:
    """YYYY-MM-DD HH:MM:SS"""
    v = ValueFormat.new_named(name, ValueType.DATETIME)
    _push_ymd(v, "-")
    v.push_text(" ")
    _push_hms(v)
    return v


def create_time_format(name: str) -> ValueFormat:
    """HH:MM:SS duration"""
    v = ValueFormat.new_named(name, ValueType.TIME_DURATION)
    _push_hms(v)
    return v


def create_loc_boolean_format(name: str, locale: LocaleLike) -> ValueFormat:
    v = ValueFormat.new_with_locale(name, locale, ValueType.BOOLEAN)
    v.push_boolean()
    return v


def create_loc_number_format(name: str, locale: LocaleLike, decimal: int, grouping: bool) -> ValueFormat:
    v = ValueFormat.new_with_locale(name, locale, ValueType.NUMBER)
    v.push_number(decimal, grouping)
    return v


def create_loc_percentage_format(name: str, locale: LocaleLike, decimal: int) -> ValueFormat:
    v = ValueFormat.new_with_locale(name, locale, ValueType.PERCENTAGE)
    v.push_number_fix(decimal, False)
    v.push_text("%")
    return v


def create_loc_currency_prefix(
    name: str,
    locale: LocaleLike,
    symbol_locale: LocaleLike,
    symbol: str,
) -> ValueFormat:
    v = ValueFormat.new_with_locale(name, locale, ValueType.CURRENCY)
    v.push_loc_currency(symbol_locale, symbol)
    v.push_text(" ")
    v.push_number_fix(2, True)
    return v


def create_loc_currency_suffix(
    name: str,
    locale: LocaleLike,
    symbol_locale: LocaleLike,
    symbol: str,
) -> ValueFormat:
    v = ValueFormat.new_with_locale(name, locale, ValueType.CURRENCY)
    v.push_number_fix(2, True)
    v.push_text(" ")
    v.push_loc_currency(symbol_locale, symbol)
    return v


def create_loc_date_dmy_format(name: str, locale: LocaleLike) -> ValueFormat:
    v = ValueFormat.new_with_locale(name, locale, ValueType.DATETIME)
    _push_dmy(v)
    return v


def create_loc_date_mdy_format(name: str, locale: LocaleLike) -> ValueFormat:
    v = ValueFormat.new_with_locale(name, locale, ValueType.DATETIME)
    _push_mdy(v)
    return v


def create_loc_datetime_format(name: str, locale: LocaleLike) -> ValueFormat:
    v = ValueFormat.new_with_locale(name, locale, ValueType.DATETIME)
    _push_dmy(v)
    v.push_text(" ")
    _push_hms(v)
    return v


def create_loc_time_format(name: str, locale: LocaleLike) -> ValueFormat:
    v = ValueFormat.new_with_locale(name, locale, ValueType.TIME_DURATION)
    _push_hms(v)
    return v
