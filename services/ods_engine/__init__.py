"""ODS Engine - value formats for OpenDocument spreadsheets.

This module handles:
1. Building value formats (number, currency, date/time, boolean, text) from ordered parts
2. Rendering booleans, numbers, strings, date-times and durations through a format
3. Reading and writing the number:*-style XML of ODS documents
4. Registering formats by name for use by cell styles
"""

from .schemas import (
    # Core
    ValueType,
    StyleOrigin,
    StyleUse,
    FormatPartType,
    FormatNumberStyle,
    FormatCalendarStyle,
    TransliterationStyle,
    AttrMap,
    Locale,
    StyleMap,
    # Errors
    ValueFormatError,
    FormatError,
    DigitExpectedError,
)
from .format import (
    FormatPart,
    ValueFormat,
    PartBuilder,
    create_boolean_format,
    create_number_format,
    create_number_format_fixed,
    create_percentage_format,
    create_currency_prefix,
    create_currency_suffix,
    create_date_iso_format,
    create_date_dmy_format,
    create_date_mdy_format,
    create_datetime_format,
    create_time_format,
    create_loc_boolean_format,
    create_loc_number_format,
    create_loc_percentage_format,
    create_loc_currency_prefix,
    create_loc_currency_suffix,
    create_loc_date_dmy_format,
    create_loc_date_mdy_format,
    create_loc_datetime_format,
    create_loc_time_format,
)
from .render import (
    format_boolean,
    format_float,
    format_str,
    format_datetime,
    format_time_duration,
)
from .parser import parse_value_format, parse_value_formats
from .writer import value_format_to_element, value_format_to_xml, write_value_formats
from .registry import FormatRegistry

__all__ = [
    # Core schemas
    "ValueType",
    "StyleOrigin",
    "StyleUse",
    "FormatPartType",
    "FormatNumberStyle",
    "FormatCalendarStyle",
    "TransliterationStyle",
    "AttrMap",
    "Locale",
    "StyleMap",
    # Errors
    "ValueFormatError",
    "FormatError",
    "DigitExpectedError",
    # Model
    "FormatPart",
    "ValueFormat",
    "PartBuilder",
    "FormatRegistry",
    # Factories
    "create_boolean_format",
    "create_number_format",
    "create_number_format_fixed",
    "create_percentage_format",
    "create_currency_prefix",
    "create_currency_suffix",
    "create_date_iso_format",
    "create_date_dmy_format",
    "create_date_mdy_format",
    "create_datetime_format",
    "create_time_format",
    "create_loc_boolean_format",
    "create_loc_number_format",
    "create_loc_percentage_format",
    "create_loc_currency_prefix",
    "create_loc_currency_suffix",
    "create_loc_date_dmy_format",
    "create_loc_date_mdy_format",
    "create_loc_datetime_format",
    "create_loc_time_format",
    # Functions
    "format_boolean",
    "format_float",
    "format_str",
    "format_datetime",
    "format_time_duration",
    "parse_value_format",
    "parse_value_formats",
    "value_format_to_element",
    "value_format_to_xml",
    "write_value_formats",
]
