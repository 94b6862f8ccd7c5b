"""Pydantic schemas for ODS value formats.

These schemas model the building blocks of an OpenDocument data style:
- Value types and style placement (origin / usage)
- The string-keyed attribute bag shared by formats and parts
- Locale identifiers decomposed into language / script / region
- Style maps (conditional overrides carried through untouched)
- Error types raised by the XML reader
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, ItemsView, Optional, Tuple

from pydantic import BaseModel, Field, RootModel


# =============================================================================
# ERRORS
# =============================================================================

class ValueFormatError(Exception):
    """Base error for value format handling."""


class FormatError(ValueFormatError):
    """Generic formatting failure."""


class DigitExpectedError(ValueFormatError):
    """A non-digit was found where a digit was expected."""

    def __init__(self, message: str = "Digit expected"):
        super().__init__(message)


# =============================================================================
# ENUMS
# =============================================================================

class ValueType(str, Enum):
    """Cell value types. Values are the office:value-type names."""
    EMPTY = "empty"  # Sentinel, never valid for a value format
    BOOLEAN = "boolean"
    NUMBER = "float"
    PERCENTAGE = "percentage"
    CURRENCY = "currency"
    TEXT = "string"
    DATETIME = "date"
    TIME_DURATION = "time"


class StyleOrigin(str, Enum):
    """Document part a style lives in: content.xml or styles.xml."""
    CONTENT = "content"
    STYLES = "styles"


class StyleUse(str, Enum):
    """Placement of a style: default, common (named) or automatic."""
    DEFAULT = "default"
    NAMED = "named"
    AUTOMATIC = "automatic"


class FormatNumberStyle(str, Enum):
    """number:style for date/time parts."""
    SHORT = "short"
    LONG = "long"


class FormatCalendarStyle(str, Enum):
    """number:calendar values. DEFAULT means the attribute is omitted."""
    DEFAULT = "default"
    GREGORIAN = "gregorian"
    GENGOU = "gengou"
    ROC = "ROC"
    HANJA = "hanja"
    HIJRI = "hijri"
    JEWISH = "jewish"
    BUDDHIST = "buddhist"


class TransliterationStyle(str, Enum):
    """number:transliteration-style values."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class FormatPartType(str, Enum):
    """Structural parts of a value format.

    Values are the local names of the matching number:* elements.
    """
    NUMBER = "number"
    FILL_CHARACTER = "fill-character"
    SCIENTIFIC_NUMBER = "scientific-number"
    FRACTION = "fraction"
    CURRENCY_SYMBOL = "currency-symbol"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    ERA = "era"
    DAY_OF_WEEK = "day-of-week"
    WEEK_OF_YEAR = "week-of-year"
    QUARTER = "quarter"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    AM_PM = "am-pm"
    BOOLEAN = "boolean"
    EMBEDDED_TEXT = "embedded-text"
    TEXT = "text"
    TEXT_CONTENT = "text-content"


# =============================================================================
# ATTRIBUTE BAG
# =============================================================================

class AttrMap(RootModel[Dict[str, str]]):
    """String-keyed attribute storage.

    Keys are the prefixed XML attribute names (e.g. "number:decimal-places"),
    so the content is exactly what gets written out.
    """
    root: Dict[str, str] = Field(default_factory=dict)

    def set_attr(self, name: str, value: str) -> None:
        self.root[name] = value

    def attr(self, name: str) -> Optional[str]:
        return self.root.get(name)

    def attr_def(self, name: str, default: str) -> str:
        """Returns the attribute or the default if it's absent."""
        return self.root.get(name, default)

    def clear_attr(self, name: str) -> Optional[str]:
        return self.root.pop(name, None)

    def items(self) -> ItemsView[str, str]:
        return self.root.items()

    def __contains__(self, name: object) -> bool:
        return name in self.root

    def __len__(self) -> int:
        return len(self.root)


# =============================================================================
# LOCALE
# =============================================================================

_LANGUAGE_RE = re.compile(r'^(?:[a-zA-Z]{2,3}|[a-zA-Z]{5,8})$')
_SCRIPT_RE = re.compile(r'^[a-zA-Z]{4}$')
_REGION_RE = re.compile(r'^(?:[a-zA-Z]{2}|\d{3})$')


def parse_language(value: str) -> Optional[str]:
    """Normalized language sub-tag or None if it isn't one."""
    if value and _LANGUAGE_RE.match(value):
        return value.lower()
    return None


def parse_script(value: str) -> Optional[str]:
    """Normalized script sub-tag or None if it isn't one."""
    if value and _SCRIPT_RE.match(value):
        return value.title()
    return None


def parse_region(value: str) -> Optional[str]:
    """Normalized region sub-tag or None if it isn't one."""
    if value and _REGION_RE.match(value):
        return value.upper()
    return None


class Locale(BaseModel):
    """A locale identifier split into its sub-tags.

    Only the language is mandatory. Accepts "de", "de_AT", "de-AT",
    "sr-Latn-RS" and the like.
    """
    language: str
    script: Optional[str] = None
    region: Optional[str] = None

    @classmethod
    def parse(cls, identifier: str) -> "Locale":
        tags = re.split(r'[-_]', identifier.strip())
        language = parse_language(tags[0])
        if language is None:
            raise ValueError(f"Invalid locale identifier: {identifier}")

        script: Optional[str] = None
        region: Optional[str] = None
        rest = tags[1:]
        if rest and parse_script(rest[0]):
            script = parse_script(rest.pop(0))
        if rest and parse_region(rest[0]):
            region = parse_region(rest.pop(0))
        if rest:
            raise ValueError(f"Invalid locale identifier: {identifier}")

        return cls(language=language, script=script, region=region)

    def subtags(self) -> Tuple[str, Optional[str], Optional[str]]:
        return self.language, self.script, self.region

    def __str__(self) -> str:
        return "-".join(t for t in self.subtags() if t)


# =============================================================================
# STYLE MAPS
# =============================================================================

class StyleMap(BaseModel):
    """Conditional style override (style:map). Not interpreted here."""
    condition: str  # e.g. "value()>=0"
    applied_style: str  # Name of the style applied when the condition holds
    base_cell: Optional[str] = None  # e.g. "Sheet1.A1"
