"""Document-wide value format registry.

Cell styles reference value formats by name; the registry is where those
names resolve.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from .format import (
    LocaleLike,
    ValueFormat,
    create_loc_boolean_format,
    create_loc_currency_prefix,
    create_loc_date_dmy_format,
    create_loc_datetime_format,
    create_loc_number_format,
    create_loc_percentage_format,
    create_loc_time_format,
)
from .schemas import ValueType

logger = logging.getLogger(__name__)


class FormatRegistry:
    """Value formats keyed by name."""

    def __init__(self):
        self._formats: Dict[str, ValueFormat] = {}
        # Format used for each value type when a cell has no explicit style
        self._defaults: Dict[ValueType, str] = {}

    @classmethod
    def with_defaults(cls, locale: LocaleLike, currency_symbol: str = "€") -> "FormatRegistry":
        """Registry preloaded with the default formats for a locale."""
        registry = cls()
        defaults = [
            (ValueType.BOOLEAN, create_loc_boolean_format("default_boolean", locale)),
            (ValueType.NUMBER, create_loc_number_format("default_num2", locale, 2, False)),
            (ValueType.PERCENTAGE, create_loc_percentage_format("default_percent", locale, 2)),
            (ValueType.CURRENCY, create_loc_currency_prefix("default_currency", locale, locale, currency_symbol)),
            (ValueType.DATETIME, create_loc_datetime_format("default_datetime", locale)),
            (ValueType.TIME_DURATION, create_loc_time_format("default_time", locale)),
        ]
        for value_type, value_format in defaults:
            registry.add_format(value_format)
            registry.set_default_format(value_type, value_format.name)

        registry.add_format(create_loc_number_format("default_num0", locale, 0, False))
        registry.add_format(create_loc_date_dmy_format("default_date", locale))

        logger.info(f"Loaded {len(registry)} default value formats for locale {locale}")
        return registry

    def add_format(self, value_format: ValueFormat) -> str:
        """Adds a format and returns its name.

        A nameless format gets a generated "val<n>" name. An existing format
        with the same name is replaced.
        """
        if not value_format.name:
            n = len(self._formats)
            while f"val{n}" in self._formats:
                n += 1
            value_format.name = f"val{n}"

        if value_format.name in self._formats:
            logger.debug(f"Replacing value format {value_format.name}")
        self._formats[value_format.name] = value_format
        return value_format.name

    def format(self, name: str) -> Optional[ValueFormat]:
        return self._formats.get(name)

    def remove_format(self, name: str) -> Optional[ValueFormat]:
        removed = self._formats.pop(name, None)
        if removed is not None:
            self._defaults = {vt: n for vt, n in self._defaults.items() if n != name}
            logger.debug(f"Removed value format {name}")
        return removed

    def formats(self) -> List[ValueFormat]:
        return list(self._formats.values())

    def set_default_format(self, value_type: ValueType, name: str) -> None:
        if name not in self._formats:
            raise KeyError(f"Unknown value format: {name}")
        self._defaults[ValueType(value_type)] = name

    def default_format(self, value_type: ValueType) -> Optional[ValueFormat]:
        name = self._defaults.get(ValueType(value_type))
        return self._formats.get(name) if name else None

    def __contains__(self, name: object) -> bool:
        return name in self._formats

    def __len__(self) -> int:
        return len(self._formats)

    def __iter__(self) -> Iterator[ValueFormat]:
        return iter(list(self._formats.values()))
