"""Tests for the format registry and engine settings."""

import sys
from pathlib import Path

# Add project root to path (tests/ods/ -> tests/ -> project root)
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from services.engine_config import get_engine_settings, reload_engine_settings
from services.ods_engine import (
    FormatRegistry,
    ValueFormat,
    ValueType,
    create_boolean_format,
    create_number_format,
)


class TestFormatRegistry:
    """Adding, looking up and removing formats."""

    def test_auto_naming(self):
        registry = FormatRegistry()
        first = registry.add_format(ValueFormat.new_named("", ValueType.NUMBER))
        second = registry.add_format(ValueFormat.new_named("", ValueType.NUMBER))
        assert first == "val0"
        assert second == "val1"
        assert registry.format("val0").name == "val0"

    def test_auto_naming_skips_taken_names(self):
        registry = FormatRegistry()
        registry.add_format(create_number_format("val1", 2, False))
        assert registry.add_format(ValueFormat.new_named("", ValueType.TEXT)) == "val2"

    def test_same_name_replaces(self):
        registry = FormatRegistry()
        registry.add_format(create_number_format("n", 2, False))
        registry.add_format(create_number_format("n", 4, False))
        assert len(registry) == 1
        assert registry.format("n").format_float(1.0) == "1.0000"

    def test_remove_clears_default(self):
        registry = FormatRegistry()
        registry.add_format(create_boolean_format("b"))
        registry.set_default_format(ValueType.BOOLEAN, "b")
        assert registry.default_format(ValueType.BOOLEAN).name == "b"

        removed = registry.remove_format("b")
        assert removed.name == "b"
        assert "b" not in registry
        assert registry.default_format(ValueType.BOOLEAN) is None
        assert registry.remove_format("b") is None

    def test_unknown_default(self):
        registry = FormatRegistry()
        with pytest.raises(KeyError):
            registry.set_default_format(ValueType.NUMBER, "missing")

    def test_with_defaults(self):
        registry = FormatRegistry.with_defaults("de_AT")
        names = [f.name for f in registry]
        assert names == [
            "default_boolean",
            "default_num2",
            "default_percent",
            "default_currency",
            "default_datetime",
            "default_time",
            "default_num0",
            "default_date",
        ]
        assert registry.default_format(ValueType.NUMBER).name == "default_num2"
        assert registry.default_format(ValueType.TEXT) is None
        assert all(f.language() == "de" and f.country() == "AT" for f in registry)
        assert registry.format("default_currency").format_float(3.5) == "€ 3.50"

    def test_with_defaults_invalid_locale(self):
        with pytest.raises(ValueError):
            FormatRegistry.with_defaults("not a locale")


class TestEngineSettings:
    """Settings loaded from the environment."""

    @pytest.fixture(autouse=True)
    def _restore(self, monkeypatch):
        yield
        monkeypatch.undo()
        reload_engine_settings()

    def test_defaults(self, monkeypatch):
        for key in (
            "ODS_DEFAULT_LOCALE",
            "ODS_LOG_LEVEL",
            "ODS_MAX_DECIMAL_PLACES",
            "ODS_LOAD_DEFAULT_FORMATS",
            "ODS_DISABLE_RATE_LIMIT",
            "ODS_RATE_LIMIT_PER_MINUTE",
            "ODS_RATE_LIMIT_BURST",
        ):
            monkeypatch.delenv(key, raising=False)
        settings = reload_engine_settings()
        assert settings.default_locale == "en_US"
        assert settings.log_level == "INFO"
        assert settings.max_decimal_places == 20
        assert settings.load_default_formats is True
        assert settings.rate_limit_enabled is True
        assert settings.rate_limit_per_minute == 120
        assert settings.rate_limit_burst == 20

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ODS_DEFAULT_LOCALE", "fr_FR")
        monkeypatch.setenv("ODS_LOG_LEVEL", "debug")
        monkeypatch.setenv("ODS_MAX_DECIMAL_PLACES", "6")
        monkeypatch.setenv("ODS_LOAD_DEFAULT_FORMATS", "false")
        reload_engine_settings()

        settings = get_engine_settings()
        assert settings.default_locale == "fr_FR"
        assert settings.log_level == "DEBUG"
        assert settings.max_decimal_places == 6
        assert settings.load_default_formats is False

    def test_invalid_max_decimal_places_ignored(self, monkeypatch):
        monkeypatch.setenv("ODS_MAX_DECIMAL_PLACES", "many")
        assert reload_engine_settings().max_decimal_places == 20
