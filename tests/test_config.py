"""
Configuration Test Suite
========================

Tests for BLConfig defaults and environment overrides.
"""

from bl_lang.config import BLConfig
from bl_lang.language.printer import DEFAULT_INDENT_SIZE


def clear_env(monkeypatch):
    for name in ("BL_INDENT_SIZE", "BL_LOG_LEVEL", "BL_ENCODING"):
        monkeypatch.delenv(name, raising=False)


class TestBLConfig:
    """Tests for BLConfig.from_env()."""

    def test_defaults(self, monkeypatch):
        clear_env(monkeypatch)
        config = BLConfig.from_env()
        assert config.indent_size == DEFAULT_INDENT_SIZE
        assert config.log_level == "WARNING"
        assert config.encoding == "utf-8"

    def test_environment_overrides(self, monkeypatch):
        clear_env(monkeypatch)
        monkeypatch.setenv("BL_INDENT_SIZE", "2")
        monkeypatch.setenv("BL_LOG_LEVEL", "debug")
        monkeypatch.setenv("BL_ENCODING", "latin-1")
        config = BLConfig.from_env()
        assert config.indent_size == 2
        assert config.log_level == "DEBUG"
        assert config.encoding == "latin-1"

    def test_invalid_values_ignored(self, monkeypatch):
        """Unusable values keep the defaults."""
        clear_env(monkeypatch)
        monkeypatch.setenv("BL_INDENT_SIZE", "wide")
        monkeypatch.setenv("BL_LOG_LEVEL", "LOUD")
        monkeypatch.setenv("BL_ENCODING", "no-such-codec")
        config = BLConfig.from_env()
        assert config == BLConfig()

    def test_non_positive_indent_ignored(self, monkeypatch):
        clear_env(monkeypatch)
        monkeypatch.setenv("BL_INDENT_SIZE", "0")
        assert BLConfig.from_env().indent_size == DEFAULT_INDENT_SIZE
