"""Tests for environment-driven configuration."""

from __future__ import annotations

import importlib

import pytest

import markdoc2doc.config as config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch):
    """Reload the config module after the test mutates the environment."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


class TestConfig:
    """Tests for config module defaults and overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, reload_config) -> None:
        """Without environment overrides the defaults apply."""
        monkeypatch.delenv("MARKDOC2DOC_STRICT_CHILD_FIELDS", raising=False)
        monkeypatch.delenv("MARKDOC2DOC_LOG_LEVEL", raising=False)

        module = reload_config()

        assert module.MARKDOC2DOC_STRICT_CHILD_FIELDS is False
        assert module.MARKDOC2DOC_LOG_LEVEL == "WARNING"

    @pytest.mark.parametrize(("raw", "expected"), [("1", True), ("true", True), ("YES", True), ("0", False), ("off", False)])
    def test_strict_flag_parsing(
        self, monkeypatch: pytest.MonkeyPatch, reload_config, raw: str, expected: bool
    ) -> None:
        """Truthy strings enable strict child field resolution."""
        monkeypatch.setenv("MARKDOC2DOC_STRICT_CHILD_FIELDS", raw)

        assert reload_config().MARKDOC2DOC_STRICT_CHILD_FIELDS is expected

    def test_log_level_is_uppercased(self, monkeypatch: pytest.MonkeyPatch, reload_config) -> None:
        """Log level names are normalized to upper case."""
        monkeypatch.setenv("MARKDOC2DOC_LOG_LEVEL", "debug")

        assert reload_config().MARKDOC2DOC_LOG_LEVEL == "DEBUG"
