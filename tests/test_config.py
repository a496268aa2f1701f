"""Tests for configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

import myoption._config as config_module
from myoption import OptionConfig, get_config, init
from myoption._config import _detect_json_output, _detect_log_level


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Start every test uninitialized and keep logging untouched."""
    calls: list[tuple[str, bool]] = []
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.setattr(
        config_module,
        "configure_logging",
        lambda level, *, json_output=True: calls.append((level, json_output)),
    )
    return calls


class TestOptionConfig:
    def test_default_values(self) -> None:
        config = OptionConfig()
        assert config.log_level is None
        assert config.json_output is True

    def test_config_is_frozen(self) -> None:
        config = OptionConfig()
        with pytest.raises(AttributeError):
            config.log_level = "DEBUG"  # type: ignore[misc]


class TestDetectFromEnv:
    def test_log_level_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None

    def test_log_level_normalized(self) -> None:
        with patch.dict(os.environ, {"MYOPTION_LOG_LEVEL": " debug "}):
            assert _detect_log_level() == "DEBUG"

    @pytest.mark.parametrize("raw", ["0", "false", "NO", "off"])
    def test_json_falsy(self, raw: str) -> None:
        with patch.dict(os.environ, {"MYOPTION_LOG_JSON": raw}):
            assert _detect_json_output() is False

    @pytest.mark.parametrize("raw", ["", "1", "true", "Yes", "on"])
    def test_json_truthy(self, raw: str) -> None:
        with patch.dict(os.environ, {"MYOPTION_LOG_JSON": raw}):
            assert _detect_json_output() is True

    def test_json_unknown_warns(self, caplog) -> None:
        with patch.dict(os.environ, {"MYOPTION_LOG_JSON": "maybe"}), caplog.at_level(logging.WARNING):
            assert _detect_json_output() is True
        assert "Unknown MYOPTION_LOG_JSON value 'maybe'" in caplog.text


class TestInit:
    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not initialized"):
            get_config()

    def test_init_silent_by_default(self, fresh_config) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config == OptionConfig(log_level=None, json_output=True)
        assert get_config() is config
        assert fresh_config == []

    def test_init_explicit_level_configures_logging(self, fresh_config) -> None:
        config = init("DEBUG", json_output=False)
        assert config.log_level == "DEBUG"
        assert fresh_config == [("DEBUG", False)]

    def test_init_reads_env(self, fresh_config) -> None:
        env = {"MYOPTION_LOG_LEVEL": "info", "MYOPTION_LOG_JSON": "off"}
        with patch.dict(os.environ, env, clear=True):
            config = init()
        assert config == OptionConfig(log_level="INFO", json_output=False)
        assert fresh_config == [("INFO", False)]

    def test_explicit_args_override_env(self, fresh_config) -> None:
        env = {"MYOPTION_LOG_LEVEL": "info", "MYOPTION_LOG_JSON": "off"}
        with patch.dict(os.environ, env, clear=True):
            config = init("WARNING", json_output=True)
        assert config == OptionConfig(log_level="WARNING", json_output=True)
