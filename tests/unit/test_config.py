"""
Unit tests for configuration and logging setup.
"""

import logging

import pytest

from recipe_finder.config import (
    DEFAULT_MAX_TURNS,
    AgentConfig,
    configure_logging,
    get_log_level,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without recipe finder variables set."""
    for name in ("LOG_LEVEL", "RECIPE_FINDER_MODEL", "RECIPE_FINDER_MAX_TURNS"):
        monkeypatch.delenv(name, raising=False)


class TestLogLevel:
    """LOG_LEVEL parsing."""

    def test_default_is_info(self):
        assert get_log_level() == logging.INFO

    def test_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    def test_invalid_level_warns_and_defaults(self, monkeypatch, capsys):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        assert get_log_level() == logging.INFO
        assert "Invalid LOG_LEVEL 'LOUD'" in capsys.readouterr().err

    def test_configure_logging_quiets_sdk_logger(self):
        configure_logging(level=logging.INFO)

        assert logging.getLogger("recipe_finder").level == logging.INFO
        assert logging.getLogger("claude_agent_sdk").level == logging.WARNING


class TestAgentConfig:
    """AgentConfig.from_env parsing."""

    def test_defaults(self):
        config = AgentConfig.from_env()

        assert config.model == "haiku"
        assert config.max_turns == DEFAULT_MAX_TURNS == 50

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("RECIPE_FINDER_MODEL", "Sonnet")
        monkeypatch.setenv("RECIPE_FINDER_MAX_TURNS", "20")

        config = AgentConfig.from_env()

        assert config.model == "sonnet"
        assert config.max_turns == 20

    @pytest.mark.parametrize("value", ["lots", "0", "-3", "2.5"])
    def test_invalid_max_turns_falls_back(self, monkeypatch, caplog, value):
        monkeypatch.setenv("RECIPE_FINDER_MAX_TURNS", value)

        with caplog.at_level(logging.WARNING, logger="recipe_finder.config"):
            config = AgentConfig.from_env()

        assert config.max_turns == DEFAULT_MAX_TURNS
        assert "RECIPE_FINDER_MAX_TURNS" in caplog.text

    def test_blank_max_turns_is_default(self, monkeypatch):
        monkeypatch.setenv("RECIPE_FINDER_MAX_TURNS", "  ")

        assert AgentConfig.from_env().max_turns == DEFAULT_MAX_TURNS

    def test_unknown_model_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("RECIPE_FINDER_MODEL", "gpt-4")

        with caplog.at_level(logging.WARNING, logger="recipe_finder.config"):
            config = AgentConfig.from_env()

        assert config.model == "haiku"
        assert "RECIPE_FINDER_MODEL" in caplog.text
