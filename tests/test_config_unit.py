"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from rss_reader.config import Config, ReaderConfig


class TestConfigUnit:
    """Unit tests for Config class."""

    def test_defaults_without_env_vars(self):
        with patch.dict(os.environ, {}, clear=True):
            reader_config = Config().get_reader_config()

        assert reader_config == ReaderConfig(
            log_level="WARNING", strict_exit=False, timeout=None
        )

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", " On "])
    def test_strict_exit_truthy_values(self, value):
        with patch.dict(os.environ, {"RSS_READER_STRICT_EXIT": value}, clear=True):
            assert Config().strict_exit is True

    @pytest.mark.parametrize("value", ["", "0", "false", "no", "off", "maybe"])
    def test_strict_exit_falsy_values(self, value):
        with patch.dict(os.environ, {"RSS_READER_STRICT_EXIT": value}, clear=True):
            assert Config().strict_exit is False

    def test_env_values_are_read(self):
        env = {
            "RSS_READER_LOG_LEVEL": "DEBUG",
            "RSS_READER_STRICT_EXIT": "1",
            "RSS_READER_TIMEOUT": "7.5",
        }
        with patch.dict(os.environ, env, clear=True):
            reader_config = Config().get_reader_config()

        assert reader_config == ReaderConfig(
            log_level="DEBUG", strict_exit=True, timeout=7.5
        )

    def test_command_line_values_override_env(self):
        env = {"RSS_READER_LOG_LEVEL": "DEBUG", "RSS_READER_STRICT_EXIT": "1"}
        with patch.dict(os.environ, env, clear=True):
            reader_config = Config().get_reader_config(
                log_level="ERROR", strict_exit=False
            )

        assert reader_config.log_level == "ERROR"
        assert reader_config.strict_exit is False

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_invalid_timeout_raises(self, value):
        with patch.dict(os.environ, {"RSS_READER_TIMEOUT": value}, clear=True):
            with pytest.raises(ValueError, match="RSS_READER_TIMEOUT"):
                Config()
