"""Unit tests for configuration loading."""

import json
import os
import pytest
from unittest.mock import patch

from pydantic import ValidationError

from html_table_reader.config import ReaderConfig, load_config, load_config_file


@pytest.fixture(autouse=True)
def no_discovery():
    """Keep tests independent of config files on the machine."""
    with patch("html_table_reader.config.find_config_file", return_value=None), \
            patch("html_table_reader.config.load_dotenv"):
        yield


class TestReaderConfig:
    """Test ReaderConfig validation."""

    def test_defaults(self):
        """Defaults match the documented values."""
        config = ReaderConfig()

        assert config.charset == "UTF-8"
        assert config.request_timeout == 30
        assert config.user_agent.startswith("html-table-reader/")
        assert config.parser is None
        assert config.log_level == "INFO"

    def test_unknown_charset(self):
        """Charsets must be known codecs."""
        with pytest.raises(ValidationError):
            ReaderConfig(charset="not-a-charset")

    @pytest.mark.parametrize("timeout", [0, -1, 301])
    def test_invalid_timeout(self, timeout):
        """Timeouts must be between 1 and 300 seconds."""
        with pytest.raises(ValidationError):
            ReaderConfig(request_timeout=timeout)

    def test_unsupported_parser(self):
        """Only known tree builders are accepted."""
        with pytest.raises(ValidationError):
            ReaderConfig(parser="regex")

    def test_blank_parser_means_auto(self):
        """An empty parser string falls back to auto-detection."""
        assert ReaderConfig(parser="").parser is None

    def test_log_level_normalized(self):
        """Log levels are upper-cased."""
        assert ReaderConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            ReaderConfig(log_level="chatty")


class TestLoadConfig:
    """Test load_config sources and priority."""

    def test_defaults_without_sources(self):
        """No file and no env gives defaults."""
        assert load_config() == ReaderConfig()

    def test_yaml_file(self, tmp_path):
        """YAML files are read."""
        path = tmp_path / "config.yaml"
        path.write_text("charset: latin-1\nrequest_timeout: 10\n", encoding="utf-8")

        config = load_config(path)

        assert config.charset == "latin-1"
        assert config.request_timeout == 10

    def test_json_file(self, tmp_path):
        """JSON files are read."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"parser": "html.parser"}), encoding="utf-8")

        assert load_config(path).parser == "html.parser"

    def test_env_overrides_file(self, tmp_path):
        """Environment variables take precedence over files."""
        path = tmp_path / "config.yaml"
        path.write_text("request_timeout: 10\n", encoding="utf-8")
        os.environ["HTML_TABLE_TIMEOUT"] = "20"
        os.environ["LOG_LEVEL"] = "warning"

        config = load_config(path)

        assert config.request_timeout == 20
        assert config.log_level == "WARNING"

    def test_missing_file(self, tmp_path):
        """An explicit but missing file is an error."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unsupported_format(self, tmp_path):
        """Unknown suffixes are rejected."""
        path = tmp_path / "config.ini"
        path.write_text("[x]\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config_file(path)

    def test_empty_yaml(self, tmp_path):
        """An empty YAML file yields defaults."""
        path = tmp_path / "config.yml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == ReaderConfig()
