"""Configuration management for HTML Table Reader."""

import os
import json
from pathlib import Path
from typing import Optional, Dict, Any, Union
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
import logging
import codecs

import yaml

from . import __version__

SUPPORTED_PARSERS = ("lxml", "html.parser", "html5lib")


class ReaderConfig(BaseModel):
    """Configuration for fetching and parsing HTML documents."""

    charset: str = Field(default="UTF-8", description="Character encoding for local files")
    request_timeout: int = Field(default=30, description="HTTP request timeout in seconds")
    user_agent: str = Field(
        default=f"html-table-reader/{__version__}",
        description="User-Agent header sent with HTTP requests",
    )
    parser: Optional[str] = Field(
        default=None, description="HTML parser to use (default: first available)"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("charset")
    @classmethod
    def validate_charset(cls, v: str) -> str:
        """Validate that charset names a known codec."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown charset: {v}")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: int) -> int:
        """Validate request_timeout is reasonable."""
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        if v > 300:
            raise ValueError("request_timeout should not exceed 300 seconds")
        return v

    @field_validator("parser")
    @classmethod
    def validate_parser(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        if v not in SUPPORTED_PARSERS:
            raise ValueError(f"Unsupported parser '{v}'. Choose one of: {', '.join(SUPPORTED_PARSERS)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if not isinstance(getattr(logging, v.upper(), None), int):
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()


def load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from a YAML or JSON file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger = logging.getLogger(__name__)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                return yaml.safe_load(f) or {}

            elif config_path.suffix.lower() == ".json":
                return json.load(f) or {}

            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    except Exception as e:
        logger.error(f"Failed to load config file {config_path}: {e}")
        raise


def find_config_file() -> Optional[Path]:
    """Find configuration file in standard locations."""
    search_paths = [
        Path.cwd() / "html-table-reader.yaml",
        Path.cwd() / "html-table-reader.yml",
        Path.cwd() / "html-table-reader.json",
        Path.home() / ".config" / "html-table-reader" / "config.yaml",
        Path.home() / ".config" / "html-table-reader" / "config.yml",
        Path.home() / ".config" / "html-table-reader" / "config.json",
    ]

    for config_path in search_paths:
        if config_path.exists():
            return config_path

    return None


def load_config(config_file: Optional[Union[str, Path]] = None) -> ReaderConfig:
    """Load configuration from multiple sources with priority order.

    Priority (highest to lowest):
    1. Environment variables
    2. Specified config file (if provided)
    3. Auto-discovered config file
    4. Default values
    """
    logger = logging.getLogger(__name__)

    config_data: Dict[str, Any] = {}

    if config_file:
        config_path = Path(config_file)
        if config_path.exists():
            config_data = load_config_file(config_path)
            logger.info(f"Loaded configuration from: {config_path}")
        else:
            raise FileNotFoundError(f"Specified config file not found: {config_path}")
    else:
        config_path = find_config_file()
        if config_path:
            config_data = load_config_file(config_path)
            logger.info(f"Auto-discovered configuration file: {config_path}")

    load_dotenv()

    env_config = {
        "charset": os.getenv("HTML_TABLE_CHARSET"),
        "request_timeout": os.getenv("HTML_TABLE_TIMEOUT"),
        "user_agent": os.getenv("HTML_TABLE_USER_AGENT"),
        "parser": os.getenv("HTML_TABLE_PARSER"),
        "log_level": os.getenv("LOG_LEVEL"),
    }
    env_config = {k: v for k, v in env_config.items() if v is not None}

    final_config = {**config_data, **env_config}

    if "request_timeout" in final_config:
        final_config["request_timeout"] = int(final_config["request_timeout"])

    return ReaderConfig(**final_config)
