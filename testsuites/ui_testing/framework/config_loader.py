"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - YAML configuration loading (config/config.yaml)
    - Optional per-environment overlay (config/{ENV}.yaml)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access with defaults
    - Typed UI settings for session setup

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .exceptions import ConfigurationError


# Default configuration file paths
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. Environment overlay YAML (config/staging.yaml when ENV=staging)
        3. Base YAML configuration file
        4. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url", "http://localhost:3000")
        'https://dev-dash.example.com'  # From YAML or env var

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - ui.implicit_wait -> UI_IMPLICIT_WAIT
        - logging.level -> LOGGING_LEVEL
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton: configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load the base YAML file and merge the environment overlay, if any."""
        self._config = self._read_yaml(self._config_path)

        env = os.getenv("ENVIRONMENT", os.getenv("ENV"))
        if env:
            overlay_path = self._config_path.parent / f"{env}.yaml"
            overlay = self._read_yaml(overlay_path)
            if overlay:
                self._config = _deep_merge(self._config, overlay)
                logger.debug(f"Merged environment config: {overlay_path}")

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            if path == self._config_path:
                logger.warning(
                    f"Configuration file not found: {path}. "
                    f"Using defaults and environment variables only."
                )
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {path}"
            )
        logger.debug(f"Loaded configuration from: {path}")
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance (used by tests)."""
        cls._instance = None
        cls._config = {}


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


@dataclass(frozen=True)
class UISettings:
    """
    Settings needed to bootstrap a browser session.

    Attributes:
        base_url: Application URL opened at session start
        browser: Browser identity (chrome, firefox, edge)
        headless: Run without a visible window
        implicit_wait: Default element wait in seconds
        page_load_timeout: Navigation timeout in seconds
    """
    base_url: str = "http://localhost:3000"
    browser: str = "chrome"
    headless: bool = True
    implicit_wait: float = 10.0
    page_load_timeout: float = 30.0

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "UISettings":
        config = config or ConfigLoader()
        defaults = cls()
        try:
            settings = cls(
                base_url=str(config.get("ui.base_url", defaults.base_url)).rstrip("/"),
                browser=str(config.get("ui.browser", defaults.browser)).lower(),
                headless=bool(config.get("ui.headless", defaults.headless)),
                implicit_wait=float(config.get("ui.implicit_wait", defaults.implicit_wait)),
                page_load_timeout=float(config.get("ui.page_load_timeout", defaults.page_load_timeout)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid UI timeout setting: {e}") from e
        if settings.implicit_wait <= 0 or settings.page_load_timeout <= 0:
            raise ConfigurationError("UI timeouts must be positive")
        return settings


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UISettings",
]
