"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration for the UI suite with environment variable override.

Features:
    - config/config.yaml loading
    - Environment variable override (BASE_URL overrides base_url,
      UI_TIMEOUT overrides ui.timeout)
    - Dot notation path access with defaults and type coercion
    - `LoginEnvironment`: the explicit, read-only environment value handed to
      fixtures, page objects and the data factory

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

DEFAULT_BASE_URL = "https://www.saucedemo.com"

# Keys whose environment variable names are part of the suite's contract.
BASE_URL_KEY = "base_url"
VALID_USERNAME_KEY = "valid_username"
VALID_PASSWORD_KEY = "valid_user_password"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def env_var_name(key: str) -> str:
    """Map a dot-notation key to its overriding environment variable."""
    return key.upper().replace(".", "_")


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (BASE_URL, UI_TIMEOUT)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.timeout", 10000)
        10000

    Environment Variable Mapping:
        - base_url -> BASE_URL
        - valid_username -> VALID_USERNAME
        - valid_user_password -> VALID_USER_PASSWORD
        - ui.headless -> UI_HEADLESS
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
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.timeout")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_value = os.environ.get(env_var_name(key))
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
        """Convert an environment string to the type of `reference`."""
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
        """Reset singleton instance (tests reload with different settings)."""
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class LoginEnvironment:
    """
    Read-only view of the environment the login suite runs against.

    Built once from `ConfigLoader` and passed explicitly; credentials may be
    absent here and are only enforced when a consumer asks for them.
    """

    base_url: str
    valid_username: Optional[str] = None
    valid_password: Optional[str] = None

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "LoginEnvironment":
        config = config or ConfigLoader()
        base_url = config.get(BASE_URL_KEY) or DEFAULT_BASE_URL
        return cls(
            base_url=str(base_url).rstrip("/"),
            valid_username=config.get(VALID_USERNAME_KEY) or None,
            valid_password=config.get(VALID_PASSWORD_KEY) or None,
        )

    def require_credentials(self) -> Tuple[str, str]:
        """
        Return the configured (username, password).

        Raises:
            ConfigurationError: if either value is missing or empty.
        """
        missing: List[str] = []
        if not self.valid_username:
            missing.append(env_var_name(VALID_USERNAME_KEY))
        if not self.valid_password:
            missing.append(env_var_name(VALID_PASSWORD_KEY))
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}. "
                f"Set them in the environment or in a .env file."
            )
        return self.valid_username, self.valid_password


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "LoginEnvironment",
    "DEFAULT_BASE_URL",
    "env_var_name",
]
