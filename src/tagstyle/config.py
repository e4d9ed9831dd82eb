"""Configuration management for tagstyle.

This module loads user configuration from ~/.config/tagstyle/init.yaml.
Command-line arguments override anything set here.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("html", "text", "json")
BOOL_SETTINGS = ("validate", "strict")


class TagstyleConfig:
    """Configuration container for tagstyle settings.

    All settings have sensible defaults. Keys in init.yaml that don't match
    a known setting are kept in the custom store (see ``get``).
    """

    def __init__(self):
        # Output settings
        self.output_format: str = "html"  # html, text, json

        # Validation settings
        self.validate: bool = True
        self.strict: bool = False  # exit non-zero when there are warnings

        # Default placeholder values, e.g. {"0": "Steve"}
        self.placeholders: dict[str, str] = {}

        # Logging
        self.log_file: Optional[str] = None

        self._custom: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        """Set a custom configuration value."""
        self._custom[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get a custom configuration value."""
        return self._custom.get(key, default)

    def update(self, data: dict[str, Any]) -> None:
        """Apply settings from a parsed config document.

        Raises:
            ValueError: on a non-string key or a setting of the wrong type.
        """
        for key, value in data.items():
            if not isinstance(key, str):
                raise ValueError(f"Config keys must be strings, got {key!r}")
            if key.startswith("_"):
                continue
            if key == "output_format":
                if value not in OUTPUT_FORMATS:
                    raise ValueError(f"Unknown output format: {value!r}")
                self.output_format = value
            elif key == "placeholders":
                if not isinstance(value, dict):
                    raise ValueError("placeholders must be a mapping")
                self.placeholders = {str(k): str(v) for k, v in value.items()}
            elif key in BOOL_SETTINGS:
                if not isinstance(value, bool):
                    raise ValueError(f"{key} must be true or false, got {value!r}")
                setattr(self, key, value)
            elif key == "log_file":
                if value is not None and not isinstance(value, str):
                    raise ValueError(f"log_file must be a path, got {value!r}")
                self.log_file = value
            else:
                self.set(key, value)


def get_config_path() -> Path:
    """Get the path to the user's config directory."""
    config_home = os.environ.get('XDG_CONFIG_HOME')
    if config_home:
        return Path(config_home) / 'tagstyle'
    return Path.home() / '.config' / 'tagstyle'


def get_init_script_path() -> Path:
    """Get the path to the user's init.yaml."""
    return get_config_path() / 'init.yaml'


def load_config() -> tuple[TagstyleConfig, Optional[str]]:
    """Load configuration from ~/.config/tagstyle/init.yaml.

    Returns:
        A tuple of (config, error_message). If loading fails, the config holds
        defaults and error_message describes the failure.
    """
    config = TagstyleConfig()
    init_path = get_init_script_path()

    # If no init.yaml exists, return default config
    if not init_path.exists():
        return config, None

    try:
        with open(init_path, 'r') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config from %s: %s", init_path, e)
        return config, f"Error loading config from {init_path}: {e}"

    if data is None:
        return config, None
    if not isinstance(data, dict):
        return config, f"Error loading config from {init_path}: expected a mapping"

    try:
        config.update(data)
    except ValueError as e:
        logger.warning("Invalid config in %s: %s", init_path, e)
        return TagstyleConfig(), f"Error loading config from {init_path}: {e}"

    return config, None
