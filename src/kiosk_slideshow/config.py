"""
Configuration for the kiosk slideshow.

This module centralizes the constants used across the application and loads
the flat YAML configuration document into an immutable `Settings` object.
Missing keys fall back to the defaults below; anything that cannot be parsed
raises `ConfigError`, which is fatal at startup.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions.slideshow_errors import ConfigError

logger = logging.getLogger(__name__)

# Image file extensions picked up by the content directory walk (case-insensitive).
SUPPORTED_IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.gif', '.bmp')

# Configuration file read when no --config argument is given.
DEFAULT_CONFIG_PATH = 'config.yaml'

DEFAULT_CONTENT_DIRECTORY = './content'
DEFAULT_MANIFEST_PATH = './manifest.yaml'

# Seconds between automatic transitions.
DEFAULT_SLIDE_INTERVAL = 30

# Caption band background and text colors.
DEFAULT_FILL_COLOR = '#ADD8E6'
DEFAULT_TEXT_COLOR = '#000000'

# Default logging level for the application.
# Can be 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'.
DEFAULT_LOG_LEVEL = 'INFO'

# Window setup.
WINDOW_TITLE = 'CAM COMIC FLEX'
DEFAULT_WINDOW_WIDTH = 1920
DEFAULT_WINDOW_HEIGHT = 1080
BACKGROUND_COLOR = 'black'

# Height in pixels reserved at the bottom of the window for captions.
# Images are always scaled to fit above it.
CAPTION_BAND_HEIGHT = 150
TITLE_FONT = ('Helvetica', 24)
DESCRIPTION_FONT = ('Helvetica', 20)
CAPTION_PADDING = 10

_HEX_COLOR_RE = re.compile(r'^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$')

_KNOWN_KEYS = {
    'content_directory',
    'manifest_path',
    'slide_interval',
    'fill_color',
    'text_color',
    'enable_text',
    'is_random_order',
    'random_seed',
}


@dataclass(frozen=True)
class Settings:
    """Slideshow settings, loaded once at startup."""
    content_directory: Path = Path(DEFAULT_CONTENT_DIRECTORY)
    manifest_path: Path = Path(DEFAULT_MANIFEST_PATH)
    slide_interval: float = DEFAULT_SLIDE_INTERVAL
    fill_color: str = DEFAULT_FILL_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    enable_text: bool = False
    is_random_order: bool = False
    random_seed: int | None = None

    @property
    def slide_interval_ms(self) -> int:
        """The slide interval in milliseconds, as expected by `Tk.after`."""
        return int(self.slide_interval * 1000)


def parse_hex_color(value: str) -> tuple[int, int, int]:
    """
    Parse a `#rrggbb` color string.

    Args:
        value: The color string.

    Returns:
        The (red, green, blue) components as integers in 0-255.

    Raises:
        ValueError: If the string is not a `#rrggbb` color.
    """
    match = _HEX_COLOR_RE.match(str(value).strip())
    if not match:
        raise ValueError(f"Invalid hex color '{value}', expected '#rrggbb'.")
    return tuple(int(component, 16) for component in match.groups())


def _as_bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false, got {value!r}.")
    return value


def _as_color(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key) or default
    try:
        parse_hex_color(value)
    except ValueError as e:
        raise ConfigError(f"'{key}': {e}") from e
    return str(value).strip()


def _as_path(data: dict[str, Any], key: str, default: str) -> Path:
    value = data.get(key)
    if value is None or value == '':
        return Path(default)
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a path, got {value!r}.")
    return Path(value)


def _as_interval(data: dict[str, Any]) -> float:
    value = data.get('slide_interval')
    if value is None:
        return DEFAULT_SLIDE_INTERVAL
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"'slide_interval' must be a number of seconds, got {value!r}.")
    if value < 0:
        raise ConfigError(f"'slide_interval' must not be negative, got {value}.")
    # Zero means unset.
    return value or DEFAULT_SLIDE_INTERVAL


def _as_seed(data: dict[str, Any]) -> int | None:
    value = data.get('random_seed')
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'random_seed' must be an integer, got {value!r}.")
    return value


def settings_from_dict(data: dict[str, Any]) -> Settings:
    """
    Build `Settings` from a parsed configuration mapping.

    Args:
        data: The mapping loaded from the YAML document.

    Returns:
        The validated settings, with defaults applied for missing keys.

    Raises:
        ConfigError: If any value has the wrong type or format.
    """
    for key in data:
        if key not in _KNOWN_KEYS:
            logger.debug(f"Ignoring unknown configuration key '{key}'.")

    return Settings(
        content_directory=_as_path(data, 'content_directory', DEFAULT_CONTENT_DIRECTORY),
        manifest_path=_as_path(data, 'manifest_path', DEFAULT_MANIFEST_PATH),
        slide_interval=_as_interval(data),
        fill_color=_as_color(data, 'fill_color', DEFAULT_FILL_COLOR),
        text_color=_as_color(data, 'text_color', DEFAULT_TEXT_COLOR),
        enable_text=_as_bool(data, 'enable_text'),
        is_random_order=_as_bool(data, 'is_random_order'),
        random_seed=_as_seed(data),
    )


def load_config(config_path: str | Path) -> Settings:
    """
    Load the slideshow configuration from a YAML file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        The loaded settings. An empty document yields all defaults.

    Raises:
        ConfigError: If the file is missing, unreadable or malformed.
    """
    path = Path(config_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in configuration file '{path}': {e}") from e

    if data is None:
        logger.warning(f"Configuration file '{path}' is empty, using defaults.")
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file '{path}' must contain a mapping of settings.")

    settings = settings_from_dict(data)
    logger.info(f"Loaded configuration from {path}")
    return settings
