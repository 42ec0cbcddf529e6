"""Configuration loading."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


# Default values
DEFAULT_CLEAR_SCREEN = True
DEFAULT_PAUSE = True
DEFAULT_PRECISION = 6
DEFAULT_LOG_LEVEL = "warning"

# Config file path
CONFIG_PATH = ".menucalc.yml"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class DisplayConfig:
    """Console display settings."""

    clear_screen: bool = DEFAULT_CLEAR_SCREEN
    pause: bool = DEFAULT_PAUSE
    precision: int = DEFAULT_PRECISION


@dataclass
class LoggingConfig:
    """Stderr logging settings."""

    level: str = DEFAULT_LOG_LEVEL


@dataclass
class MenucalcConfig:
    """Main configuration class."""

    version: str = "1.0"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG_YAML = f"""\
# menucalc configuration
version: "1.0"
display:
  clear_screen: {str(DEFAULT_CLEAR_SCREEN).lower()}
  pause: {str(DEFAULT_PAUSE).lower()}
  precision: {DEFAULT_PRECISION}
logging:
  level: {DEFAULT_LOG_LEVEL}
"""


def _parse_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _as_bool(value: object, name: str) -> bool:
    """Accept YAML booleans as-is and boolean-like strings via _parse_bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _parse_bool(value, name)
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _as_mapping(value: object, name: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def load_config(repo_path: Optional[Path] = None) -> MenucalcConfig:
    """Load menucalc configuration.

    Priority (highest to lowest):
    1. Environment variables (MENUCALC_PRECISION, etc.)
    2. Config file (.menucalc.yml in the given directory)
    3. Package defaults

    Args:
        repo_path: Directory holding the config file. Defaults to current directory.

    Returns:
        MenucalcConfig instance

    Raises:
        ValueError: If the config file or an environment override cannot be parsed.
    """
    config = MenucalcConfig()

    if repo_path is None:
        repo_path = Path.cwd()

    config_file = repo_path / CONFIG_PATH
    if config_file.exists():
        try:
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_PATH}: {e}") from None
        data = _as_mapping(data, CONFIG_PATH)

        if "version" in data:
            config.version = str(data["version"])

        # Parse display
        if "display" in data:
            display = _as_mapping(data["display"] or {}, "display")
            config.display.clear_screen = _as_bool(
                display.get("clear_screen", DEFAULT_CLEAR_SCREEN), "display.clear_screen"
            )
            config.display.pause = _as_bool(
                display.get("pause", DEFAULT_PAUSE), "display.pause"
            )
            config.display.precision = int(
                display.get("precision", DEFAULT_PRECISION)
            )

        # Parse logging
        if "logging" in data:
            logging = _as_mapping(data["logging"] or {}, "logging")
            config.logging.level = str(logging.get("level", DEFAULT_LOG_LEVEL))

    # Override with environment variables
    if env_clear := os.environ.get("MENUCALC_CLEAR_SCREEN"):
        config.display.clear_screen = _parse_bool(env_clear, "MENUCALC_CLEAR_SCREEN")
    if env_pause := os.environ.get("MENUCALC_PAUSE"):
        config.display.pause = _parse_bool(env_pause, "MENUCALC_PAUSE")
    if env_precision := os.environ.get("MENUCALC_PRECISION"):
        config.display.precision = int(env_precision)
    if env_level := os.environ.get("MENUCALC_LOG_LEVEL"):
        config.logging.level = env_level

    if config.display.precision < 1:
        raise ValueError(
            f"precision must be at least 1, got {config.display.precision}"
        )

    return config
