"""
Configuration loader — reads guardgen.yml into a GeneratorConfig.

This is the primary entry point for loading generator configuration.
It reads YAML, overlays it on the built-in axes, validates against
Pydantic schemas, and returns a typed config.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from guardgen.core.config.defaults import default_config_data
from guardgen.core.models.axes import GeneratorConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "guardgen.yml"


class ConfigError(Exception):
    """Raised when generator configuration is invalid."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for guardgen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to guardgen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def default_config() -> GeneratorConfig:
    """The stock attribute suite configuration."""
    return GeneratorConfig.model_validate(default_config_data())


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Load and validate generator configuration.

    Keys present in the file replace the built-in value for that key
    wholesale (an ``attributes`` list replaces all stock attributes).
    Setting only ``support_namespace`` moves the stock reference kinds
    along with it; value kinds given in the file are taken as written.

    Args:
        path: Explicit path to guardgen.yml. If None, searches upward
            and falls back to the built-in axes when nothing is found.

    Returns:
        Validated GeneratorConfig.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using built-in axes", CONFIG_FILE)
            return default_config()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading generator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "guardgen" key or be flat
    if isinstance(data.get("guardgen"), dict):
        data = data["guardgen"]

    support_namespace = data.get("support_namespace")
    if not isinstance(support_namespace, str):
        support_namespace = None
    merged = {**default_config_data(support_namespace), **data}

    try:
        config = GeneratorConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid generator configuration in {path}: {e}") from e

    logger.info(
        "Loaded config from %s: %d attributes, %d base types, %d value kinds",
        path,
        len(config.attributes),
        len(config.base_types),
        len(config.value_kinds),
    )
    return config
