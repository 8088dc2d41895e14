"""
Resolver settings — optional localproject.yml overrides.

Settings are small on purpose: the descriptor file name probed for tree
membership and the source language used for the ``src/main/<lang>``
convention. Without a settings file the Maven defaults apply.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

SETTINGS_FILE = "localproject.yml"


class ConfigError(Exception):
    """Raised when the settings file is invalid or missing."""


class ResolverSettings(BaseModel):
    """Knobs for descriptor discovery and path derivation."""

    model_config = ConfigDict(frozen=True)

    descriptor_name: str = "pom.xml"
    source_language: str = "java"


DEFAULT_SETTINGS = ResolverSettings()


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for localproject.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to localproject.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None  # filesystem root
        current = parent


def load_settings(path: Path | None = None) -> ResolverSettings:
    """Load resolver settings.

    Args:
        path: Explicit path to localproject.yml. If None, searches upward
            and falls back to defaults when nothing is found.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_settings_file()
        if path is None:
            return DEFAULT_SETTINGS
    elif not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")

    logger.debug("Loading resolver settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return DEFAULT_SETTINGS
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        return ResolverSettings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid resolver settings: {e}") from e
