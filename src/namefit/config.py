"""Ignored-tag and tag-conversion configuration, stored as YAML.

The default config lives in the platform config directory
(e.g. ~/.config/namefit/config.yaml on Linux) and is created with empty
values on first use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from platformdirs import user_config_dir

from namefit.errors import ConfigError
from namefit.utils import normalize_tag

logger = logging.getLogger(__name__)

APP_NAME = "namefit"
CONFIG_FILENAME = "config.yaml"

# Upper bound on numbered candidates tried before giving up
DEFAULT_MAX_RETRIES = 10_000


@dataclass
class ShortenerConfig:
    ignored_tags: set[str] = field(default_factory=set)
    conversions: dict[str, str] = field(default_factory=dict)
    max_retries: int | None = DEFAULT_MAX_RETRIES

    def to_dict(self) -> dict:
        return {
            "ignored_tags": sorted(self.ignored_tags),
            "conversions": dict(self.conversions),
            "max_retries": self.max_retries,
        }


def default_config_path() -> Path:
    return Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME


def write_config(path: Path, config: ShortenerConfig) -> None:
    """Write config as YAML, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, allow_unicode=True, sort_keys=False)


def parse_config(data: dict | None) -> ShortenerConfig:
    """Validate raw YAML data and build a config with normalized lookup keys."""
    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    for key in data:
        if key not in ("ignored_tags", "conversions", "max_retries"):
            logger.warning("Ignoring unknown config key: %s", key)

    ignored_tags = data.get("ignored_tags") or []
    if not isinstance(ignored_tags, list) or not all(isinstance(t, str) for t in ignored_tags):
        raise ConfigError("'ignored_tags' must be a list of strings")

    conversions = data.get("conversions") or {}
    if not isinstance(conversions, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in conversions.items()
    ):
        raise ConfigError("'conversions' must map strings to strings")

    max_retries = data.get("max_retries", DEFAULT_MAX_RETRIES)
    if max_retries is not None and (
        isinstance(max_retries, bool) or not isinstance(max_retries, int) or max_retries < 1
    ):
        raise ConfigError("'max_retries' must be a positive integer or null")

    return ShortenerConfig(
        ignored_tags={normalize_tag(t) for t in ignored_tags},
        conversions={normalize_tag(k): v for k, v in conversions.items()},
        max_retries=max_retries,
    )


def load_config(path: str | Path | None = None) -> ShortenerConfig:
    """Load config from path, or from the default location.

    A missing default config file is created with empty values; an explicit
    path must exist.
    """
    if path is None:
        path = default_config_path()
        if not path.exists():
            write_config(path, ShortenerConfig())
            logger.debug("Default config written to %s", path)

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    return parse_config(data)
