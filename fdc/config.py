"""Configuration loading for fdc (explicit ``--config`` YAML files)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

DEFAULT_ROOT_MARKER = r"^\s*\*?\s*Plugin Name:"
DEFAULT_ENCODING = "utf-8"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class FinderConfig:
    """Settings that tune discovery and root detection."""

    exclude_paths: List[str] = field(default_factory=list)
    root_marker: str = DEFAULT_ROOT_MARKER
    encoding: str = DEFAULT_ENCODING
    source: Optional[Path] = None

    def compile_root_marker(self) -> re.Pattern[str]:
        try:
            return re.compile(self.root_marker, re.MULTILINE)
        except re.error as exc:
            raise ConfigError(f"Invalid root_marker pattern {self.root_marker!r}: {exc}") from exc


def load_config(config_path: Path | None) -> FinderConfig:
    """Load configuration from disk, returning defaults when no path is given."""
    if config_path is None:
        return FinderConfig()

    config_file = config_path.expanduser().resolve()
    if not config_file.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    config = FinderConfig(source=config_file)
    config.exclude_paths = _as_str_list(data.get("exclude_paths"))

    root_marker = _as_str(data.get("root_marker"))
    if root_marker:
        config.root_marker = root_marker

    encoding = _as_str(data.get("encoding"))
    if encoding:
        config.encoding = encoding

    # Fail early on a bad pattern rather than in the middle of a scan.
    config.compile_root_marker()
    return config


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["ConfigError", "FinderConfig", "load_config", "DEFAULT_ROOT_MARKER"]
