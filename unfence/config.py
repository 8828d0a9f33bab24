"""Configuration loading for unfence (.unfence.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".unfence.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class UnfenceConfig:
    """Settings read from .unfence.yml; ``None`` means "not set"."""

    root: Path
    fence: Optional[str] = None
    input: Optional[str] = None
    out_dir: Optional[str] = None
    encoding: Optional[str] = None
    keep_going: Optional[bool] = None
    dry_run: Optional[bool] = None
    log_file: Optional[str] = None

    def resolve(self, value: Optional[str]) -> Optional[Path]:
        """Anchor a relative path setting at the directory holding the config file."""
        if not value:
            return None
        return self.root / Path(value).expanduser()


def load_config(config_path: Path) -> UnfenceConfig:
    """Load configuration from disk, returning empty settings when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return UnfenceConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    return UnfenceConfig(
        root=root,
        fence=_as_str(data.get("fence")) or None,
        input=_as_str(data.get("input")),
        out_dir=_as_str(data.get("out_dir")),
        encoding=_as_str(data.get("encoding")),
        keep_going=_as_bool(data.get("keep_going")),
        dry_run=_as_bool(data.get("dry_run")),
        log_file=_as_str(data.get("log_file")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


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
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "UnfenceConfig", "load_config"]
