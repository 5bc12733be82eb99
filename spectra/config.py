"""
Load and expose app config (YAML). Used by the pipeline and CLI to get the default
definition file, default output formats, home directory and log level.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def _defaults() -> dict[str, Any]:
    return {
        "definition": "colors.yaml",
        "formats": ["palette", "objc"],
        "paths": {"home": None},
        "logging": {"level": "INFO"},
    }


def get_home_dir(config: dict[str, Any]) -> Path:
    """Home directory used as the root for per-user output locations (e.g. ~/Library/Colors)."""
    home = (config.get("paths") or {}).get("home")
    if home:
        return Path(home).expanduser()
    return Path.home()


def get_default_formats(config: dict[str, Any]) -> list[str]:
    """Format kinds generated when a definition requests none."""
    formats = config.get("formats") or _defaults()["formats"]
    return [str(kind) for kind in formats]


def get_definition_path(config: dict[str, Any]) -> Path:
    """Palette definition file (relative paths resolve against the working directory)."""
    return Path(config.get("definition") or _defaults()["definition"])


def get_log_level(config: dict[str, Any]) -> str:
    return str((config.get("logging") or {}).get("level", "INFO")).upper()
