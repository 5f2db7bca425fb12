"""
Settings for the Arc sidebar exporter.

Loaded from:
1. Defaults (this file)
2. Config file (~/.config/arc-sidebar/config.toml) if exists
3. Environment variables (ARC_SIDEBAR_*) override file
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path


def _default_snapshot_dir() -> Path:
    return Path.home() / ".arc-sidebar" / "snapshots"


@dataclass
class ExporterSettings:
    """Where to read Arc data and where to write exports."""
    json_path: Path | None = None  # None: look in cwd, then Arc's data directory
    output_folder: str = ""  # empty: current directory
    snapshot_dir: Path = field(default_factory=_default_snapshot_dir)


ENV_MAP: dict[str, tuple[str, type]] = {
    "ARC_SIDEBAR_JSON": ("json_path", Path),
    "ARC_SIDEBAR_OUTPUT": ("output_folder", str),
    "ARC_SIDEBAR_SNAPSHOTS": ("snapshot_dir", Path),
}


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "arc-sidebar" / "config.toml"
    return Path.home() / ".config" / "arc-sidebar" / "config.toml"


def load_settings() -> ExporterSettings:
    """Load settings from file if exists, then apply env overrides."""
    settings = ExporterSettings()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            settings = _apply_toml(settings, data)
        except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
            logging.warning(f"Ignoring config file {path}: {e}")
            settings = ExporterSettings()

    return _apply_env(settings)


def _apply_toml(settings: ExporterSettings, data: dict) -> ExporterSettings:
    """Apply toml data to settings."""
    if "json_path" in data:
        settings.json_path = Path(data["json_path"]).expanduser()
    if "output_folder" in data:
        settings.output_folder = str(data["output_folder"])
    if "snapshot_dir" in data:
        settings.snapshot_dir = Path(data["snapshot_dir"]).expanduser()
    return settings


def _apply_env(settings: ExporterSettings) -> ExporterSettings:
    """Apply environment variable overrides."""
    for env_key, (attr, type_) in ENV_MAP.items():
        value = os.environ.get(env_key)
        if value is None:
            continue
        if type_ is Path:
            setattr(settings, attr, Path(value).expanduser())
        else:
            setattr(settings, attr, value)
    return settings
