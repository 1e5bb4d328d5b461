"""Settings — host paths and runtime command, optionally from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# ~/.cgvalidate/config.yaml
DEFAULT_CONFIG_PATH = Path.home() / ".cgvalidate" / "config.yaml"


@dataclass(frozen=True)
class HostPaths:
    """Every host file and directory the validator reads."""

    proc_cgroups: str = "/proc/cgroups"
    proc_mounts: str = "/proc/mounts"
    mountinfo: str = "/proc/self/mountinfo"
    cgroup_root: str = "/sys/fs/cgroup"
    sys_block: str = "/sys/block"
    os_release: str = "/etc/os-release"
    kernel_release: str = "/proc/sys/kernel/osrelease"


@dataclass(frozen=True)
class Settings:
    paths: HostPaths = field(default_factory=HostPaths)
    runtime_bin: str = "docker"
    runtime_timeout: float = 5.0


def _known(cls, data: dict[str, Any]) -> dict[str, Any]:
    """Keep only keys that are fields of cls."""
    names = {f.name for f in fields(cls)}
    ignored = sorted(set(data) - names)
    if ignored:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(ignored))
    return {k: v for k, v in data.items() if k in names}


def settings_from_dict(data: dict[str, Any]) -> Settings:
    """Build Settings from a parsed config mapping (as found in config.yaml)."""
    data = dict(data or {})
    paths = data.pop("paths", None) or {}
    if not isinstance(paths, dict):
        logger.warning("Config 'paths' must be a mapping, got %s", type(paths).__name__)
        paths = {}
    kwargs = _known(Settings, data)
    if "runtime_timeout" in kwargs:
        kwargs["runtime_timeout"] = float(kwargs["runtime_timeout"])
    return Settings(
        paths=HostPaths(**{k: str(v) for k, v in _known(HostPaths, paths).items()}),
        **kwargs,
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from config_path (or the default location). Missing file means defaults."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        if config_path is not None:
            logger.warning("Config file not found: %s", path)
        return Settings()
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not load config %s: %s", path, e)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("Config %s must be a mapping, using defaults", path)
        return Settings()
    try:
        return settings_from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning("Invalid config %s: %s", path, e)
        return Settings()
