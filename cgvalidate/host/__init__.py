"""Host inspection — cgroup inventory, mounts, machine and runtime facts."""

from .cgroups import CgroupTable, check_present, load_enabled
from .machine import HostManager
from .mounts import find_mountpoint, is_unified_mode
from .runtime import DockerRuntime

__all__ = [
    "CgroupTable",
    "check_present",
    "load_enabled",
    "find_mountpoint",
    "is_unified_mode",
    "HostManager",
    "DockerRuntime",
]
