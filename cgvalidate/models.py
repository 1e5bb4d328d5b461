"""Structured facts from collaborators and the assembled report."""

from dataclasses import dataclass, field
from typing import Optional

from .checks.base import ClassificationResult


@dataclass
class VersionInfo:
    """Versions reported by the container manager."""

    agent_version: str
    os_version: str
    kernel_version: str  # e.g. "5.15.0-91-generic"
    runtime_version: str  # e.g. "24.0.7", or "Unknown"


@dataclass
class MachineInfo:
    """Machine facts from the container manager."""

    disk_schedulers: dict[str, str] = field(default_factory=dict)  # {"sda": "mq-deadline"}


@dataclass
class RuntimeInfo:
    """Validated info from the container runtime."""

    storage_driver: str
    server_version: str
    cgroup_driver: Optional[str] = None
    cgroup_version: Optional[str] = None


@dataclass
class Section:
    """One report section: a classified capability or a raw debug category."""

    name: str
    result: Optional[ClassificationResult] = None
    lines: list[str] = field(default_factory=list)  # Debug sections only

    @property
    def is_debug(self) -> bool:
        return self.result is None


@dataclass
class Report:
    """Ordered report: capability sections first, debug sections last."""

    agent_name: str
    agent_version: str
    os_version: str
    sections: list[Section] = field(default_factory=list)

    @property
    def checks(self) -> list[Section]:
        return [s for s in self.sections if not s.is_debug]

    @property
    def debug(self) -> list[Section]:
        return [s for s in self.sections if s.is_debug]
