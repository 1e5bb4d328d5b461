"""Host manager — versions, block-device schedulers and debug info for this machine."""

from __future__ import annotations

import logging
import os
from dataclasses import fields
from pathlib import Path

from .. import __version__
from ..config import HostPaths
from ..errors import FatalFetchError, MachineInfoError
from ..models import MachineInfo, VersionInfo

logger = logging.getLogger(__name__)

AGENT_NAME = "cgvalidate"


def read_kernel_release(path: str) -> str:
    """Kernel release string, e.g. '6.1.0-18-amd64'."""
    try:
        release = Path(path).read_text().strip()
    except OSError as e:
        raise FatalFetchError(f"could not read kernel release from {path}: {e}") from e
    if not release:
        raise FatalFetchError(f"empty kernel release in {path}")
    return release


def read_os_version(path: str) -> str:
    """PRETTY_NAME from os-release, 'Linux' if unavailable."""
    try:
        text = Path(path).read_text()
    except OSError:
        return "Linux"
    for line in text.splitlines():
        if line.startswith("PRETTY_NAME="):
            value = line.split("=", 1)[1].strip().strip('"').strip("'")
            if value:
                return value
    return "Linux"


def parse_scheduler(text: str) -> str:
    """'mq-deadline kyber [bfq] none' -> 'bfq'. Without brackets the single entry is active."""
    names = text.split()
    for name in names:
        if name.startswith("[") and name.endswith("]"):
            return name[1:-1]
    if len(names) == 1:
        return names[0]
    return "none"


def read_disk_schedulers(sys_block: str) -> dict[str, str]:
    """Disk name -> active I/O scheduler, from /sys/block/<dev>/queue/scheduler."""
    try:
        devices = sorted(os.listdir(sys_block))
    except OSError as e:
        raise MachineInfoError(f"could not list block devices in {sys_block}: {e}") from e
    schedulers = {}
    for dev in devices:
        try:
            text = (Path(sys_block) / dev / "queue" / "scheduler").read_text()
        except OSError:
            schedulers[dev] = "none"
            continue
        schedulers[dev] = parse_scheduler(text)
    return schedulers


class HostManager:
    """Container-manager provider for the local host."""

    def __init__(self, runtime, paths: HostPaths | None = None):
        self.runtime = runtime
        self.paths = paths or HostPaths()

    def get_version_info(self) -> VersionInfo:
        return VersionInfo(
            agent_version=__version__,
            os_version=read_os_version(self.paths.os_release),
            kernel_version=read_kernel_release(self.paths.kernel_release),
            runtime_version=self.runtime.version_string(),
        )

    def get_machine_info(self) -> MachineInfo:
        return MachineInfo(disk_schedulers=read_disk_schedulers(self.paths.sys_block))

    def debug_info(self) -> dict[str, list[str]]:
        """Category -> lines, appended verbatim after the capability sections."""
        return {
            "Host paths": [f"{f.name}: {getattr(self.paths, f.name)}" for f in fields(self.paths)],
            "Runtime": self.runtime.debug_lines(),
        }
