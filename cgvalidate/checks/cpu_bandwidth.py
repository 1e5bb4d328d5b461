"""CPU CFS bandwidth control sub-check (decorates the cgroup setup result)."""

from pathlib import Path

from ..config import HostPaths
from ..host.cgroups import CgroupTable, check_present
from ..host.mounts import find_mountpoint

PERIOD_FILE = "cpu.cfs_period_us"


def describe(available: CgroupTable, paths: HostPaths) -> str:
    ok, _ = check_present(available, ["cpu"])
    if not ok:
        return "\tCpu cfs bandwidth status unknown: cpu cgroup not enabled.\n"
    mnt = find_mountpoint("cpu", "/", paths)
    if mnt is None:
        return "\tCpu cfs bandwidth status unknown: cpu cgroup not mounted.\n"
    if not (Path(mnt) / PERIOD_FILE).exists():
        return '\tCpu cfs bandwidth is disabled. Recompile kernel with "CONFIG_CFS_BANDWIDTH" enabled.\n'
    return "\tCpu cfs bandwidth is enabled.\n"
