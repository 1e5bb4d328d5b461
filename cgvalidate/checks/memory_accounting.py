"""Hierarchical memory accounting sub-check (decorates the cgroup setup result)."""

from pathlib import Path

from ..config import HostPaths
from ..host.cgroups import CgroupTable, check_present
from ..host.mounts import find_mountpoint, is_unified_mode

HIERARCHY_FILE = "memory.use_hierarchy"


def _read_hierarchy_flag(path: Path) -> int:
    """The interface holds exactly one integer. OSError if unreadable, ValueError if not."""
    fields = path.read_text().split()
    if len(fields) != 1:
        raise ValueError(f"expected one integer in {path}, got {len(fields)} fields")
    return int(fields[0])


def describe(available: CgroupTable, paths: HostPaths) -> str:
    """Status line for hierarchical memory accounting. Requires memory in available."""
    ok, _ = check_present(available, ["memory"])
    if not ok:
        return "\tHierarchical memory accounting status unknown: memory cgroup not enabled.\n"

    if is_unified_mode(paths):
        enabled = 1
    else:
        mnt = find_mountpoint("memory", "/", paths)
        if mnt is None:
            return "\tHierarchical memory accounting status unknown: memory cgroup not mounted.\n"
        try:
            enabled = _read_hierarchy_flag(Path(mnt) / HIERARCHY_FILE)
        except OSError:
            return "\tHierarchical memory accounting status unknown: hierarchy interface unavailable.\n"
        except ValueError:
            return "\tHierarchical memory accounting status unknown: hierarchy interface unreadable.\n"

    if enabled == 1:
        return (
            "\tHierarchical memory accounting enabled. "
            "Reported memory usage includes memory used by child containers.\n"
        )
    return (
        "\tHierarchical memory accounting disabled. "
        "Memory usage does not include usage from child containers.\n"
    )
