"""Cgroup inventory — which subsystems the kernel has, and which are enabled."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ..errors import ParseError

logger = logging.getLogger(__name__)

# subsystem name -> enabled flag (0/1), as in /proc/cgroups
CgroupTable = dict[str, int]


def parse_enabled(text: str) -> CgroupTable:
    """
    Parse /proc/cgroups content.

    Format: subsys_name hierarchy num_cgroups enabled. The first line is a
    header. Any malformed line aborts the parse; no partial table is returned.
    """
    table: CgroupTable = {}
    for i, line in enumerate(text.split("\n")):
        if i == 0 or not line.strip():
            continue
        parts = line.split()
        if len(parts) != 4:
            raise ParseError(f"failed to parse cgroup entry {line!r}")
        name, hierarchy, num_cgroups, enabled = parts
        try:
            int(hierarchy)
            int(num_cgroups)
            table[name] = int(enabled)
        except ValueError as e:
            raise ParseError(f"failed to parse cgroup entry {line!r}") from e
    return table


def load_enabled(path: str = "/proc/cgroups") -> CgroupTable:
    """Read the enabled-subsystem table. OSError if unreadable, ParseError if malformed."""
    text = Path(path).read_text()
    table = parse_enabled(text)
    logger.debug("Loaded %d cgroup subsystems from %s", len(table), path)
    return table


def format_table(available: CgroupTable) -> str:
    """'blkio:1 cpu:1 ...' sorted by name, for explanations."""
    return " ".join(f"{name}:{flag}" for name, flag in sorted(available.items()))


def check_present(available: CgroupTable, desired: Sequence[str]) -> tuple[bool, str]:
    """
    Check that every desired subsystem is present and enabled.
    Stops at the first missing or disabled one and names it.
    """
    for cgroup in desired:
        if cgroup not in available:
            return False, f"Missing cgroup {cgroup}. Available cgroups: {format_table(available)}\n"
        if available[cgroup] != 1:
            return False, f"Cgroup {cgroup} not enabled. Available cgroups: {format_table(available)}\n"
    return True, ""
