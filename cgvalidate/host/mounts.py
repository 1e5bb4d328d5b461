"""Cgroup mount inspection — mountinfo parsing, mountpoint lookup, unified mode."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from ..config import HostPaths
from ..errors import ParseError

logger = logging.getLogger(__name__)

CGROUP_FS_TYPES = ("cgroup", "cgroup2")

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


@dataclass(frozen=True)
class MountEntry:
    """One line of /proc/self/mountinfo."""

    mount_point: str
    root: str
    fs_type: str
    source: str
    super_options: tuple[str, ...]


def _unescape(field: str) -> str:
    """Mountinfo escapes space, tab, newline and backslash as \\ooo."""
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), field)


def parse_mountinfo(text: str) -> list[MountEntry]:
    """
    Parse mountinfo content.

    Format: id parent major:minor root mount_point options [optional...] - fstype source super_options
    """
    entries = []
    for line in text.splitlines():
        if not line.strip():
            continue
        pre, sep, post = line.partition(" - ")
        fields = pre.split()
        tail = post.split()
        if not sep or len(fields) < 5 or len(tail) < 2:
            raise ParseError(f"malformed mountinfo line {line!r}")
        entries.append(MountEntry(
            mount_point=_unescape(fields[4]),
            root=_unescape(fields[3]),
            fs_type=tail[0],
            source=tail[1],
            super_options=tuple(tail[2].split(",")) if len(tail) > 2 else (),
        ))
    return entries


def read_mountinfo(paths: HostPaths) -> list[MountEntry] | None:
    """Mount entries, or None if mountinfo is unreadable or malformed."""
    try:
        return parse_mountinfo(Path(paths.mountinfo).read_text())
    except (OSError, ParseError) as e:
        logger.warning("Could not read %s: %s", paths.mountinfo, e)
        return None


def is_unified_mode(paths: HostPaths) -> bool:
    """True when the cgroup root itself is a cgroup2 mount (pure v2 host)."""
    entries = read_mountinfo(paths) or []
    root = paths.cgroup_root.rstrip("/") or "/"
    return any(e.mount_point == root and e.fs_type == "cgroup2" for e in entries)


def find_mountpoint(subsystem: str, root: str = "/", paths: HostPaths | None = None) -> str | None:
    """
    Mount point of the v1 hierarchy carrying subsystem, under root.
    Returns None if not mounted, or on unified hosts where per-controller mounts don't exist.
    """
    paths = paths or HostPaths()
    if is_unified_mode(paths):
        logger.debug("Unified cgroup hierarchy; no mount point for %s", subsystem)
        return None
    prefix = root.rstrip("/") + "/"
    for entry in read_mountinfo(paths) or []:
        if entry.fs_type != "cgroup":
            continue
        if entry.mount_point != root.rstrip("/") and not entry.mount_point.startswith(prefix):
            continue
        if subsystem in entry.super_options:
            return entry.mount_point
    logger.debug("No cgroup mount found for %s under %s", subsystem, root)
    return None


def cgroup_mount_lines(text: str) -> list[str]:
    """Lines of /proc/mounts whose filesystem type is cgroup or cgroup2."""
    lines = []
    for line in text.split("\n"):
        parts = line.split()
        if len(parts) >= 3 and parts[2] in CGROUP_FS_TYPES:
            lines.append(line)
    return lines
