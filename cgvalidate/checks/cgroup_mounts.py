"""Cgroup mount check — where the hierarchies live and whether we can see them."""

import logging
import os
from pathlib import Path

from ..config import HostPaths
from ..host.mounts import cgroup_mount_lines, find_mountpoint
from .base import ClassificationResult, SupportTier

logger = logging.getLogger(__name__)

RECOMMENDED_MOUNT = "/sys/fs/cgroup"

DESCRIPTION = (
    "\tAny cgroup mount point that is detectable and accessible is supported. "
    f"{RECOMMENDED_MOUNT} is recommended as a standard location.\n"
)


def check(paths: HostPaths) -> ClassificationResult:
    """Recommended at /sys/fs/cgroup, Supported anywhere else we can read."""
    desc = DESCRIPTION
    mnt = find_mountpoint("cpu", "/", paths)
    if mnt is None:
        return ClassificationResult(SupportTier.UNKNOWN, "Could not locate cgroup mount point.\n" + desc)

    root = os.path.dirname(mnt)
    if not Path(root).exists():
        return ClassificationResult(SupportTier.UNSUPPORTED, f"Cgroup mount directory {root} inaccessible.\n" + desc)
    try:
        entries = sorted(os.listdir(root))
    except OSError as e:
        logger.warning("Could not list %s: %s", root, e)
        return ClassificationResult(SupportTier.UNSUPPORTED, f"Could not read cgroup mount directory {root}.\n" + desc)

    out = f"Cgroups are mounted at {root}.\n"
    out += "\tCgroup mount directories: " + " ".join(entries) + "\n"
    out += desc
    try:
        mounts = Path(paths.proc_mounts).read_text()
    except OSError as e:
        logger.warning("Could not read %s: %s", paths.proc_mounts, e)
        return ClassificationResult(SupportTier.UNSUPPORTED, f"Could not read {paths.proc_mounts}.\n" + desc)
    out += "\tCgroup mounts:\n"
    for line in cgroup_mount_lines(mounts):
        out += "\t" + line + "\n"

    if root == RECOMMENDED_MOUNT:
        return ClassificationResult(SupportTier.RECOMMENDED, out)
    return ClassificationResult(SupportTier.SUPPORTED, out)
