"""Cgroup setup check — required and recommended subsystems."""

import logging

from ..config import HostPaths
from ..errors import ParseError
from ..host.cgroups import check_present, format_table, load_enabled
from . import cpu_bandwidth, memory_accounting
from .base import ClassificationResult, SupportTier

logger = logging.getLogger(__name__)

REQUIRED_CGROUPS = ("cpu", "cpuacct")
RECOMMENDED_CGROUPS = ("memory", "blkio", "cpuset", "devices", "freezer")

DESCRIPTION = (
    f"\tFollowing cgroups are required: {', '.join(REQUIRED_CGROUPS)}\n"
    f"\tFollowing other cgroups are recommended: {', '.join(RECOMMENDED_CGROUPS)}\n"
)


def check(paths: HostPaths) -> ClassificationResult:
    """Unsupported without cpu/cpuacct, Supported without the recommended set."""
    try:
        available = load_enabled(paths.proc_cgroups)
    except OSError as e:
        logger.warning("Could not read %s: %s", paths.proc_cgroups, e)
        return ClassificationResult(SupportTier.UNKNOWN, f"Could not read {paths.proc_cgroups}.\n{DESCRIPTION}")
    except ParseError as e:
        logger.warning("Could not parse %s: %s", paths.proc_cgroups, e)
        return ClassificationResult(SupportTier.UNKNOWN, f"Could not parse {paths.proc_cgroups}.\n{DESCRIPTION}")

    ok, out = check_present(available, REQUIRED_CGROUPS)
    if not ok:
        return ClassificationResult(SupportTier.UNSUPPORTED, out + DESCRIPTION)
    ok, out = check_present(available, RECOMMENDED_CGROUPS)
    if not ok:
        return ClassificationResult(SupportTier.SUPPORTED, out + DESCRIPTION)

    # Only a fully recommended setup gets the advanced sub-checks.
    out = f"Available cgroups: {format_table(available)}\n"
    out += DESCRIPTION
    out += memory_accounting.describe(available, paths)
    out += cpu_bandwidth.describe(available, paths)
    return ClassificationResult(SupportTier.RECOMMENDED, out)
