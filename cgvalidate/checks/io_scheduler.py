"""Block device I/O scheduler check."""

import logging

from ..errors import MachineInfoError
from .base import ClassificationResult, SupportTier

logger = logging.getLogger(__name__)

# Only cfq exposes the per-device stats we report. Multi-queue kernels (5.0+)
# no longer ship cfq, so those hosts land on Supported.
STATS_SCHEDULER = "cfq"


def check(manager) -> ClassificationResult:
    try:
        machine = manager.get_machine_info()
    except MachineInfoError as e:
        logger.warning("Machine info not available: %s", e)
        return ClassificationResult(SupportTier.UNKNOWN, "Machine info not available\n\t")

    desc = ""
    found = False
    for disk, scheduler in sorted(machine.disk_schedulers.items()):
        desc += f'\t Disk "{disk}" Scheduler type "{scheduler}".\n'
        if scheduler == STATS_SCHEDULER:
            found = True
    # Block devices come and go; one device on cfq is enough.
    if found:
        desc = f"At least one device supports '{STATS_SCHEDULER}' I/O scheduler. Some disk stats can be reported.\n" + desc
        return ClassificationResult(SupportTier.RECOMMENDED, desc)
    desc = f"None of the devices support '{STATS_SCHEDULER}' I/O scheduler. No disk stats can be reported.\n" + desc
    return ClassificationResult(SupportTier.SUPPORTED, desc)
