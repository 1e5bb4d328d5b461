"""Report assembly — runs every capability check in a fixed order."""

from __future__ import annotations

import logging

from .checks import (
    cgroup_mounts,
    cgroup_setup,
    io_scheduler,
    kernel,
    runtime_driver,
    runtime_version,
)
from .config import Settings
from .errors import FatalFetchError
from .host.machine import AGENT_NAME, HostManager
from .host.runtime import DockerRuntime
from .models import Report, Section

logger = logging.getLogger(__name__)


def default_collaborators(settings: Settings) -> tuple[HostManager, DockerRuntime]:
    """Local host manager and docker runtime built from settings."""
    runtime = DockerRuntime(settings.runtime_bin, settings.runtime_timeout)
    return HostManager(runtime, settings.paths), runtime


def build_report(manager, runtime, settings: Settings | None = None) -> Report:
    """
    Classify the host and collect debug info.
    Raises FatalFetchError if version info can't be fetched; every other
    failure is reported inside its own section.
    """
    settings = settings or Settings()
    paths = settings.paths
    try:
        versions = manager.get_version_info()
    except FatalFetchError:
        raise
    except Exception as e:
        raise FatalFetchError(f"could not get version info: {e}") from e

    report = Report(
        agent_name=AGENT_NAME,
        agent_version=versions.agent_version,
        os_version=versions.os_version,
    )
    name = runtime.name
    checks = [
        ("Kernel version", lambda: kernel.check(versions.kernel_version)),
        ("Cgroup setup", lambda: cgroup_setup.check(paths)),
        ("Cgroup mount setup", lambda: cgroup_mounts.check(paths)),
        (f"{name} version", lambda: runtime_version.check(versions.runtime_version, name)),
        (f"{name} driver setup", lambda: runtime_driver.check(runtime)),
        ("Block device setup", lambda: io_scheduler.check(manager)),
    ]
    for section_name, check_fn in checks:
        result = check_fn()
        logger.debug("%s: %s", section_name, result.tier.value)
        report.sections.append(Section(section_name, result=result))

    for category, lines in manager.debug_info().items():
        report.sections.append(Section(category, lines=list(lines)))
    return report
