"""Container runtime driver check."""

from ..errors import RuntimeInfoError
from .base import ClassificationResult, SupportTier


def check(runtime) -> ClassificationResult:
    """Recommended whenever the runtime reports valid info; Unsupported otherwise."""
    try:
        info = runtime.validate_info()
    except RuntimeInfoError as e:
        return ClassificationResult(SupportTier.UNSUPPORTED, f"{runtime.name} setup is invalid: {e}\n")
    desc = f"Storage driver is {info.storage_driver}.\n"
    if info.cgroup_driver:
        desc += f"\tCgroup driver is {info.cgroup_driver}.\n"
    if info.cgroup_version:
        desc += f"\tCgroup version is {info.cgroup_version}.\n"
    return ClassificationResult(SupportTier.RECOMMENDED, desc)
