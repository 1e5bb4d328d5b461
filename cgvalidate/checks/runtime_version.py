"""Container runtime (Docker) version check."""

from ..errors import ParseError
from ..version import parse_major_minor
from .base import ClassificationResult, SupportTier

MIN_SUPPORTED_MAJOR = 1
MIN_RECOMMENDED = (1, 2)


def check(version: str, runtime_name: str = "Docker") -> ClassificationResult:
    """>= 1.0 is supported, 1.2+ is recommended."""
    desc = f"{runtime_name} version is {version}. Versions >= 1.0 are supported. 1.2+ are recommended.\n"
    try:
        major, minor = parse_major_minor(version)
    except ParseError:
        return ClassificationResult(
            SupportTier.UNKNOWN,
            f"Could not parse {runtime_name.lower()} version. {desc}",
        )

    if major < MIN_SUPPORTED_MAJOR:
        return ClassificationResult(SupportTier.UNSUPPORTED, desc)
    if (major, minor) < MIN_RECOMMENDED:
        return ClassificationResult(SupportTier.SUPPORTED, desc)
    return ClassificationResult(SupportTier.RECOMMENDED, desc)
