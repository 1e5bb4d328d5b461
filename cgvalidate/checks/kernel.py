"""Kernel version check."""

from ..errors import ParseError
from ..version import parse_major_minor
from .base import ClassificationResult, SupportTier

MIN_SUPPORTED = (2, 6)
MIN_RECOMMENDED_MAJOR = 3


def check(version: str) -> ClassificationResult:
    """>= 2.6 is supported, 3.0+ is recommended."""
    desc = f"Kernel version is {version}. Versions >= 2.6 are supported. 3.0+ are recommended.\n"
    try:
        major, minor = parse_major_minor(version)
    except ParseError:
        return ClassificationResult(SupportTier.UNKNOWN, f"Could not parse kernel version. {desc}")

    if (major, minor) < MIN_SUPPORTED:
        return ClassificationResult(SupportTier.UNSUPPORTED, desc)
    if major >= MIN_RECOMMENDED_MAJOR:
        return ClassificationResult(SupportTier.RECOMMENDED, desc)
    return ClassificationResult(SupportTier.SUPPORTED, desc)
