"""Parse "major.minor<suffix>" version strings."""

import logging
import re
from typing import NamedTuple

from .errors import ParseError

logger = logging.getLogger(__name__)

_MAJOR_MINOR = re.compile(r"(\d+)\.(\d+)")


class VersionTuple(NamedTuple):
    major: int
    minor: int


def parse_major_minor(version: str) -> VersionTuple:
    """Parse '3.10.0-1160.el7' -> (3, 10). Anything after the minor number is ignored."""
    m = _MAJOR_MINOR.match(version or "")
    if not m:
        logger.debug("Failed to parse version for %r", version)
        raise ParseError(f"cannot parse major.minor from {version!r}")
    return VersionTuple(int(m.group(1)), int(m.group(2)))
