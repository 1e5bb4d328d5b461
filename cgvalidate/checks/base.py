"""Base types for capability checks."""

from dataclasses import dataclass
from enum import Enum


class SupportTier(str, Enum):
    UNKNOWN = "Unknown"
    UNSUPPORTED = "Unsupported"
    SUPPORTED = "Supported"
    RECOMMENDED = "Recommended"

    @property
    def label(self) -> str:
        """Bracketed label used in the text report."""
        return TIER_LABELS[self]

    @property
    def rank(self) -> int:
        """Desirability: Unknown (0) < Unsupported < Supported < Recommended (3)."""
        return TIER_RANK[self]


TIER_LABELS = {
    SupportTier.UNKNOWN: "[Unknown]",
    SupportTier.UNSUPPORTED: "[Unsupported]",
    SupportTier.SUPPORTED: "[Supported, but not recommended]",
    SupportTier.RECOMMENDED: "[Supported and recommended]",
}

TIER_RANK = {
    SupportTier.UNKNOWN: 0,
    SupportTier.UNSUPPORTED: 1,
    SupportTier.SUPPORTED: 2,
    SupportTier.RECOMMENDED: 3,
}


@dataclass(frozen=True)
class ClassificationResult:
    """Output of a single capability check."""

    tier: SupportTier
    explanation: str  # Multi-line, always states the rule as well as the outcome
