"""Report output — plain text (optionally coloured) and JSON."""

import json

import click

from .checks.base import SupportTier
from .models import Report, Section

OUTPUT_FORMAT = "{name}: {tier}\n\t{explanation}\n\n"

TIER_COLORS = {
    SupportTier.RECOMMENDED: "green",
    SupportTier.SUPPORTED: "yellow",
    SupportTier.UNSUPPORTED: "red",
    SupportTier.UNKNOWN: "magenta",
}


def _tier_text(section: Section, color: bool) -> str:
    if section.result is None:
        return ""
    label = section.result.tier.label
    if color:
        return click.style(label, fg=TIER_COLORS[section.result.tier], bold=True)
    return label


def format_section(section: Section, color: bool = False) -> str:
    """'<name>: <tier>\\n\\t<explanation>\\n\\n'. Debug sections have an empty tier."""
    if section.is_debug:
        explanation = "\n\t".join(section.lines)
    else:
        explanation = section.result.explanation
    return OUTPUT_FORMAT.format(name=section.name, tier=_tier_text(section, color), explanation=explanation)


def format_text(report: Report, color: bool = False) -> str:
    """Build the full text report as a single string."""
    out = f"{report.agent_name} version: {report.agent_version}\n\n"
    # No OS is preferred or unsupported.
    out += f"OS version: {report.os_version}\n\n"
    for section in report.sections:
        out += format_section(section, color=color)
    return out


def report_to_dict(report: Report) -> dict:
    return {
        "agent": report.agent_name,
        "agent_version": report.agent_version,
        "os_version": report.os_version,
        "checks": [
            {
                "name": s.name,
                "tier": s.result.tier.value,
                "label": s.result.tier.label,
                "explanation": s.result.explanation,
            }
            for s in report.checks
        ],
        "debug": {s.name: s.lines for s in report.debug},
    }


def format_json(report: Report) -> str:
    return json.dumps(report_to_dict(report), indent=2)
