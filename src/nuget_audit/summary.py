"""Human-readable console rendering."""

from __future__ import annotations

from typing import Any

_VERDICTS = {
    "deprecated": "Deprecated",
    "not-deprecated": "Not Deprecated",
}


def _verdict(finding: dict[str, Any]) -> str:
    status = finding.get("status", "")
    if status in _VERDICTS:
        return _VERDICTS[status]
    return f"Skipped ({finding.get('reason') or 'unknown reason'})"


def render_repository(audit: dict[str, Any]) -> str:
    """Return the lines printed for one repository audit."""
    lines = ["", f"Repository: {audit.get('repository', '')}"]

    for descriptor in audit.get("descriptors", []):
        name = descriptor.get("name", "")
        lines.append(f"  Found project file: {descriptor.get('path') or name}")

        if descriptor.get("error"):
            lines.append(f"  Failed to read {name}: {descriptor['error']}")
            continue

        findings = descriptor.get("findings") or []
        if not findings:
            lines.append(f"  No dependencies found in {name}.")
            continue

        lines.append(f"  Dependencies in {name}:")
        for finding in findings:
            package = finding.get("package") or "(unnamed)"
            version = finding.get("version") or "(none)"
            lines.append(f"    - {package}, Version: {version}")
            lines.append(f"      {_verdict(finding)}")

    return "\n".join(lines) + "\n"


def render_summary(report: dict[str, Any]) -> str:
    """Return a one-paragraph totals summary for the end of a run."""
    totals = report.get("totals", {})

    lines = []
    lines.append("")
    lines.append(
        f"Repositories: {totals.get('repositories', 0)} | "
        f"Project files: {totals.get('descriptors', 0)} | "
        f"Dependencies: {totals.get('dependencies', 0)}"
    )
    lines.append(
        f"Deprecated: {totals.get('deprecated', 0)} | Skipped: {totals.get('skipped', 0)}"
    )

    return "\n".join(lines) + "\n"
