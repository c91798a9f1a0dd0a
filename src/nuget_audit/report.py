"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any


def aggregate(repositories: list[dict[str, Any]]) -> dict[str, Any]:
    """Aggregate per-repository audits into a single report.

    The input ``repositories`` is expected to be a list of dicts as produced by
    ``RepositoryAudit.to_dict``: ``repository`` and ``descriptors``, each
    descriptor holding ``findings`` with ``package``, ``version`` and
    ``status``.

    Computes totals and the top-level flag, and passes repositories through.
    """

    descriptors = [d for repo in repositories for d in repo.get("descriptors", [])]
    findings = [f for d in descriptors for f in d.get("findings", [])]
    deprecated = sum(1 for f in findings if f.get("status") == "deprecated")
    skipped = sum(1 for f in findings if f.get("status") == "skipped")

    report: dict[str, Any] = {
        "version": "1",
        "hasFindings": deprecated > 0,
        "repositories": repositories,
        "totals": {
            "repositories": len(repositories),
            "descriptors": len(descriptors),
            "dependencies": len(findings),
            "deprecated": deprecated,
            "skipped": skipped,
        },
    }

    return report
