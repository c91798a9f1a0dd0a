"""Per-descriptor and per-repository audit results."""

from __future__ import annotations

from dataclasses import dataclass

from .dependency import DependencyFinding
from .repository import Repository


@dataclass(frozen=True)
class DescriptorAudit:
    """Findings for a single project file, or the error that prevented them."""

    name: str
    path: str
    findings: tuple[DependencyFinding, ...] = ()
    error: str = ""

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "name": self.name,
            "path": self.path,
            "findings": [finding.to_dict() for finding in self.findings],
        }
        if self.error:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class RepositoryAudit:
    """All descriptor audits found in one repository."""

    repository: Repository
    descriptors: tuple[DescriptorAudit, ...]

    def __post_init__(self) -> None:
        if not self.descriptors:
            raise ValueError("A repository audit must contain at least one descriptor")

    def to_dict(self) -> dict[str, object]:
        return {
            "repository": self.repository.full_name,
            "descriptors": [descriptor.to_dict() for descriptor in self.descriptors],
        }
