"""Dependency declarations and their audit outcome."""

from __future__ import annotations

from dataclasses import dataclass

DEPRECATED = "deprecated"
NOT_DEPRECATED = "not-deprecated"
SKIPPED = "skipped"

_VALID_STATUSES = {DEPRECATED, NOT_DEPRECATED, SKIPPED}


@dataclass(frozen=True)
class DependencyDeclaration:
    """A ``PackageReference`` as written in a project file.

    Either field may be ``None`` when the attribute is absent; such
    declarations are reported but never looked up in the registry.
    """

    name: str | None
    version: str | None

    @property
    def is_queryable(self) -> bool:
        return bool(self.name and self.name.strip() and self.version and self.version.strip())


@dataclass(frozen=True)
class DependencyFinding:
    """Deprecation verdict for one declaration."""

    package: str
    version: str
    status: str
    reason: str = ""

    def __post_init__(self) -> None:
        if self.status not in _VALID_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
        if self.status == SKIPPED and not self.reason:
            raise ValueError("Skipped findings must carry a reason")

    @property
    def deprecated(self) -> bool:
        return self.status == DEPRECATED

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "package": self.package,
            "version": self.version,
            "status": self.status,
        }
        if self.reason:
            data["reason"] = self.reason
        return data

    @classmethod
    def from_verdict(cls, declaration: DependencyDeclaration, deprecated: bool) -> DependencyFinding:
        return cls(
            package=declaration.name or "",
            version=declaration.version or "",
            status=DEPRECATED if deprecated else NOT_DEPRECATED,
        )

    @classmethod
    def skipped(cls, declaration: DependencyDeclaration, reason: str) -> DependencyFinding:
        return cls(
            package=declaration.name or "",
            version=declaration.version or "",
            status=SKIPPED,
            reason=reason,
        )
