"""Data models for the repository audit pipeline."""

from __future__ import annotations

from .audit import DescriptorAudit, RepositoryAudit
from .dependency import DependencyDeclaration, DependencyFinding
from .repository import Repository
from .tree_entry import TreeEntry

__all__ = [
    "DependencyDeclaration",
    "DependencyFinding",
    "DescriptorAudit",
    "Repository",
    "RepositoryAudit",
    "TreeEntry",
]
