"""Core scanning entrypoints.

This module wires the GitHub client, tree walker, project-file parser and
registry resolver together. It does no printing so it can be driven by the
CLI or by other callers that want the structured results.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .config import Settings
from .discovery import walk_descriptors
from .errors import AuditError
from .hosting.github import GitHubClient
from .models import (
    DependencyDeclaration,
    DependencyFinding,
    DescriptorAudit,
    Repository,
    RepositoryAudit,
    TreeEntry,
)
from .parsers.csproj import extract_dependencies
from .parsers.semver import is_valid
from .registry.client import RegistryClient
from .registry.deprecation import DeprecationResolver

logger = logging.getLogger(__name__)

MISSING_FIELD_REASON = "missing package name or version"
UNPARSEABLE_VERSION_REASON = "unparseable version"


def audit_dependency(
    declaration: DependencyDeclaration, resolver: DeprecationResolver
) -> DependencyFinding:
    if not declaration.is_queryable:
        return DependencyFinding.skipped(declaration, MISSING_FIELD_REASON)
    if not is_valid(declaration.version):
        return DependencyFinding.skipped(declaration, UNPARSEABLE_VERSION_REASON)

    deprecated = resolver.check_deprecation(declaration.name.strip(), declaration.version.strip())
    return DependencyFinding.from_verdict(declaration, deprecated)


def audit_descriptor(
    entry: TreeEntry, host: GitHubClient, resolver: DeprecationResolver
) -> DescriptorAudit:
    """Fetch, parse and audit one project file.

    Fetch and parse failures are recorded on the result instead of raised.
    """
    if not entry.download_url:
        return DescriptorAudit(name=entry.name, path=entry.path, error="no download URL")

    try:
        document = host.fetch_text(entry.download_url)
        declarations = extract_dependencies(document)
    except AuditError as exc:
        logger.warning("Failed to read %s: %s", entry.path, exc)
        return DescriptorAudit(name=entry.name, path=entry.path, error=str(exc))

    findings = tuple(audit_dependency(declaration, resolver) for declaration in declarations)
    return DescriptorAudit(name=entry.name, path=entry.path, findings=findings)


def audit_repository(
    repository: Repository,
    host: GitHubClient,
    resolver: DeprecationResolver,
    settings: Settings,
) -> RepositoryAudit | None:
    """Audit every project file in ``repository``; None when it has none."""
    descriptors = tuple(
        audit_descriptor(entry, host, resolver)
        for entry in walk_descriptors(
            host,
            repository.owner,
            repository.name,
            suffixes=settings.descriptor_suffixes,
        )
    )
    if not descriptors:
        logger.debug("No project files in %s", repository.full_name)
        return None
    return RepositoryAudit(repository=repository, descriptors=descriptors)


@dataclass(slots=True)
class ScanCounts:
    """Running totals filled in while ``scan_account`` is consumed."""

    repositories: int = 0
    audited: int = 0


def scan_account(
    settings: Settings,
    host: GitHubClient | None = None,
    resolver: DeprecationResolver | None = None,
    counts: ScanCounts | None = None,
) -> Iterator[RepositoryAudit]:
    """Yield an audit for each repository of the account that has project files.

    Repositories are processed one at a time in listing order. Failing to list
    the repositories themselves propagates to the caller. When ``counts`` is
    given it tracks how many repositories were listed and how many audited.
    """
    counts = counts if counts is not None else ScanCounts()
    host = host or GitHubClient(settings)
    resolver = resolver or DeprecationResolver(RegistryClient(settings), settings)

    for repository in host.list_repositories():
        counts.repositories += 1
        audit = audit_repository(repository, host, resolver, settings)
        if audit is not None:
            counts.audited += 1
            yield audit
