"""Repository tree traversal and descriptor discovery."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Protocol

from .config import DEFAULT_DESCRIPTOR_SUFFIXES
from .errors import AuditError
from .models import TreeEntry

logger = logging.getLogger(__name__)


class DirectoryLister(Protocol):
    """Anything able to list one directory of a repository."""

    def list_directory(self, owner: str, repo: str, path: str = "") -> list[TreeEntry]: ...


def is_descriptor_name(name: str, suffixes: Iterable[str] = DEFAULT_DESCRIPTOR_SUFFIXES) -> bool:
    lowered = name.lower()
    return any(lowered.endswith(suffix.lower()) for suffix in suffixes)


def walk_descriptors(
    lister: DirectoryLister,
    owner: str,
    repo: str,
    path: str = "",
    suffixes: Iterable[str] = DEFAULT_DESCRIPTOR_SUFFIXES,
) -> Iterator[TreeEntry]:
    """Yield descriptor files under ``path`` depth-first, in listing order.

    A directory that cannot be listed (missing permissions, 404, malformed
    payload, network failure) contributes nothing; its siblings and parents
    are still traversed.
    """
    suffixes = tuple(suffixes)
    try:
        entries = lister.list_directory(owner, repo, path)
    except AuditError as exc:
        logger.warning("Failed to fetch content from %s/%s/%s: %s", owner, repo, path, exc)
        return

    for entry in entries:
        if entry.is_file and is_descriptor_name(entry.name, suffixes):
            yield entry
        elif entry.is_directory:
            yield from walk_descriptors(lister, owner, repo, entry.path, suffixes)


def has_descriptor(
    lister: DirectoryLister,
    owner: str,
    repo: str,
    path: str = "",
    suffixes: Iterable[str] = DEFAULT_DESCRIPTOR_SUFFIXES,
) -> bool:
    """Return True as soon as one descriptor is found under ``path``."""
    return next(walk_descriptors(lister, owner, repo, path, suffixes), None) is not None
