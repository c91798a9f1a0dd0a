"""Two-stage deprecation lookup against the NuGet registration index.

Stage A reads ``{base}/{id}/index.json`` and picks the page whose
``lower``/``upper`` range contains the target version. Stage B reads that page
and looks for a leaf of the version carrying ``catalogEntry.deprecation``.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import Settings
from ..errors import AuditError, MissingFieldError
from ..parsers.semver import contains_range, same_version
from .client import RegistryClient

logger = logging.getLogger(__name__)


def _items(document: Any, url: str) -> list[Any]:
    items = document.get("items") if isinstance(document, dict) else None
    if not isinstance(items, list):
        raise MissingFieldError(f"Document at {url} has no 'items' array")
    return items


def _leaf_id(item: dict[str, Any]) -> str:
    # Leaves expose "@id"; some mirrors also report a plain "id".
    return str(item.get("id") or item.get("@id") or "")


class DeprecationResolver:
    """Answer "is this package version deprecated?" for the pipeline."""

    def __init__(self, registry: RegistryClient, settings: Settings) -> None:
        self.registry = registry
        self.settings = settings

    def index_url(self, package: str) -> str:
        base = self.settings.registry_api_base.rstrip("/")
        return f"{base}/{package.lower()}/index.json"

    def _page_matches(self, item: Any, version: str) -> bool:
        if not isinstance(item, dict):
            return False
        lower = item.get("lower")
        upper = item.get("upper")
        if not lower or not upper:
            return False
        try:
            return contains_range(
                str(lower), str(upper), version, inclusive=self.settings.inclusive_range_bounds
            )
        except AuditError:
            return False

    def resolve_catalog_page(self, package: str, version: str) -> str | None:
        """Return the address of the page covering ``version``, or None.

        When several ranges contain the version the last one in document
        order wins.
        """
        url = self.index_url(package)
        try:
            items = _items(self.registry.fetch_document(url), url)
        except AuditError as exc:
            logger.warning("Registry index lookup failed for %s %s: %s", package, version, exc)
            return None

        matches = [
            str(item["@id"])
            for item in items
            if self._page_matches(item, version) and item.get("@id")
        ]
        if not matches:
            logger.info("No registry page covers %s %s", package, version)
            return None
        return matches[-1]

    def _leaf_matches(self, item: Any, version: str) -> bool:
        if not isinstance(item, dict):
            return False
        catalog_entry = item.get("catalogEntry")
        if not isinstance(catalog_entry, dict) or catalog_entry.get("deprecation") is None:
            return False
        if self.settings.strict_version_match:
            return same_version(catalog_entry.get("version"), version)
        return version in _leaf_id(item)

    def is_deprecated(self, page_url: str, version: str) -> bool:
        """Return True when the page lists ``version`` with deprecation metadata.

        Any fetch or parse failure is reported as not deprecated.
        """
        try:
            items = _items(self.registry.fetch_document(page_url), page_url)
        except AuditError as exc:
            logger.warning("%s (%s)", exc, version)
            return False
        return any(self._leaf_matches(item, version) for item in items)

    def check_deprecation(self, package: str, version: str) -> bool:
        page_url = self.resolve_catalog_page(package, version)
        if not page_url:
            return False
        return self.is_deprecated(page_url, version)
