"""GitHub REST client used to enumerate repositories and their contents."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import requests
from requests import Response

from ..config import Settings
from ..errors import DecodeError, HttpStatusError, MissingFieldError, NetworkError
from ..models import Repository, TreeEntry

logger = logging.getLogger(__name__)


class GitHubClient:
    """Authenticated, GET-only access to the GitHub API."""

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self.settings = settings
        self.base_url = settings.hosting_api_base.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"token {settings.token}",
                "Accept": "application/vnd.github+json",
                "User-Agent": settings.user_agent,
            }
        )

    def _get(self, url: str, params: dict[str, Any] | None = None) -> Response:
        try:
            response = self.session.get(url, params=params, timeout=self.settings.timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"Failed to reach {url}: {exc}", url=url) from exc

        if not response.ok:
            raise HttpStatusError(
                f"Unexpected status code {response.status_code} fetching {url}",
                url=url,
                status_code=response.status_code,
            )
        return response

    def _get_json(self, url: str, params: dict[str, Any] | None = None) -> tuple[Any, Response]:
        response = self._get(url, params=params)
        try:
            return response.json(), response
        except ValueError as exc:
            raise DecodeError(f"Invalid JSON from {url}: {exc}") from exc

    def list_repositories(self) -> Iterator[Repository]:
        """Yield every repository of the authenticated user, following pagination."""
        url: str | None = f"{self.base_url}/user/repos"
        params: dict[str, Any] | None = {"per_page": self.settings.page_size}

        while url:
            data, response = self._get_json(url, params=params)
            if not isinstance(data, list):
                raise DecodeError(f"Expected a list of repositories from {url}")
            for item in data:
                try:
                    repository = Repository.from_api(item)
                except MissingFieldError as exc:
                    logger.warning("Skipping malformed repository entry: %s", exc)
                    continue
                yield repository

            # The next link already carries the query string.
            url = response.links.get("next", {}).get("url")
            params = None

    def list_directory(self, owner: str, repo: str, path: str = "") -> list[TreeEntry]:
        """Return the entries of one directory, in listing order."""
        path = path.strip("/")
        url = f"{self.base_url}/repos/{owner}/{repo}/contents/{path}"
        data, _ = self._get_json(url)
        if not isinstance(data, list):
            raise DecodeError(f"Expected a directory listing from {url}")
        return [TreeEntry.from_api(item, parent=path) for item in data]

    def fetch_text(self, url: str) -> str:
        """Download a file body, e.g. an entry's ``download_url``."""
        response = self._get(url)
        response.encoding = response.encoding or "utf-8"
        return response.text
