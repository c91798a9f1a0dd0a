"""Tree entry model for repository contents listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import MissingFieldError

FILE = "file"
DIRECTORY = "dir"


def join_path(parent: str, name: str) -> str:
    """Join repository paths without introducing a leading slash at the root."""
    parent = parent.strip("/")
    return f"{parent}/{name}" if parent else name


@dataclass(frozen=True)
class TreeEntry:
    """A file or directory at ``path`` inside a repository."""

    name: str
    path: str
    kind: str
    download_url: str | None = None

    @property
    def is_file(self) -> bool:
        return self.kind == FILE

    @property
    def is_directory(self) -> bool:
        return self.kind == DIRECTORY

    @classmethod
    def from_api(cls, data: Any, parent: str = "") -> TreeEntry:
        """Build from a ``GET /repos/{owner}/{repo}/contents/{path}`` element."""
        if not isinstance(data, dict):
            raise MissingFieldError("Contents entry must be an object")
        name = data.get("name")
        kind = data.get("type")
        if not name or not kind:
            raise MissingFieldError("Contents entry is missing 'name' or 'type'")
        path = data.get("path") or join_path(parent, str(name))
        return cls(
            name=str(name),
            path=str(path),
            kind=str(kind),
            download_url=data.get("download_url") or None,
        )
