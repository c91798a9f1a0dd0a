"""Repository model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import MissingFieldError


@dataclass(frozen=True)
class Repository:
    """A repository owned by (or visible to) the authenticated account."""

    owner: str
    name: str
    full_name: str

    def __post_init__(self) -> None:
        if not self.owner:
            raise ValueError("Repository owner must be non-empty")
        if not self.name:
            raise ValueError("Repository name must be non-empty")

    @classmethod
    def from_api(cls, data: Any) -> Repository:
        """Build from a ``GET /user/repos`` array element."""
        if not isinstance(data, dict):
            raise MissingFieldError("Repository entry must be an object")
        name = data.get("name")
        owner = (data.get("owner") or {}).get("login")
        if not name or not owner:
            raise MissingFieldError("Repository entry is missing 'name' or 'owner.login'")
        full_name = data.get("full_name") or f"{owner}/{name}"
        return cls(owner=str(owner), name=str(name), full_name=str(full_name))
