"""Clients for source-hosting APIs."""

from .github import GitHubClient

__all__ = [
    "GitHubClient",
]
