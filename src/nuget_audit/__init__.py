"""nuget-audit core package.

This package provides the scanning pipeline that walks GitHub repositories,
extracts NuGet package references from project files and checks each pinned
version against the NuGet registry for deprecation.
"""

__all__ = [
    "core",
]
