"""Parsers for project files and NuGet version strings."""
