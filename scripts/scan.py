#!/usr/bin/env python3
"""Local CLI entrypoint to run the scanner without installing the console script.

Usage:
  GITHUB_TOKEN=... python scripts/scan.py [--config settings.yml] [--json] [--fail-on-deprecated]

This calls the same nuget_audit.cli.main used by the ``nuget-audit`` command.
"""

from __future__ import annotations

from nuget_audit.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
