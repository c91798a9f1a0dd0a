"""Scan every repository of the authenticated GitHub account for deprecated NuGet packages."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import load_settings
from .core import ScanCounts, scan_account
from .errors import ConfigError, FetchError, DecodeError
from .report import aggregate
from .summary import render_repository, render_summary

EXIT_CONFIG_ERROR = 1
EXIT_FETCH_ERROR = 2
EXIT_DEPRECATED = 10


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="nuget-audit", description=__doc__)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON or YAML settings file (default: $NUGET_AUDIT_CONFIG)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report at the end instead of per-repository lines",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--fail-on-deprecated",
        action="store_true",
        help=f"Exit with status {EXIT_DEPRECATED} when any deprecated package is found",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    audits = []
    counts = ScanCounts()
    try:
        for audit in scan_account(settings, counts=counts):
            data = audit.to_dict()
            audits.append(data)
            if not args.json:
                print(render_repository(data), flush=True)
    except (FetchError, DecodeError) as exc:
        print(f"ERROR: Failed to list repositories: {exc}", file=sys.stderr)
        return EXIT_FETCH_ERROR

    report = aggregate(audits)
    if args.json:
        print(json.dumps(report, indent=2))
    elif counts.repositories == 0:
        print("No repositories found.")
    elif not audits:
        print("No repositories with project files found.")
    else:
        print(render_summary(report))

    if report["hasFindings"] and args.fail_on_deprecated:
        return EXIT_DEPRECATED

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
