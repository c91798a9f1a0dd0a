"""NuGet version parsing and SemVer 2.0 precedence.

A NuGet version is a numeric core of one to four parts ("1", "1.2", "1.2.3",
"1.2.3.4"; missing parts read as 0), an optional prerelease made of
dot-separated identifiers after ``-``, and optional build metadata after ``+``
which never takes part in ordering.

Precedence follows SemVer 2.0 section 11: compare the numeric core, then a
release outranks any prerelease of the same core, then prerelease identifiers
left to right. Numeric identifiers compare numerically and rank below
alphanumeric ones; alphanumeric identifiers compare case-insensitively, as
NuGet does. When all shared identifiers are equal the longer prerelease wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

from ..errors import VersionParseError

_VERSION_RE = re.compile(
    r"""
    ^(?P<core>\d+(?:\.\d+){0,3})
    (?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    (?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$
    """,
    re.VERBOSE,
)


def _identifier_key(identifier: str) -> tuple[int, int | str]:
    if identifier.isdigit():
        return (0, int(identifier))
    return (1, identifier.lower())


@total_ordering
@dataclass(frozen=True, eq=False)
class NuGetVersion:
    """A parsed version ordered by SemVer precedence."""

    release: tuple[int, int, int, int]
    prerelease: tuple[str, ...] = ()

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def _key(self) -> tuple:
        pre = tuple(_identifier_key(identifier) for identifier in self.prerelease)
        return (self.release, not self.prerelease, pre)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NuGetVersion):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: NuGetVersion) -> bool:
        if not isinstance(other, NuGetVersion):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        text = ".".join(str(part) for part in self.release)
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        return text


def parse_version(text: str | None) -> NuGetVersion:
    """Parse a NuGet version string, raising VersionParseError when impossible."""
    if text is None or not text.strip():
        raise VersionParseError("Version string is empty")
    match = _VERSION_RE.match(text.strip())
    if match is None:
        raise VersionParseError(f"Unparseable version: {text!r}")

    parts = [int(part) for part in match.group("core").split(".")]
    parts += [0] * (4 - len(parts))
    pre = match.group("pre")
    return NuGetVersion(
        release=(parts[0], parts[1], parts[2], parts[3]),
        prerelease=tuple(pre.split(".")) if pre else (),
    )


def is_valid(text: str | None) -> bool:
    try:
        parse_version(text)
    except VersionParseError:
        return False
    return True


def contains_range(lower: str, upper: str, target: str, inclusive: bool = False) -> bool:
    """Return whether ``target`` falls inside the registry page range.

    Both bounds are exclusive unless ``inclusive`` is set, so a target equal
    to ``lower`` or ``upper`` is not contained by default.
    """
    lo = parse_version(lower)
    hi = parse_version(upper)
    v = parse_version(target)
    if inclusive:
        return (lo <= v) and (v <= hi)
    return (lo < v) and (v < hi)


def same_version(left: str | None, right: str | None) -> bool:
    """Compare two versions by precedence rather than by spelling ("1.0" == "1.0.0")."""
    try:
        return parse_version(left) == parse_version(right)
    except VersionParseError:
        return False
