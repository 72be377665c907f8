"""
Dotted version strings: comparison, validation and bumping.

Comparison is numeric only. Pre-release and build suffixes are dropped
before comparing, so ``1.2.3-beta`` and ``1.2.3`` compare as equal.
Nothing in this module raises on malformed input.
"""

import re
from typing import NamedTuple, Optional

SEMVER_PATTERN = re.compile(
    r'(\d+)\.(\d+)\.(\d+)'
    r'(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?'
    r'(?:\+[0-9A-Za-z-]+)?',
    re.ASCII,
)


class Version(NamedTuple):
    major: int
    minor: int
    patch: int

    def __str__(self):
        return f"{self.major}.{self.minor}.{self.patch}"


def _segments(version: str) -> list:
    core = re.split(r'[-+]', version or '', maxsplit=1)[0]
    segments = []
    for part in core.split('.'):
        # ASCII digits only; "1_0", " 1" and non-Latin digits count as 0
        segments.append(int(part) if part.isascii() and part.isdigit() else 0)
    return segments


def compare_versions(v1: str, v2: str) -> int:
    """
    Compare two dotted versions segment by segment.

    Missing or non-numeric segments count as 0, so ``1.0`` equals ``1.0.0``.

    Returns:
        -1 if v1 < v2, 0 if equal, 1 if v1 > v2
    """
    parts1 = _segments(v1)
    parts2 = _segments(v2)
    length = max(len(parts1), len(parts2))
    parts1 += [0] * (length - len(parts1))
    parts2 += [0] * (length - len(parts2))

    for part1, part2 in zip(parts1, parts2):
        if part1 < part2:
            return -1
        if part1 > part2:
            return 1
    return 0


def is_version_greater(v1: str, v2: str) -> bool:
    return compare_versions(v1, v2) > 0


def is_version_greater_or_equal(v1: str, v2: str) -> bool:
    return compare_versions(v1, v2) >= 0


def is_version_less(v1: str, v2: str) -> bool:
    return compare_versions(v1, v2) < 0


def is_version_less_or_equal(v1: str, v2: str) -> bool:
    return compare_versions(v1, v2) <= 0


def is_valid_semver(version: str) -> bool:
    """True for ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``; no ``v`` prefix."""
    return bool(SEMVER_PATTERN.fullmatch(version or ''))


def parse_version(version: str) -> Optional[Version]:
    match = SEMVER_PATTERN.fullmatch(version or '')
    if not match:
        return None
    return Version(int(match.group(1)), int(match.group(2)), int(match.group(3)))


def next_major_version(version: str) -> str:
    parsed = parse_version(version)
    if parsed is None:
        return version
    return str(Version(parsed.major + 1, 0, 0))


def next_minor_version(version: str) -> str:
    parsed = parse_version(version)
    if parsed is None:
        return version
    return str(Version(parsed.major, parsed.minor + 1, 0))


def next_patch_version(version: str) -> str:
    parsed = parse_version(version)
    if parsed is None:
        return version
    return str(Version(parsed.major, parsed.minor, parsed.patch + 1))
