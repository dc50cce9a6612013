"""
Version sorting utilities for release version strings.

This module provides lenient version parsing and comparison for the
version text found in release datasets. Parsing never fails: anything
that cannot be read degrades to zeros so every input still has a place
in the ordering.

Supported formats:
- Standard semver: v1.27.0, 1.27.0
- Pre-release tags: v1.25.0-RC1, 1.25.0-beta.2
- Incomplete versions: v1.27, 1 (missing parts count as 0)
- Extra segments: 1.2.3.4 (ignored past the patch number)

Pre-release tags are compared as plain text, so "RC1" < "beta" and
"beta.10" < "beta.2". Full semver pre-release precedence is not applied.
"""

from typing import NamedTuple, Optional
import re

SEMVER_PATTERN = re.compile(r'^[vV]?\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?$', re.ASCII)

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)', re.ASCII)


class ParsedVersion(NamedTuple):
    """Numeric core plus pre-release tag of a version string"""

    major: int
    minor: int
    patch: int
    prerelease: str


def _parse_component(text: str) -> int:
    """Read the leading integer of a version component, 0 if there is none"""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_version(version_str: Optional[str]) -> ParsedVersion:
    """
    Parse a loosely formatted version string.

    Args:
        version_str: Raw version string (e.g., "v1.27.0", "1.27.0-RC1")

    Returns:
        ParsedVersion; missing or non-numeric components are 0

    Examples:
        >>> parse_version("v1.27.0-RC1")
        ParsedVersion(major=1, minor=27, patch=0, prerelease='RC1')
        >>> parse_version("1.2")
        ParsedVersion(major=1, minor=2, patch=0, prerelease='')
        >>> parse_version(None)
        ParsedVersion(major=0, minor=0, patch=0, prerelease='')
    """
    text = str(version_str or '').strip()
    if text[:1] in ('v', 'V'):
        text = text[1:]

    core, _, prerelease = text.partition('-')
    parts = core.split('.')[:3]
    numbers = [_parse_component(part) for part in parts]
    numbers += [0] * (3 - len(numbers))

    return ParsedVersion(numbers[0], numbers[1], numbers[2], prerelease)


def compare_versions(version_a: Optional[str], version_b: Optional[str]) -> int:
    """
    Compare two version strings.

    Args:
        version_a: First version string
        version_b: Second version string

    Returns:
        -1 if version_a < version_b
         0 if version_a == version_b
         1 if version_a > version_b

    Examples:
        >>> compare_versions("v1.27.0", "v1.26.1")
        1
        >>> compare_versions("v1.27.0-RC1", "v1.27.0")
        -1
        >>> compare_versions("1.27.0", "v1.27.0")
        0
    """
    parsed_a = parse_version(version_a)
    parsed_b = parse_version(version_b)

    core_a = parsed_a[:3]
    core_b = parsed_b[:3]
    if core_a != core_b:
        return 1 if core_a > core_b else -1

    pre_a = parsed_a.prerelease
    pre_b = parsed_b.prerelease

    # A release outranks any of its pre-releases
    if pre_a and not pre_b:
        return -1
    if pre_b and not pre_a:
        return 1

    if pre_a < pre_b:
        return -1
    elif pre_a > pre_b:
        return 1
    else:
        return 0


def looks_like_semver(version_str) -> bool:
    """
    Check whether a value has the MAJOR.MINOR.PATCH[-PRERELEASE] shape.

    Only used to choose a default sort order; comparisons accept anything.

    Examples:
        >>> looks_like_semver("v2.0.1-beta.1")
        True
        >>> looks_like_semver("2024.05")
        False
    """
    return SEMVER_PATTERN.fullmatch(str(version_str or '')) is not None

