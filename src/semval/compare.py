# SPDX-License-Identifier: MIT
"""Comparison helpers over version strings and Version objects.

Strings are parsed in the requested dialect (strict by default) before being
compared; Version objects are used as they are.
"""

from __future__ import annotations

from typing import Iterable, Union

from .parser import Dialect, parse
from .version import Version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike, dialect: Union[Dialect, str]) -> Version:
    return parse(version, dialect) if isinstance(version, str) else version


def compare_versions(
    version1: VersionLike,
    version2: VersionLike,
    dialect: Union[Dialect, str] = Dialect.STRICT,
) -> int:
    """Compare two versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        dialect: Dialect used to parse string arguments

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0", "1.0.0", dialect="lax")
        0
    """
    return _coerce(version1, dialect).compare_to(_coerce(version2, dialect))


def sort_versions(
    versions: Iterable[VersionLike],
    dialect: Union[Dialect, str] = Dialect.STRICT,
    reverse: bool = False,
) -> list[Version]:
    """Return the given versions as Version objects in precedence order.

    Examples:
        >>> [str(v) for v in sort_versions(["1.0.0", "2.0.0", "1.0.0-alpha"])]
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return sorted((_coerce(v, dialect) for v in versions), reverse=reverse)


def max_version(
    versions: Iterable[VersionLike],
    dialect: Union[Dialect, str] = Dialect.STRICT,
) -> Version:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If ``versions`` is empty
    """
    parsed = [_coerce(v, dialect) for v in versions]
    if not parsed:
        raise ValueError("max_version() requires at least one version")
    return max(parsed)
