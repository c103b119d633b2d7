# SPDX-License-Identifier: MIT
"""The Version value type.

A version is three unsigned 32-bit components plus an optional qualifier.
A version without a qualifier has higher precedence than any pre-release of
the same numbers, so ``1.0.0-alpha < 1.0.0``.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, replace
from typing import Optional, Union

from .errors import InvalidComponentError
from .qualifier import Qualifier

UINT32_MAX = 2**32 - 1

_COMPONENT_RANGE = f"an integer between 0 and {UINT32_MAX}"


def _compare_qualifiers(a: Optional[Qualifier], b: Optional[Qualifier]) -> int:
    if a is None and b is None:
        return 0
    if a is None:
        return 1  # Release > pre-release
    if b is None:
        return -1
    return a.compare_to(b)


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        qualifier: Optional pre-release qualifier (e.g. "alpha.1", "SNAPSHOT").
            A plain string is converted to a Qualifier.
    """

    major: int
    minor: int
    patch: int
    qualifier: Optional[Qualifier] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidComponentError(name, value, _COMPONENT_RANGE)
            if not 0 <= value <= UINT32_MAX:
                raise InvalidComponentError(name, value, _COMPONENT_RANGE)

        if isinstance(self.qualifier, str):
            object.__setattr__(self, "qualifier", Qualifier(self.qualifier))
        elif self.qualifier is not None and not isinstance(self.qualifier, Qualifier):
            raise TypeError(
                f"qualifier must be a Qualifier, str or None, got {type(self.qualifier).__name__}"
            )

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        if self.qualifier is None:
            return self.base_version
        return f"{self.base_version}-{self.qualifier}"

    @property
    def is_snapshot(self) -> bool:
        """Return True if the qualifier is exactly ``SNAPSHOT``."""
        return self.qualifier is not None and self.qualifier.is_snapshot

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.qualifier is not None

    @property
    def base_version(self) -> str:
        """Return the version without its qualifier."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def with_qualifier(self, qualifier: Union[Qualifier, str]) -> Version:
        """Return a copy of this version with the given qualifier."""
        return replace(self, qualifier=qualifier)

    def without_qualifier(self) -> Version:
        """Return the release version for this version."""
        return replace(self, qualifier=None)

    def compare_to(self, other: Version) -> int:
        """Compare two versions by precedence.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        return _compare_qualifiers(self.qualifier, other.qualifier)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0
