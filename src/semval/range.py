# SPDX-License-Identifier: MIT
"""Intervals over versions."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import MalformedRangeError
from .version import Version


@dataclass(frozen=True, slots=True)
class VersionRange:
    """A closed, open or half-open interval of versions.

    No normalization is performed: a range whose bounds are equal and both
    exclusive is legal and contains nothing.

    Attributes:
        lower: The lower bound
        lower_inclusive: True if the lower bound is part of the range
        upper: The upper bound
        upper_inclusive: True if the upper bound is part of the range
    """

    lower: Version
    lower_inclusive: bool
    upper: Version
    upper_inclusive: bool

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise MalformedRangeError(self.lower, self.upper)

    @classmethod
    def exact(cls, version: Version) -> VersionRange:
        """Return the range containing only ``version``."""
        return cls(version, True, version, True)

    @classmethod
    def closed(cls, lower: Version, upper: Version) -> VersionRange:
        """Return ``[lower, upper]``."""
        return cls(lower, True, upper, True)

    @classmethod
    def half_open(cls, lower: Version, upper: Version) -> VersionRange:
        """Return ``[lower, upper)``."""
        return cls(lower, True, upper, False)

    @property
    def is_empty(self) -> bool:
        """Return True if no version can lie within this range."""
        return self.lower == self.upper and not (self.lower_inclusive and self.upper_inclusive)

    def contains(self, version: Version) -> bool:
        """Return True if ``version`` lies within this range."""
        lower = version.compare_to(self.lower)
        upper = version.compare_to(self.upper)
        lower_ok = lower >= 0 if self.lower_inclusive else lower > 0
        upper_ok = upper <= 0 if self.upper_inclusive else upper < 0
        return lower_ok and upper_ok

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, Version):
            raise TypeError(
                f"VersionRange membership requires a Version, got {type(version).__name__}"
            )
        return self.contains(version)

    def __str__(self) -> str:
        opening = "[" if self.lower_inclusive else "("
        closing = "]" if self.upper_inclusive else ")"
        return f"{opening}{self.lower}, {self.upper}{closing}"
