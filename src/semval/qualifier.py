# SPDX-License-Identifier: MIT
"""Pre-release qualifiers and their SemVer precedence.

Identifiers are compared per SemVer 2.0.0 rule 11:

1. Identifiers consisting of only digits are compared numerically.
2. Identifiers with letters or hyphens are compared in ASCII sort order.
3. Numeric identifiers always have lower precedence than non-numeric ones.
4. A larger set of identifiers has higher precedence than a smaller set,
   if all of the preceding identifiers are equal.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from .errors import InvalidQualifierError

QUALIFIER_PATTERN = re.compile(r"[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*")

_NUMERIC = re.compile(r"[0-9]+")

SNAPSHOT = "SNAPSHOT"


def _compare_numeric(a: str, b: str) -> int:
    a = a.lstrip("0")
    b = b.lstrip("0")
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return (a > b) - (a < b)


def _compare_identifier(a: str, b: str) -> int:
    numeric_a = _NUMERIC.fullmatch(a) is not None
    numeric_b = _NUMERIC.fullmatch(b) is not None

    if numeric_a and numeric_b:
        return _compare_numeric(a, b)
    if not numeric_a and not numeric_b:
        return (a > b) - (a < b)
    return -1 if numeric_a else 1


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Qualifier:
    """A version qualifier such as ``alpha.1`` or ``SNAPSHOT``.

    Attributes:
        text: Dot-separated identifiers made of ASCII letters, digits and hyphens
    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or QUALIFIER_PATTERN.fullmatch(self.text) is None:
            raise InvalidQualifierError(self.text, QUALIFIER_PATTERN.pattern)

    def __str__(self) -> str:
        return self.text

    @property
    def is_snapshot(self) -> bool:
        """Return True if this qualifier denotes a snapshot version."""
        return self.text == SNAPSHOT

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Return the dot-separated identifiers of this qualifier."""
        return tuple(self.text.split("."))

    def compare_to(self, other: Qualifier) -> int:
        """Compare two qualifiers by SemVer precedence.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        if self.text == other.text:
            return 0

        ids_a = self.text.split(".")
        ids_b = other.text.split(".")

        for a, b in zip(ids_a, ids_b):
            result = _compare_identifier(a, b)
            if result != 0:
                return result

        if len(ids_a) != len(ids_b):
            return -1 if len(ids_a) < len(ids_b) else 1

        # Only reachable when numeric identifiers differ by leading zeros.
        return -1 if self.text < other.text else 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Qualifier):
            return NotImplemented
        return self.compare_to(other) < 0
