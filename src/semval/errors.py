# SPDX-License-Identifier: MIT
"""Exceptions raised by semval.

Every exception keeps the offending input and a description of what was
expected so callers can build their own diagnostics.
"""

from __future__ import annotations

from enum import Enum


class VersionError(Exception):
    """Base class for all semval errors."""

    def __init__(self, text: object, expected: str, message: str = ""):
        self.text = text
        self.expected = expected
        self.message = message or f"Invalid value {text!r}: expected {expected}"
        super().__init__(self.message)


class InvalidQualifierError(VersionError, ValueError):
    """Raised when qualifier text does not match the qualifier grammar."""

    def __init__(self, text: object, expected: str):
        super().__init__(
            text, expected, f"Qualifier {text!r} must match the pattern '{expected}'"
        )


class InvalidComponentError(VersionError, ValueError):
    """Raised when a version component is not an unsigned 32-bit integer."""

    def __init__(self, name: str, value: object, expected: str):
        self.name = name
        super().__init__(
            value, expected, f"Version component {name}={value!r} must be {expected}"
        )


class ParseFailure(Enum):
    """Why a version string could not be parsed."""

    GRAMMAR = "grammar"
    OVERFLOW = "overflow"
    QUALIFIER = "qualifier"


class VersionParseError(VersionError, ValueError):
    """Raised when version text cannot be parsed.

    Attributes:
        text: The input that failed
        expected: The grammar the input had to match
        reason: Which kind of failure occurred
    """

    def __init__(self, text: object, expected: str, reason: ParseFailure, detail: str = ""):
        self.reason = reason
        if reason is ParseFailure.GRAMMAR:
            message = f"Version text {text!r} must match the pattern '{expected}'"
        else:
            message = f"Version text {text!r} cannot be parsed: {detail}"
        super().__init__(text, expected, message)


class MalformedRangeError(VersionError, ValueError):
    """Raised when a range's lower bound is above its upper bound."""

    def __init__(self, lower: object, upper: object):
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"{lower}, {upper}",
            "lower <= upper",
            f"Version {lower} must be <= version {upper}",
        )
