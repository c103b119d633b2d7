# SPDX-License-Identifier: MIT
"""Parsing of version text.

Three dialects are supported:

- strict: ``MAJOR.MINOR.PATCH[-QUALIFIER]``
- OSGi: ``MAJOR.MINOR.PATCH[.QUALIFIER]``
- lax: strict, then OSGi, then ``MAJOR.MINOR[-QUALIFIER]``, then
  ``MAJOR[-QUALIFIER]``; missing components default to zero.

Input is never trimmed or otherwise normalized: the whole string must match.

Example:
    >>> parse_version("1.0.0-alpha.1")
    Version(major=1, minor=0, patch=0, qualifier=Qualifier(text='alpha.1'))
    >>> str(parse_osgi_version("1.2.0.SNAPSHOT"))
    '1.2.0-SNAPSHOT'
    >>> str(parse_lax_version("1.2"))
    '1.2.0'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .errors import InvalidQualifierError, ParseFailure, VersionParseError
from .qualifier import Qualifier
from .version import UINT32_MAX, Version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grammar:
    """A version grammar: how many numeric components, and the qualifier separator.

    Attributes:
        name: Short name used in log messages
        components: Number of dot-separated numeric components (1 to 3)
        separator: Character introducing the qualifier
    """

    name: str
    components: int
    separator: str
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        numbers = r"\.".join(["([0-9]+)"] * self.components)
        pattern = re.compile(f"{numbers}(?:{re.escape(self.separator)}(.+))?")
        object.__setattr__(self, "pattern", pattern)

    def match(self, text: str) -> Optional[re.Match[str]]:
        return self.pattern.fullmatch(text)

    def build(self, text: str, match: re.Match[str]) -> Version:
        """Build a Version from a successful match of this grammar."""
        numbers = []
        for group in match.groups()[: self.components]:
            digits = group.lstrip("0") or "0"
            # Bound the digit count before int() so huge inputs report overflow.
            if len(digits) > len(str(UINT32_MAX)) or int(digits) > UINT32_MAX:
                raise VersionParseError(
                    text,
                    self.pattern.pattern,
                    ParseFailure.OVERFLOW,
                    f"component {group} exceeds {UINT32_MAX}",
                )
            numbers.append(int(digits))
        numbers.extend([0] * (3 - self.components))

        qualifier_text = match.group(self.components + 1)
        qualifier = None
        if qualifier_text is not None:
            try:
                qualifier = Qualifier(qualifier_text)
            except InvalidQualifierError as e:
                raise VersionParseError(
                    text, self.pattern.pattern, ParseFailure.QUALIFIER, e.message
                ) from e

        return Version(numbers[0], numbers[1], numbers[2], qualifier)


STRICT = Grammar("strict", 3, "-")
OSGI = Grammar("osgi", 3, ".")
MAJOR_MINOR = Grammar("major-minor", 2, "-")
MAJOR = Grammar("major", 1, "-")

# Order matters: the first grammar that matches decides the qualifier separator.
LAX_GRAMMARS = (STRICT, OSGI, MAJOR_MINOR, MAJOR)

_LAX_EXPECTED = " | ".join(g.pattern.pattern for g in LAX_GRAMMARS)


class Dialect(str, Enum):
    """Version text dialects accepted by :func:`parse`."""

    STRICT = "strict"
    OSGI = "osgi"
    LAX = "lax"


def _check_text(text: object, expected: str) -> str:
    if not isinstance(text, str):
        raise VersionParseError(
            text,
            expected,
            ParseFailure.GRAMMAR,
        )
    return text


def _parse_with(grammar: Grammar, text: object) -> Version:
    text = _check_text(text, grammar.pattern.pattern)
    match = grammar.match(text)
    if match is None:
        logger.debug("Version text %r does not match the %s grammar", text, grammar.name)
        raise VersionParseError(text, grammar.pattern.pattern, ParseFailure.GRAMMAR)
    return grammar.build(text, match)


def parse_version(text: str) -> Version:
    """Parse a strict ``MAJOR.MINOR.PATCH[-QUALIFIER]`` version.

    Args:
        text: The version text

    Returns:
        The parsed Version

    Raises:
        VersionParseError: If the text does not match, a component exceeds
            the unsigned 32-bit range, or the qualifier is invalid

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, qualifier=None)
    """
    return _parse_with(STRICT, text)


def parse_osgi_version(text: str) -> Version:
    """Parse an OSGi style ``MAJOR.MINOR.PATCH[.QUALIFIER]`` version.

    Everything after the third dot is the qualifier, which may contain dots.
    """
    return _parse_with(OSGI, text)


def parse_lax_version(text: str) -> Version:
    """Parse a version, allowing for missing minor and patch components.

    Grammars are tried in the order strict, OSGi, major-minor, major. The
    first one that matches produces the result; if building the version then
    fails (overflow, bad qualifier) the error is raised without trying the
    remaining grammars.

    Examples:
        >>> parse_lax_version("1.2-beta")
        Version(major=1, minor=2, patch=0, qualifier=Qualifier(text='beta'))
        >>> parse_lax_version("7")
        Version(major=7, minor=0, patch=0, qualifier=None)
    """
    text = _check_text(text, _LAX_EXPECTED)
    for grammar in LAX_GRAMMARS:
        match = grammar.match(text)
        if match is not None:
            logger.debug("Version text %r matched the %s grammar", text, grammar.name)
            return grammar.build(text, match)

    logger.debug("Version text %r matches no lax grammar", text)
    raise VersionParseError(text, _LAX_EXPECTED, ParseFailure.GRAMMAR)


_PARSERS = {
    Dialect.STRICT: parse_version,
    Dialect.OSGI: parse_osgi_version,
    Dialect.LAX: parse_lax_version,
}


def parse(text: str, dialect: Union[Dialect, str] = Dialect.STRICT) -> Version:
    """Parse version text in the given dialect.

    Raises:
        ValueError: If the dialect is unknown
        VersionParseError: If the text cannot be parsed
    """
    return _PARSERS[Dialect(dialect)](text)


def is_valid_version(text: str, dialect: Union[Dialect, str] = Dialect.STRICT) -> bool:
    """Check if text parses in the given dialect.

    Examples:
        >>> is_valid_version("1.0")
        False
        >>> is_valid_version("1.0", Dialect.LAX)
        True
    """
    try:
        parse(text, dialect)
    except VersionParseError:
        return False
    return True
