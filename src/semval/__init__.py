# SPDX-License-Identifier: MIT
"""Semantic version values: parsing, precedence and ranges.

This package provides immutable Version, Qualifier and VersionRange values,
parsers for the strict SemVer, OSGi and lax version dialects, and an ordering
that follows the SemVer 2.0.0 precedence rules.

Example:
    >>> from semval import parse_version, parse_lax_version, VersionRange
    >>>
    >>> version = parse_version("1.2.3-alpha.1")
    >>> version.major
    1
    >>> str(version.qualifier)
    'alpha.1'
    >>>
    >>> parse_version("1.0.0-alpha") < parse_version("1.0.0")
    True
    >>>
    >>> VersionRange.half_open(parse_version("1.0.0"), parse_version("2.0.0")).contains(
    ...     parse_lax_version("1.5")
    ... )
    True
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    InvalidQualifierError,
    InvalidComponentError,
    VersionParseError,
    ParseFailure,
    MalformedRangeError,
)
from .qualifier import (
    Qualifier,
    QUALIFIER_PATTERN,
)
from .version import (
    Version,
    UINT32_MAX,
)
from .parser import (
    Dialect,
    Grammar,
    parse,
    parse_version,
    parse_osgi_version,
    parse_lax_version,
    is_valid_version,
)
from .range import VersionRange
from .compare import (
    compare_versions,
    sort_versions,
    max_version,
)

__all__ = [
    # Errors
    "VersionError",
    "InvalidQualifierError",
    "InvalidComponentError",
    "VersionParseError",
    "ParseFailure",
    "MalformedRangeError",
    # Values
    "Qualifier",
    "QUALIFIER_PATTERN",
    "Version",
    "UINT32_MAX",
    "VersionRange",
    # Parsing
    "Dialect",
    "Grammar",
    "parse",
    "parse_version",
    "parse_osgi_version",
    "parse_lax_version",
    "is_valid_version",
    # Comparison
    "compare_versions",
    "sort_versions",
    "max_version",
]
