"""
semverkit — Semantic Versioning 2.0.0 parsing and bumping

semverkit parses, validates, formats and increments version strings of
the form ``[v]MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` as defined at
https://semver.org. The leading ``v`` is an accepted extension.

Example:
    >>> import semverkit
    >>> v = semverkit.parse("v2.3.7-rc.1")
    >>> v.tag()
    'v2.3.7-rc.1'
    >>> str(semverkit.bump_minor(v))
    '2.4.0'
"""

from __future__ import annotations

from semverkit.__version__ import __version__
from semverkit.constants import MAX_NUMERIC, SEMVER_SPEC_VERSION
from semverkit.core import (
    bump_major,
    bump_minor,
    bump_patch,
    is_valid,
    parse,
    parse_or_zero,
)
from semverkit.exceptions import (
    InvalidVersionError,
    InvalidVersionFieldError,
    SemverError,
    VersionOverflowError,
)
from semverkit.models import ZERO_VERSION, Version, new

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "semverkit Contributors"
__license__ = "Apache-2.0"
__description__ = "Parse, validate, format and bump Semantic Versioning 2.0.0 strings."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    # Constants
    "MAX_NUMERIC",
    "SEMVER_SPEC_VERSION",
    # Model
    "Version",
    "ZERO_VERSION",
    "new",
    # Parsing
    "parse",
    "parse_or_zero",
    "is_valid",
    # Bumping
    "bump_major",
    "bump_minor",
    "bump_patch",
    # Errors
    "SemverError",
    "InvalidVersionError",
    "InvalidVersionFieldError",
    "VersionOverflowError",
]
