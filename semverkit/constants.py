"""
Centralized constants for semverkit.

This module defines immutable configuration values used across semverkit,
including grammar delimiters, numeric limits, error reporting limits and
logging formats. All values are intended to be treated as read-only.
"""

from typing import Final

# ---------------------------------------------------------------------------
# Semantic Versioning
# ---------------------------------------------------------------------------

#: Version of the semver.org specification implemented by this package.
SEMVER_SPEC_VERSION: Final[str] = "2.0.0"

#: Largest value accepted for major, minor and patch (unsigned 64-bit).
MAX_NUMERIC: Final[int] = 2**64 - 1

#: Optional prefix accepted by the parser and emitted by ``Version.tag``.
VERSION_PREFIX: Final[str] = "v"

#: Separator between the core version and the prerelease identifiers.
PRERELEASE_SEPARATOR: Final[str] = "-"

#: Separator between the version and the build metadata.
BUILD_SEPARATOR: Final[str] = "+"

#: Separator between individual prerelease or build identifiers.
IDENTIFIER_SEPARATOR: Final[str] = "."

# ---------------------------------------------------------------------------
# Error reporting
# ---------------------------------------------------------------------------

#: Maximum length of offending input echoed into error details and logs.
ERROR_TEXT_MAX_LENGTH: Final[int] = 200

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
