"""Parsing and validation entry points for semverkit.

:func:`parse` turns text into a :class:`~semverkit.models.version.Version`
and raises :class:`~semverkit.exceptions.InvalidVersionError` on any
malformed input. :func:`is_valid` answers the same question with a boolean
and never raises for string or byte input, whatever its length or content.

Typical usage::

    from semverkit import is_valid, parse

    version = parse("v2.3.7-rc.1")
    version.major        # 2
    version.prerelease   # "rc.1"

    is_valid("1.2.3.4")  # False
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from semverkit.constants import MAX_NUMERIC
from semverkit.core.grammar import VersionText, extract
from semverkit.exceptions import InvalidVersionError, _printable, _truncate
from semverkit.models.version import ZERO_VERSION, Version
from semverkit.utils.logger import get_logger

logger = get_logger("parser")

# Digit strings longer than this cannot fit in MAX_NUMERIC. Checking the
# length first keeps int() away from CPython's int/str conversion limit.
_MAX_NUMERIC_DIGITS = len(str(MAX_NUMERIC))


def _to_numeric(digits: str) -> Optional[int]:
    """Convert a captured numeric component, or ``None`` if out of range."""
    if len(digits) > _MAX_NUMERIC_DIGITS:
        return None
    value = int(digits)
    if value > MAX_NUMERIC:
        return None
    return value


def _split(text: VersionText) -> Optional[Tuple[int, int, int, str, str]]:
    """Match ``text`` and convert its captures, or return ``None``."""
    groups: Optional[Dict[str, str]] = extract(text)
    if groups is None:
        return None

    major = _to_numeric(groups["major"])
    minor = _to_numeric(groups["minor"])
    patch = _to_numeric(groups["patch"])
    if major is None or minor is None or patch is None:
        return None

    return major, minor, patch, groups["prerelease"], groups["build"]


def is_valid(text: VersionText) -> bool:
    """Return ``True`` if ``text`` is a valid semantic version.

    A leading ``v`` is accepted. Numeric components must fit in an
    unsigned 64-bit integer.

    Args:
        text: Candidate version, as ``str`` or ASCII ``bytes``.

    Raises:
        TypeError: ``text`` is neither a string nor a byte string.

    Examples:
        >>> is_valid("v8.1.0-rc.1+build.123")
        True
        >>> is_valid("1.2.3-0123")
        False
    """
    return _split(text) is not None


def parse(text: VersionText) -> Version:
    """Parse a semantic version string.

    Args:
        text: Version string, optionally prefixed with ``v``.

    Returns:
        The parsed :class:`Version`.

    Raises:
        InvalidVersionError: ``text`` does not follow the grammar, or a
            numeric component is larger than ``MAX_NUMERIC``.
        TypeError: ``text`` is neither a string nor a byte string.

    Examples:
        >>> parse("1.2.4")
        Version(major=1, minor=2, patch=4, prerelease='', build='')
    """
    parts = _split(text)
    if parts is None:
        logger.debug("Rejected version string %r", _truncate(_printable(text)))
        raise InvalidVersionError(text)

    major, minor, patch, prerelease, build = parts
    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=prerelease,
        build=build,
    )


def parse_or_zero(text: VersionText) -> Version:
    """Parse ``text``, returning ``ZERO_VERSION`` instead of raising.

    Useful where ``0.0.0`` already means "no version". Callers that need
    to tell ``"0.0.0"`` apart from a failure should use :func:`parse`.
    """
    try:
        return parse(text)
    except InvalidVersionError:
        return ZERO_VERSION
