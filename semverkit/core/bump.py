"""Version bumping for semverkit.

Each bump increments one numeric component, resets every lower component
to zero and drops the prerelease and build metadata: the result starts a
new release line rather than continuing the old one.

Incrementing a component that is already ``MAX_NUMERIC`` raises
:class:`~semverkit.exceptions.VersionOverflowError`; values never wrap.
"""

from __future__ import annotations

from semverkit.constants import MAX_NUMERIC
from semverkit.exceptions import VersionOverflowError
from semverkit.models.version import Version
from semverkit.utils.logger import get_logger

logger = get_logger("bump")


def _increment(version: Version, field: str) -> int:
    """Return ``version.<field> + 1``, refusing to pass ``MAX_NUMERIC``."""
    current = getattr(version, field)
    if current >= MAX_NUMERIC:
        logger.debug("Cannot bump %s of %s: already at %d", field, version, current)
        raise VersionOverflowError(
            f"Cannot bump {field}: value is already {MAX_NUMERIC}",
            field=field,
            version=version.to_string(),
        )
    return current + 1


def bump_major(version: Version) -> Version:
    """Return the next major release.

    Examples:
        >>> str(bump_major(Version(0, 32, 6, "rc.1", "build.123")))
        '1.0.0'
    """
    return Version(major=_increment(version, "major"))


def bump_minor(version: Version) -> Version:
    """Return the next minor release.

    Examples:
        >>> str(bump_minor(Version(123, 32, 6, "rc.1", "build.123")))
        '123.33.0'
    """
    return Version(major=version.major, minor=_increment(version, "minor"))


def bump_patch(version: Version) -> Version:
    """Return the next patch release.

    Examples:
        >>> str(bump_patch(Version(0, 32, 6, "rc.1", "build.123")))
        '0.32.7'
    """
    return Version(
        major=version.major,
        minor=version.minor,
        patch=_increment(version, "patch"),
    )
