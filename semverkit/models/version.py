"""
Version data model for semverkit.

This module defines :class:`Version`, the immutable value produced by
parsing a semantic version string, together with its canonical and tag
renderings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

from semverkit.constants import (
    BUILD_SEPARATOR,
    MAX_NUMERIC,
    PRERELEASE_SEPARATOR,
    VERSION_PREFIX,
)
from semverkit.exceptions import InvalidVersionFieldError

if TYPE_CHECKING:
    from semverkit.core.grammar import VersionText

NUMERIC_FIELDS = ("major", "minor", "patch")
METADATA_FIELDS = ("prerelease", "build")


def _check_numeric(name: str, value: Any) -> None:
    """Reject values that cannot be an unsigned 64-bit version component."""
    # bool is an int subclass, but True.0.0 is never what the caller meant
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidVersionFieldError(
            f"{name} must be an integer, got {type(value).__name__}",
            field=name,
            value=value,
        )
    if value < 0:
        raise InvalidVersionFieldError(
            f"{name} must not be negative",
            field=name,
            value=value,
        )
    if value > MAX_NUMERIC:
        raise InvalidVersionFieldError(
            f"{name} must not exceed {MAX_NUMERIC}",
            field=name,
            value=value,
        )


@dataclass(frozen=True)
class Version:
    """A semantic version.

    Construction trusts the caller for ``prerelease`` and ``build``: their
    content is not checked against the grammar. Use
    :func:`semverkit.parse` to build a version from untrusted text.

    The all-zero value ``Version()`` is the legal version ``0.0.0`` and is
    also used as the "no version" sentinel.

    Attributes:
        major: Major version, ``0 <= major <= MAX_NUMERIC``.
        minor: Minor version, same range.
        patch: Patch version, same range.
        prerelease: Dot-separated prerelease identifiers, or ``""``.
            ``None`` is tolerated at runtime and stored as ``""``.
        build: Dot-separated build metadata identifiers, or ``""``; same
            ``None`` handling.

    Raises:
        InvalidVersionFieldError: A numeric field is not an ``int`` in
            range, or a metadata field is not a string.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    build: str = ""

    def __post_init__(self) -> None:
        for name in NUMERIC_FIELDS:
            _check_numeric(name, getattr(self, name))

        for name in METADATA_FIELDS:
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, "")
            elif not isinstance(value, str):
                raise InvalidVersionFieldError(
                    f"{name} must be a string, got {type(value).__name__}",
                    field=name,
                    value=value,
                )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: VersionText) -> "Version":
        """Parse ``text`` into an instance of ``cls``.

        See :func:`semverkit.core.parser.parse` for accepted input and errors.
        """
        from semverkit.core.parser import parse

        return cls(**parse(text).to_json())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Render the canonical form, ``MAJOR.MINOR.PATCH[-PRE][+BUILD]``.

        Examples:
            >>> Version(4, 16, 3, "rc.1", "build.123").to_string()
            '4.16.3-rc.1+build.123'
        """
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            base += PRERELEASE_SEPARATOR + self.prerelease
        if self.build:
            base += BUILD_SEPARATOR + self.build
        return base

    def tag(self) -> str:
        """Render the version as a git tag, i.e. the canonical form with ``v``."""
        return VERSION_PREFIX + self.to_string()

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": self.prerelease,
            "build": self.build,
        }

    @property
    def is_prerelease(self) -> bool:
        """True if the version carries prerelease identifiers."""
        return bool(self.prerelease)

    # ------------------------------------------------------------------
    # Bumping
    # ------------------------------------------------------------------

    def bump_major(self) -> "Version":
        """Return the next major release; see :func:`semverkit.bump_major`."""
        from semverkit.core.bump import bump_major

        return bump_major(self)

    def bump_minor(self) -> "Version":
        """Return the next minor release; see :func:`semverkit.bump_minor`."""
        from semverkit.core.bump import bump_minor

        return bump_minor(self)

    def bump_patch(self) -> "Version":
        """Return the next patch release; see :func:`semverkit.bump_patch`."""
        from semverkit.core.bump import bump_patch

        return bump_patch(self)

    def __str__(self) -> str:
        return self.to_string()


#: The zero value, ``0.0.0``, returned as a placeholder when parsing fails.
ZERO_VERSION: Version = Version()


def new(
    major: int,
    minor: int,
    patch: int,
    build: str = "",
    prerelease: str = "",
) -> Version:
    """Create a :class:`Version` from explicit fields.

    Note the argument order: build metadata comes before the prerelease.
    No grammar validation is performed.

    Examples:
        >>> str(new(4, 16, 3, "build.123", "rc.1"))
        '4.16.3-rc.1+build.123'
    """
    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=prerelease,
        build=build,
    )
