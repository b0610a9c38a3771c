"""Unit tests for semverkit.core.bump module.

Test Coverage:
- Increment-and-reset semantics for major, minor and patch
- Unconditional removal of prerelease and build metadata
- Overflow at the unsigned 64-bit limit
- Method forms on Version
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from semverkit.constants import MAX_NUMERIC
from semverkit.core import bump as bump_module
from semverkit.core.bump import bump_major, bump_minor, bump_patch
from semverkit.exceptions import VersionOverflowError
from semverkit.models.version import Version


@pytest.fixture
def release_candidate() -> Version:
    """A version carrying both prerelease and build metadata."""
    return Version(major=0, minor=32, patch=6, prerelease="rc.1", build="build.123")


@pytest.mark.unit
class TestBumpMajor:
    """Tests for bump_major()."""

    def test_resets_lower_components(self, release_candidate: Version) -> None:
        """Test minor, patch and metadata are reset."""
        assert bump_major(release_candidate) == Version(1, 0, 0, "", "")

    def test_plain_version(self) -> None:
        """Test bumping a version without metadata."""
        assert str(bump_major(Version(4, 16, 3))) == "5.0.0"

    def test_original_unchanged(self, release_candidate: Version) -> None:
        """Test the input version is not modified."""
        bump_major(release_candidate)

        assert release_candidate == Version(0, 32, 6, "rc.1", "build.123")


@pytest.mark.unit
class TestBumpMinor:
    """Tests for bump_minor()."""

    def test_resets_patch_and_metadata(self) -> None:
        """Test patch and metadata are reset, major kept."""
        version = Version(123, 32, 6, "rc.1", "build.123")

        assert bump_minor(version) == Version(123, 33, 0, "", "")

    def test_from_zero(self) -> None:
        """Test bumping the zero value."""
        assert str(bump_minor(Version())) == "0.1.0"


@pytest.mark.unit
class TestBumpPatch:
    """Tests for bump_patch()."""

    def test_increments_patch(self, release_candidate: Version) -> None:
        """Test patch is incremented and metadata dropped."""
        assert bump_patch(release_candidate) == Version(0, 32, 7, "", "")

    def test_build_only_dropped(self) -> None:
        """Test build metadata is dropped even without a prerelease."""
        assert bump_patch(Version(1, 2, 3, build="sha.abc")).build == ""


@pytest.mark.unit
class TestBumpOverflow:
    """Tests for increments at the numeric limit."""

    @pytest.mark.parametrize(
        "bump,version,field",
        [
            (bump_major, Version(major=MAX_NUMERIC), "major"),
            (bump_minor, Version(minor=MAX_NUMERIC), "minor"),
            (bump_patch, Version(patch=MAX_NUMERIC), "patch"),
        ],
        ids=["major", "minor", "patch"],
    )
    def test_overflow_raises(self, bump, version: Version, field: str) -> None:
        """Test incrementing a field at MAX_NUMERIC raises."""
        with pytest.raises(VersionOverflowError) as exc_info:
            bump(version)

        assert exc_info.value.field == field
        assert exc_info.value.version == version.to_string()

    def test_overflow_is_overflow_error(self) -> None:
        """Test callers can catch the stdlib OverflowError."""
        with pytest.raises(OverflowError):
            bump_patch(Version(patch=MAX_NUMERIC))

    def test_lower_field_at_limit_is_reset(self) -> None:
        """Test a lower field at the limit does not block a higher bump."""
        version = Version(1, MAX_NUMERIC, MAX_NUMERIC)

        assert bump_major(version) == Version(2, 0, 0)

    def test_one_below_limit(self) -> None:
        """Test the last representable increment succeeds."""
        assert bump_patch(Version(patch=MAX_NUMERIC - 1)).patch == MAX_NUMERIC

    def test_overflow_logged(self) -> None:
        """Test overflow is logged at debug level."""
        with patch.object(bump_module.logger, "debug") as mock_debug:
            with pytest.raises(VersionOverflowError):
                bump_minor(Version(minor=MAX_NUMERIC))

        mock_debug.assert_called_once()


@pytest.mark.unit
class TestVersionBumpMethods:
    """Tests for the bump methods on Version."""

    def test_methods_match_functions(self, release_candidate: Version) -> None:
        """Test each method returns the same value as its function."""
        assert release_candidate.bump_major() == bump_major(release_candidate)
        assert release_candidate.bump_minor() == bump_minor(release_candidate)
        assert release_candidate.bump_patch() == bump_patch(release_candidate)

    def test_chained_bumps(self) -> None:
        """Test bumps can be chained."""
        assert str(Version(1, 2, 3).bump_minor().bump_patch()) == "1.3.1"
