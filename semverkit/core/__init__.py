"""
Core functionality exports for semverkit.

This module provides convenient access to the grammar matcher, the
parsing entry points and the bump operations:

    from semverkit.core import parse, bump_minor
"""

from __future__ import annotations

from semverkit.core.bump import bump_major, bump_minor, bump_patch
from semverkit.core.grammar import SEMVER_PATTERN, extract, matches
from semverkit.core.parser import is_valid, parse, parse_or_zero

__all__ = [
    "SEMVER_PATTERN",
    "matches",
    "extract",
    "parse",
    "parse_or_zero",
    "is_valid",
    "bump_major",
    "bump_minor",
    "bump_patch",
]
