"""
Data model exports for semverkit.

Example:
    >>> from semverkit.models import Version, new
"""

from __future__ import annotations

from semverkit.models.version import ZERO_VERSION, Version, new

__all__ = [
    "Version",
    "ZERO_VERSION",
    "new",
]
