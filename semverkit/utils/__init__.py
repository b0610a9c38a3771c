"""
Utility helpers for semverkit.

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

from semverkit.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
]
