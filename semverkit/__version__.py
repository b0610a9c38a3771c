"""
semverkit version information.

This module provides a single source of truth for the package version,
which is itself a semantic version and is parsed with semverkit's own
grammar.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Main version (single source of truth)
# ---------------------------------------------------------------------------

__version__ = "0.1.0"


# ---------------------------------------------------------------------------
# Structured version metadata
# ---------------------------------------------------------------------------


def _version_info():
    """Break ``__version__`` into components using the package grammar."""
    from semverkit.core.parser import parse

    return parse(__version__).to_json()


VERSION_INFO = _version_info()
