"""Grammar matcher for semantic version strings.

Recognizes ``[v]MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` as defined by
SemVer 2.0.0 (https://semver.org), plus an optional leading ``v``, and
splits a matching string into five named captures.

The pattern is the one suggested at
https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
with two adjustments for Python's ``re`` module:

- digit classes are spelled ``[0-9]`` and compiled with ``re.ASCII`` so that
  non-ASCII digits such as ``"\\uff11"`` never match;
- matching uses :meth:`re.Pattern.fullmatch`, because ``$`` also matches
  just before a trailing newline.

The compiled pattern is a module-level constant built once at import time
and never mutated, so it can be shared freely between threads.
"""

from __future__ import annotations

import re
from typing import Dict, Final, Optional, Union

from semverkit.constants import VERSION_PREFIX

#: Names of the capture groups, in the order they appear in a version.
GROUP_NAMES: Final = ("major", "minor", "patch", "prerelease", "build")

_NUMERIC = r"0|[1-9][0-9]*"
_PRERELEASE_ID = r"0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*"
_BUILD_ID = r"[0-9A-Za-z-]+"

SEMVER_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"(?:{re.escape(VERSION_PREFIX)})?"
    rf"(?P<major>{_NUMERIC})"
    rf"\.(?P<minor>{_NUMERIC})"
    rf"\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>(?:{_PRERELEASE_ID})(?:\.(?:{_PRERELEASE_ID}))*))?"
    rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?",
    re.ASCII,
)

VersionText = Union[str, bytes, bytearray]


def as_text(text: VersionText) -> Optional[str]:
    """Return ``text`` as ``str``, or ``None`` if it cannot be a version.

    Byte strings are decoded as ASCII; any non-ASCII byte means the input
    cannot match the grammar.

    Raises:
        TypeError: ``text`` is neither a string nor a byte string.
    """
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("ascii")
        except UnicodeDecodeError:
            return None
    raise TypeError(
        f"version must be str or bytes, not {type(text).__name__}"
    )


def matches(text: VersionText) -> bool:
    """Return ``True`` if ``text`` is a syntactically valid semantic version.

    Only the grammar is checked. Numeric components are not range-checked
    here; see :func:`semverkit.core.parser.is_valid`.
    """
    value = as_text(text)
    return value is not None and SEMVER_PATTERN.fullmatch(value) is not None


def extract(text: VersionText) -> Optional[Dict[str, str]]:
    """Split a version string into its five named components.

    Args:
        text: Candidate version string.

    Returns:
        Mapping of ``major``, ``minor``, ``patch``, ``prerelease`` and
        ``build`` to the captured substrings (absent prerelease or build
        map to ``""``), or ``None`` if ``text`` does not match.

    Examples:
        >>> extract("v1.2.3-rc.1")["prerelease"]
        'rc.1'
        >>> extract("1.2") is None
        True
    """
    value = as_text(text)
    if value is None:
        return None

    match = SEMVER_PATTERN.fullmatch(value)
    if match is None:
        return None

    return match.groupdict(default="")
