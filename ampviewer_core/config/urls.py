"""URL shape predicates used by the config validator.

Both predicates only look at the string; nothing is fetched or resolved.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlsplit

__all__ = [
    "PLACEHOLDER",
    "is_valid_url",
    "is_valid_url_with_placeholder",
]

# Token substituted by the proxies at request time (e.g. the image src).
PLACEHOLDER = "%s"

_PLACEHOLDER_STANDIN = "placeholder"

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_BAD_CHARS_RE = re.compile(r"[\x00-\x20\x7f]")
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_AUTHORITY_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


def is_valid_url(value: Any) -> bool:
    """Return True if ``value`` is a well-formed absolute URL string."""
    if not isinstance(value, str) or not value:
        return False
    if _BAD_CHARS_RE.search(value) or _BAD_PERCENT_RE.search(value):
        return False
    try:
        parts = urlsplit(value)
        # Raises ValueError for a non-numeric or out of range port.
        parts.port
    except ValueError:
        return False

    if not parts.scheme or not _SCHEME_RE.fullmatch(parts.scheme):
        return False
    if parts.scheme.lower() in _AUTHORITY_SCHEMES:
        return bool(parts.hostname)
    return bool(parts.netloc or parts.path)


def is_valid_url_with_placeholder(value: Any) -> bool:
    """Like :func:`is_valid_url`, but allows one ``%s`` placeholder token."""
    if not isinstance(value, str):
        return False
    if value.count(PLACEHOLDER) > 1:
        return False
    return is_valid_url(value.replace(PLACEHOLDER, _PLACEHOLDER_STANDIN))
