"""String helpers: URL-safe slugs and lenient string coercion."""

from __future__ import annotations

import re
import unicodedata
from typing import Any

_NON_SLUG = re.compile(r"[^a-z0-9\-_]+")
_REPEATED_DASH = re.compile(r"-{2,}")


def ensure_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def transliterate(value: str) -> str:
    text = unicodedata.normalize("NFKD", value)
    return text.encode("ascii", "ignore").decode("ascii")


def parameterize(value: Any) -> str:
    """
    Turn ``value`` into a lowercase ASCII slug.

    Runs of characters outside ``[a-z0-9-_]`` collapse into a single dash;
    leading and trailing dashes are removed::

        parameterize("Pacific Time (US & Canada)")   # → "pacific-time-us-canada"
        parameterize("America/São Paulo")            # → "america-sao-paulo"
    """
    text = transliterate(ensure_string(value)).lower()
    text = _NON_SLUG.sub("-", text)
    text = _REPEATED_DASH.sub("-", text)
    return text.strip("-")
