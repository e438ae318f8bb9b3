from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from datekit._text import ensure_string

logger = logging.getLogger(__name__)

# Directives supported by strftime on some platforms only, and never by strptime.
_SHORTHANDS = {
    "F": "%Y-%m-%d",
    "T": "%H:%M:%S",
    "D": "%m/%d/%y",
    "R": "%H:%M",
}
_DIRECTIVE = re.compile(r"%([%FTDR])")


def resolve_format(formats: Mapping[str, str], key: Any) -> str:
    """Format registered under ``key``, or ``key`` itself as a string."""
    return ensure_string(formats.get(ensure_string(key), key))


def expand_shorthands(fmt: str) -> str:
    """Rewrite ``%F``, ``%T``, ``%D`` and ``%R`` into portable directives."""
    return _DIRECTIVE.sub(lambda m: _SHORTHANDS.get(m.group(1), m.group(0)), fmt)


@dataclass(frozen=True)
class ParseResult:
    value: Optional[datetime] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


def parse(value: Any, fmt: str) -> ParseResult:
    text = ensure_string(value)
    try:
        return ParseResult(value=datetime.strptime(text, expand_shorthands(fmt)))
    except (ValueError, TypeError) as exc:
        logger.debug("Could not parse %r with %r: %s", text, fmt, exc)
        return ParseResult(error=str(exc))
