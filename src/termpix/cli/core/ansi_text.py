"""ANSI text utilities - measuring and fitting strings with escape codes."""

from __future__ import annotations

import re

from termpix.core.constants import RESET

_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]')


def strip_ansi(s: str) -> str:
    """Remove ANSI escape codes."""
    return _ANSI_ESCAPE.sub('', s)


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(strip_ansi(s))


def truncate(s: str, max_width: int) -> str:
    """
    Cut an ANSI-escaped string to max_width visible characters.

    Escape codes are kept intact. A reset is appended when anything was
    cut so colors do not bleed into the next line.
    """
    if max_width <= 0:
        return ""

    parts: list[str] = []
    shown = 0
    pos = 0
    for match in _ANSI_ESCAPE.finditer(s):
        text = s[pos:match.start()]
        if shown + len(text) > max_width:
            parts.append(text[:max_width - shown])
            return ''.join(parts) + RESET
        parts.append(text)
        shown += len(text)
        parts.append(match.group())
        pos = match.end()

    tail = s[pos:]
    if shown + len(tail) > max_width:
        parts.append(tail[:max_width - shown])
        return ''.join(parts) + RESET
    parts.append(tail)
    return ''.join(parts)


def truncate_and_pad(s: str, width: int) -> str:
    """Truncate if too long, pad if too short. Always width visible chars."""
    vlen = visible_len(s)
    if vlen > width:
        return truncate(s, width)
    return s + ' ' * (width - vlen)
