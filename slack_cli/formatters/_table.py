"""Low-level text layout helpers (stdlib only)."""

import re

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from text output.
    Preserves newlines (\\n) and tabs (\\t)."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def _columns(rows, indent="  ", gap=2):
    """Lay out (label, description) pairs with descriptions aligned.
    The label column is as wide as the longest label plus *gap*."""
    if not rows:
        return []
    width = max(len(label) for label, _ in rows) + gap
    return [f"{indent}{label:<{width}}{description}" for label, description in rows]
