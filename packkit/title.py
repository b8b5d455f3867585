"""Title casing of text."""

from __future__ import annotations

import re

_WORD = re.compile(r"[^\W_]+(?:['\u2019][^\W_]+)*")


def title(s: str) -> str:
    """Return ``s`` with each word capitalised and the rest lower cased."""
    return _WORD.sub(lambda m: m.group(0).capitalize(), s)