"""Helper functions made available to pack templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
}


def _quote(text: str, quote: str = '"') -> str:
    parts = [quote]
    for ch in text:
        if ch == quote:
            parts.append("\\" + ch)
        elif ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            code = ord(ch)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    parts.append(quote)
    return "".join(parts)


def _format_quoted(value: Any) -> str:
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (bytes, bytearray)):
        return _quote(bytes(value).decode("utf-8", "replace"))
    if isinstance(value, bool):
        return f"%!q(bool={'true' if value else 'false'})"
    if isinstance(value, int):
        char = chr(value) if 0 <= value <= 0x10FFFF and not 0xD800 <= value <= 0xDFFF else "\ufffd"
        return _quote(char, "'")
    return _quote(str(value))


def to_string_list(value: Any) -> str:
    """Render ``value`` as an HCL list of quoted strings."""
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_format_quoted(item) for item in value) + "]"
    return "[" + _format_quoted(value) + "]"


def file_contents(file: str) -> str:
    """Return the contents of ``file`` as text."""
    try:
        return Path(file).read_text(encoding="utf-8", errors="replace")
    except OSError as err:
        raise OSError(f"failed to read {file}: {err}") from err