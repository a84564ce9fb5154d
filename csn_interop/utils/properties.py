"""
Reader for i18n ``.properties`` files.

Handles the subset of the Java properties format used by CDS text bundles:
comments, ``=``/``:``/whitespace separators, line continuations and
backslash escapes including ``\\uXXXX``.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "f": "\f"}


def _logical_lines(text: str) -> list[str]:
    """Join continuation lines and drop blanks and comments."""
    lines: list[str] = []
    buffer = ""
    for raw in text.splitlines():
        line = raw.lstrip()
        if not buffer and (not line or line[0] in "#!"):
            continue

        # An odd number of trailing backslashes continues the line
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            buffer += line[:-1]
            continue

        lines.append(buffer + line)
        buffer = ""

    if buffer:
        lines.append(buffer)
    return lines


def _unescape(value: str) -> str:
    chars: list[str] = []
    i = 0
    while i < len(value):
        c = value[i]
        if c != "\\" or i + 1 >= len(value):
            chars.append(c)
            i += 1
            continue

        nxt = value[i + 1]
        if nxt == "u" and i + 6 <= len(value):
            try:
                chars.append(chr(int(value[i + 2 : i + 6], 16)))
                i += 6
                continue
            except ValueError:
                pass
        chars.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(chars)


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line at its first unescaped separator."""
    i = 0
    while i < len(line):
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in "=:" or c.isspace():
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip()
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip()
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse properties file contents into a key/text mapping.

    Later duplicates of a key replace earlier ones.
    """
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        if key:
            entries[key] = value
    return entries


def read_properties(path: Path) -> dict[str, str]:
    """Read a UTF-8 encoded properties file."""
    logger.debug(f"Reading properties file: {path}")
    return parse_properties(path.read_text(encoding="utf-8-sig"))
