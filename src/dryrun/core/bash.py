"""Bash quoting and line-splitting utilities for dryrun messages and script scans."""

from __future__ import annotations

from collections.abc import Iterable

# Characters that never need quoting in a bash word
SAFE_CHARS = frozenset("-_./=@:,+%")

# Escapes understood inside $'...'
ANSI_C_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\x1b": "\\E",
}


def bash_quote(s: str) -> str:
    """Quote a string so it reads back as one bash word.

    Uses single quotes, with embedded single quotes written as '"'"'.
    Strings holding control characters use $'...' with backslash escapes.
    Returns '' for empty strings and the string itself if nothing needs quoting.
    """
    if not s:
        return "''"
    if any(_needs_escape(c) for c in s):
        return ansi_c_quote(s)
    if all(c.isalnum() or c in SAFE_CHARS for c in s) and not s.startswith("="):
        return s
    return "'" + s.replace("'", "'\"'\"'") + "'"


def ansi_c_quote(s: str) -> str:
    """Quote as $'...' so control characters stay visible, like printf %q."""
    return "$'" + "".join(_escape(c) for c in s) + "'"


def _needs_escape(c: str) -> bool:
    return ord(c) < 0x20 or ord(c) == 0x7F


def _escape(c: str) -> str:
    if c in ANSI_C_ESCAPES:
        return ANSI_C_ESCAPES[c]
    if _needs_escape(c):
        return f"\\x{ord(c):02x}"
    return c


def bash_join(tokens: Iterable[str]) -> str:
    """Join tokens into a bash command string with proper quoting."""
    return " ".join(bash_quote(t) for t in tokens)


def strip_comment(line: str) -> str:
    """Drop everything from the first '#' on, then trim.

    Purely textual: a '#' inside quotes is treated as a comment too.
    """
    return line.split("#", 1)[0].strip()


def split_words(line: str) -> list[str]:
    """Split on whitespace. Quotes are not interpreted."""
    return line.split()


def is_comment_line(line: str) -> bool:
    """True for lines whose first non-blank character is '#'."""
    return line.lstrip().startswith("#")
