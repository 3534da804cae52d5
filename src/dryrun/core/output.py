"""
Leveled diagnostics for dryrun.

Informational text and success markers go to stdout, warnings and errors to
stderr, each behind a fixed prefix. Rich decides whether the terminal gets
color; redirected output stays plain.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text

PREFIX_INFO = "[DRY-RUN]"
PREFIX_WARN = "[WARNING]"
PREFIX_ERROR = "[ERROR]"
PREFIX_OK = "[OK]"


def _console(stderr: bool) -> Console:
    return Console(
        stderr=stderr,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )


@dataclass(frozen=True)
class Reporter:
    """Writes leveled messages to stdout/stderr."""

    out: Console = field(default_factory=lambda: _console(stderr=False))
    err: Console = field(default_factory=lambda: _console(stderr=True))

    def info(self, message: str) -> None:
        self._emit(self.out, PREFIX_INFO, "blue", message)

    def ok(self, message: str) -> None:
        self._emit(self.out, PREFIX_OK, "green", message)

    def warn(self, message: str) -> None:
        self._emit(self.err, PREFIX_WARN, "yellow", message)

    def error(self, message: str) -> None:
        self._emit(self.err, PREFIX_ERROR, "red", message)

    def plain(self, message: str) -> None:
        """Print an unprefixed line to stdout (headers, listings, usage)."""
        self.out.print(Text(message))

    @staticmethod
    def _emit(console: Console, prefix: str, style: str, message: str) -> None:
        console.print(Text.assemble((prefix, style), " ", message))
