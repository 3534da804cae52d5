"""
chmod command handler for dryrun.

Decodes the mode string into a readable description and shows the current
mode of each target next to it.

Mode strings:
- 754      absolute, decoded per digit through the permission triad table
- +754     additive / -754 subtractive, same decoding
- +x, -w   single-letter symbolic forms with fixed descriptions
- other    generic "change permissions"
"""

from __future__ import annotations

import stat
from pathlib import Path

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_quote
from dryrun.core.errors import NotFoundError, UsageError
from dryrun.core.fs import exists
from dryrun.core.patterns import FLAG_LIKE_MODE, NUMERIC_MODE, PERMISSION_TRIADS, SYMBOLIC_MODES

COMMANDS = ["chmod"]


def handle(ctx: HandlerContext) -> int:
    mode, files = split_mode(ctx.flags, ctx.args)
    if not mode or not files:
        raise UsageError("Usage: chmod <mode> <files>")

    desc = describe_mode(mode)
    for f in files:
        path = Path(f)
        if not exists(path):
            raise NotFoundError(f"Not found: {bash_quote(f)}")
        ctx.reporter.info(f"Current permissions for {bash_quote(f)}: {current_mode(path)}")
        ctx.reporter.info(f"Would {desc} (mode {mode}) for {bash_quote(f)}")
    return 0


def split_mode(flags: tuple[str, ...], args: tuple[str, ...]) -> tuple[str, tuple[str, ...]]:
    """Return (mode, files).

    A mode starting with '-' (chmod -x file) was partitioned as a flag, so the
    first flag shaped like a mode wins over the first positional.
    """
    for flag in flags:
        if FLAG_LIKE_MODE.match(flag):
            return flag, args
    if not args:
        return "", ()
    return args[0], args[1:]


def describe_triads(digits: str) -> str:
    """'754' -> "'rwxr-xr--' (owner: rwx, group: r-x, others: r--)"."""
    owner, group, other = (PERMISSION_TRIADS[d] for d in digits)
    return f"'{owner}{group}{other}' (owner: {owner}, group: {group}, others: {other})"


def describe_mode(mode: str) -> str:
    """Describe what a chmod mode string would do."""
    op, rest = mode[:1], mode[1:]
    if op in ("+", "-") and NUMERIC_MODE.match(rest):
        verb = "add" if op == "+" else "remove"
        return f"{verb} permissions: {describe_triads(rest)}"
    if NUMERIC_MODE.match(mode):
        return f"change permissions to {describe_triads(mode)}"
    return SYMBOLIC_MODES.get(mode, "change permissions")


def current_mode(path: Path) -> str:
    """Permission bits as octal (like stat -c %a), or 'unknown'."""
    try:
        return format(stat.S_IMODE(path.stat().st_mode), "o")
    except OSError:
        return "unknown"
