"""
rmdir command handler for dryrun.

Each target must be an existing directory. rmdir refuses non-empty
directories, so those get a warning.
"""

from __future__ import annotations

from pathlib import Path

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_quote
from dryrun.core.errors import NotFoundError, UsageError
from dryrun.core.fs import is_dir

COMMANDS = ["rmdir"]


def handle(ctx: HandlerContext) -> int:
    if not ctx.args:
        raise UsageError("Usage: rmdir <dir> [dir...]")
    for d in ctx.args:
        path = Path(d)
        if not is_dir(path):
            raise NotFoundError(f"Not found: {bash_quote(d)}")
        if _has_entries(path):
            ctx.reporter.warn(f"Directory is not empty; rmdir would fail: {bash_quote(d)}")
        ctx.reporter.info(f"Would remove empty dir: {bash_quote(d)}")
    return 0


def _has_entries(path: Path) -> bool:
    try:
        return next(path.iterdir(), None) is not None
    except OSError:
        return False
