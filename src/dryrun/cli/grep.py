"""
grep command handler for dryrun.

Needs a pattern and at least one existing file. With -r/-R the inputs may
also be directories.
"""

from __future__ import annotations

from pathlib import Path

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_quote
from dryrun.core.errors import NotFoundError, UsageError
from dryrun.core.fs import is_dir, is_file
from dryrun.core.invocation import has_flag

COMMANDS = ["grep"]


def handle(ctx: HandlerContext) -> int:
    pattern = ctx.args[0] if ctx.args else ""
    files = ctx.args[1:]
    if not pattern or not files:
        raise UsageError("Usage: grep <pattern> <files>")

    recursive = has_flag(ctx.invocation, "--recursive", "--dereference-recursive", short="rR")
    for f in files:
        path = Path(f)
        if not (is_file(path) or (recursive and is_dir(path))):
            raise NotFoundError(f"Not found: {bash_quote(f)}")
        ctx.reporter.info(f"Would grep {bash_quote(pattern)} in {bash_quote(f)}")
    return 0
