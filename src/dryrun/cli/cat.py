"""cat command handler - every file must exist."""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_quote
from dryrun.core.errors import NotFoundError, UsageError
from dryrun.core.fs import is_file

COMMANDS = ["cat"]


def handle(ctx: HandlerContext) -> int:
    if not ctx.args:
        raise UsageError("Usage: cat <file> [file...]")
    for f in ctx.args:
        if not is_file(f):
            raise NotFoundError(f"File not found: {bash_quote(f)}")
        ctx.reporter.info(f"Would display: {bash_quote(f)}")
    return 0
