"""ls command handler. With no targets, lists the current directory."""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_quote
from dryrun.core.errors import NotFoundError
from dryrun.core.fs import exists

COMMANDS = ["ls"]


def handle(ctx: HandlerContext) -> int:
    for t in ctx.args or (".",):
        if not exists(t):
            raise NotFoundError(f"Not found: {bash_quote(t)}")
        ctx.reporter.info(f"Would list: {bash_quote(t)}")
    return 0
