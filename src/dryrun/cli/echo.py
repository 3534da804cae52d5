"""echo command handler."""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_join

COMMANDS = ["echo"]


def handle(ctx: HandlerContext) -> int:
    ctx.reporter.info(f"Would output: {bash_join(ctx.args)}")
    return 0
