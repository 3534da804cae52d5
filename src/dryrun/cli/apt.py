"""apt and apt-get command handler - -s simulates the transaction."""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.delegate import execute, need

COMMANDS = ["apt", "apt-get"]

DRY_FLAGS = ["-s"]


def handle(ctx: HandlerContext) -> int:
    need(ctx.command)
    return execute([ctx.command, *DRY_FLAGS, *ctx.flags, *ctx.args], DRY_FLAGS, ctx.reporter)
