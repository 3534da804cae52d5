"""yum and dnf command handler - --assumeno answers no to every prompt."""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.delegate import execute, need

COMMANDS = ["yum", "dnf"]

DRY_FLAGS = ["--assumeno"]


def handle(ctx: HandlerContext) -> int:
    need(ctx.command)
    return execute([ctx.command, *DRY_FLAGS, *ctx.flags, *ctx.args], DRY_FLAGS, ctx.reporter)
