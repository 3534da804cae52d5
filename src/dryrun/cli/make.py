"""make command handler - make -n prints recipes without running them."""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.delegate import execute, need

COMMANDS = ["make"]

DRY_FLAGS = ["-n"]


def handle(ctx: HandlerContext) -> int:
    need("make")
    return execute(["make", *DRY_FLAGS, *ctx.flags, *ctx.args], DRY_FLAGS, ctx.reporter)
