"""AWS CLI handler for dryrun - --dry-run goes last (EC2-style dry run)."""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.delegate import execute, need

COMMANDS = ["aws"]

DRY_FLAGS = ["--dry-run"]


def handle(ctx: HandlerContext) -> int:
    need("aws")
    return execute(["aws", *ctx.flags, *ctx.args, *DRY_FLAGS], DRY_FLAGS, ctx.reporter)
