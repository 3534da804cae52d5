"""rsync command handler - runs rsync --dry-run."""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.delegate import execute, need

COMMANDS = ["rsync"]

DRY_FLAGS = ["--dry-run"]


def handle(ctx: HandlerContext) -> int:
    need("rsync")
    return execute(["rsync", *DRY_FLAGS, *ctx.flags, *ctx.args], DRY_FLAGS, ctx.reporter)
