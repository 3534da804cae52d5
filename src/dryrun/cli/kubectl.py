"""
Kubectl command handler for dryrun.

Client-side dry run, rendered as YAML so the would-be object is visible.
"""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.delegate import execute, need

COMMANDS = ["kubectl"]

DRY_FLAGS = ["--dry-run=client", "-o", "yaml"]


def handle(ctx: HandlerContext) -> int:
    need("kubectl")
    return execute(["kubectl", *ctx.flags, *ctx.args, *DRY_FLAGS], DRY_FLAGS, ctx.reporter)
