"""ansible-playbook command handler - --check runs the play without making changes."""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.delegate import execute, need

COMMANDS = ["ansible-playbook"]

DRY_FLAGS = ["--check"]


def handle(ctx: HandlerContext) -> int:
    need("ansible-playbook")
    return execute(
        ["ansible-playbook", *DRY_FLAGS, *ctx.flags, *ctx.args], DRY_FLAGS, ctx.reporter
    )
