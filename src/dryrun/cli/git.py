"""
Git command handler for dryrun.

Only subcommands with a native dry-run are executed:
- git clean -> git clean -n
- git push  -> git push --dry-run

Every other subcommand is described, not run.
"""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.delegate import execute, need

COMMANDS = ["git"]

# Subcommand -> flags that make it a dry run
DRY_RUN_SUBCOMMANDS = {
    "clean": ["-n"],
    "push": ["--dry-run"],
}


def handle(ctx: HandlerContext) -> int:
    need("git")
    sub = ctx.args[0] if ctx.args else ""
    rest = ctx.args[1:]

    dry_flags = DRY_RUN_SUBCOMMANDS.get(sub)
    if dry_flags is None:
        ctx.reporter.info(f"Simulating: git {ctx.invocation.describe()}")
        return 0
    return execute(["git", sub, *dry_flags, *ctx.flags, *rest], dry_flags, ctx.reporter)
