"""
find command handler for dryrun.

Echoes the find invocation in its original argument order. Actions that
change things per match are called out:
- -delete: removes every match
- -exec, -execdir, -ok, -okdir: run a command on every match
"""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_join

COMMANDS = ["find"]

EXEC_ACTIONS = ("-exec", "-execdir", "-ok", "-okdir")


def handle(ctx: HandlerContext) -> int:
    raw = ctx.invocation.raw
    ctx.reporter.info(f"Would run: {bash_join(['find', *raw])}")

    if "-delete" in raw:
        ctx.reporter.warn("find -delete would remove every matched path")
    for action in EXEC_ACTIONS:
        if action in raw:
            ctx.reporter.warn(f"find {action} would run a command on every matched path")
    return 0
