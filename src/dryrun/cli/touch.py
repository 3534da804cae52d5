"""touch command handler - touch is idempotent, so no existence check."""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_quote
from dryrun.core.errors import UsageError

COMMANDS = ["touch"]


def handle(ctx: HandlerContext) -> int:
    if not ctx.args:
        raise UsageError("Usage: touch <file> [file...]")
    for f in ctx.args:
        ctx.reporter.info(f"Would create file: {bash_quote(f)}")
    return 0
