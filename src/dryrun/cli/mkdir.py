"""mkdir command handler - reports directories that would be created."""

from __future__ import annotations

from pathlib import Path

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_quote
from dryrun.core.errors import UsageError
from dryrun.core.fs import exists, is_dir
from dryrun.core.invocation import has_flag

COMMANDS = ["mkdir"]


def handle(ctx: HandlerContext) -> int:
    if not ctx.args:
        raise UsageError("Usage: mkdir <dir> [dir...]")

    parents = has_flag(ctx.invocation, "--parents", short="p")
    for d in ctx.args:
        path = Path(d)
        if is_dir(path):
            if parents:
                # mkdir -p leaves an existing directory alone
                ctx.reporter.info(f"Directory already exists, nothing to do: {bash_quote(d)}")
                continue
            ctx.reporter.warn(f"Directory already exists: {bash_quote(d)}")
        elif exists(path):
            ctx.reporter.warn(f"File already exists: {bash_quote(d)}")
        ctx.reporter.info(f"Would create directory: {bash_quote(d)}")
    return 0
