"""
rm command handler for dryrun.

Lists what would be deleted with an approximate item count. Never deletes.
"""

from __future__ import annotations

import os
from itertools import islice
from pathlib import Path

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_quote
from dryrun.core.errors import UsageError
from dryrun.core.fs import exists, is_dir, is_symlink

COMMANDS = ["rm"]

# Display limit for the per-target item count
COUNT_LIMIT = 200


def handle(ctx: HandlerContext) -> int:
    """Report each target and how many entries it holds."""
    if not ctx.args:
        raise UsageError("'rm' requires at least one target.")

    ctx.reporter.info("Files/directories that would be deleted:")
    for target in ctx.args:
        path = Path(target)
        if exists(path):
            count = count_entries(path, COUNT_LIMIT)
            ctx.reporter.plain(
                f"  - {bash_quote(target)} (showing up to {COUNT_LIMIT} items; found ~{count})"
            )
        else:
            ctx.reporter.warn(f"Target does not exist: {bash_quote(target)}")
    return 0


def count_entries(path: Path, limit: int) -> int:
    """Count path plus everything below it, stopping at limit. Symlinks are not followed."""
    return sum(1 for _ in islice(_walk_entries(path), limit))


def _walk_entries(path: Path):
    yield path
    if is_symlink(path) or not is_dir(path):
        return
    for dirpath, dirnames, filenames in os.walk(path):
        for name in dirnames + filenames:
            yield Path(dirpath) / name
