"""
cp and mv command handler for dryrun.

The last positional is the destination, the rest are sources. Checks that
sources exist, that several sources go into a directory, and (cp only) that
directory sources come with a recursive flag.
"""

from __future__ import annotations

import glob
from pathlib import Path

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_quote
from dryrun.core.errors import UsageError
from dryrun.core.fs import exists, is_dir
from dryrun.core.invocation import has_flag
from dryrun.core.patterns import GLOB_CHARS

COMMANDS = ["cp", "mv"]

VERBS = {"cp": "copy", "mv": "move"}


def handle(ctx: HandlerContext) -> int:
    """Describe the copy/move of each source into the destination."""
    command = ctx.command
    if len(ctx.args) < 2:
        raise UsageError(f"'{command}' requires at least one source and a destination.")

    dest = ctx.args[-1]
    sources = expand_sources(ctx.args[:-1])
    recursive = has_flag(ctx.invocation, "--recursive", "--archive", short="rRa")

    ctx.reporter.info(f"Would {VERBS[command]}:")
    for src in sources:
        path = Path(src)
        if not exists(path):
            ctx.reporter.warn(f"Source not found: {bash_quote(src)}")
            continue
        if command == "cp" and is_dir(path) and not recursive:
            ctx.reporter.warn(
                "Source is a directory but no recursive flag (-r/-R) was given; "
                f"cp would omit it: {bash_quote(src)}"
            )
            continue
        ctx.reporter.info(f"  - {bash_quote(src)} -> {bash_quote(dest)}")

    if len(sources) > 1 and not is_dir(dest):
        ctx.reporter.warn(f"Multiple sources into non-directory destination: {bash_quote(dest)}")
    return 0


def expand_sources(sources: tuple[str, ...]) -> list[str]:
    """Expand glob patterns in sources. A pattern with no match stays literal, as in bash."""
    expanded: list[str] = []
    for src in sources:
        matches = sorted(glob.glob(src)) if GLOB_CHARS.search(src) else []
        expanded.extend(matches or [src])
    return expanded
