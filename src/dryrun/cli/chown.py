"""chown command handler - shows current and intended owner:group per target."""

from __future__ import annotations

import grp
import pwd
from pathlib import Path

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_quote
from dryrun.core.errors import NotFoundError, UsageError
from dryrun.core.fs import exists

COMMANDS = ["chown"]


def handle(ctx: HandlerContext) -> int:
    owner = ctx.args[0] if ctx.args else ""
    files = ctx.args[1:]
    if not owner or not files:
        raise UsageError("Usage: chown <user[:group]> <files>")

    for f in files:
        path = Path(f)
        if not exists(path):
            raise NotFoundError(f"Not found: {bash_quote(f)}")
        user, group = current_owner(path)
        ctx.reporter.info(f"Current ownership for {bash_quote(f)}: {user}:{group}")
        ctx.reporter.info(f"Would change ownership to {owner} for {bash_quote(f)}")
    return 0


def current_owner(path: Path) -> tuple[str, str]:
    """Resolve (user, group) names; either is 'unknown' when it can't be read."""
    try:
        st = path.stat()
    except OSError:
        return "unknown", "unknown"
    try:
        user = pwd.getpwuid(st.st_uid).pw_name
    except KeyError:
        user = "unknown"
    try:
        group = grp.getgrgid(st.st_gid).gr_name
    except KeyError:
        group = "unknown"
    return user, group
