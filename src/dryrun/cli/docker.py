"""
Docker command handler for dryrun.

Docker has no native dry-run, so nothing is executed; `docker run` gets an
extra warning because it starts a container.
"""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.bash import bash_join

COMMANDS = ["docker"]


def handle(ctx: HandlerContext) -> int:
    sub = ctx.args[0] if ctx.args else ""
    rest = ctx.args[1:]
    if sub == "build":
        ctx.reporter.info(f"Simulating: docker build {bash_join([*ctx.flags, *rest])}")
    elif sub == "run":
        ctx.reporter.warn("No native dry-run for 'docker run'.")
        ctx.reporter.info(f"Simulating: docker run {bash_join([*ctx.flags, *rest])}")
    else:
        ctx.reporter.info(f"Simulating: docker {ctx.invocation.describe()}")
    return 0
