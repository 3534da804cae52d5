"""Service and network tools without a dry-run mode - described, never run."""

from __future__ import annotations

from dryrun.cli import HandlerContext

COMMANDS = ["systemctl", "service", "ping", "wget", "curl"]


def handle(ctx: HandlerContext) -> int:
    ctx.reporter.info(f"Simulating: {ctx.command} {ctx.invocation.describe()}")
    return 0
