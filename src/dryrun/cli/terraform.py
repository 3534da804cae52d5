"""
Terraform command handler for dryrun.

Everything becomes `terraform plan`. An explicit apply/plan action is folded
into it, destroy becomes plan -destroy, and -auto-approve is dropped since
plan does not accept it.
"""

from __future__ import annotations

from dryrun.cli import HandlerContext
from dryrun.core.delegate import execute, need

COMMANDS = ["terraform"]

DRY_FLAGS = ["plan"]

# Actions that plan already covers
FOLDED_ACTIONS = frozenset({"apply", "plan"})

# Flags plan rejects
DROPPED_FLAGS = frozenset({"-auto-approve", "--auto-approve"})


def handle(ctx: HandlerContext) -> int:
    need("terraform")
    flags = [f for f in ctx.flags if f not in DROPPED_FLAGS]
    args = list(ctx.args)
    if args and args[0] in FOLDED_ACTIONS:
        args = args[1:]
    elif args and args[0] == "destroy":
        args = args[1:]
        flags.insert(0, "-destroy")
    return execute(["terraform", *DRY_FLAGS, *flags, *args], DRY_FLAGS, ctx.reporter)
