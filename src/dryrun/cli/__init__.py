"""
Command handlers for dryrun.

Each handler module exports:
- COMMANDS: list[str] - command names this handler supports
- handle(ctx: HandlerContext) -> int - simulate or delegate, return exit status

Handlers raise dryrun.core.errors.FatalError for fatal conditions and report
everything else through ctx.reporter.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Protocol

from dryrun.core.invocation import Invocation
from dryrun.core.output import Reporter


@dataclass(frozen=True)
class HandlerContext:
    """Context passed to handlers."""

    invocation: Invocation
    reporter: Reporter = field(default_factory=Reporter)

    @property
    def command(self) -> str:
        return self.invocation.command

    @property
    def flags(self) -> tuple[str, ...]:
        return self.invocation.flags

    @property
    def args(self) -> tuple[str, ...]:
        return self.invocation.args


class CLIHandler(Protocol):
    """Protocol for handler modules."""

    COMMANDS: list[str]

    def handle(self, ctx: HandlerContext) -> int:
        """Run the handler.

        Args:
            ctx: Handler context with the partitioned invocation and reporter

        Returns the exit status for this invocation.
        """
        ...


@lru_cache(maxsize=32)
def load_handler(module_name: str) -> CLIHandler:
    """Load a handler module by name (cached within process)."""
    return importlib.import_module(f".{module_name}", package="dryrun.cli")
