"""
Dispatch for dryrun.

Classifies an invocation and hands it to its handler. Script line simulation
calls back into simulate() in-process.
"""

from __future__ import annotations

import structlog

from dryrun.cli import HandlerContext, load_handler
from dryrun.core.classifier import CommandClass, classify, is_on_path, suggest_command
from dryrun.core.errors import NotFoundError
from dryrun.core.invocation import Invocation
from dryrun.core.output import Reporter

log = structlog.get_logger()


def simulate(invocation: Invocation, reporter: Reporter) -> int:
    """Run the handler for an invocation and return its exit status.

    Raises FatalError subclasses for fatal conditions.
    """
    route = classify(invocation.command)
    log.debug("route", command=invocation.command, kind=route.kind.value, handler=route.handler)

    if route.kind is CommandClass.UNKNOWN:
        return _handle_unknown(invocation.command, reporter)

    handler = load_handler(route.handler)
    return handler.handle(HandlerContext(invocation, reporter))


def _handle_unknown(command: str, reporter: Reporter) -> int:
    if not is_on_path(command):
        close = suggest_command(command)
        hint = f". Did you mean '{close}'?" if close else ""
        raise NotFoundError(f"Command not found: {command}{hint}")
    reporter.warn(f"Command '{command}' is not explicitly supported.")
    return 0
