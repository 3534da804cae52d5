"""Fatal error types for dryrun.

Handlers raise these; the entry point turns them into an [ERROR] line and
exit status. Anything that is only advisory goes through Reporter.warn.
"""

from __future__ import annotations


class FatalError(Exception):
    """Terminates the current invocation with a non-zero exit status."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(FatalError):
    """Missing or malformed arguments for a command."""


class NotFoundError(FatalError):
    """A path the command requires does not exist."""


class MissingBinaryError(FatalError):
    """A required external program is not on PATH."""


class SyntaxCheckError(FatalError):
    """The shell reported syntax errors in a script."""


class ScriptReadError(FatalError):
    """A script file exists but cannot be opened."""


class DryRunCancelledError(FatalError):
    """User arguments would switch a delegated tool's dry-run mode back off."""
