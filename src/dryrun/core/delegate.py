"""
Running external tools in their own dry-run mode.

Every subprocess dryrun starts goes through execute(), which refuses an argv
that does not carry the tool's dry-run flag, or that carries a user option
which would switch that flag back off.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence

import structlog

from dryrun.core.bash import bash_join, bash_quote
from dryrun.core.errors import DryRunCancelledError, FatalError, MissingBinaryError
from dryrun.core.output import Reporter
from dryrun.core.patterns import APT_SIMULATE_OPTION, DRY_RUN_NEGATIONS, DRY_RUN_OFF

log = structlog.get_logger()

INSTALL_HINTS = {
    "shellcheck": "'shellcheck' is not installed. Install it via: sudo apt install shellcheck",
}


def need(binary: str) -> str:
    """Return the resolved path of binary, or raise MissingBinaryError."""
    resolved = shutil.which(binary)
    if resolved is None:
        message = INSTALL_HINTS.get(binary, f"Required command not found in PATH: {binary}")
        raise MissingBinaryError(message)
    return resolved


def execute(argv: Sequence[str], dry_flags: Sequence[str], reporter: Reporter) -> int:
    """Run argv and return its exit status.

    dry_flags are the tokens that make the run non-mutating; each must appear
    in argv. Nothing is retried and the status is not normalized.
    """
    argv = list(argv)
    if not dry_flags or any(flag not in argv for flag in dry_flags):
        raise ValueError(f"refusing to run without dry-run flags: {bash_join(argv)}")
    cancel = cancelling_token(argv, dry_flags)
    if cancel is not None:
        raise DryRunCancelledError(
            f"Refusing to run {argv[0]}: {bash_quote(cancel)} would turn off {bash_join(dry_flags)}"
        )

    reporter.info(f"Executing: {bash_join(argv)}")
    log.debug("delegate_exec", argv=argv)
    try:
        completed = subprocess.run(argv, check=False)
    except FileNotFoundError:
        raise MissingBinaryError(f"Required command not found in PATH: {argv[0]}") from None
    except OSError as e:
        raise FatalError(f"Could not run {argv[0]}: {e}") from None
    log.debug("delegate_exit", argv=argv, status=completed.returncode)
    return completed.returncode


def cancelling_token(argv: Sequence[str], dry_flags: Sequence[str]) -> str | None:
    """Return the first token that would switch the dry run back off, if any."""
    negations = DRY_RUN_NEGATIONS | {"--no-" + f.lstrip("-") for f in dry_flags if f[:1] == "-"}
    for token in argv:
        if token in dry_flags:
            continue
        if token in negations or DRY_RUN_OFF.match(token) or APT_SIMULATE_OPTION.search(token):
            return token
    return None


def run_checked(argv: Sequence[str]) -> int:
    """Run a read-only checker (bash -n, shellcheck) and return its status."""
    argv = list(argv)
    log.debug("check_exec", argv=argv)
    try:
        completed = subprocess.run(argv, check=False)
    except FileNotFoundError:
        raise MissingBinaryError(f"Required command not found in PATH: {argv[0]}") from None
    return completed.returncode
