"""Command-line entry point for dryrun.

Usage: dryrun <command> [--] [flags...] [args...]

The command token picks a handler from a static table:
- filesystem and text tools (rm, cp, chmod, grep, ...) are simulated from
  read-only probes of the paths involved
- tools with a native dry-run (rsync, apt, terraform, kubectl, ...) are run
  for real with that flag attached
- syntax/trace/script/check-vars/lint analyze a script file

Exit codes:
- 0: Success.
- 1: Fatal condition (usage, missing target, missing binary, syntax error).
- Delegated tools and lint: the tool's own exit status, unchanged.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import structlog

from dryrun.core import engine
from dryrun.core.bash import bash_quote
from dryrun.core.config import ENV_LOG_LEVEL, LOG_LEVELS, configure_logging, load_settings
from dryrun.core.errors import FatalError
from dryrun.core.invocation import END_OF_FLAGS, Invocation, partition
from dryrun.core.output import Reporter

log = structlog.get_logger()

USAGE = """\
Usage: dryrun <command> [args...]

Executes real dry-run modes where supported; otherwise simulates.

Filesystem:   rm, cp, mv, mkdir, touch, echo, cat, ls, chmod, chown, rmdir

Text tools:   grep, find

Exec dry-run: rsync, apt/apt-get(-s), yum/dnf(--assumeno), make(-n),
              git(clean -n, push --dry-run), terraform(plan),
              ansible-playbook(--check), kubectl(--dry-run=client),
              aws(--dry-run)

System tools: docker (simulate), systemctl/service (simulate),
              ping (simulate), wget/curl (simulate)

Extra dryrun modes:
  dryrun syntax <script>       - Syntax check only
  dryrun trace <script>        - Print commands without execution
  dryrun script <script>       - Simulate file operations inside script
  dryrun check-vars <script>   - Warn about dangerous $VAR usage
  dryrun lint <script>         - Run shellcheck linter on script

Examples:
  dryrun cp file.txt /tmp/
  dryrun apt-get install nginx
  dryrun -- rm -rf -- /etc"""

HELP_FLAGS = frozenset({"--help", "-h"})


def parse_command_line(argv: Sequence[str]) -> Invocation | None:
    """Build the Invocation from argv (program name excluded). None means show usage."""
    argv = list(argv)
    # `dryrun -- rm ...`: a leading -- only separates dryrun from the command
    if argv and argv[0] == END_OF_FLAGS:
        argv = argv[1:]
    if not argv or argv[0] in HELP_FLAGS:
        return None
    return partition(argv[0], argv[1:])


def run(invocation: Invocation, reporter: Reporter) -> int:
    """Print the banner and dispatch. FatalError becomes [ERROR] and its exit code."""
    shown = " ".join(filter(None, [bash_quote(invocation.command), invocation.describe()]))
    reporter.plain(f"Dry run mode: showing what would happen if you ran: {shown}")
    try:
        return engine.simulate(invocation, reporter)
    except FatalError as e:
        log.debug("fatal", command=invocation.command, error=e.message)
        reporter.error(e.message)
        return e.exit_code


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    reporter = Reporter()

    settings = load_settings()
    configure_logging(settings)
    if settings.rejected_level:
        log.warning(
            "unknown_log_level",
            variable=ENV_LOG_LEVEL,
            value=settings.rejected_level,
            choices=list(LOG_LEVELS),
        )

    invocation = parse_command_line(argv)
    if invocation is None:
        reporter.plain(USAGE)
        return 0

    try:
        return run(invocation, reporter)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
