"""
Script analysis handler for dryrun.

Five modes, each taking one script path:
- syntax      bash -n
- trace       print the non-comment lines as a command trace
- script      simulate the file operations line by line
- check-vars  flag $VAR usage and rm -rf with unquoted variables
- lint        shellcheck -x

Line handling is textual: no quoting, expansion or control flow is understood.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

import structlog

from dryrun.cli import HandlerContext
from dryrun.core import engine
from dryrun.core.bash import bash_quote, is_comment_line, split_words, strip_comment
from dryrun.core.classifier import SCRIPT_SIMULATABLE
from dryrun.core.delegate import need, run_checked
from dryrun.core.errors import FatalError, NotFoundError, ScriptReadError, SyntaxCheckError
from dryrun.core.fs import is_file
from dryrun.core.invocation import partition
from dryrun.core.output import Reporter
from dryrun.core.patterns import DANGEROUS_RM, VARIABLE_REFERENCE

log = structlog.get_logger()

COMMANDS = ["syntax", "trace", "script", "check-vars", "lint"]


@dataclass(frozen=True)
class ScriptLine:
    """One physical script line with its comment-stripped form."""

    number: int
    text: str

    @property
    def clean(self) -> str:
        """Comment stripped, trimmed, whitespace collapsed."""
        return " ".join(split_words(strip_comment(self.text)))

    @property
    def first(self) -> str:
        words = split_words(self.clean)
        return words[0] if words else ""

    @property
    def rest(self) -> list[str]:
        return split_words(self.clean)[1:]


def handle(ctx: HandlerContext) -> int:
    script = Path(ctx.args[0]) if ctx.args else None
    if script is None or not is_file(script):
        raise NotFoundError(f"Script not found: {ctx.args[0] if ctx.args else ''}")
    return MODES[ctx.command](script, ctx.reporter)


def read_lines(script: Path) -> Iterator[ScriptLine]:
    """Yield the script's lines. Undecodable bytes are replaced, not fatal."""
    try:
        f = open(script, encoding="utf-8", errors="replace")
    except OSError as e:
        message = f"Cannot read script: {bash_quote(str(script))} ({e.strerror})"
        raise ScriptReadError(message) from None
    with f:
        for number, text in enumerate(f, 1):
            yield ScriptLine(number, text.rstrip("\r\n"))


def operand(script: Path) -> str:
    """Script path as a checker argument; a leading '-' would read as an option."""
    path = str(script)
    return f"./{path}" if path.startswith("-") else path


# === Modes ===


def check_syntax(script: Path, reporter: Reporter) -> int:
    """Let bash parse the script without running it. Its diagnostics go to stderr."""
    reporter.info(f"Checking syntax for: {bash_quote(str(script))}")
    bash = need("bash")
    if run_checked([bash, "-n", operand(script)]) != 0:
        raise SyntaxCheckError("Syntax errors found in the script.")
    reporter.ok("No syntax errors detected.")
    return 0


def trace(script: Path, reporter: Reporter) -> int:
    """Print every non-blank, non-comment line as a trace entry, in order."""
    reporter.info("Showing command trace (simulated):")
    for line in read_lines(script):
        text = line.text.strip()
        if not text or is_comment_line(text):
            continue
        reporter.plain(f"+ {text}")
    return 0


def simulate_script(script: Path, reporter: Reporter) -> int:
    """Simulate each supported line in-process. A failing line never stops the scan."""
    reporter.info(f"Parsing and simulating script: {bash_quote(str(script))}")
    for line in read_lines(script):
        clean = line.clean
        if not clean:
            continue
        if line.first not in SCRIPT_SIMULATABLE:
            reporter.warn(f"Skipping unsupported or complex line: {clean}")
            continue

        reporter.info(f"Simulating: {clean}")
        try:
            engine.simulate(partition(line.first, line.rest), reporter)
        except FatalError as e:
            reporter.error(e.message)
            log.debug("script_line_failed", line=line.number, error=e.message)
        except OSError as e:
            reporter.error(f"Line {line.number}: {e.strerror or e}")
            log.debug("script_line_failed", line=line.number, error=str(e))
    return 0


def check_vars(script: Path, reporter: Reporter) -> int:
    """Warn about variable references, louder for rm -rf with an unquoted variable."""
    reporter.info("Scanning for potentially dangerous $VAR usage...")
    for line in read_lines(script):
        if VARIABLE_REFERENCE.search(line.text):
            reporter.warn(f"Found variable usage: {line.text}")
        if DANGEROUS_RM.search(line.text):
            reporter.warn(f"Possible dangerous 'rm' with unquoted variable: {line.text}")
    reporter.ok("Finished scanning for variable-related issues.")
    return 0


def lint(script: Path, reporter: Reporter) -> int:
    """Run shellcheck and pass its exit status through unchanged."""
    shellcheck = need("shellcheck")
    reporter.info(f"Running shellcheck on: {bash_quote(str(script))}")
    status = run_checked([shellcheck, "-x", operand(script)])
    if status == 0:
        reporter.ok("No lint issues found.")
    else:
        reporter.warn(f"Shellcheck returned warnings or errors (exit code {status}).")
    return status


MODES: dict[str, Callable[[Path, Reporter], int]] = {
    "syntax": check_syntax,
    "trace": trace,
    "script": simulate_script,
    "check-vars": check_vars,
    "lint": lint,
}
