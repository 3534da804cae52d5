"""
Argument partitioning for dryrun.

Splits the tokens after the command into flags and positionals. A single
`--` ends flag parsing; it is consumed and never stored.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from dryrun.core.bash import bash_join

END_OF_FLAGS = "--"


@dataclass(frozen=True)
class Invocation:
    """A command with its arguments split into flags and positionals."""

    command: str
    flags: tuple[str, ...] = ()
    args: tuple[str, ...] = ()
    raw: tuple[str, ...] = ()
    """Arguments exactly as given, `--` included."""

    def describe(self) -> str:
        """Quoted flags followed by quoted args, as shown in messages."""
        return bash_join([*self.flags, *self.args])


def partition(command: str, argv: Sequence[str]) -> Invocation:
    """Partition argv (command token excluded) into an Invocation."""
    flags: list[str] = []
    args: list[str] = []
    seen_end = False
    for token in argv:
        if seen_end:
            args.append(token)
        elif token == END_OF_FLAGS:
            seen_end = True
        elif token.startswith("-"):
            flags.append(token)
        else:
            args.append(token)
    return Invocation(command, tuple(flags), tuple(args), tuple(argv))


def has_flag(invocation: Invocation, *names: str, short: str = "") -> bool:
    """Check for any of the long/exact flags, or a short letter in a combined flag.

    has_flag(inv, "--recursive", short="rR") matches -r, -R, -rf, -vR and
    --recursive, but not --remove-destination.
    """
    for flag in invocation.flags:
        if flag in names:
            return True
        if short and not flag.startswith("--") and any(c in flag[1:] for c in short):
            return True
    return False
