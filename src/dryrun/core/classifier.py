"""
Command classification for dryrun.

A static table maps every supported command to a behavior class and the
handler module under dryrun.cli that implements it. Commands outside the
table are probed on PATH.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from dryrun.core.fs import is_file


class CommandClass(Enum):
    FILESYSTEM_SIMULATE = "filesystem-simulate"
    TEXT_SIMULATE = "text-simulate"
    SYSTEM_SIMULATE = "system-simulate"
    NATIVE_DELEGATE = "native-delegate"
    SCRIPT_MODE = "script-mode"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Route:
    """Where a command goes: its class and the handler module that runs it."""

    kind: CommandClass
    handler: str | None = None


# === Data: command table ===

FILESYSTEM_COMMANDS = {
    "rm": "rm",
    "cp": "copy",
    "mv": "copy",
    "mkdir": "mkdir",
    "touch": "touch",
    "echo": "echo",
    "cat": "cat",
    "ls": "ls",
    "chmod": "chmod",
    "chown": "chown",
    "rmdir": "rmdir",
}

TEXT_COMMANDS = {
    "grep": "grep",
    "find": "find",
}

# No native dry-run; described only
SYSTEM_COMMANDS = {
    "docker": "docker",
    "systemctl": "system",
    "service": "system",
    "ping": "system",
    "wget": "system",
    "curl": "system",
}

DELEGATE_COMMANDS = {
    "rsync": "rsync",
    "apt": "apt",
    "apt-get": "apt",
    "yum": "yum",
    "dnf": "yum",
    "make": "make",
    "git": "git",
    "aws": "aws",
    "terraform": "terraform",
    "ansible-playbook": "ansible",
    "kubectl": "kubectl",
}

SCRIPT_COMMANDS = {
    "syntax": "script",
    "trace": "script",
    "script": "script",
    "check-vars": "script",
    "lint": "script",
}


def _build_routes() -> dict[str, Route]:
    routes: dict[str, Route] = {}
    for kind, table in (
        (CommandClass.FILESYSTEM_SIMULATE, FILESYSTEM_COMMANDS),
        (CommandClass.TEXT_SIMULATE, TEXT_COMMANDS),
        (CommandClass.SYSTEM_SIMULATE, SYSTEM_COMMANDS),
        (CommandClass.NATIVE_DELEGATE, DELEGATE_COMMANDS),
        (CommandClass.SCRIPT_MODE, SCRIPT_COMMANDS),
    ):
        for command, handler in table.items():
            if command in routes:
                raise ValueError(f"command '{command}' is listed in more than one class")
            routes[command] = Route(kind, handler)
    return routes


ROUTES = _build_routes()

# Commands a script line may be simulated with
SCRIPT_SIMULATABLE = frozenset(FILESYSTEM_COMMANDS) | frozenset(TEXT_COMMANDS)

UNKNOWN = Route(CommandClass.UNKNOWN)


def classify(command: str) -> Route:
    """Look up a command in the static table. Unlisted commands route to UNKNOWN."""
    return ROUTES.get(command, UNKNOWN)


def is_on_path(command: str) -> bool:
    """Check whether the command resolves to an executable."""
    return shutil.which(command) is not None


def suggest_command(prefix: str, path: str | None = None) -> str | None:
    """Return the first executable on PATH whose name starts with prefix.

    Best-effort hint only: directories are searched in PATH order and names in
    sorted order within each directory. This is not a closest-match search.
    """
    if not prefix or os.sep in prefix:
        return None
    if path is None:
        path = os.environ.get("PATH", "")
    for entry in path.split(os.pathsep):
        if not entry:
            continue
        directory = Path(entry)
        try:
            names = sorted(p.name for p in directory.iterdir())
        except OSError:
            continue
        for name in names:
            if name.startswith(prefix) and os.access(directory / name, os.X_OK):
                if is_file(directory / name):
                    return name
    return None
