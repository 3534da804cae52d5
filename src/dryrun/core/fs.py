"""
Read-only path checks for dryrun handlers.

The os.path predicates answer False for any path the OS refuses to stat
(name too long, permission denied, embedded NUL), so a strange argument is
reported as missing instead of escaping as an OSError.
"""

from __future__ import annotations

import os
from pathlib import Path


def exists(path: str | Path) -> bool:
    return os.path.exists(path)


def is_file(path: str | Path) -> bool:
    return os.path.isfile(path)


def is_dir(path: str | Path) -> bool:
    return os.path.isdir(path)


def is_symlink(path: str | Path) -> bool:
    return os.path.islink(path)
