"""
dryrun - see what a command would do before you run it.

Delegates to a tool's own dry-run mode where one exists and simulates the
effect otherwise.
"""

from __future__ import annotations

__version__ = "0.3.0"

from dryrun.dryrun import main, run

__all__ = ["main", "run", "__version__"]
