"""
Shared patterns and lookup tables for dryrun.
"""

import re


# === Permission triads ===
# One octal digit -> rwx string

PERMISSION_TRIADS = {
    "0": "---",
    "1": "--x",
    "2": "-w-",
    "3": "-wx",
    "4": "r--",
    "5": "r-x",
    "6": "rw-",
    "7": "rwx",
}

NUMERIC_MODE = re.compile(r"^[0-7]{3}$")

# Symbolic single-letter forms and their fixed descriptions
SYMBOLIC_MODES = {
    "+x": "add execute permission",
    "-x": "remove execute permission",
    "+w": "add write permission",
    "-w": "remove write permission",
    "+r": "add read permission",
    "-r": "remove read permission",
}

# A chmod flag token that is really a mode (chmod -x file, chmod -755 file)
FLAG_LIKE_MODE = re.compile(r"^-(?:[rwxXst]+|[0-7]+)$")


# === Script variable scanning ===
# Line-oriented and textual: a match inside a comment or a quoted heredoc still counts.

VARIABLE_REFERENCE = re.compile(r"\$[A-Za-z_][A-Za-z0-9_]*")

# rm with a recursive/force flag, later followed by $VAR or ${VAR not opened by a double quote
DANGEROUS_RM = re.compile(
    r"\brm\s+(?:.*\s)?(?:-[A-Za-z]*[rRf][A-Za-z]*|--recursive|--force)\b"
    r".*(?<!\")\$\{?[A-Za-z_]"
)


# === Glob metacharacters ===

GLOB_CHARS = re.compile(r"[*?\[]")


# === Dry-run cancellation ===
# Delegated tools let a later option override an earlier one, so any of these
# in a user's arguments would undo the injected dry-run flag.

DRY_RUN_NEGATIONS = frozenset({
    "--no-dry-run",
    "--no-simulate",
    "--no-just-print",
    "--no-recon",
    "--no-check",
})

# --dry-run=none, --simulate=false, -s=no, ...
DRY_RUN_OFF = re.compile(
    r"^--?(?:dry-run|simulate|just-print|recon|no-act|check|s|n)=(?:none|no|false|off|0)$",
    re.IGNORECASE,
)

# apt configuration overrides: -oAPT::Get::Simulate=false, -o APT::Get::Simulate=0
APT_SIMULATE_OPTION = re.compile(r"::simulate\b", re.IGNORECASE)
