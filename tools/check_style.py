#!/usr/bin/env python3
"""Check for banned Python constructions in dryrun source.

Banned everywhere under src/:

    Construction          Reason                            Use instead
    --------------------  --------------------------------  --------------------------
    import shlex          quoting rules live in one place   dryrun.core.bash
    from shlex import

Banned in handlers (src/dryrun/cli/):

    Construction          Reason                            Use instead
    --------------------  --------------------------------  --------------------------
    import subprocess     every run must carry a dry flag   dryrun.core.delegate
    os.remove(), ...      handlers only ever probe paths    a reporter message
    path.unlink(), ...
    open(..., "w")
"""

import ast
import os
import sys

BANNED_MODULES = frozenset({"shlex"})

HANDLER_BANNED_MODULES = frozenset({"subprocess"})

# Attribute calls that change the filesystem, whatever object they hang off
MUTATING_CALLS = frozenset({
    "remove", "unlink", "rmdir", "removedirs", "rename", "renames", "replace",
    "chmod", "lchmod", "chown", "lchown", "mkdir", "makedirs", "touch",
    "rmtree", "move", "copy", "copy2", "copyfile", "copytree", "symlink_to",
    "hardlink_to", "write_text", "write_bytes", "truncate", "system",
})

WRITE_MODES = ("w", "a", "x", "+")


def find_python_files(directory):
    """Find all .py files recursively."""
    result = []
    for root, dirs, files in os.walk(directory):
        if "__pycache__" in dirs:
            dirs.remove("__pycache__")
        for f in files:
            if f.endswith(".py"):
                result.append(os.path.join(root, f))
    result.sort()
    return result


def is_handler(filepath):
    return os.path.join("dryrun", "cli") + os.sep in filepath


def _open_mode(node):
    """Mode string of an open() call, if given as a literal."""
    if len(node.args) > 1 and isinstance(node.args[1], ast.Constant):
        return node.args[1].value
    for kw in node.keywords:
        if kw.arg == "mode" and isinstance(kw.value, ast.Constant):
            return kw.value.value
    return "r"


def check_file(filepath):
    with open(filepath) as f:
        source = f.read()

    tree = ast.parse(source, filepath)
    handler = is_handler(filepath)
    banned = BANNED_MODULES | HANDLER_BANNED_MODULES if handler else BANNED_MODULES
    errors = []

    for node in ast.walk(tree):
        lineno = getattr(node, "lineno", 0)

        if isinstance(node, ast.Import):
            for alias in node.names:
                if alias.name in banned:
                    errors.append((lineno, f"import {alias.name}: banned here"))

        if isinstance(node, ast.ImportFrom):
            if node.module in banned:
                errors.append((lineno, f"from {node.module} import: banned here"))

        if not handler or not isinstance(node, ast.Call):
            continue

        func = node.func
        if isinstance(func, ast.Attribute) and func.attr in MUTATING_CALLS:
            errors.append((lineno, f".{func.attr}(): handlers must not change the filesystem"))
        if isinstance(func, ast.Name) and func.id == "open":
            mode = _open_mode(node)
            if isinstance(mode, str) and any(c in mode for c in WRITE_MODES):
                errors.append((lineno, f"open(mode={mode!r}): handlers must not write files"))

    return errors


def main():
    src_dir = "src"
    if len(sys.argv) > 1:
        src_dir = sys.argv[1]

    if not os.path.isdir(src_dir):
        print(f"Directory not found: {src_dir}")
        sys.exit(1)

    files = find_python_files(src_dir)
    if not files:
        print(f"No Python files found in: {src_dir}")
        sys.exit(1)

    all_errors = []
    for filepath in files:
        try:
            for lineno, description in check_file(filepath):
                all_errors.append((filepath, lineno, description))
        except SyntaxError as e:
            print(f"Syntax error in {filepath}: {e}")
            sys.exit(1)

    if not all_errors:
        sys.exit(0)

    print(f"Found {len(all_errors)} banned construction(s):")
    for filepath, lineno, description in sorted(all_errors):
        print(f"  {filepath}:{lineno}: {description}")
    sys.exit(1)


if __name__ == "__main__":
    main()
