"""Test cases for chown simulation."""

from __future__ import annotations

import grp
import os
import pwd

from dryrun.cli.chown import current_owner


def test_requires_spec_and_target(dryrun, workdir):
    result = dryrun("chown", "root")
    assert result.code == 1
    assert "Usage: chown <user[:group]> <files>" in result.err


def test_reports_current_and_new(dryrun, workdir):
    (workdir / "f").write_text("")
    user = pwd.getpwuid(os.getuid()).pw_name
    group = grp.getgrgid(os.getgid()).gr_name
    result = dryrun("chown", "nobody:nogroup", "f")
    assert result.code == 0
    assert f"Current ownership for f: {user}:{group}" in result.out
    assert "Would change ownership to nobody:nogroup for f" in result.out


def test_missing_target_is_fatal(dryrun, workdir):
    (workdir / "a").write_text("")
    result = dryrun("chown", "root", "a", "missing")
    assert result.code == 1
    assert "Would change ownership to root for a" in result.out
    assert "Not found: missing" in result.err


def test_unknown_owner(tmp_path, monkeypatch):
    (tmp_path / "f").write_text("")

    def fail(_):
        raise KeyError("no such id")

    monkeypatch.setattr(pwd, "getpwuid", fail)
    monkeypatch.setattr(grp, "getgrgid", fail)
    assert current_owner(tmp_path / "f") == ("unknown", "unknown")


def test_unreadable_path(tmp_path):
    assert current_owner(tmp_path / "missing") == ("unknown", "unknown")
