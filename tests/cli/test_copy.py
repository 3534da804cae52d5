"""Test cases for cp and mv simulation."""

from __future__ import annotations

import pytest

AMBIGUITY = "Multiple sources into non-directory destination"


@pytest.mark.parametrize("command", ["cp", "mv"])
def test_requires_source_and_destination(dryrun, workdir, command):
    result = dryrun(command, "only-one")
    assert result.code == 1
    assert f"'{command}' requires at least one source and a destination." in result.err


@pytest.mark.parametrize("command,verb", [("cp", "copy"), ("mv", "move")])
def test_single_source_into_directory(dryrun, workdir, command, verb):
    (workdir / "a.txt").write_text("")
    (workdir / "dest").mkdir()
    result = dryrun(command, "a.txt", "dest")
    assert result.code == 0
    assert f"Would {verb}:" in result.out
    assert "  - a.txt -> dest" in result.out
    assert AMBIGUITY not in result.err


@pytest.mark.parametrize("command", ["cp", "mv"])
def test_two_sources_into_missing_destination(dryrun, workdir, command):
    (workdir / "a").write_text("")
    (workdir / "b").write_text("")
    result = dryrun(command, "a", "b", "nowhere")
    assert f"{AMBIGUITY}: nowhere" in result.err


@pytest.mark.parametrize("command", ["cp", "mv"])
def test_two_sources_into_file(dryrun, workdir, command):
    for name in ("a", "b", "target"):
        (workdir / name).write_text("")
    result = dryrun(command, "a", "b", "target")
    assert f"{AMBIGUITY}: target" in result.err


def test_two_missing_sources_still_ambiguous(dryrun, workdir):
    result = dryrun("mv", "x", "y", "z")
    assert "Source not found: x" in result.err
    assert "Source not found: y" in result.err
    assert AMBIGUITY in result.err


def test_missing_source_warns(dryrun, workdir):
    (workdir / "dest").mkdir()
    result = dryrun("cp", "ghost", "dest")
    assert result.code == 0
    assert "Source not found: ghost" in result.err


def test_glob_sources_expand(dryrun, workdir):
    (workdir / "one.log").write_text("")
    (workdir / "two.log").write_text("")
    (workdir / "dest").mkdir()
    result = dryrun("cp", "*.log", "dest")
    assert "  - one.log -> dest" in result.out
    assert "  - two.log -> dest" in result.out
    assert AMBIGUITY not in result.err


def test_glob_expanding_to_many_into_file(dryrun, workdir):
    (workdir / "one.log").write_text("")
    (workdir / "two.log").write_text("")
    result = dryrun("cp", "*.log", "out.txt")
    assert AMBIGUITY in result.err


def test_unmatched_glob_stays_literal(dryrun, workdir):
    result = dryrun("cp", "*.nothing", "dest")
    assert "Source not found: '*.nothing'" in result.err


class TestDirectorySource:
    def test_cp_directory_without_recursive_warns(self, dryrun, workdir):
        (workdir / "src").mkdir()
        (workdir / "dest").mkdir()
        result = dryrun("cp", "src", "dest")
        assert "no recursive flag" in result.err
        assert "src -> dest" not in result.out

    @pytest.mark.parametrize("flag", ["-r", "-R", "-rv", "--recursive", "-a"])
    def test_cp_directory_with_recursive(self, dryrun, workdir, flag):
        (workdir / "src").mkdir()
        (workdir / "dest").mkdir()
        result = dryrun("cp", flag, "src", "dest")
        assert "no recursive flag" not in result.err
        assert "  - src -> dest" in result.out

    def test_mv_directory_needs_no_flag(self, dryrun, workdir):
        (workdir / "src").mkdir()
        result = dryrun("mv", "src", "renamed")
        assert "no recursive flag" not in result.err
        assert "  - src -> renamed" in result.out


def test_nothing_is_copied(dryrun, workdir):
    (workdir / "a").write_text("")
    dryrun("cp", "a", "b")
    dryrun("mv", "a", "c")
    assert sorted(p.name for p in workdir.iterdir()) == ["a"]
