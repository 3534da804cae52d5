"""Tests for the read-only path checks."""

import pytest

from dryrun.core.fs import exists, is_dir, is_file, is_symlink

CHECKS = [exists, is_dir, is_file, is_symlink]


@pytest.mark.parametrize("check", CHECKS)
def test_name_too_long_is_false(tmp_path, check):
    assert check(tmp_path / ("x" * 300)) is False


@pytest.mark.parametrize("check", CHECKS)
def test_embedded_nul_is_false(check):
    assert check("bad\0name") is False


def test_kinds(tmp_path):
    (tmp_path / "f").write_text("")
    (tmp_path / "d").mkdir()
    (tmp_path / "l").symlink_to(tmp_path / "f")
    assert is_file(tmp_path / "f") and not is_dir(tmp_path / "f")
    assert is_dir(tmp_path / "d") and exists(tmp_path / "d")
    assert is_symlink(tmp_path / "l") and not is_symlink(tmp_path / "f")
