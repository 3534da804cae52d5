"""
Shared test fixtures for dryrun tests.
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from dryrun.core.config import Settings, configure_logging
from dryrun.core.output import Reporter


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Keep structlog at its default WARNING threshold for every test."""
    configure_logging(Settings())


@dataclass
class Result:
    """Exit status and captured streams of one dryrun run."""

    code: int
    out: str
    err: str


@pytest.fixture
def dryrun(capsys):
    """Run dryrun's main() in-process and capture its output."""
    from dryrun.dryrun import main

    def _run(*argv: str) -> Result:
        code = main(list(argv))
        captured = capsys.readouterr()
        return Result(code, captured.out, captured.err)

    return _run


@pytest.fixture
def reporter():
    return Reporter()


@dataclass
class FakeRunner:
    """Records subprocess.run calls instead of executing them."""

    returncode: int = 0
    calls: list[list[str]] = field(default_factory=list)

    def __call__(self, argv, check=False, **kwargs):
        self.calls.append(list(argv))
        return subprocess.CompletedProcess(argv, self.returncode)

    @property
    def argv(self) -> list[str]:
        assert len(self.calls) == 1, f"expected one call, got {self.calls}"
        return self.calls[0]


@pytest.fixture
def fake_run(monkeypatch):
    """Replace subprocess.run; every binary is reported as installed."""
    runner = FakeRunner()
    monkeypatch.setattr(subprocess, "run", runner)
    monkeypatch.setattr(shutil, "which", lambda name, *a, **kw: f"/usr/bin/{name}")
    return runner


@pytest.fixture
def no_binaries(monkeypatch):
    """Pretend nothing is on PATH."""
    monkeypatch.setattr(shutil, "which", lambda name, *a, **kw: None)
    monkeypatch.setenv("PATH", "")


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Keep rich from emitting color codes into captured output."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
