"""Test cases for docker and service/network tool simulation."""

from __future__ import annotations

import pytest


class TestDocker:
    def test_build(self, dryrun, fake_run):
        result = dryrun("docker", "build", "-t", "app:latest", ".")
        assert result.code == 0
        assert "Simulating: docker build -t app:latest ." in result.out
        assert fake_run.calls == []

    def test_run_warns(self, dryrun, fake_run):
        result = dryrun("docker", "run", "--rm", "alpine", "echo", "hi")
        assert result.code == 0
        assert "No native dry-run for 'docker run'." in result.err
        assert "Simulating: docker run --rm alpine echo hi" in result.out
        assert fake_run.calls == []

    def test_other_subcommand(self, dryrun, fake_run):
        result = dryrun("docker", "ps")
        assert "Simulating: docker ps" in result.out
        assert result.err == ""

    def test_does_not_need_docker_installed(self, dryrun, no_binaries):
        assert dryrun("docker", "pull", "nginx").code == 0


@pytest.mark.parametrize("argv", [
    ["systemctl", "restart", "nginx"],
    ["service", "nginx", "stop"],
    ["ping", "-c", "3", "example.com"],
    ["wget", "https://example.com/file"],
    ["curl", "-fsSL", "https://example.com"],
])
def test_described_not_run(dryrun, fake_run, argv):
    result = dryrun(*argv)
    assert result.code == 0
    assert f"Simulating: {argv[0]}" in result.out
    assert fake_run.calls == []


def test_describe_puts_flags_first(dryrun, fake_run):
    result = dryrun("systemctl", "restart", "--now", "nginx")
    assert "Simulating: systemctl --now restart nginx" in result.out
