"""Tests for leveled output."""

from dryrun.core.output import Reporter


def test_info_and_ok_go_to_stdout(capsys):
    reporter = Reporter()
    reporter.info("would do a thing")
    reporter.ok("done")
    captured = capsys.readouterr()
    assert captured.out == "[DRY-RUN] would do a thing\n[OK] done\n"
    assert captured.err == ""


def test_warn_and_error_go_to_stderr(capsys):
    reporter = Reporter()
    reporter.warn("careful")
    reporter.error("broken")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[WARNING] careful\n[ERROR] broken\n"


def test_brackets_are_not_markup(capsys):
    Reporter().info("file[1].txt [bold]x[/bold]")
    assert "file[1].txt [bold]x[/bold]" in capsys.readouterr().out


def test_long_lines_are_not_wrapped(capsys):
    message = "x" * 300
    Reporter().plain(message)
    assert capsys.readouterr().out == message + "\n"
