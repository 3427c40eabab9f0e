import errno
import io
import os
import shutil

import pytest

from pipex.runner import CommandNotFound, parse_command, run_heredoc, run_pipeline

ENV = {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello\nworld\n")
    return path


def test_parse_command_drops_empty_pieces():
    assert parse_command("ls  -l   -a") == ["ls", "-l", "-a"]
    assert parse_command("   ") == []
    assert parse_command(None) == []


def test_command_not_found_message():
    exc = CommandNotFound("frobnicate")
    assert exc.name == "frobnicate"
    assert str(exc) == "command not found: frobnicate"


def test_two_commands_transform_input(infile, tmp_path):
    out = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", "tr a-z A-Z"], str(out), ENV)
    assert status == 0
    assert out.read_text() == infile.read_text().upper()


def test_output_is_truncated(infile, tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("x" * 1000)
    status = run_pipeline(str(infile), ["cat", "cat"], str(out), ENV)
    assert status == 0
    assert out.read_text() == infile.read_text()


def test_three_commands(infile, tmp_path):
    out = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", "cat", "tr a-z A-Z"], str(out), ENV)
    assert status == 0
    assert out.read_text() == "HELLO\nWORLD\n"


def test_missing_infile_reports_and_continues(tmp_path, capsys):
    out = tmp_path / "out.txt"
    status = run_pipeline(str(tmp_path / "absent"), ["cat", "cat"], str(out), ENV)
    assert status == 0
    assert out.read_text() == ""
    assert f"zsh: {os.strerror(errno.ENOENT)}" in capsys.readouterr().err


def test_unknown_last_command(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    status = run_pipeline(str(infile), ["cat", "nosuchcmd_pipex_q"], str(out), ENV)
    assert status == 127
    assert out.exists()
    assert "zsh: command not found: nosuchcmd_pipex_q\n" in capsys.readouterr().err


def test_empty_command_is_not_found(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert run_pipeline(str(infile), ["cat", ""], str(out), ENV) == 127


def test_status_of_last_command_is_returned(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert run_pipeline(str(infile), ["cat", "false"], str(out), ENV) == 1
    assert run_pipeline(str(infile), ["false", "cat"], str(out), ENV) == 0


def test_absolute_program_path(infile, tmp_path):
    out = tmp_path / "out.txt"
    cat = shutil.which("cat")
    status = run_pipeline(str(infile), [cat, cat], str(out), ENV)
    assert status == 0
    assert out.read_text() == infile.read_text()


def test_missing_path_fails(infile, tmp_path):
    out = tmp_path / "out.txt"
    cat = shutil.which("cat")
    assert run_pipeline(str(infile), [cat, cat], str(out), {}) == 1


def test_environment_as_entry_list(infile, tmp_path):
    out = tmp_path / "out.txt"
    env = [f"PATH={ENV['PATH']}", "OTHER=1"]
    assert run_pipeline(str(infile), ["cat", "cat"], str(out), env) == 0
    assert out.read_text() == infile.read_text()


def test_unwritable_outfile(infile, tmp_path):
    assert run_pipeline(str(infile), ["cat", "cat"], str(tmp_path), ENV) == 1


def test_no_commands_rejected(infile, tmp_path):
    with pytest.raises(ValueError):
        run_pipeline(str(infile), [], str(tmp_path / "out"), ENV)


def test_heredoc_appends_until_limiter(tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("start\n")
    stdin = io.StringIO("line one\nline two\nEOF\nafter\n")
    status = run_heredoc("EOF", ["cat", "cat"], str(out), ENV, stdin)
    assert status == 0
    assert out.read_text() == "start\nline one\nline two\n"
    assert stdin.read() == "after\n"


def test_heredoc_unknown_command(tmp_path):
    out = tmp_path / "out.txt"
    stdin = io.StringIO("data\nEOF\n")
    assert run_heredoc("EOF", ["cat", "nosuchcmd_pipex_q"], str(out), ENV, stdin) == 127


def test_heredoc_unwritable_outfile(tmp_path):
    stdin = io.StringIO("data\nEOF\n")
    assert run_heredoc("EOF", ["cat", "cat"], str(tmp_path), ENV, stdin) == 1