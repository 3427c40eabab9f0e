import io

import pytest

from pipex.cli import main


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["in", "cat", "out"],
        ["here_doc", "EOF", "cat", "out"],
        ["here_doc", "EOF", "cat", "cat", "cat", "out"],
    ],
)
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err == "wrong number of args\n"


def test_pipeline(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("abc\n")
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "tr a-z A-Z", str(out)]) == 0
    assert out.read_text() == "ABC\n"


def test_pipeline_unknown_command(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("abc\n")
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "nosuchcmd_pipex_q", str(out)]) == 127
    assert "zsh: command not found: nosuchcmd_pipex_q" in capsys.readouterr().err


def test_heredoc(tmp_path, monkeypatch):
    out = tmp_path / "out.txt"
    out.write_text("old\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("first\nEND\nignored\n"))
    assert main(["here_doc", "END", "cat", "cat", str(out)]) == 0
    assert out.read_text() == "old\nfirst\n"