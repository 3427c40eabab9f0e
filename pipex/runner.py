"""Running a chain of commands joined by pipes, fed from a file or a here-document."""

import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping

from .linereader import read_heredoc
from .paths import find_path_dirs, resolve_command
from .strings import split

_SHELL_NAME = "zsh"
_NOT_FOUND_STATUS = 127
_FAILURE_STATUS = 1


class CommandNotFound(Exception):
    """Raised when a command cannot be located or started."""

    def __init__(self, name):
        super().__init__(f"command not found: {name}")
        self.name = name


def _report(message):
    print(f"{_SHELL_NAME}: {message}", file=sys.stderr, flush=True)


def _report_os_error(exc):
    _report(exc.strerror or str(exc))


def parse_command(text):
    """Split a command line on spaces into its arguments, dropping empty pieces."""
    if text is None:
        return []
    return split(text, " ")


def _environ(env):
    """Return ``env`` as a mapping suitable for a child process."""
    if env is None:
        return {}
    if isinstance(env, Mapping):
        return dict(env)
    result = {}
    for entry in env:
        key, _, value = entry.partition("=")
        result[key] = value
    return result


def _open_output(path, append):
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    return os.fdopen(os.open(path, flags, 0o644), "wb")


def _launch(text, stdin, stdout, path_dirs, child_env):
    """Start one command; return its process, or its exit status when it cannot start."""
    if path_dirs is None:
        return _FAILURE_STATUS
    argv = parse_command(text)
    name = argv[0] if argv else ""
    try:
        program = resolve_command(name, path_dirs)
        if program is None:
            raise CommandNotFound(name)
        try:
            return subprocess.Popen(
                argv, executable=program, stdin=stdin, stdout=stdout, env=child_env
            )
        except OSError as exc:
            raise CommandNotFound(name) from exc
    except CommandNotFound as exc:
        _report(str(exc))
        return _NOT_FOUND_STATUS


def _run(open_input, commands, outfile, append, env):
    """Run ``commands`` as a pipeline and return the exit status of the last one."""
    commands = list(commands)
    if not commands:
        raise ValueError("at least one command is required")
    path_dirs = find_path_dirs(env)
    child_env = _environ(env)
    last = len(commands) - 1
    results = []
    upstream = None
    for position, text in enumerate(commands):
        opened = []
        result = None
        stdin = upstream if upstream is not None else subprocess.DEVNULL
        stdout = subprocess.PIPE
        if position == 0:
            try:
                stdin = open_input()
                opened.append(stdin)
            except OSError as exc:
                _report_os_error(exc)
                result = _FAILURE_STATUS
        if result is None and position == last:
            try:
                stdout = _open_output(outfile, append)
                opened.append(stdout)
            except OSError as exc:
                _report_os_error(exc)
                result = _FAILURE_STATUS
        if result is None:
            result = _launch(text, stdin, stdout, path_dirs, child_env)
        for handle in opened:
            handle.close()
        if upstream is not None:
            upstream.close()
        upstream = None
        if isinstance(result, subprocess.Popen) and position != last:
            upstream = result.stdout
        results.append(result)
    statuses = [r.wait() if isinstance(r, subprocess.Popen) else r for r in results]
    # A command killed by a signal reports an exit status of 0, as a raw wait status would.
    return max(statuses[-1], 0)


def run_pipeline(infile, commands, outfile, env):
    """Run ``commands`` with the first reading ``infile`` and the last writing ``outfile``.

    The output file is truncated. Returns the exit status of the last command:
    127 when it cannot be found, 1 when a file cannot be opened or the
    environment holds no PATH.
    """
    return _run(lambda: open(infile, "rb"), commands, outfile, False, env)


def run_heredoc(limiter, commands, outfile, env, stdin=None):
    """Run ``commands`` on here-document text read from ``stdin`` up to ``limiter``.

    The output is appended to ``outfile``. Returns the exit status of the
    last command.
    """
    stream = sys.stdin if stdin is None else stdin
    text = read_heredoc(stream, limiter)
    data = text.encode() if isinstance(text, str) else bytes(text)
    with tempfile.TemporaryFile("w+b") as buffer:
        buffer.write(data)
        buffer.flush()

        def open_input():
            buffer.seek(0)
            return os.fdopen(os.dup(buffer.fileno()), "rb")

        return _run(open_input, commands, outfile, True, env)