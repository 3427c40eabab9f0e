"""Command-line entry: ``pipex infile cmd1 ... cmdN outfile`` or ``pipex here_doc LIMITER cmd1 cmd2 outfile``."""

import os
import sys

from .runner import run_heredoc, run_pipeline

_HEREDOC = "here_doc"


def _wrong_arguments():
    sys.stderr.write("wrong number of args\n")
    sys.stderr.flush()
    return 1


def main(argv=None):
    """Run the pipeline described by ``argv`` and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or args[0] == _HEREDOC:
        if len(args) != 5:
            return _wrong_arguments()
        limiter, first, second, outfile = args[1:]
        return run_heredoc(limiter, [first, second], outfile, os.environ, sys.stdin)
    if len(args) < 4:
        return _wrong_arguments()
    return run_pipeline(args[0], args[1:-1], args[-1], os.environ)


if __name__ == "__main__":
    sys.exit(main())