"""Writing characters, strings and numbers to a text stream."""

from operator import index


def put_char(c, stream):
    """Write the single character ``c`` to ``stream``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s, stream):
    """Write ``s`` to ``stream``; a missing string writes nothing."""
    if s:
        stream.write(s)


def put_endl(s, stream):
    """Write ``s`` followed by a newline; a missing string writes just the newline."""
    put_str(s, stream)
    stream.write("\n")


def put_nbr(n, stream):
    """Write the decimal form of the integer ``n``."""
    stream.write(str(index(n)))