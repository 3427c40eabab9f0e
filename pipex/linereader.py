"""Reading input one line at a time, and collecting here-document text."""


def read_line(stream):
    """Read one line from ``stream``, newline included, one character at a time.

    Reading stops just after the newline, so nothing past it is consumed.
    NUL characters are dropped. Returns None at end of input.
    """
    parts = []
    empty = None
    while True:
        chunk = stream.read(1)
        if empty is None:
            empty = chunk[:0]
        if not chunk:
            break
        if chunk in ("\0", b"\0"):
            continue
        parts.append(chunk)
        if chunk in ("\n", b"\n"):
            break
    line = empty.join(parts) if parts else None
    return line or None


def read_heredoc(stream, limiter):
    """Collect lines from ``stream`` until one equals ``limiter`` plus a newline.

    The limiter line is consumed but not included. A final limiter without a
    newline does not end the input and is kept. Returns the collected text.
    """
    collected = []
    empty = None
    while True:
        line = read_line(stream)
        if line is None:
            break
        if empty is None:
            empty = line[:0]
        if isinstance(line, bytes):
            stop = (limiter.encode() if isinstance(limiter, str) else bytes(limiter)) + b"\n"
        else:
            stop = limiter + "\n"
        if line == stop:
            break
        collected.append(line)
    if empty is None:
        return b"" if isinstance(limiter, (bytes, bytearray)) else ""
    return empty.join(collected)