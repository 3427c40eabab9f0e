"""String helpers with C library semantics: searching, joining, trimming, splitting."""

from itertools import zip_longest
from operator import index

_NUL = "\0"


def _char(c):
    """Return ``c`` as a one-character string; integers are truncated like a C char."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(index(c) & 0xFF)


def _size(value, name):
    """Return ``value`` as a non-negative integer, as an unsigned C size would be."""
    value = index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text, sep):
    """Split ``text`` on the character ``sep``, dropping empty pieces.

    Returns None when ``text`` is None.
    """
    if text is None:
        return None
    sep = _char(sep)
    return [piece for piece in text.split(sep) if piece]


def strchr(text, c):
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    c = _char(c)
    if c == _NUL:
        return len(text)
    found = text.find(c)
    return None if found == -1 else found


def strrchr(text, c):
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    c = _char(c)
    if c == _NUL:
        return len(text)
    found = text.rfind(c)
    return None if found == -1 else found


def strjoin(first, second):
    """Concatenate two strings; a missing one counts as absent, both missing gives None."""
    if first is None and second is None:
        return None
    if first is None:
        return second
    if second is None:
        return first
    return first + second


def strmapi(text, func):
    """Return a new string of ``func(index, char)`` for every character of ``text``."""
    if text is None:
        return None
    return "".join(func(i, ch) for i, ch in enumerate(text))


def striteri(chars, func):
    """Call ``func(index, char)`` for each item of the mutable sequence ``chars``.

    A non-None result replaces the character in place.
    """
    if chars is None:
        return
    for i, ch in enumerate(chars):
        replacement = func(i, ch)
        if replacement is not None:
            chars[i] = replacement


def strncmp(first, second, n):
    """Compare at most ``n`` characters.

    Returns the code difference at the first mismatch, with the end of a
    string counting as NUL, or 0 when they agree. A missing string compares
    equal to anything.
    """
    if first is None or second is None:
        return 0
    n = _size(n, "n")
    pairs = zip_longest(first[:n], second[:n], fillvalue=_NUL)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack, needle, length):
    """Return the index of ``needle`` wholly inside the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    length = _size(length, "length")
    if not needle:
        return 0
    found = haystack[:length].find(needle)
    return None if found == -1 else found


def strtrim(text, charset):
    """Strip characters in ``charset`` from both ends of ``text``.

    Returns None for a missing text and the text unchanged for a missing set.
    """
    if text is None:
        return None
    if not text or charset is None:
        return text
    return text.strip(charset.replace(_NUL, ""))


def substr(text, start, length):
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if text is None:
        return None
    start = _size(start, "start")
    length = _size(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]