"""Character classification and integer/text conversion with C library semantics."""

from operator import index

_SPACES = "\t\n\v\f\r "
_LLONG_MAX = 9223372036854775807
_ULLONG_MASK = (1 << 64) - 1
_MAX_DIGITS = 19


def _code(c):
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return index(c)


def _like(original, code):
    """Return ``code`` in the same form (str or int) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def _wrap32(value):
    """Reduce ``value`` to a signed 32-bit integer, as a C int would hold it."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def is_alpha(c):
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c):
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c):
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c):
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c):
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c):
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if 65 <= code <= 90:
        return _like(c, code + 32)
    return c


def to_upper(c):
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if 97 <= code <= 122:
        return _like(c, code - 32)
    return c


def _accumulate(text, pos, skipped, sign):
    """Read the digit run starting at ``pos`` into an unsigned 64-bit value.

    Overflow gives -1 for a positive number and 0 for a negative one. The
    digit limit counts every character before the digits except the sign
    and leading zeros.
    """
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9" and value < _LLONG_MAX:
        previous = value
        value = (value * 10 + ord(text[pos]) - ord("0")) & _ULLONG_MASK
        pos += 1
        if value < previous or pos - skipped > _MAX_DIGITS:
            return -1 if sign == 1 else 0
    if value > _LLONG_MAX:
        return -1 if sign == 1 else 0
    return value


def atoi(text):
    """Parse a leading integer from ``text`` and return it as a 32-bit int.

    Leading whitespace, one sign and leading zeros are skipped; parsing stops
    at the first non-digit. Values beyond 64 bits collapse to -1 (positive)
    or 0 (negative); everything else wraps to 32 bits.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _SPACES:
        pos += 1
    sign = 1
    skipped = 0
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
        skipped += 1
    while pos < length and text[pos] == "0":
        pos += 1
        skipped += 1
    return _wrap32(sign * _wrap32(_accumulate(text, pos, skipped, sign)))


def itoa(n):
    """Return the decimal text of an integer."""
    return str(index(n))