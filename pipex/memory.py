"""Byte-buffer operations with C library semantics over bytearrays."""

SIZE_MAX = (1 << 64) - 1


def _cstr(data):
    """Return the bytes of ``data`` up to (not including) the first NUL."""
    data = bytes(data)
    end = data.find(b"\0")
    return data if end == -1 else data[:end]


def memset(buf, c, n):
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    if n > len(buf):
        raise IndexError("fill length exceeds buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n):
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def calloc(count, size):
    """Return a zeroed buffer of ``count * size`` bytes.

    A negative count or size raises ValueError; a product that does not fit
    in a size_t raises OverflowError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > SIZE_MAX // size:
        raise OverflowError("requested size does not fit in size_t")
    return bytearray(count * size)


def memchr(data, c, n):
    """Return the index of the first byte equal to ``c`` in the first ``n``, or None."""
    found = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if found == -1 else found


def memcmp(a, b, n):
    """Compare the first ``n`` bytes; return the difference at the first mismatch, else 0."""
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst, src, n):
    """Copy ``n`` bytes from ``src`` into the start of ``dst``."""
    if dst is None and src is None:
        return None
    if n > len(dst) or n > len(src):
        raise IndexError("copy length exceeds buffer")
    dst[:n] = src[:n]
    return dst


def memmove(buf, dst, src, n):
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``; overlap is safe."""
    if max(dst, src) + n > len(buf) or min(dst, src) < 0:
        raise IndexError("move range exceeds buffer")
    buf[dst:dst + n] = buf[src:src + n]
    return buf


def strlcpy(dst, src, dstsize):
    """Copy the C string ``src`` into ``dst``, at most ``dstsize - 1`` bytes plus NUL.

    Returns the length of ``src``.
    """
    text = _cstr(src)
    copied = text[:max(dstsize - 1, 0)]
    dst[:len(copied)] = copied
    if len(copied) != dstsize:
        dst[len(copied)] = 0
    return len(text)


def strlcat(dst, src, dstsize):
    """Append the C string ``src`` to the C string in ``dst`` within ``dstsize`` bytes.

    Returns the length the result would have had without truncation.
    """
    text = _cstr(src)
    if dstsize == 0:
        return len(text)
    start = min(len(_cstr(dst)), dstsize)
    copied = text[:max(dstsize - start - 1, 0)]
    end = start + len(copied)
    dst[start:end] = copied
    if end != dstsize:
        dst[end] = 0
    return start + len(text)