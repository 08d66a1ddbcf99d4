"""Strict UTF-8 encoding and validation helpers."""

from __future__ import annotations

from collections.abc import Iterator

MAX_CODEPOINT = 0x10FFFF


def utf8_encode(codepoint: int) -> bytes:
    """Encode a single code point as UTF-8 bytes.

    Surrogate code points are encoded like any other value; callers that
    need strict UTF-8 must validate the result.  Raises ValueError for
    negative code points and those above U+10FFFF.
    """
    if codepoint < 0:
        raise ValueError(f"negative code point: {codepoint}")
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((
            0xC0 + ((codepoint & 0x7C0) >> 6),
            0x80 + (codepoint & 0x03F),
        ))
    if codepoint < 0x10000:
        return bytes((
            0xE0 + ((codepoint & 0xF000) >> 12),
            0x80 + ((codepoint & 0x0FC0) >> 6),
            0x80 + (codepoint & 0x003F),
        ))
    if codepoint <= MAX_CODEPOINT:
        return bytes((
            0xF0 + ((codepoint & 0x1C0000) >> 18),
            0x80 + ((codepoint & 0x03F000) >> 12),
            0x80 + ((codepoint & 0x000FC0) >> 6),
            0x80 + (codepoint & 0x00003F),
        ))
    raise ValueError(f"code point out of Unicode range: {codepoint:#x}")


def utf8_check_first(byte: int) -> int:
    """Return the length of the sequence a lead byte starts, or 0 if it cannot start one."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")
    if byte < 0x80:
        return 1
    if byte <= 0xBF:
        # continuation byte
        return 0
    if byte in (0xC0, 0xC1):
        # overlong encoding of an ASCII byte
        return 0
    if byte <= 0xDF:
        return 2
    if byte <= 0xEF:
        return 3
    if byte <= 0xF4:
        return 4
    # restricted or invalid lead byte
    return 0


def utf8_check_full(buffer: bytes) -> int | None:
    """Decode one complete multi-byte sequence.

    The whole buffer (two to four bytes) is taken as the sequence.  Returns
    the code point, or None if the sequence is invalid, overlong, a
    surrogate half or outside the Unicode range.
    """
    size = len(buffer)
    if size == 2:
        value = buffer[0] & 0x1F
    elif size == 3:
        value = buffer[0] & 0x0F
    elif size == 4:
        value = buffer[0] & 0x07
    else:
        return None

    for byte in buffer[1:]:
        if not 0x80 <= byte <= 0xBF:
            return None
        value = (value << 6) + (byte & 0x3F)

    if value > MAX_CODEPOINT:
        return None
    if 0xD800 <= value <= 0xDFFF:
        return None
    minimum = {2: 0x80, 3: 0x800, 4: 0x10000}[size]
    if value < minimum:
        return None
    return value


def utf8_iterate(buffer: bytes) -> Iterator[int]:
    """Yield the code points of a UTF-8 buffer, raising ValueError at the first invalid sequence."""
    data = memoryview(bytes(buffer))
    pos = 0
    while pos < len(data):
        count = utf8_check_first(data[pos])
        if count == 0:
            raise ValueError(f"invalid UTF-8 lead byte at offset {pos}")
        if count == 1:
            value: int | None = data[pos]
        else:
            if count > len(data) - pos:
                raise ValueError(f"truncated UTF-8 sequence at offset {pos}")
            value = utf8_check_full(data[pos:pos + count].tobytes())
            if value is None:
                raise ValueError(f"invalid UTF-8 sequence at offset {pos}")
        yield value
        pos += count


def utf8_check_string(data: bytes) -> bool:
    """Return True if the bytes are valid UTF-8."""
    try:
        for _ in utf8_iterate(data):
            pass
    except ValueError:
        return False
    return True