"""Conversion between UTF-8 byte strings and sequences of code points."""

from __future__ import annotations

from typing import Iterable, Union

from strawcore.optional import Optional

_MAX_CODEPOINT = 0x10FFFF
_ENCODABLE_BITS = 21

CodepointLike = Union[int, str]


def _as_codepoint(value: CodepointLike) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    codepoint = int(value)
    if codepoint < 0:
        raise ValueError(f"code point must not be negative: {codepoint}")
    return codepoint


def _utf8_width(codepoint: int) -> int:
    """Number of UTF-8 bytes needed for ``codepoint``."""
    if codepoint <= 0x007F:
        return 1
    if codepoint <= 0x07FF:
        return 2
    if codepoint <= 0xFFFF:
        return 3
    if codepoint <= _MAX_CODEPOINT:
        return 4
    raise ValueError(f"code point 0x{codepoint:x} is beyond the Unicode range")


def decode_codepoint(data: bytes) -> Optional[int]:
    """Decode the code point at the start of ``data``.

    Raises ValueError when the first byte cannot start a UTF-8 sequence; returns
    an empty Optional when the sequence is cut short.
    """
    if len(data) == 0:
        raise ValueError("no bytes to decode")
    first = data[0]
    if first & 0b1000_0000 == 0:
        length, codepoint = 1, first & 0b0111_1111
    elif first & 0b1110_0000 == 0b1100_0000:
        length, codepoint = 2, first & 0b0001_1111
    elif first & 0b1111_0000 == 0b1110_0000:
        length, codepoint = 3, first & 0b0000_1111
    elif first & 0b1111_1000 == 0b1111_0000:
        length, codepoint = 4, first & 0b0000_0111
    else:
        raise ValueError(f"invalid UTF-8 leading byte 0x{first:02x}")

    if len(data) < length:
        return Optional()
    for byte in data[1:length]:
        codepoint = (codepoint << 6) | (byte & 0b0011_1111)
    return Optional(codepoint)


def to_utf32(data: bytes, placeholder: CodepointLike = "?") -> str:
    """Decode UTF-8 ``data`` into a string, one character per code point.

    A sequence cut short at the end is replaced by ``placeholder``.
    """
    fallback = _as_codepoint(placeholder)
    view = memoryview(bytes(data))
    characters: list[str] = []
    position = 0
    while position < len(view):
        codepoint = decode_codepoint(view[position:]).unwrap_or(fallback)
        width = _utf8_width(codepoint)
        characters.append(chr(codepoint))
        position += width
    return "".join(characters)


def encode_codepoint(codepoint: CodepointLike) -> Optional[bytes]:
    """Encode one code point as UTF-8.

    Values too wide for a four-byte sequence give an empty Optional; values that
    fit in 21 bits but lie past U+10FFFF raise ValueError.
    """
    value = _as_codepoint(codepoint)
    if value.bit_length() > _ENCODABLE_BITS:
        return Optional()
    width = _utf8_width(value)
    if width == 1:
        return Optional(bytes([value]))

    lead = (0b1100_0000, 0b1110_0000, 0b1111_0000)[width - 2]
    continuation = [
        0b1000_0000 | ((value >> (6 * shift)) & 0b0011_1111)
        for shift in reversed(range(width - 1))
    ]
    return Optional(bytes([lead | (value >> (6 * (width - 1))), *continuation]))


def to_utf8(text: Iterable[CodepointLike], placeholder: Union[str, bytes] = "?") -> bytes:
    """Encode characters or code points as UTF-8.

    Code points that cannot be encoded are replaced by ``placeholder``.
    """
    fallback = placeholder.encode("utf-8") if isinstance(placeholder, str) else bytes(placeholder)
    return b"".join(encode_codepoint(item).unwrap_or(fallback) for item in text)