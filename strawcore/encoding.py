"""Codecs that address code points inside encoded byte buffers, and a string over them."""

from __future__ import annotations

import struct
from typing import Iterator, Union

BytesLike = Union[bytes, bytearray, memoryview]

_MAX_CODEPOINT = 0x10FFFF


class Utf8Encoding:
    """Code point access inside UTF-8 encoded bytes."""

    def char_width(self, data: BytesLike, offset: int = 0) -> int:
        """Byte width of the character whose leading byte is at ``offset``."""
        byte = data[offset]
        leading_ones = 8 - (~byte & 0xFF).bit_length()
        if leading_ones == 0:
            return 1
        if leading_ones in (2, 3, 4):
            return leading_ones
        kind = "non-leading byte" if byte & 0b1100_0000 == 0b1000_0000 else "invalid leading byte"
        raise ValueError(f"invalid UTF-8 leading byte 0x{byte:02x}: {kind}")

    def codepoint_width(self, codepoint: int) -> int:
        """Byte width of ``codepoint`` once encoded."""
        if codepoint < 0:
            raise ValueError(f"code point must not be negative: {codepoint}")
        if codepoint <= 0x007F:
            return 1
        if codepoint <= 0x07FF:
            return 2
        if codepoint <= 0xFFFF:
            return 3
        if codepoint <= _MAX_CODEPOINT:
            return 4
        raise ValueError(f"code point 0x{codepoint:x} is beyond the Unicode range")

    def _offset_of(self, data: BytesLike, index: int) -> int:
        if index < 0:
            raise IndexError(f"character index {index} is negative")
        offset = 0
        for _ in range(index):
            if offset >= len(data):
                break
            offset = self.next(data, offset)
        if offset >= len(data):
            raise IndexError(f"character index {index} is out of range")
        return offset

    def get_codepoint(self, data: BytesLike, index: int) -> int:
        """The code point of the ``index``-th character."""
        offset = self._offset_of(data, index)
        width = self.char_width(data, offset)
        if offset + width > len(data):
            raise ValueError("UTF-8 sequence is cut short")
        first_mask = (0b0111_1111, 0b0001_1111, 0b0000_1111, 0b0000_0111)[width - 1]
        codepoint = data[offset] & first_mask
        for byte in data[offset + 1:offset + width]:
            codepoint = (codepoint << 6) | (byte & 0b0011_1111)
        return codepoint

    def _encode(self, codepoint: int) -> bytes:
        width = self.codepoint_width(codepoint)
        if width == 1:
            return bytes([codepoint])
        lead = (0b1100_0000, 0b1110_0000, 0b1111_0000)[width - 2]
        tail = [
            0b1000_0000 | ((codepoint >> (6 * shift)) & 0b0011_1111)
            for shift in reversed(range(width - 1))
        ]
        return bytes([lead | (codepoint >> (6 * (width - 1))), *tail])

    def set_codepoint(self, data: bytearray, index: int, codepoint: int) -> None:
        """Replace the ``index``-th character; the buffer grows or shrinks as needed."""
        offset = self._offset_of(data, index)
        width = self.char_width(data, offset)
        data[offset:offset + width] = self._encode(codepoint)

    def next(self, data: BytesLike, offset: int) -> int:
        """Offset of the character after the one at ``offset``."""
        return offset + self.char_width(data, offset)

    def prev(self, data: BytesLike, offset: int) -> int:
        """Offset of the character before ``offset``."""
        for step in range(1, 5):
            position = offset - step
            if position < 0:
                break
            if data[position] & 0b1100_0000 != 0b1000_0000:
                return position
        raise ValueError(f"no leading byte found before offset {offset}")

    def length(self, data: BytesLike) -> int:
        """Number of characters in ``data``."""
        count = 0
        offset = 0
        while offset < len(data):
            offset = self.next(data, offset)
            count += 1
        return count


class Utf32Encoding:
    """Code point access inside little-endian UTF-32 bytes."""

    _UNIT = struct.Struct("<I")

    def _check_index(self, data: BytesLike, index: int) -> int:
        if not 0 <= index < self.length(data):
            raise IndexError(f"character index {index} is out of range")
        return index * self._UNIT.size

    def get_codepoint(self, data: BytesLike, index: int) -> int:
        offset = self._check_index(data, index)
        return self._UNIT.unpack_from(data, offset)[0]

    def _encode(self, codepoint: int) -> bytes:
        if not 0 <= codepoint <= 0xFFFFFFFF:
            raise ValueError(f"code point {codepoint} does not fit in 32 bits")
        return self._UNIT.pack(codepoint)

    def set_codepoint(self, data: bytearray, index: int, codepoint: int) -> None:
        offset = self._check_index(data, index)
        data[offset:offset + self._UNIT.size] = self._encode(codepoint)

    def next(self, data: BytesLike, offset: int) -> int:
        return offset + self._UNIT.size

    def prev(self, data: BytesLike, offset: int) -> int:
        if offset < self._UNIT.size:
            raise ValueError(f"no character before offset {offset}")
        return offset - self._UNIT.size

    def length(self, data: BytesLike) -> int:
        if len(data) % self._UNIT.size:
            raise ValueError("UTF-32 data length is not a multiple of 4")
        return len(data) // self._UNIT.size


Encoding = Union[Utf8Encoding, Utf32Encoding]


class EncodedString:
    """A mutable string stored as bytes in a chosen encoding.

    Built from another EncodedString, the code points are transcoded.
    """

    def __init__(self, encoding: Encoding | type, data: BytesLike | EncodedString = b"") -> None:
        if isinstance(encoding, type):
            encoding = encoding()
        self._encoding = encoding
        if isinstance(data, EncodedString):
            self._data = bytearray(b"".join(encoding._encode(codepoint) for codepoint in data))
        else:
            self._data = bytearray(data)

    @property
    def encoding(self) -> Encoding:
        return self._encoding

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    def get_codepoint(self, index: int) -> int:
        if not 0 <= index < len(self):
            raise IndexError(f"character index {index} is out of range")
        return self._encoding.get_codepoint(self._data, index)

    def set_codepoint(self, index: int, codepoint: int) -> None:
        if not 0 <= index < len(self):
            raise IndexError(f"character index {index} is out of range")
        self._encoding.set_codepoint(self._data, index, codepoint)

    def __len__(self) -> int:
        return self._encoding.length(self._data)

    def __iter__(self) -> Iterator[int]:
        snapshot = memoryview(bytes(self._data))
        offset = 0
        while offset < len(snapshot):
            yield self._encoding.get_codepoint(snapshot[offset:], 0)
            offset = self._encoding.next(snapshot, offset)

    def __repr__(self) -> str:
        return f"EncodedString({type(self._encoding).__name__}, {bytes(self._data)!r})"