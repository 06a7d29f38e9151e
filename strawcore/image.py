"""Eight-bit raster images with per-pixel access, blitting and PNG, BMP and JPEG files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

from PIL import Image as PILImage

_MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}

PixelLike = Union[int, Iterable[int]]


class ImageError(Exception):
    """Raised when an image cannot be built, loaded or saved."""


class Image:
    """A width x height grid of pixels, each with 1 to 4 eight-bit channels."""

    __slots__ = ("_width", "_height", "_channels", "_data")

    def __init__(self, width: int = 0, height: int = 0, channels: int = 4,
                 fill: PixelLike | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image size {width}x{height} must not be negative")
        if channels not in _MODES:
            raise ValueError(f"channel count {channels} is not one of 1, 2, 3, 4")
        self._width = width
        self._height = height
        self._channels = channels
        pixel = bytes(channels) if fill is None else self._pixel_bytes(fill)
        self._data = bytearray(pixel * (width * height))

    @classmethod
    def from_bytes(cls, width: int, height: int, channels: int, data: bytes) -> Image:
        """An image from tightly packed row-major pixel bytes."""
        image = cls(0, 0, channels)
        expected = width * height * channels
        if width < 0 or height < 0 or len(data) != expected:
            raise ImageError(
                f"expected {expected} bytes for a {width}x{height} image, got {len(data)}"
            )
        image._width = width
        image._height = height
        image._data = bytearray(data)
        return image

    @classmethod
    def from_file(cls, path: str | os.PathLike[str], channels: int = 4) -> Image:
        """Load an image file, converting it to ``channels`` channels."""
        if channels not in _MODES:
            raise ValueError(f"channel count {channels} is not one of 1, 2, 3, 4")
        try:
            with PILImage.open(path) as source:
                converted = source.convert(_MODES[channels])
                width, height = converted.size
                data = converted.tobytes()
        except (OSError, ValueError) as exc:
            raise ImageError(f"cannot load image {os.fspath(path)!r}: {exc}") from exc
        return cls.from_bytes(width, height, channels, data)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def channels(self) -> int:
        return self._channels

    def _pixel_bytes(self, pixel: PixelLike) -> bytes:
        values = (pixel,) if isinstance(pixel, int) else tuple(pixel)
        if len(values) != self._channels:
            raise ValueError(f"pixel {values!r} does not have {self._channels} channels")
        try:
            return bytes(values)
        except (ValueError, TypeError) as exc:
            raise ValueError(f"pixel {values!r} has channels outside 0..255") from exc

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self._width}x{self._height} image")
        return (y * self._width + x) * self._channels

    def read(self, x: int, y: int) -> tuple[int, ...]:
        offset = self._offset(x, y)
        return tuple(self._data[offset:offset + self._channels])

    def write(self, x: int, y: int, pixel: PixelLike) -> None:
        offset = self._offset(x, y)
        self._data[offset:offset + self._channels] = self._pixel_bytes(pixel)

    def to_bytes(self) -> bytes:
        """The pixels as packed row-major bytes."""
        return bytes(self._data)

    def _to_pil(self) -> PILImage.Image:
        return PILImage.frombytes(_MODES[self._channels], self.size, bytes(self._data))

    def save(self, path: str | os.PathLike[str], quality: int = 100) -> None:
        """Write a ``.png``, ``.bmp`` or ``.jpg`` file; ``quality`` applies to JPEG only."""
        target = Path(path)
        extension = target.suffix
        if extension not in (".png", ".bmp", ".jpg"):
            raise ImageError(f"unsupported image extension: {extension!r}")
        try:
            picture = self._to_pil()
            if extension == ".png":
                picture.save(target, format="PNG")
            elif extension == ".bmp":
                if self._channels == 2:
                    picture = picture.convert("RGBA")
                picture.save(target, format="BMP")
            else:
                if not 1 <= quality <= 100:
                    raise ValueError(f"JPEG quality {quality} is not in 1..100")
                picture = picture.convert("L" if self._channels <= 2 else "RGB")
                picture.save(target, format="JPEG", quality=quality)
        except (OSError, ValueError, SystemError) as exc:
            raise ImageError(f"cannot save image {str(target)!r}: {exc}") from exc

    def blit(self, other: Image, offset: tuple[int, int] = (0, 0)) -> None:
        """Copy ``other`` into this image with its top-left corner at ``offset``."""
        if other.channels != self._channels:
            raise ValueError("cannot blit images with different channel counts")
        left, top = offset
        if left < 0 or top < 0 or left + other.width > self._width or top + other.height > self._height:
            raise IndexError(
                f"a {other.width}x{other.height} image at {offset} "
                f"does not fit in {self._width}x{self._height}"
            )
        row_bytes = other.width * self._channels
        for y in range(other.height):
            source = y * row_bytes
            start = self._offset(left, top + y) if other.width else 0
            self._data[start:start + row_bytes] = other._data[source:source + row_bytes]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (self.size, self._channels, self._data) == (other.size, other._channels, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image({self._width}x{self._height}, channels={self._channels})"