"""Immutable RGBA pixel buffers."""

from __future__ import annotations

import numbers
from dataclasses import dataclass

import numpy as np
from PIL import Image

from pixelcompare.errors import InvalidBufferError, InvalidDimensionsError

CHANNELS = 4


def validate_dimensions(width, height) -> None:
    """Raise InvalidDimensionsError unless both sides are positive integers."""
    for side in (width, height):
        if isinstance(side, bool) or not isinstance(side, numbers.Integral) or side <= 0:
            raise InvalidDimensionsError(width, height)


@dataclass(frozen=True)
class PixelBuffer:
    """A decoded raster image as interleaved 8-bit RGBA bytes.

    The buffer owns its data: bytes-like input is copied on construction, so
    the caller's memory is never referenced or written to.
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self):
        validate_dimensions(self.width, self.height)
        data = self.data
        if not isinstance(data, bytes):
            try:
                data = bytes(memoryview(data).cast("B"))
            except TypeError as exc:
                raise InvalidBufferError(
                    self.width, self.height, self.byte_length, 0
                ) from exc
            object.__setattr__(self, "data", data)
        if len(data) != self.byte_length:
            raise InvalidBufferError(
                self.width, self.height, self.byte_length, len(data)
            )

    @property
    def channels(self) -> int:
        return CHANNELS

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def byte_length(self) -> int:
        return self.width * self.height * CHANNELS

    def to_array(self) -> np.ndarray:
        """Return a read-only ``(height, width, 4)`` uint8 view of the pixels."""
        arr = np.frombuffer(self.data, dtype=np.uint8)
        return arr.reshape(self.height, self.width, CHANNELS)

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", self.size, self.data)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> PixelBuffer:
        """Build a buffer from a ``(height, width, 4)`` array of 0-255 values."""
        if arr.ndim != 3 or arr.shape[2] != CHANNELS:
            raise ValueError(f"expected an (h, w, 4) array, got shape {arr.shape}")
        height, width = int(arr.shape[0]), int(arr.shape[1])
        return cls(width, height, np.ascontiguousarray(arr, dtype=np.uint8).tobytes())

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelBuffer:
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(image.width, image.height, image.tobytes())

    @classmethod
    def solid(cls, width: int, height: int, rgba: tuple[int, int, int, int]) -> PixelBuffer:
        """A buffer filled with a single colour."""
        validate_dimensions(width, height)
        return cls(width, height, bytes(rgba) * (width * height))

    @classmethod
    def transparent(cls, width: int, height: int) -> PixelBuffer:
        return cls.solid(width, height, (0, 0, 0, 0))
