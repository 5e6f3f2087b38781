"""Byte tolerance metric: share of RGBA bytes that nearly match."""

from __future__ import annotations

import numpy as np

from pixelcompare.buffer import PixelBuffer
from pixelcompare.errors import InvalidDimensionsError


class ByteToleranceMetric:
    """Fraction of channel bytes whose absolute difference is below ``tolerance``.

    Every channel counts, alpha included, and transparency gets no special
    treatment.
    """

    def __init__(self, tolerance: int = 10):
        if not 0 < tolerance <= 256:
            raise ValueError(f"tolerance must be in (0, 256], got {tolerance}")
        self.tolerance = tolerance

    def compute(self, image: PixelBuffer, reference: PixelBuffer) -> float:
        if image.size != reference.size:
            raise InvalidDimensionsError(
                image.width,
                image.height,
                f"buffers must share a size, got {image.width}x{image.height} "
                f"and {reference.width}x{reference.height}",
            )
        a = np.frombuffer(image.data, dtype=np.uint8).astype(np.int16)
        b = np.frombuffer(reference.data, dtype=np.uint8).astype(np.int16)
        similar = np.count_nonzero(np.abs(a - b) < self.tolerance)
        return float(similar / a.size)
