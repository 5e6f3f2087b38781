"""Alpha-weighted RGB difference metric.

For every pixel the absolute red, green and blue differences are summed
(0-765). Pixels that are fully transparent in both images carry no weight;
every other pixel counts once. The score is one minus the weighted mean
difference, normalised by 765.
"""

from __future__ import annotations

import numpy as np

from pixelcompare.buffer import PixelBuffer
from pixelcompare.errors import InvalidDimensionsError

MAX_CHANNEL_DIFF = 3 * 255


class WeightedRgbMetric:
    """Computes alpha-weighted RGB similarity between two equal-sized buffers."""

    def compute(self, image: PixelBuffer, reference: PixelBuffer) -> float:
        """Return a score in [0, 1] where 1.0 means pixel-identical RGB."""
        if image.size != reference.size:
            raise InvalidDimensionsError(
                image.width,
                image.height,
                f"buffers must share a size, got {image.width}x{image.height} "
                f"and {reference.width}x{reference.height}",
            )

        a = image.to_array()
        b = reference.to_array()

        weight = (a[..., 3] > 0) | (b[..., 3] > 0)
        total_weight = int(np.count_nonzero(weight))
        if total_weight == 0:
            return 1.0

        diff = np.abs(a[..., :3].astype(np.int16) - b[..., :3].astype(np.int16))
        channel_diff = diff.sum(axis=2, dtype=np.int64)
        weighted = int(channel_diff[weight].sum(dtype=np.int64))

        score = 1.0 - weighted / (MAX_CHANNEL_DIFF * total_weight)
        return float(min(1.0, max(0.0, score)))
