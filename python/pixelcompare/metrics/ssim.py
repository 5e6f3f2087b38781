"""SSIM (Structural Similarity Index) over the RGB channels of two buffers."""

from __future__ import annotations

from pixelcompare.buffer import PixelBuffer
from pixelcompare.errors import InvalidDimensionsError
from pixelcompare.metrics.weighted_rgb import WeightedRgbMetric

try:
    from skimage.metrics import structural_similarity
except ImportError:
    structural_similarity = None

# skimage's default window is 7x7; smaller images need an odd window that fits.
_DEFAULT_WIN = 7


class SsimMetric:
    """Computes SSIM between two equal-sized buffers."""

    def __init__(self):
        if structural_similarity is None:
            from pixelcompare.errors import MissingDependencyError
            raise MissingDependencyError("scikit-image", "ssim", "SSIM metric")

    def compute(self, image: PixelBuffer, reference: PixelBuffer) -> float:
        """Compute SSIM between two buffers.

        Returns a score clamped to [0, 1] where 1.0 means identical.
        """
        if image.size != reference.size:
            raise InvalidDimensionsError(
                image.width,
                image.height,
                f"buffers must share a size, got {image.width}x{image.height} "
                f"and {reference.width}x{reference.height}",
            )

        img_arr = image.to_array()[..., :3]
        ref_arr = reference.to_array()[..., :3]

        if (img_arr == ref_arr).all():
            return 1.0

        side = min(image.width, image.height, _DEFAULT_WIN)
        win_size = side if side % 2 else side - 1
        if win_size < 3:
            # No structural window fits; score per pixel instead.
            return WeightedRgbMetric().compute(image, reference)

        score = structural_similarity(
            img_arr, ref_arr, channel_axis=2, data_range=255, win_size=win_size
        )
        return float(min(1.0, max(0.0, score)))
