"""Composite images that visualize the difference between two buffers."""

from __future__ import annotations

import enum
import math
import numbers
from dataclasses import dataclass

import numpy as np

from pixelcompare.buffer import PixelBuffer
from pixelcompare.errors import InvalidAlphaError, InvalidDimensionsError
from pixelcompare.log import get_logger

log = get_logger(__name__)

DIVIDER_COLOR = (255, 255, 255, 255)


class BlendMode(enum.Enum):
    OVERLAY_BLEND = "overlay_blend"
    SPLIT_VIEW = "split_view"


class SplitAxis(enum.Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def validate_alpha(alpha) -> float:
    """Return ``alpha`` as a float, raising InvalidAlphaError outside [0, 1]."""
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
        raise InvalidAlphaError(alpha)
    value = float(alpha)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidAlphaError(alpha)
    return value


@dataclass(frozen=True)
class CompositeSpec:
    """How to combine two images.

    ``alpha`` weights image B in OVERLAY_BLEND mode and is ignored by
    SPLIT_VIEW. ``split_axis`` is only read in SPLIT_VIEW mode: VERTICAL puts
    A on the left and B on the right, HORIZONTAL puts A on top and B below.
    ``divider`` paints the first line of B's half opaque white.
    """

    alpha: float = 0.5
    mode: BlendMode = BlendMode.OVERLAY_BLEND
    split_axis: SplitAxis = SplitAxis.VERTICAL
    divider: bool = False

    @classmethod
    def overlay(cls, alpha: float) -> CompositeSpec:
        return cls(alpha=alpha, mode=BlendMode.OVERLAY_BLEND)

    @classmethod
    def split(
        cls, axis: SplitAxis = SplitAxis.VERTICAL, divider: bool = False
    ) -> CompositeSpec:
        return cls(mode=BlendMode.SPLIT_VIEW, split_axis=axis, divider=divider)


@dataclass(frozen=True)
class CompositeImage:
    """A composite buffer and the file it was written to."""

    buffer: PixelBuffer
    path: str


def blend(a: np.ndarray, b: np.ndarray, alpha: float) -> np.ndarray:
    """Linear interpolation ``alpha * b + (1 - alpha) * a`` on every channel."""
    if alpha == 0.0:
        return a.copy()
    if alpha == 1.0:
        return b.copy()
    mixed = alpha * b.astype(np.float64) + (1.0 - alpha) * a.astype(np.float64)
    # Round half up.
    return np.clip(np.floor(mixed + 0.5), 0, 255).astype(np.uint8)


def split(
    a: np.ndarray, b: np.ndarray, axis: SplitAxis, divider: bool = False
) -> np.ndarray:
    """Place ``a`` in the first half and ``b`` in the second, unblended."""
    out = a.copy()
    if axis is SplitAxis.VERTICAL:
        mid = a.shape[1] // 2
        out[:, mid:] = b[:, mid:]
        if divider and mid < a.shape[1]:
            out[:, mid] = DIVIDER_COLOR
    else:
        mid = a.shape[0] // 2
        out[mid:, :] = b[mid:, :]
        if divider and mid < a.shape[0]:
            out[mid, :] = DIVIDER_COLOR
    return out


def compose(buf_a: PixelBuffer, buf_b: PixelBuffer, spec: CompositeSpec) -> PixelBuffer:
    """Combine two equal-sized buffers according to ``spec``.

    Raises:
        InvalidAlphaError: In OVERLAY_BLEND mode when alpha is outside [0, 1].
        InvalidDimensionsError: If the buffers differ in size.
    """
    if buf_a.size != buf_b.size:
        raise InvalidDimensionsError(
            buf_a.width,
            buf_a.height,
            f"buffers must share a size, got {buf_a.width}x{buf_a.height} "
            f"and {buf_b.width}x{buf_b.height}",
        )

    a = buf_a.to_array()
    b = buf_b.to_array()

    if spec.mode is BlendMode.OVERLAY_BLEND:
        alpha = validate_alpha(spec.alpha)
        out = blend(a, b, alpha)
    elif spec.mode is BlendMode.SPLIT_VIEW:
        out = split(a, b, spec.split_axis, spec.divider)
    else:
        raise ValueError(f"Unknown blend mode: {spec.mode!r}")

    log.debug("composed", mode=spec.mode.value, size=buf_a.size)
    return PixelBuffer.from_array(out)
