"""The two operations exposed to calling layers.

Both are blocking, stateless and safe to call from several threads at once
as long as no caller mutates a bytes-like argument while a call is running.
"""

from __future__ import annotations

from pathlib import Path

from pixelcompare.buffer import PixelBuffer
from pixelcompare.compositor import (
    CompositeImage,
    CompositeSpec,
    SplitAxis,
    compose,
    validate_alpha,
)
from pixelcompare.log import get_logger
from pixelcompare.metrics import DEFAULT_METRIC, create_metric
from pixelcompare.normalize import normalize
from pixelcompare.writer import write

log = get_logger(__name__)


def similarity_of(
    buf_a: PixelBuffer, buf_b: PixelBuffer, metric: str = DEFAULT_METRIC
) -> float:
    """Normalize two buffers and score them with the named metric."""
    scorer = create_metric(metric)
    norm_a, norm_b = normalize(buf_a, buf_b)
    score = scorer.compute(norm_a, norm_b)
    log.debug("similarity", metric=metric, canvas=norm_a.size, score=score)
    return score


def render_comparison(
    buf_a: PixelBuffer,
    buf_b: PixelBuffer,
    spec: CompositeSpec,
    output_dir: str | Path | None = None,
    image_format: str | None = None,
) -> CompositeImage:
    """Normalize, compose and write a comparison image."""
    norm_a, norm_b = normalize(buf_a, buf_b)
    composite = compose(norm_a, norm_b, spec)
    path = write(composite, output_dir=output_dir, image_format=image_format)
    return CompositeImage(buffer=composite, path=path)


def compute_similarity(
    pixels_a,
    width_a: int,
    height_a: int,
    pixels_b,
    width_b: int,
    height_b: int,
    metric: str = DEFAULT_METRIC,
) -> float:
    """Score two raw RGBA buffers in [0, 1].

    Raises:
        InvalidDimensionsError: If a width or height is not positive.
        InvalidBufferError: If a buffer's length is not ``width*height*4``.
    """
    buf_a = PixelBuffer(width_a, height_a, pixels_a)
    buf_b = PixelBuffer(width_b, height_b, pixels_b)
    return similarity_of(buf_a, buf_b, metric)


def create_comparison_image(
    pixels_a,
    width_a: int,
    height_a: int,
    pixels_b,
    width_b: int,
    height_b: int,
    alpha: float,
    vertical_cut: bool,
    output_dir: str | Path | None = None,
) -> str:
    """Write a comparison image of two raw RGBA buffers and return its path.

    ``vertical_cut=True`` renders a left/right split view, otherwise the
    images are blended with ``alpha`` weighting image B.

    Raises:
        InvalidDimensionsError: If a width or height is not positive.
        InvalidBufferError: If a buffer's length is not ``width*height*4``.
        InvalidAlphaError: If ``alpha`` is outside [0, 1].
        ImageWriteError: If the output file cannot be written.
    """
    buf_a = PixelBuffer(width_a, height_a, pixels_a)
    buf_b = PixelBuffer(width_b, height_b, pixels_b)
    alpha = validate_alpha(alpha)

    if vertical_cut:
        spec = CompositeSpec.split(SplitAxis.VERTICAL)
    else:
        spec = CompositeSpec.overlay(alpha)
    return render_comparison(buf_a, buf_b, spec, output_dir=output_dir).path
