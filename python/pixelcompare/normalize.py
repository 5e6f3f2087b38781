"""Canvas normalization: bring two buffers onto one common size.

Policy for images of different sizes:

* The common canvas is the element-wise maximum of both sizes, unless the
  caller passes an explicit ``canvas``.
* Each image is scaled uniformly (aspect ratio preserved) to fit inside the
  canvas and anchored at the top-left corner.
* Growing uses bilinear interpolation, shrinking uses area averaging.
* Canvas area the scaled image does not cover is fully transparent. Content
  is never stretched and edges are never replicated.
"""

from __future__ import annotations

from PIL import Image

from pixelcompare.buffer import PixelBuffer, validate_dimensions
from pixelcompare.log import get_logger

log = get_logger(__name__)

TRANSPARENT = (0, 0, 0, 0)


def common_canvas(buf_a: PixelBuffer, buf_b: PixelBuffer) -> tuple[int, int]:
    return (max(buf_a.width, buf_b.width), max(buf_a.height, buf_b.height))


def fit_size(size: tuple[int, int], canvas: tuple[int, int]) -> tuple[int, int]:
    """Largest aspect-preserving size of ``size`` that fits inside ``canvas``."""
    width, height = size
    canvas_w, canvas_h = canvas
    scale = min(canvas_w / width, canvas_h / height)
    if scale == 1.0:
        return size
    new_w = min(canvas_w, max(1, round(width * scale)))
    new_h = min(canvas_h, max(1, round(height * scale)))
    return (new_w, new_h)


def fit_to_canvas(buf: PixelBuffer, canvas: tuple[int, int]) -> PixelBuffer:
    """Scale ``buf`` into ``canvas`` and pad the remainder with transparency."""
    if buf.size == canvas:
        return buf

    image = buf.to_image()
    target = fit_size(buf.size, canvas)
    if target != buf.size:
        grows = target[0] * target[1] > buf.width * buf.height
        resample = Image.BILINEAR if grows else Image.BOX
        image = image.resize(target, resample)

    if target == canvas:
        return PixelBuffer.from_image(image)

    out = Image.new("RGBA", canvas, TRANSPARENT)
    out.paste(image, (0, 0))
    return PixelBuffer.from_image(out)


def normalize(
    buf_a: PixelBuffer,
    buf_b: PixelBuffer,
    canvas: tuple[int, int] | None = None,
) -> tuple[PixelBuffer, PixelBuffer]:
    """Return both buffers resampled onto a shared canvas.

    Args:
        buf_a: First image.
        buf_b: Second image.
        canvas: Optional explicit ``(width, height)``. Defaults to the
            element-wise maximum of the two sizes.

    Returns:
        Two buffers with identical dimensions, comparable index by index.

    Raises:
        InvalidDimensionsError: If ``canvas`` has a non-positive side.
    """
    if canvas is None:
        if buf_a.size == buf_b.size:
            return buf_a, buf_b
        canvas = common_canvas(buf_a, buf_b)
    else:
        validate_dimensions(*canvas)
        canvas = (int(canvas[0]), int(canvas[1]))

    log.debug(
        "normalizing",
        size_a=buf_a.size,
        size_b=buf_b.size,
        canvas=canvas,
    )
    return fit_to_canvas(buf_a, canvas), fit_to_canvas(buf_b, canvas)
