"""Decode image files into pixel buffers for callers that start from disk."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from pixelcompare.buffer import PixelBuffer
from pixelcompare.errors import ImageDecodeError


def load_buffer(path: str | Path) -> PixelBuffer:
    """Open ``path`` with Pillow and return its pixels as RGBA."""
    try:
        with Image.open(path) as image:
            image.load()
            return PixelBuffer.from_image(image)
    except FileNotFoundError as exc:
        raise ImageDecodeError(str(path), "file not found") from exc
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImageDecodeError(str(path), str(exc)) from exc
