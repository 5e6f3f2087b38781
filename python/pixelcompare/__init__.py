"""pixelcompare — pixel-level similarity scoring and comparison images."""

from pixelcompare.buffer import PixelBuffer
from pixelcompare.compositor import (
    BlendMode,
    CompositeImage,
    CompositeSpec,
    SplitAxis,
    compose,
)
from pixelcompare.engine import (
    compute_similarity,
    create_comparison_image,
    render_comparison,
    similarity_of,
)
from pixelcompare.decode import load_buffer
from pixelcompare.errors import (
    PixelCompareError,
    InvalidBufferError,
    InvalidDimensionsError,
    InvalidAlphaError,
    ImageWriteError,
    ImageDecodeError,
    ConfigurationError,
    MissingDependencyError,
)
from pixelcompare.metrics import create_metric, similarity
from pixelcompare.normalize import normalize
from pixelcompare.writer import write

__all__ = [
    "PixelBuffer",
    "BlendMode",
    "CompositeImage",
    "CompositeSpec",
    "SplitAxis",
    "compose",
    "compute_similarity",
    "create_comparison_image",
    "render_comparison",
    "similarity_of",
    "create_metric",
    "similarity",
    "normalize",
    "write",
    "load_buffer",
    "PixelCompareError",
    "InvalidBufferError",
    "InvalidDimensionsError",
    "InvalidAlphaError",
    "ImageWriteError",
    "ImageDecodeError",
    "ConfigurationError",
    "MissingDependencyError",
]
