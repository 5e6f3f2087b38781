"""pixelcompare error types.

Every failure the engine reports is a subclass of ``PixelCompareError`` so
callers can catch the whole family with one ``except`` clause.
"""


class PixelCompareError(Exception):
    """Base exception for all pixelcompare errors."""


class InvalidDimensionsError(PixelCompareError):
    """Raised when a width or height is not a positive integer."""

    def __init__(self, width, height, message: str | None = None):
        self.width = width
        self.height = height
        super().__init__(
            message or f"image dimensions must be positive, got {width}x{height}"
        )


class InvalidBufferError(PixelCompareError):
    """Raised when pixel data does not match its declared dimensions."""

    def __init__(self, width: int, height: int, expected: int, actual: int):
        self.width = width
        self.height = height
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{width}x{height} RGBA buffer needs {expected} bytes, got {actual}"
        )


class InvalidAlphaError(PixelCompareError):
    """Raised when a blend factor lies outside [0, 1]."""

    def __init__(self, alpha):
        self.alpha = alpha
        super().__init__(f"alpha must be within [0.0, 1.0], got {alpha!r}")


class ImageWriteError(PixelCompareError, OSError):
    """Raised when a composite image cannot be written to disk."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"failed to write {path}: {message}")


class ImageDecodeError(PixelCompareError):
    """Raised when an image file cannot be opened or decoded."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"failed to decode {path}: {message}")


class ConfigurationError(PixelCompareError):
    """Raised for invalid configuration values."""


class MissingDependencyError(PixelCompareError):
    """Raised when an optional dependency is not installed."""

    def __init__(self, package: str, extra: str, feature: str):
        self.package = package
        self.extra = extra
        self.feature = feature
        super().__init__(
            f"{feature} requires '{package}'. "
            f"Install with: pip install pixelcompare[{extra}]"
        )
