"""Environment-driven configuration."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from pixelcompare.errors import ConfigurationError

# Pillow format name and file extension per lossless output format.
LOSSLESS_FORMATS = {
    "png": ("PNG", "png"),
    "tiff": ("TIFF", "tiff"),
    "webp": ("WEBP", "webp"),
}

LOG_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


@dataclass
class EngineConfig:
    output_dir: str | None = None
    image_format: str = "png"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.image_format = self.image_format.lower()
        if self.image_format not in LOSSLESS_FORMATS:
            raise ConfigurationError(
                f"image_format must be one of {sorted(LOSSLESS_FORMATS)}, "
                f"got {self.image_format!r}"
            )
        self.log_level = self.log_level.upper()

    @property
    def output_path(self) -> Path:
        if self.output_dir:
            return Path(self.output_dir).expanduser().resolve()
        return Path(tempfile.gettempdir()).resolve() / "pixelcompare"


def check_log_level(level: str) -> str:
    """Return ``level`` upper-cased, raising ConfigurationError if unknown."""
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"log_level must be one of {list(LOG_LEVELS)}, got {level!r}"
        )
    return level


def load_config(environ=None) -> EngineConfig:
    """Read configuration from ``PIXELCOMPARE_*`` environment variables."""
    env = os.environ if environ is None else environ
    return EngineConfig(
        output_dir=env.get("PIXELCOMPARE_OUTPUT_DIR") or None,
        image_format=env.get("PIXELCOMPARE_IMAGE_FORMAT", "png"),
        log_level=env.get("PIXELCOMPARE_LOG_LEVEL", "WARNING"),
    )
