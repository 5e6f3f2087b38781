"""Lossless encoding of composite buffers to disk."""

from __future__ import annotations

import contextlib
import uuid
from pathlib import Path

from pixelcompare.buffer import PixelBuffer
from pixelcompare.config import LOSSLESS_FORMATS, EngineConfig, load_config
from pixelcompare.errors import ConfigurationError, ImageWriteError
from pixelcompare.log import get_logger

log = get_logger(__name__)


def _output_filename(extension: str) -> str:
    return f"comparison_{uuid.uuid4().hex}.{extension}"


def _discard(path: Path) -> None:
    with contextlib.suppress(OSError):
        path.unlink()


def write(
    buffer: PixelBuffer,
    output_dir: str | Path | None = None,
    image_format: str | None = None,
    config: EngineConfig | None = None,
) -> str:
    """Encode ``buffer`` losslessly and write it under a fresh name.

    Args:
        buffer: Pixels to encode.
        output_dir: Target directory, created if missing. Defaults to the
            configured output directory.
        image_format: One of the lossless formats (``png`` by default).
        config: Configuration to fall back on; read from the environment
            when omitted.

    Returns:
        Absolute path of the written file.

    Raises:
        ConfigurationError: If ``image_format`` is not a lossless format.
        ImageWriteError: If the directory or file cannot be written.
    """
    if config is None:
        config = load_config()
    fmt = (image_format or config.image_format).lower()
    if fmt not in LOSSLESS_FORMATS:
        raise ConfigurationError(
            f"image_format must be one of {sorted(LOSSLESS_FORMATS)}, got {fmt!r}"
        )
    pil_format, extension = LOSSLESS_FORMATS[fmt]

    dest_dir = Path(output_dir).expanduser().resolve() if output_dir else config.output_path
    dest = dest_dir / _output_filename(extension)

    save_kwargs = {"lossless": True, "exact": True} if pil_format == "WEBP" else {}
    created = False
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        with open(dest, "xb") as fh:
            created = True
            buffer.to_image().save(fh, format=pil_format, **save_kwargs)
    except OSError as exc:
        log.error("write_failed", path=str(dest), error=str(exc))
        if created:
            _discard(dest)
        raise ImageWriteError(str(dest), exc.strerror or str(exc)) from exc
    except BaseException:
        if created:
            _discard(dest)
        raise

    log.info("composite_written", path=str(dest), size=buffer.size, format=fmt)
    return str(dest)
