"""Shared buffer fixtures."""

import logging

import pytest
import structlog

from pixelcompare.buffer import PixelBuffer

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
CLEAR = (0, 0, 0, 0)


def make_buffer(width, height, pixel_fn):
    """Build a buffer whose pixel (x, y) is ``pixel_fn(x, y)``."""
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data.extend(pixel_fn(x, y))
    return PixelBuffer(width, height, bytes(data))


@pytest.fixture
def red_2x2():
    return PixelBuffer.solid(2, 2, RED)


@pytest.fixture
def blue_2x2():
    return PixelBuffer.solid(2, 2, BLUE)


@pytest.fixture
def gradient_4x3():
    return make_buffer(4, 3, lambda x, y: (x * 60, y * 100, (x + y) * 20, 255))


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _reset_log_level():
    yield
    logging.getLogger("pixelcompare").setLevel(logging.NOTSET)
