"""Tests for overlay blending and split view compositing."""

import math

import numpy as np
import pytest

from pixelcompare.buffer import PixelBuffer
from pixelcompare.compositor import (
    BlendMode,
    CompositeSpec,
    SplitAxis,
    compose,
    validate_alpha,
)
from pixelcompare.errors import InvalidAlphaError, InvalidDimensionsError

from conftest import BLUE, RED, make_buffer


@pytest.fixture
def pair():
    a = make_buffer(5, 3, lambda x, y: (x * 50, y * 80, 10, 255))
    b = make_buffer(5, 3, lambda x, y: (200, x * 20, y * 100, 128))
    return a, b


class TestValidateAlpha:
    @pytest.mark.parametrize("alpha", [0, 0.0, 0.25, 1, 1.0])
    def test_valid(self, alpha):
        assert validate_alpha(alpha) == float(alpha)

    @pytest.mark.parametrize("alpha", [-0.01, 1.5, math.inf, math.nan, "0.5", None, True])
    def test_invalid(self, alpha):
        with pytest.raises(InvalidAlphaError):
            validate_alpha(alpha)


class TestOverlayBlend:
    def test_alpha_zero_reproduces_a(self, pair):
        a, b = pair
        assert compose(a, b, CompositeSpec.overlay(0.0)) == a

    def test_alpha_one_reproduces_b(self, pair):
        a, b = pair
        assert compose(a, b, CompositeSpec.overlay(1.0)) == b

    def test_midpoint_blend_includes_alpha_channel(self):
        a = PixelBuffer.solid(1, 1, (0, 100, 255, 255))
        b = PixelBuffer.solid(1, 1, (255, 100, 0, 0))
        out = compose(a, b, CompositeSpec.overlay(0.5))
        # 127.5 rounds half up to 128.
        assert out.data == bytes((128, 100, 128, 128))

    def test_weighted_blend(self):
        a = PixelBuffer.solid(1, 1, (0, 0, 0, 255))
        b = PixelBuffer.solid(1, 1, (200, 100, 10, 255))
        out = compose(a, b, CompositeSpec.overlay(0.25))
        assert out.data == bytes((50, 25, 3, 255))

    def test_invalid_alpha(self, pair):
        a, b = pair
        with pytest.raises(InvalidAlphaError):
            compose(a, b, CompositeSpec.overlay(1.5))
        with pytest.raises(InvalidAlphaError):
            compose(a, b, CompositeSpec.overlay(-0.1))

    def test_output_dimensions(self, pair):
        a, b = pair
        assert compose(a, b, CompositeSpec.overlay(0.3)).size == a.size

    def test_idempotent(self, pair):
        a, b = pair
        spec = CompositeSpec.overlay(0.37)
        assert compose(a, b, spec).data == compose(a, b, spec).data

    def test_inputs_unchanged(self, pair):
        a, b = pair
        before = (a.data, b.data)
        compose(a, b, CompositeSpec.overlay(0.6))
        assert (a.data, b.data) == before


class TestSplitView:
    def test_vertical_split_left_right(self, pair):
        a, b = pair
        out = compose(a, b, CompositeSpec.split(SplitAxis.VERTICAL)).to_array()
        # Width 5: columns 0-1 from A, columns 2-4 from B.
        assert (out[:, :2] == a.to_array()[:, :2]).all()
        assert (out[:, 2:] == b.to_array()[:, 2:]).all()

    def test_horizontal_split_top_bottom(self, pair):
        a, b = pair
        out = compose(a, b, CompositeSpec.split(SplitAxis.HORIZONTAL)).to_array()
        # Height 3: row 0 from A, rows 1-2 from B.
        assert (out[:1] == a.to_array()[:1]).all()
        assert (out[1:] == b.to_array()[1:]).all()

    def test_even_split(self, red_2x2, blue_2x2):
        out = compose(red_2x2, blue_2x2, CompositeSpec.split()).to_array()
        assert tuple(out[0, 0]) == RED
        assert tuple(out[1, 1]) == BLUE

    def test_single_column_goes_to_second_half(self):
        a = PixelBuffer.solid(1, 2, RED)
        b = PixelBuffer.solid(1, 2, BLUE)
        assert compose(a, b, CompositeSpec.split(SplitAxis.VERTICAL)) == b

    def test_alpha_ignored(self, pair):
        a, b = pair
        spec = CompositeSpec(alpha=7.0, mode=BlendMode.SPLIT_VIEW)
        assert compose(a, b, spec) == compose(a, b, CompositeSpec.split())

    def test_divider_line(self):
        a = PixelBuffer.solid(4, 2, RED)
        b = PixelBuffer.solid(4, 2, BLUE)
        out = compose(a, b, CompositeSpec.split(divider=True)).to_array()
        assert (out[:, 2] == 255).all()
        assert tuple(out[0, 1]) == RED
        assert tuple(out[0, 3]) == BLUE

    def test_horizontal_divider_line(self):
        a = PixelBuffer.solid(2, 4, RED)
        b = PixelBuffer.solid(2, 4, BLUE)
        spec = CompositeSpec.split(SplitAxis.HORIZONTAL, divider=True)
        out = compose(a, b, spec).to_array()
        assert (out[2] == 255).all()
        assert tuple(out[3, 0]) == BLUE

    def test_split_output_is_not_blended(self, pair):
        a, b = pair
        out = compose(a, b, CompositeSpec.split()).to_array()
        joined = np.concatenate([a.to_array()[:, :2], b.to_array()[:, 2:]], axis=1)
        assert (out == joined).all()


class TestCompose:
    def test_size_mismatch_rejected(self, red_2x2):
        with pytest.raises(InvalidDimensionsError):
            compose(red_2x2, PixelBuffer.solid(3, 3, RED), CompositeSpec.split())

    def test_default_spec_is_half_blend(self):
        spec = CompositeSpec()
        assert spec.mode is BlendMode.OVERLAY_BLEND
        assert spec.alpha == 0.5
        assert spec.divider is False
