"""
Tests for decoding packed image data into grids.
"""
import base64

import numpy as np
import pytest

from sc2knowledge.pixel_map import (
    ByteMap,
    GridDecodeError,
    GridShapeError,
    Pixel,
    PixelMap,
    Visibility,
    VisibilityDecodeError,
    VisibilityMap,
    byte_to_pixels,
    decode_bytes,
    decode_pixels,
    decode_visibility,
    unpack_bits,
)
from tests.conftest import make_image


class TestBinaryDecode:
    """Test the one bit per cell decoder used for pathing and placement."""

    def test_all_zero_bytes_are_set(self):
        grid = decode_pixels(bytes(4), 8, 4)
        assert grid.shape == (8, 4)
        assert (grid == Pixel.SET).all()

    def test_all_one_bytes_are_empty(self):
        grid = decode_pixels(b"\xff" * 4, 16, 2)
        assert grid.shape == (16, 2)
        assert (grid == Pixel.EMPTY).all()

    @pytest.mark.parametrize("byte", range(256))
    def test_fast_path_matches_generic_unpacking(self, byte):
        assert byte_to_pixels(byte) == unpack_bits(byte)

    def test_generic_unpacking_is_msb_first(self):
        assert unpack_bits(0b10000000) == (Pixel.EMPTY,) + (Pixel.SET,) * 7
        assert unpack_bits(0b00000001) == (Pixel.SET,) * 7 + (Pixel.EMPTY,)

    def test_decoder_matches_numpy_unpackbits(self):
        """Every byte value decodes to its bits, one meaning EMPTY."""
        data = bytes(range(256))
        grid = decode_pixels(data, 8, 256)
        expected = np.unpackbits(np.frombuffer(data, dtype=np.uint8)).reshape(256, 8).T
        assert np.array_equal(grid, expected)

    def test_orientation(self):
        """Wire row y runs along x; the grid is indexed [x, y]."""
        grid = decode_pixels(bytes([0b10000000, 0b00000001]), 8, 2)
        assert grid[0, 0] == Pixel.EMPTY
        assert grid[7, 0] == Pixel.SET
        assert grid[0, 1] == Pixel.SET
        assert grid[7, 1] == Pixel.EMPTY

    def test_bit_count_must_match_header(self):
        with pytest.raises(GridShapeError):
            decode_pixels(bytes(1), 3, 2)

    def test_grid_is_read_only(self):
        grid = decode_pixels(bytes([0x0f]), 4, 2)
        with pytest.raises(ValueError):
            grid[0, 0] = Pixel.EMPTY


class TestByteDecode:
    """Test the one byte per cell decoder used for terrain height."""

    def test_values_pass_through(self):
        grid = decode_bytes(bytes(range(8)), 4, 2)
        assert grid.shape == (4, 2)
        assert grid[1, 0] == 1
        assert grid[0, 1] == 4
        assert grid[3, 1] == 7

    def test_short_buffer_is_rejected(self):
        with pytest.raises(GridShapeError):
            decode_bytes(bytes(5), 3, 2)

    def test_long_buffer_is_rejected(self):
        with pytest.raises(GridShapeError):
            decode_bytes(bytes(7), 3, 2)

    def test_negative_size_is_rejected(self):
        with pytest.raises(GridShapeError):
            decode_bytes(b"", -1, 0)


class TestVisibilityDecode:
    """Test the enumerated visibility decoder."""

    def test_states(self):
        grid = decode_visibility(bytes([0, 1, 2, 3]), 4, 1)
        assert [Visibility(v) for v in grid[:, 0]] == [
            Visibility.HIDDEN,
            Visibility.FOGGED,
            Visibility.VISIBLE,
            Visibility.FULL_HIDDEN,
        ]

    @pytest.mark.parametrize("value", [4, 5, 128, 255])
    def test_unknown_state_is_rejected(self, value):
        with pytest.raises(VisibilityDecodeError):
            decode_visibility(bytes([0, 1, value, 3]), 2, 2)

    def test_short_buffer_is_rejected(self):
        with pytest.raises(GridShapeError):
            decode_visibility(bytes(5), 3, 2)

    def test_errors_share_a_base(self):
        assert issubclass(GridShapeError, GridDecodeError)
        assert issubclass(VisibilityDecodeError, GridDecodeError)

    def test_state_helpers(self):
        assert Visibility.HIDDEN.is_hidden()
        assert not Visibility.HIDDEN.is_explored()
        assert Visibility.FOGGED.is_fogged() and Visibility.FOGGED.is_explored()
        assert Visibility.VISIBLE.is_visible()
        assert Visibility.FULL_HIDDEN.is_full_hidden() and Visibility.FULL_HIDDEN.is_explored()


class TestGridMaps:
    """Test the grid classes built from images."""

    def test_pixel_map_from_proto(self):
        grid = PixelMap.from_proto(make_image(bytes([0b10000000, 0b00000001]), 8, 2, bits_per_pixel=1))
        assert (grid.width, grid.height) == (8, 2)
        assert grid.at((0, 0)) is Pixel.EMPTY
        assert grid.is_empty((7, 1))
        assert grid.is_set((3, 1))

    def test_base64_data(self):
        """The JSON form of an image carries its data as base64."""
        image = make_image(base64.b64encode(bytes(range(6))).decode(), 3, 2)
        grid = ByteMap.from_proto(image)
        assert grid.at((2, 1)) == 5

    def test_bits_per_pixel_must_match(self):
        with pytest.raises(GridDecodeError):
            PixelMap.from_proto(make_image(bytes(6), 3, 2, bits_per_pixel=8))

    def test_shape_error_from_proto(self):
        with pytest.raises(GridShapeError):
            ByteMap.from_proto(make_image(bytes(5), 3, 2))

    def test_visibility_map(self):
        grid = VisibilityMap.from_bytes(bytes([2, 0, 1, 3]), 2, 2)
        assert grid.at((0, 0)) is Visibility.VISIBLE
        assert grid.is_visible((0.2, 0.4))
        assert not grid.is_explored((1, 0))
        assert grid.at((1, 1)) is Visibility.FULL_HIDDEN

    def test_with_value_returns_new_grid(self):
        grid = ByteMap.from_bytes(bytes(6), 3, 2)
        changed = grid.with_value((1.5, 0.5), 9)
        assert changed.data_numpy[2, 1] == 9
        assert changed.at((1.5, 0.5)) == 9
        assert changed.at((2, 1)) == 9
        assert grid.at((1.5, 0.5)) == 0
        assert changed != grid
        assert changed.with_value((1.5, 0.5), 0) == grid

    def test_with_value_on_last_column(self):
        grid = ByteMap.from_bytes(bytes(8), 4, 2)
        changed = grid.with_value((2.5, 0.5), 3)
        assert changed.data_numpy[3, 1] == 3
        assert changed.at((3.4, 1.4)) == 3
        with pytest.raises(IndexError):
            grid.with_value((3.5, 0), 1)

    def test_with_value_rejects_unknown_visibility(self):
        grid = VisibilityMap.from_bytes(bytes(4), 2, 2)
        with pytest.raises(ValueError):
            grid.with_value((0, 0), 7)

    def test_out_of_range_position(self):
        grid = ByteMap.from_bytes(bytes(6), 3, 2)
        with pytest.raises(IndexError):
            grid.at((3, 0))
        with pytest.raises(ValueError):
            grid.at((-1, 0))
