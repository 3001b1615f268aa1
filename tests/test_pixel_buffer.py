"""Tests for the frame pixel buffer."""

import numpy as np
import pytest

from pixel_buffer import PixelBuffer


def pixel_at(buffer: PixelBuffer, x: int, y: int) -> list:
    index = (y * buffer.width + x) * buffer.bytes_per_pixel
    return buffer.pixels[index:index + buffer.bytes_per_pixel].tolist()


class TestPixelBufferLayout:
    """Tests for allocation and clearing."""

    def test_size_and_stride(self, buffer: PixelBuffer) -> None:
        assert len(buffer) == 800 * 600 * 4
        assert buffer.row_stride == 800 * 4
        assert buffer.pixels.dtype == np.uint8

    def test_starts_black(self, buffer: PixelBuffer) -> None:
        assert not buffer.pixels.any()

    @pytest.mark.parametrize("width, height", [(1, 1), (2, 3), (64, 48)])
    def test_clear_zeroes_every_byte(self, width: int, height: int) -> None:
        buffer = PixelBuffer(width, height)
        buffer.pixels[:] = 0xAB
        buffer.clear()
        assert not buffer.pixels.any()

    def test_rejects_empty_buffer(self) -> None:
        with pytest.raises(ValueError):
            PixelBuffer(0, 10)


class TestSetPixel:
    """Tests for single pixel writes and their bounds quirk."""

    def test_writes_color_channels(self, buffer: PixelBuffer) -> None:
        buffer.set_pixel(10, 20, 200)
        assert pixel_at(buffer, 10, 20) == [200, 200, 200, 0]

    def test_leaves_fourth_byte_untouched(self, buffer: PixelBuffer) -> None:
        index = (20 * buffer.width + 10) * 4
        buffer.pixels[index + 3] = 77
        buffer.set_pixel(10, 20, 200)
        assert pixel_at(buffer, 10, 20) == [200, 200, 200, 77]

    def test_only_target_pixel_changes(self, buffer: PixelBuffer) -> None:
        buffer.set_pixel(3, 4, 90)
        assert int(np.count_nonzero(buffer.pixels)) == 3

    def test_first_pixel_is_never_written(self, buffer: PixelBuffer) -> None:
        buffer.set_pixel(0, 0, 200)
        assert not buffer.pixels.any()

    def test_last_pixel_is_never_written(self, buffer: PixelBuffer) -> None:
        buffer.set_pixel(buffer.width - 1, buffer.height - 1, 200)
        assert not buffer.pixels.any()

    def test_second_pixel_and_second_to_last_pixel_are_written(self, buffer: PixelBuffer) -> None:
        buffer.set_pixel(1, 0, 50)
        buffer.set_pixel(buffer.width - 2, buffer.height - 1, 60)
        assert pixel_at(buffer, 1, 0)[:3] == [50, 50, 50]
        assert pixel_at(buffer, buffer.width - 2, buffer.height - 1)[:3] == [60, 60, 60]

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (-5, -5), (0, 600), (799, 600), (5, 10_000)])
    def test_out_of_range_writes_are_dropped(self, buffer: PixelBuffer, x: int, y: int) -> None:
        buffer.set_pixel(x, y, 200)
        assert not buffer.pixels.any()

    def test_x_past_row_end_lands_on_next_row(self, buffer: PixelBuffer) -> None:
        # Offsets are linear, so x is not checked against the width.
        buffer.set_pixel(buffer.width, 0, 120)
        assert pixel_at(buffer, 0, 1)[:3] == [120, 120, 120]

    def test_tiny_buffer_accepts_no_writes(self) -> None:
        buffer = PixelBuffer(1, 1)
        buffer.set_pixel(0, 0, 255)
        assert buffer.pixels.tolist() == [0, 0, 0, 0]
