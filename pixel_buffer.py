# pixel_buffer.py
"""
The frame's pixel storage.

PixelBuffer owns a flat, tightly packed byte array that the star field
rasterizes into and the display uploads each frame. Single-pixel writes go
through a Numba-jitted kernel so the star field's draw loop can call it
from compiled code.
"""
import logging
import numpy as np
from numba import jit
from constants import BYTES_PER_PIXEL

# --- Data Contracts ---
#
# class PixelBuffer:
#   - __init__(self, width: int, height: int, bytes_per_pixel: int = 4):
#     - Side Effects: Allocates a zeroed uint8 array of
#       width * height * bytes_per_pixel bytes.
#
#   - clear(self) -> None:
#     - Side Effects: Sets every byte to 0.
#
#   - set_pixel(self, x: int, y: int, value: int) -> None:
#     - Side Effects: Writes value to the three color bytes of pixel (x, y)
#       when its starting index lies strictly between 0 and len - 4.
#       The fourth byte is never touched. Anything else is dropped.
#     - Invariants: Never raises for out-of-range coordinates.


@jit(nopython=True)
def _set_pixel_numba(pixels, width, bytes_per_pixel, x, y, value):
    """
    Numba-jitted single pixel write.

    The accepted index range excludes index 0 and the final pixel, so the
    top-left and bottom-right pixels are never written.
    """
    index = (y * width + x) * bytes_per_pixel
    if index > 0 and index < pixels.shape[0] - 4:
        c = np.uint8(value)
        pixels[index] = c
        pixels[index + 1] = c
        pixels[index + 2] = c


class PixelBuffer:
    """
    A flat RGBX byte buffer representing one frame.
    """
    def __init__(self, width: int, height: int, bytes_per_pixel: int = BYTES_PER_PIXEL):
        if width <= 0 or height <= 0:
            msg = f"Pixel buffer must have positive dimensions, got {width}x{height}."
            logging.critical(msg)
            raise ValueError(msg)

        self.width = width
        self.height = height
        self.bytes_per_pixel = bytes_per_pixel
        self.row_stride = width * bytes_per_pixel
        self.pixels = np.zeros(width * height * bytes_per_pixel, dtype=np.uint8)

        logging.info(
            f"PixelBuffer allocated: {width}x{height}, "
            f"{self.pixels.nbytes} bytes."
        )

    def __len__(self) -> int:
        return self.pixels.shape[0]

    def clear(self) -> None:
        self.pixels.fill(0)

    def set_pixel(self, x: int, y: int, value: int) -> None:
        _set_pixel_numba(self.pixels, self.width, self.bytes_per_pixel, x, y, value)
