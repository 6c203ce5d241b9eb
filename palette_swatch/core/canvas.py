"""Raster canvas: a mutable (height, width, 3) uint8 RGB buffer.

Created once per render, painted by the renderer, then handed to the
encoder. Nothing keeps a reference to it after render() returns.
"""

import io

import numpy as np
from PIL import Image

from palette_swatch.core.errors import InvalidColorCount
from palette_swatch.core.palette import Color


class Canvas:
    """Row-major 8-bit RGB pixels, black on creation."""

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f'canvas size must be non-negative, got {width}x{height}')
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def fill_block(self, color: Color, x: int, y: int, size: int) -> None:
        """Overwrite a size x size square at (x, y). No blending."""
        if x < 0 or y < 0 or x + size > self.width or y + size > self.height:
            raise ValueError(f'block {size}px at ({x}, {y}) outside {self.width}x{self.height} canvas')
        self.pixels[y : y + size, x : x + size] = color.rgb

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        px = self.pixels[y, x]
        return (int(px[0]), int(px[1]), int(px[2]))

    def tobytes(self) -> bytes:
        """Raw row-major RGB bytes."""
        return self.pixels.tobytes()

    def to_image(self) -> Image.Image:
        if self.width == 0 or self.height == 0:
            return Image.new('RGB', (self.width, self.height))
        return Image.fromarray(self.pixels)

    def to_png(self) -> bytes:
        """Encode as PNG. A zero-size canvas cannot be encoded."""
        if self.width == 0 or self.height == 0:
            raise InvalidColorCount('cannot encode an empty palette as PNG')
        buf = io.BytesIO()
        self.to_image().save(buf, format='PNG')
        return buf.getvalue()
