"""A grid kept as close to square as possible, filled row-major.

Column count is ceil(sqrt(n)) and is chosen first, so when n is not a
perfect square the grid has at least as many columns as rows:

    n = 3  -> 2 x 2 (one empty cell)
    n = 5  -> 3 x 2
    n = 10 -> 4 x 3

Blocks fill left to right, top to bottom in colour order. Unfilled cells in
the last row stay black.

Example:
    palette-swatch render out.png --colors ff0000,00ff00,0000ff -b 16 -l grid
"""

import math

from palette_swatch.core.types import Layout

layout = Layout(
    name='grid',
    help='Near-square grid, row-major. Columns = ceil(sqrt(n)).',
)


def grid_shape(color_count: int) -> tuple[int, int]:
    """Return (cols, rows) for n colours. (0, 0) for no colours."""
    if color_count == 0:
        return (0, 0)
    cols = math.isqrt(color_count)
    if cols * cols < color_count:
        cols += 1
    rows = -(-color_count // cols)
    return (cols, rows)


@layout.dimensions
def dimensions(color_count: int, block_size: int) -> tuple[int, int]:
    cols, rows = grid_shape(color_count)
    return (cols * block_size, rows * block_size)


@layout.position
def position(index: int, color_count: int, block_size: int) -> tuple[int, int]:
    cols, _rows = grid_shape(color_count)
    return ((index % cols) * block_size, (index // cols) * block_size)
