"""A single horizontal row of blocks, in colour order.

Canvas is (color_count * block_size) wide and block_size tall.
Works best for small palettes; large ones become long thin strips.

Example:
    palette-swatch render out.png --colors ff0000,00ff00,0000ff -b 16 -l linear
"""

from palette_swatch.core.types import Layout

layout = Layout(
    name='linear',
    help='Single row of blocks, left to right. Best for few colours.',
)


@layout.dimensions
def dimensions(color_count: int, block_size: int) -> tuple[int, int]:
    if color_count == 0:
        return (0, 0)
    return (color_count * block_size, block_size)


@layout.position
def position(index: int, color_count: int, block_size: int) -> tuple[int, int]:
    return (index * block_size, 0)
