"""Layout engine: canvas size and block positions for a colour count.

Dispatches to the layout strategy registered under palette_swatch.layouts
after validating the shared preconditions:

  0 <= color_count <= 255   (InvalidColorCount)
  block_size >= 1           (InvalidBlockSize)
  0 <= index < color_count  (IndexError)

Zero colours is valid and yields a 0x0 canvas with no blocks.
"""

from collections.abc import Sequence

from palette_swatch import registry
from palette_swatch.core.errors import InvalidBlockSize
from palette_swatch.core.palette import Color, check_color_count
from palette_swatch.core.types import Block, LayoutKind


def _check_block_size(block_size: int) -> None:
    if isinstance(block_size, bool) or not isinstance(block_size, int) or block_size < 1:
        raise InvalidBlockSize(f'block size must be a positive integer, got {block_size!r}')


def compute_dimensions(color_count: int, block_size: int, layout: LayoutKind | str) -> tuple[int, int]:
    """Return (width, height) of the canvas in pixels."""
    check_color_count(color_count, allow_empty=True)
    _check_block_size(block_size)
    return registry.get(layout).compute_dimensions(color_count, block_size)


def position_of(index: int, color_count: int, block_size: int, layout: LayoutKind | str) -> tuple[int, int]:
    """Return the (x, y) top-left pixel of block `index`."""
    check_color_count(color_count, allow_empty=True)
    _check_block_size(block_size)
    if not 0 <= index < color_count:
        raise IndexError(f'block index {index} out of range for {color_count} colours')
    return registry.get(layout).position_of(index, color_count, block_size)


def plan_blocks(colors: Sequence[Color], block_size: int, layout: LayoutKind | str) -> list[Block]:
    """Place already-ordered colours. One block per colour, in order."""
    count = len(colors)
    check_color_count(count, allow_empty=True)
    _check_block_size(block_size)
    strategy = registry.get(layout)
    blocks = []
    for i, color in enumerate(colors):
        x, y = strategy.position_of(i, count, block_size)
        blocks.append(Block(index=i, color=color, x=x, y=y, size=block_size))
    return blocks
