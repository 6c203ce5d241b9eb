"""Renderer: paint sorted colours as solid blocks onto a fresh canvas.

render() is a pure function of its arguments. Each call allocates its own
canvas and colour list, so concurrent calls share nothing. Validation and
layout run before any pixel is touched, so a failure never leaves a
half-painted canvas behind.
"""

from collections.abc import Sequence

import numpy as np

from palette_swatch.core.canvas import Canvas
from palette_swatch.core.errors import PaletteError
from palette_swatch.core.palette import Color, check_color_count
from palette_swatch.core.sorting import sort_colors
from palette_swatch.core.types import Block, LayoutKind, SortOrder
from palette_swatch.layout import compute_dimensions, plan_blocks


def render_plan(
    colors: Sequence[Color],
    block_size: int = 1,
    layout: LayoutKind | str = LayoutKind.LINEAR,
    order: SortOrder | str = SortOrder.NONE,
) -> tuple[tuple[int, int], list[Block]]:
    """Return ((width, height), blocks) without painting anything."""
    check_color_count(len(colors), allow_empty=True)
    width, height = compute_dimensions(len(colors), block_size, layout)
    ordered = sort_colors(colors, order)
    return (width, height), plan_blocks(ordered, block_size, layout)


def render(
    colors: Sequence[Color],
    block_size: int = 1,
    layout: LayoutKind | str = LayoutKind.LINEAR,
    order: SortOrder | str = SortOrder.NONE,
) -> Canvas:
    """Render a palette swatch. Unpainted cells (grid remainder) stay black."""
    size, blocks = render_plan(colors, block_size, layout, order)
    return paint(size, blocks)


def paint(size: tuple[int, int], blocks: Sequence[Block]) -> Canvas:
    """Paint planned blocks onto a fresh black canvas of `size`."""
    canvas = Canvas(*size)
    for block in blocks:
        canvas.fill_block(block.color, block.x, block.y, block.size)
    return canvas


def render_noise(width: int, height: int, colors: Sequence[Color], seed: int | None = None) -> Canvas:
    """Fill every pixel with a uniformly random colour from `colors`."""
    check_color_count(len(colors))
    if width < 1 or height < 1:
        raise PaletteError(f'noise canvas must be at least 1x1, got {width}x{height}')
    palette = np.array([c.rgb for c in colors], dtype=np.uint8)
    picks = np.random.default_rng(seed).integers(0, len(colors), size=(height, width))
    canvas = Canvas(width, height)
    canvas.pixels[:] = palette[picks]
    return canvas
