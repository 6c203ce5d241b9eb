"""Colour ordering for visually coherent palettes.

sort_colors() always returns a new list; input colours are never mutated
and the input list is never returned as-is.

Orders:
  none        input order (identity)
  hue         HSV hue, ascending
  saturation  HSV saturation, ascending
  lightness   CIE L*, ascending
  luminance   relative luminance (0.2126 R + 0.7152 G + 0.0722 B, linear light)
  gradient    nearest sample on a reference colour ramp, highest index first

Ties keep input order (Python's sort is stable).
"""

import math
from collections.abc import Callable, Sequence

import numpy as np

from palette_swatch.core.color_spaces import relative_luminance, rgb_to_hsv, rgb_to_lab
from palette_swatch.core.palette import Color, rgb_distance
from palette_swatch.core.types import SortOrder

GRADIENT_SIZE = 100
DEFAULT_GRADIENT = 'turbo'

_KEYS: dict[SortOrder, Callable[[Color], float]] = {
    SortOrder.HUE: lambda c: rgb_to_hsv(c).h,
    SortOrder.SATURATION: lambda c: rgb_to_hsv(c).s,
    SortOrder.LIGHTNESS: lambda c: rgb_to_lab(c).l,
    SortOrder.LUMINANCE: relative_luminance,
}


def sort_colors(colors: Sequence[Color], order: SortOrder | str = SortOrder.NONE) -> list[Color]:
    """Return colours reordered by `order`."""
    order = SortOrder.parse(order, default=SortOrder.NONE)
    if order is SortOrder.NONE or len(colors) < 2:
        return list(colors)
    if order is SortOrder.GRADIENT:
        return sort_colors_colormap(colors)
    return sorted(colors, key=_KEYS[order])


def build_gradient(name: str = DEFAULT_GRADIENT, size: int = GRADIENT_SIZE) -> np.ndarray:
    """Sample a matplotlib colormap at positions i / size for i in 0..size-1.

    The ramp start is sampled but its far end (1.0) is not. Returns an int
    array of shape (size, 3), channels 0-255.
    """
    import matplotlib

    cmap = matplotlib.colormaps[name]
    rgba = cmap(np.arange(size) / size)
    # Take only RGB, drop alpha
    return np.rint(rgba[:, :3] * 255).astype(int)


def nearest_gradient_indices(
    colors: Sequence[Color],
    gradient: np.ndarray | None = None,
) -> list[int]:
    """Index of the nearest gradient sample (Euclidean RGB) for each colour.

    On equal distances the earliest sample wins.
    """
    if gradient is None:
        gradient = build_gradient()
    samples = [tuple(sample) for sample in gradient]
    indices = []
    for color in colors:
        best, best_distance = 0, math.inf
        for i, sample in enumerate(samples):
            distance = rgb_distance(color.rgb, sample)
            if distance < best_distance:
                best, best_distance = i, distance
        indices.append(best)
    return indices


def sort_colors_colormap(
    colors: Sequence[Color],
    gradient: np.ndarray | None = None,
    descending: bool = True,
) -> list[Color]:
    """Sort colours by their nearest position on a reference ramp.

    Highest ramp index comes first by default (turbo: red end first).
    """
    nearest = nearest_gradient_indices(colors, gradient)
    sign = -1 if descending else 1
    order = sorted(range(len(colors)), key=lambda i: sign * nearest[i])
    return [colors[i] for i in order]
