"""Shared types for palette-swatch: LayoutKind, SortOrder, Layout, Block, RenderReport."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from palette_swatch.core.errors import UnknownOption, UnsupportedLayout
from palette_swatch.core.palette import Color


class _NamedEnum(str, Enum):
    """String enum parsed case-insensitively from wire/CLI names."""

    @classmethod
    def parse(cls, value: str | _NamedEnum | None, default: _NamedEnum | None = None):
        if value is None or value == '':
            if default is None:
                raise UnknownOption(f'{cls.__name__} is required')
            return default
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        key = cls._aliases().get(key, key)
        for member in cls:
            if member.value == key:
                return member
        choices = ', '.join(m.value for m in cls)
        raise UnknownOption(f'unknown {cls.__name__} {value!r} (choose from: {choices})')

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {}


class LayoutKind(_NamedEnum):
    LINEAR = 'linear'
    GRID = 'grid'
    MOSAIC = 'mosaic'

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        # 'mason' is the gallery-style name the service first shipped with
        return {'mason': 'mosaic'}


class SortOrder(_NamedEnum):
    NONE = 'none'
    HUE = 'hue'
    SATURATION = 'saturation'
    LIGHTNESS = 'lightness'
    LUMINANCE = 'luminance'
    GRADIENT = 'gradient'


@dataclass(frozen=True)
class Block:
    """One painted square: colour `index` in sorted order at pixel (x, y)."""

    index: int
    color: Color
    x: int
    y: int
    size: int


DimensionsFn = Callable[[int, int], tuple[int, int]]
PositionFn = Callable[[int, int, int], tuple[int, int]]


class Layout:
    """A self-registering layout strategy.

    Usage in a layout module:

        layout = Layout(name='linear', help='Single row of blocks')

        @layout.dimensions
        def dimensions(color_count, block_size):
            ...

        @layout.position
        def position(index, color_count, block_size):
            ...

    A layout without both functions is declared but unimplemented;
    using it raises UnsupportedLayout.
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._dimensions_fn: DimensionsFn | None = None
        self._position_fn: PositionFn | None = None

    @property
    def implemented(self) -> bool:
        return self._dimensions_fn is not None and self._position_fn is not None

    def dimensions(self, fn: DimensionsFn) -> DimensionsFn:
        """Decorator to register the canvas-size function."""
        self._dimensions_fn = fn
        return fn

    def position(self, fn: PositionFn) -> PositionFn:
        """Decorator to register the per-index position function."""
        self._position_fn = fn
        return fn

    def compute_dimensions(self, color_count: int, block_size: int) -> tuple[int, int]:
        if self._dimensions_fn is None:
            raise UnsupportedLayout(f'layout {self.name!r} is not implemented')
        return self._dimensions_fn(color_count, block_size)

    def position_of(self, index: int, color_count: int, block_size: int) -> tuple[int, int]:
        if self._position_fn is None:
            raise UnsupportedLayout(f'layout {self.name!r} is not implemented')
        return self._position_fn(index, color_count, block_size)


@dataclass
class RenderReport:
    """What a render produced, for text/JSON output."""

    output_path: str = ''
    width: int = 0
    height: int = 0
    block_size: int = 1
    layout: str = LayoutKind.LINEAR.value
    order: str = SortOrder.NONE.value
    blocks: list[Block] = field(default_factory=list)
