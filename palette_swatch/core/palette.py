"""Colour parsing and RGB distance.

Colours are canonical 24-bit RGB. Alpha is parsed and carried but never
rendered. Hex input: #RRGGBB, RRGGBB, #RGB, #RRGGBBAA (case-insensitive).
"""

import math
import re
from dataclasses import dataclass

from palette_swatch.core.errors import InvalidColorCount, MalformedColorInput

MAX_COLORS = 255

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')


@dataclass(frozen=True)
class Color:
    """An immutable RGB colour. `a` is ignored for rendering."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise MalformedColorInput(f'channel out of range 0-255: {channel}')

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'


def parse_hex(value: str) -> Color:
    """Parse a single hex colour token. Raises MalformedColorInput."""
    token = value.strip()
    m = _HEX_RE.match(token)
    if not m:
        raise MalformedColorInput(f'not a hex colour: {value!r}')
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    r, g, b = int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    a = int(digits[6:8], 16) if len(digits) == 8 else 255
    return Color(r, g, b, a)


def parse_color_list(text: str) -> list[Color]:
    """Parse a comma-separated hex list into 1-255 colours.

    Duplicates are kept; order as given is the identity ordering.
    """
    if text is None or not text.strip():
        raise InvalidColorCount('at least one colour is required')

    colors = []
    for position, token in enumerate(text.split(',')):
        try:
            colors.append(parse_hex(token))
        except MalformedColorInput as exc:
            raise MalformedColorInput(f'colour #{position + 1}: {exc}') from exc

    check_color_count(len(colors))
    return colors


def check_color_count(count: int, allow_empty: bool = False) -> None:
    """Raise InvalidColorCount unless count fits the 8-bit ceiling."""
    if count > MAX_COLORS:
        raise InvalidColorCount(f'too many colours: {count} (max {MAX_COLORS})')
    if count < 0 or (count == 0 and not allow_empty):
        raise InvalidColorCount(f'invalid colour count: {count}')


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance in RGB space. Plain ints, so no uint8 wraparound."""
    dr = int(a[0]) - int(b[0])
    dg = int(a[1]) - int(b[1])
    db = int(a[2]) - int(b[2])
    return math.sqrt(dr * dr + dg * dg + db * db)
