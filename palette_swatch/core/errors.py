"""Typed failures raised by the palette core.

Every error is a ValueError so callers that only care about "bad input"
can catch one thing. The HTTP layer maps PaletteError to a 400 response.
"""


class PaletteError(ValueError):
    """Base class for all rejected palette requests."""

    kind = 'palette_error'


class InvalidColorCount(PaletteError):
    """Colour list is empty where one is required, or longer than 255."""

    kind = 'invalid_color_count'


class InvalidBlockSize(PaletteError):
    kind = 'invalid_block_size'


class UnsupportedLayout(PaletteError):
    """A known layout that has no implementation yet (e.g. mosaic)."""

    kind = 'unsupported_layout'


class MalformedColorInput(PaletteError):
    kind = 'malformed_color_input'


class UnknownOption(PaletteError):
    """A layout or sort order name that is not recognised at all."""

    kind = 'unknown_option'
