"""Gallery-style mosaic: some blocks wider or taller than others.

Declared but not implemented. Requesting it fails with UnsupportedLayout
rather than producing an empty canvas.
"""

from palette_swatch.core.types import Layout

layout = Layout(
    name='mosaic',
    help='Gallery-style mixed block sizes (not implemented yet).',
)
