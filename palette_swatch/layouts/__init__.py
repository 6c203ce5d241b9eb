"""Auto-discovery of layout modules.

Every .py file in this package that defines a `layout` object is
auto-registered by palette_swatch.registry.discover().

The explicit imports below keep frozen builds working, where
pkgutil.iter_modules cannot see the layout files at runtime.
"""

# Hidden imports: keep this list in sync with layout modules
import palette_swatch.layouts.grid as _grid  # noqa: F401
import palette_swatch.layouts.linear as _linear  # noqa: F401
import palette_swatch.layouts.mosaic as _mosaic  # noqa: F401
