"""Layout auto-discovery and registration.

Scans palette_swatch/layouts/ for modules that define a `layout` object
of type Layout. Collects them into a dict keyed by name.

Handles both normal Python (pkgutil.iter_modules) and frozen binaries
(where iter_modules returns nothing, so fall back to explicit imports
from layouts/__init__.py).
"""

import importlib
import pkgutil
import threading

from palette_swatch.core.errors import UnknownOption
from palette_swatch.core.types import Layout, LayoutKind

_registry: dict[str, Layout] = {}
_lock = threading.Lock()

# Known layout module names, fallback for frozen binaries
_LAYOUT_MODULES = [
    'grid',
    'linear',
    'mosaic',
]


def discover() -> dict[str, Layout]:
    """Import all layout modules and return the registry.

    Layouts are collected into a local dict and published in one step under
    a lock, so concurrent callers never see a partly filled registry.
    """
    with _lock:
        if _registry:
            return _registry

        import palette_swatch.layouts as pkg

        found_modules = [
            modname
            for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__)
            if not modname.startswith('_')
        ]

        if not found_modules:
            found_modules = _LAYOUT_MODULES

        found: dict[str, Layout] = {}
        for modname in found_modules:
            module = importlib.import_module(f'palette_swatch.layouts.{modname}')
            layout = getattr(module, 'layout', None)
            if isinstance(layout, Layout):
                found[layout.name] = layout

        _registry.update(found)
        return _registry


def get(kind: LayoutKind | str) -> Layout:
    """Get a layout by kind or (case-insensitive) name."""
    name = LayoutKind.parse(kind).value
    reg = discover()
    if name not in reg:
        raise UnknownOption(f'Unknown layout: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_layouts() -> dict[str, Layout]:
    """Return all registered layouts."""
    return discover()
