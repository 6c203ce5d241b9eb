"""palette_swatch.core — Foundation layer.

Contains colour parsing, colour-space conversions, sorting, the canvas,
shared types, errors, settings and the report builder.
This module has NO dependencies on palette_swatch.layouts, the registry,
the layout engine, the renderer or the HTTP server.
Only stdlib, numpy, matplotlib and PIL are allowed here.
"""
