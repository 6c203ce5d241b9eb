"""HTTP service: renders palette swatches as PNG.

Endpoints:
  GET /palette?colors=ff0000,00ff00&bs=16&layout=grid&order=hue  -> image/png
  GET /health                                                    -> liveness
  /*  static files from Settings.static_dir (when the directory exists)

Every rejected request (bad colour, too many colours, unknown or
unimplemented layout, bad block size) answers 400 with
{"error": <kind>, "detail": <message>}. No partial image is ever sent.
"""

import os
import sys
import time

import uvicorn
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from palette_swatch import registry
from palette_swatch.core.env import Settings, load_settings
from palette_swatch.core.errors import InvalidBlockSize, PaletteError
from palette_swatch.core.palette import parse_color_list
from palette_swatch.core.types import LayoutKind, SortOrder
from palette_swatch.render import render


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    # Layout registry is filled before the first request
    registry.discover()

    app = FastAPI(
        title='palette-swatch',
        description='Render colour palette swatches as PNG images',
        docs_url='/docs',
        redoc_url=None,
    )

    @app.exception_handler(PaletteError)
    async def palette_error_handler(request: Request, exc: PaletteError) -> JSONResponse:
        return JSONResponse(status_code=400, content={'error': exc.kind, 'detail': str(exc)})

    @app.get('/health')
    def health_check() -> dict:
        """Liveness check."""
        return {'status': 'ok'}

    @app.get('/palette')
    def palette(
        colors: str = Query(..., description='Comma-separated hex colours, 1-255 entries'),
        bs: int = Query(1, description='Block size in pixels'),
        layout: str | None = Query(None, description='linear | grid'),
        order: str | None = Query(None, description='none | hue | saturation | lightness | luminance | gradient'),
    ) -> Response:
        """Render a palette swatch PNG."""
        parsed = parse_color_list(colors)
        layout_kind = LayoutKind.parse(layout, default=LayoutKind.LINEAR)
        sort_order = SortOrder.parse(order, default=SortOrder.NONE)
        if bs > settings.max_block_size:
            raise InvalidBlockSize(f'block size {bs} exceeds maximum {settings.max_block_size}')

        start = time.perf_counter()
        canvas = render(parsed, block_size=bs, layout=layout_kind, order=sort_order)
        png = canvas.to_png()
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        print(
            f'palette-swatch: {len(parsed)} colours, bs={bs}, {layout_kind.value}/{sort_order.value}, '
            f'{canvas.width}×{canvas.height} in {elapsed_ms:.1f}ms',
            file=sys.stderr,
        )
        return Response(content=png, media_type='image/png')

    # Mounted last so the routes above take precedence over "/"
    if os.path.isdir(settings.static_dir):
        app.mount('/', StaticFiles(directory=settings.static_dir, html=True), name='static')
    else:
        print(f'palette-swatch: static dir not found, skipping: {settings.static_dir}', file=sys.stderr)

    return app


def serve(settings: Settings | None = None) -> None:
    """Run the HTTP service with uvicorn (blocking)."""
    settings = settings or load_settings()
    print(f'palette-swatch: serving on http://{settings.host}:{settings.port}', file=sys.stderr)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, reload=False)
