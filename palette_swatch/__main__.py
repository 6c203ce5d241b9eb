"""palette-swatch — Render colour palette swatch images.

Usage: palette-swatch <command> [options]

Layouts are auto-discovered from palette_swatch/layouts/.
Each layout module's docstring is its documentation.
Run `palette-swatch help <layout>` for full layout docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, palette-swatch looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys
from dataclasses import replace

from palette_swatch import registry
from palette_swatch.core.env import load_env, load_settings
from palette_swatch.core.errors import PaletteError
from palette_swatch.core.palette import parse_color_list
from palette_swatch.core.report import format_json, format_text
from palette_swatch.core.types import LayoutKind, RenderReport, SortOrder
from palette_swatch.render import paint, render_noise, render_plan


def _load_layout_module(name: str) -> object:
    """Load the raw module for a layout (for docstring access)."""
    return importlib.import_module(f'palette_swatch.layouts.{name}')


def _short_doc(name: str) -> str:
    doc = (_load_layout_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  palette-swatch render out.png --colors ff0000,00ff00,0000ff -b 16\n'
        '  palette-swatch render out.png --colors "#264653,#2a9d8f,#e9c46a" -l grid -o hue --json\n'
        '  palette-swatch noise out.png --colors 000000,ffffff --width 64 --height 64 --seed 1\n'
        '  palette-swatch layouts\n'
        '  palette-swatch help grid\n'
        '  palette-swatch serve --port 8080\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  PALETTE_SWATCH_HOST, PALETTE_SWATCH_PORT, PALETTE_SWATCH_STATIC_DIR,\n'
        '  PALETTE_SWATCH_MAX_BLOCK_SIZE\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-swatch',
        description='Render colour palette swatch images.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('render', help='Render a palette swatch PNG')
    p.add_argument('output', help='Path to write the PNG')
    p.add_argument('-c', '--colors', required=True, help='Comma-separated hex colours (1-255)')
    p.add_argument('-b', '--block-size', type=int, default=1, metavar='N', help='Block size in pixels (default: 1)')
    p.add_argument(
        '-l',
        '--layout',
        default=LayoutKind.LINEAR.value,
        help=f'Layout: {", ".join(k.value for k in LayoutKind)} (default: linear)',
    )
    p.add_argument(
        '-o',
        '--order',
        default=SortOrder.NONE.value,
        help=f'Sort order: {", ".join(o.value for o in SortOrder)} (default: none)',
    )
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    p = sub.add_parser('noise', help='Render random pixels drawn from a colour list')
    p.add_argument('output', help='Path to write the PNG')
    p.add_argument('-c', '--colors', required=True, help='Comma-separated hex colours (1-255)')
    p.add_argument('--width', type=int, required=True)
    p.add_argument('--height', type=int, required=True)
    p.add_argument('--seed', type=int, default=None, help='RNG seed for reproducible output')

    sub.add_parser('layouts', help='List available layouts')

    help_parser = sub.add_parser('help', help='Print full docs for a layout')
    help_parser.add_argument('layout', nargs='?', help='Layout name')

    p = sub.add_parser('serve', help='Run the HTTP service')
    p.add_argument('--host', default=None, help='Bind address (default: PALETTE_SWATCH_HOST or localhost)')
    p.add_argument('--port', type=int, default=None, help='Bind port (default: PALETTE_SWATCH_PORT or 8080)')
    p.add_argument('--static-dir', default=None, help='Static files root (default: ./public)')

    return parser


def _print_layouts() -> None:
    print('Available layouts:\n')
    for name, layout in sorted(registry.all_layouts().items()):
        status = '' if layout.implemented else '  [not implemented]'
        print(f'  {name:<10} {_short_doc(name)}{status}')
    print('\nRun: palette-swatch help <layout> for full docs.')


def _print_help(name: str | None) -> None:
    """Print full module docstring for a layout."""
    if name is None:
        _print_layouts()
        return

    try:
        name = registry.get(name).name
    except PaletteError:
        print(f'Unknown layout: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(registry.all_layouts()))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_layout_module(name).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {name!r})')


def _run_render(args: argparse.Namespace) -> None:
    colors = parse_color_list(args.colors)
    layout = LayoutKind.parse(args.layout)
    order = SortOrder.parse(args.order)

    (width, height), blocks = render_plan(colors, args.block_size, layout, order)
    canvas = paint((width, height), blocks)
    canvas.to_image().save(args.output, format='PNG')
    print(
        f'palette-swatch: #colors: {len(colors)}, block_size: {args.block_size}, img size: ({width}, {height})',
        file=sys.stderr,
    )

    report = RenderReport(
        output_path=args.output,
        width=width,
        height=height,
        block_size=args.block_size,
        layout=layout.value,
        order=order.value,
        blocks=blocks,
    )
    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


def _run_noise(args: argparse.Namespace) -> None:
    colors = parse_color_list(args.colors)
    canvas = render_noise(args.width, args.height, colors, seed=args.seed)
    canvas.to_image().save(args.output, format='PNG')
    print(f'palette-swatch: wrote {args.output} ({canvas.width}×{canvas.height})', file=sys.stderr)


def _run_serve(args: argparse.Namespace) -> None:
    from palette_swatch.server import serve

    settings = load_settings()
    overrides = {
        'host': args.host,
        'port': args.port,
        'static_dir': args.static_dir,
    }
    settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    serve(settings)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'palette-swatch: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'layouts':
        _print_layouts()
        return

    if args.command == 'help':
        _print_help(getattr(args, 'layout', None))
        return

    try:
        if args.command == 'render':
            _run_render(args)
        elif args.command == 'noise':
            _run_noise(args)
        elif args.command == 'serve':
            _run_serve(args)
    except PaletteError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
