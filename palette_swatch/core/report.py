"""Report builder — text and JSON output for palette-swatch renders."""

import json
from typing import Any

from palette_swatch.core.types import RenderReport


def format_text(report: RenderReport) -> str:
    """Format report as human-readable text."""
    lines = []
    dim = f'{report.width}×{report.height}'
    header = f'palette-swatch: {report.output_path or "(memory)"} ({dim})'
    header += f' — {report.layout}, {len(report.blocks)} colours, block {report.block_size}px'
    if report.order != 'none':
        header += f', sorted by {report.order}'
    lines.append(header)
    lines.append('')

    for block in report.blocks:
        lines.append(f'  {block.index:>3}  {block.color.hex}  @ ({block.x},{block.y})')

    return '\n'.join(lines)


def format_json(report: RenderReport) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'dimensions': {'width': report.width, 'height': report.height},
        'block_size': report.block_size,
        'layout': report.layout,
        'order': report.order,
    }
    if report.output_path:
        obj['image'] = report.output_path

    obj['blocks'] = [
        {
            'index': block.index,
            'color': block.color.hex,
            'x': block.x,
            'y': block.y,
        }
        for block in report.blocks
    ]
    return json.dumps(obj, indent=2)
