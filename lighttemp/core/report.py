"""Report builder — text and JSON output for lighttemp results."""

import json
import os
from typing import Any

from lighttemp.core.types import Report


def _format_temperature(data: dict[str, Any]) -> str:
    if 'error' in data:
        return f'  temperature: ✗ {data["error"]}'
    x, y = data['xy']
    return f'  temperature: {data["kelvin"]} K ({data["label"]})  xy=({x}, {y})  n={data["n"]}'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    dim = f'{report.image_width}×{report.image_height}'
    header = f'lighttemp: {report.image_path} ({dim})'
    if report.raw_path:
        header += f' + RAW {os.path.basename(report.raw_path)}'
    lines.append(header)
    lines.append('')

    for sample_name, sample_data in report.samples.items():
        bounds = sample_data.get('bounds')
        b = f'[{bounds[0]},{bounds[1]}→{bounds[2]},{bounds[3]}]' if bounds else ''
        lines.append(f'── {sample_name} {b}')

        for tech_name, tech_data in sample_data.get('techniques', {}).items():
            if tech_name == 'average' and 'hex' in tech_data:
                rgb = ', '.join(str(c) for c in tech_data['rgb'])
                lines.append(f'  average: {tech_data["hex"]} ({rgb})')
            elif tech_name == 'temperature':
                lines.append(_format_temperature(tech_data))
            elif tech_name == 'whitebalance' and 'multipliers' in tech_data:
                mult = ', '.join(f'{m:.3f}' for m in tech_data['multipliers'])
                lines.append(f'  as-shot WB: [{mult}]')
            else:
                for k, v in tech_data.items():
                    lines.append(f'  {tech_name}.{k}: {v}')

        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} samples  FAIL {report.fail_count}/{total} samples')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'image': report.image_path,
        'dimensions': {'width': report.image_width, 'height': report.image_height},
    }
    if report.raw_path:
        obj['raw'] = report.raw_path

    obj['samples'] = []
    for sample_name, sample_data in report.samples.items():
        obj['samples'].append(
            {
                'name': sample_name,
                'source': sample_data.get('source', 'photo'),
                'bounds': sample_data.get('bounds'),
                'techniques': sample_data.get('techniques', {}),
            }
        )

    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
    }
    return json.dumps(obj, indent=2)


def format_decode(value: str, data: dict[str, Any], as_json: bool = False) -> str:
    """Format the result of decoding and estimating a single hex colour."""
    if as_json:
        return json.dumps({'input': value, **data}, indent=2)
    rgb = ', '.join(str(c) for c in data['rgb'])
    x, y = data['xy']
    return '\n'.join(
        [
            f'lighttemp: {value} → {data["hex"]} ({rgb})',
            f'  xy=({x}, {y})  n={data["n"]}',
            f'  {data["kelvin"]} K ({data["label"]})',
        ]
    )
