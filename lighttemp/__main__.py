"""lighttemp — Estimate the colour temperature of a captured photo.

Usage: lighttemp <technique> <image> [options]
       lighttemp decode <hex>

Techniques are auto-discovered from lighttemp/techniques/.
Each technique module's docstring is its documentation.
Run `lighttemp help <technique>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, lighttemp looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from lighttemp import pipeline, registry
from lighttemp.core.config import load_env, load_settings
from lighttemp.core.errors import LightTempError
from lighttemp.core.hexcolor import decode
from lighttemp.core.report import format_decode, format_json, format_text
from lighttemp.core.temperature import analyse
from lighttemp.core.types import Report


def _load_technique_module(name: str) -> object:
    """Load the raw module for a technique (for docstring access)."""
    return importlib.import_module(f'lighttemp.techniques.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_technique_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _parse_region(value: str, index: int) -> tuple[str, tuple[int, int, int, int]]:
    """Parse 'NAME=X1,Y1,X2,Y2' or 'X1,Y1,X2,Y2' (named region-<index>)."""
    name, sep, coords = value.rpartition('=')
    if not sep:
        name = f'region-{index}'
    parts = coords.split(',')
    if len(parts) != 4 or not name:
        raise argparse.ArgumentTypeError(f'invalid region {value!r}; expected NAME=X1,Y1,X2,Y2')
    try:
        x1, y1, x2, y2 = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid region {value!r}; coordinates must be integers') from None
    return name, (x1, y1, x2, y2)


def _parse_range(value: str) -> tuple[float, float]:
    """Parse 'MIN,MAX' Kelvin bounds."""
    parts = value.split(',')
    try:
        low, high = (float(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid range {value!r}; expected MIN,MAX in Kelvin') from None
    if low > high:
        raise argparse.ArgumentTypeError(f'invalid range {value!r}; MIN is greater than MAX')
    return low, high


def _build_parser() -> argparse.ArgumentParser:
    techniques = registry.all_techniques()

    epilog = (
        'Examples:\n'
        '  lighttemp temperature photo.jpg\n'
        '  lighttemp temperature photo.jpg --raw photo.dng --json\n'
        '  lighttemp all photo.jpg --region sky=0,0,4032,1200 --region ground=0,2000,4032,3024\n'
        '  lighttemp temperature photo.jpg --fail-outside 5000,7000\n'
        '  lighttemp decode "#996633"\n'
        '  lighttemp help temperature\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  LIGHTTEMP_MAX_SAMPLES  pixels averaged per sample, 0 = all\n'
        '  LIGHTTEMP_FORMAT       text | json\n'
        '  LIGHTTEMP_PRECISION    decimals for Kelvin values\n'
    )
    parser = argparse.ArgumentParser(
        prog='lighttemp',
        description='Estimate the colour temperature of a captured photo.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='technique', help='Technique to run')

    for name, tech in sorted(techniques.items()):
        p = sub.add_parser(name, help=_short_help(name, tech.help))
        p.add_argument('image', help='Path to the processed photo (JPEG/PNG/...)')
        p.add_argument('-r', '--raw', help='Path to the RAW companion (DNG/CR2/NEF/...)')
        p.add_argument(
            '-R',
            '--region',
            action='append',
            default=[],
            metavar='NAME=X1,Y1,X2,Y2',
            help='Analyse only this region (repeatable). Default: the whole image.',
        )
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-f',
            '--fail-outside',
            type=_parse_range,
            default=None,
            metavar='MIN,MAX',
            help='Exit 1 if any sample temperature falls outside MIN..MAX Kelvin (CI gating)',
        )

    decode_parser = sub.add_parser('decode', help='Decode an average-colour hex string and estimate its temperature')
    decode_parser.add_argument('hex', help='Colour as RRGGBB or #RRGGBB')
    decode_parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a technique')
    help_parser.add_argument('command', nargs='?', help='Technique name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a technique."""
    techniques = registry.all_techniques()

    if command is None:
        print('Available techniques:\n')
        for name, tech in sorted(techniques.items()):
            print(f'  {name:<14} {_short_help(name, tech.help)}')
        print('\nRun: lighttemp help <technique> for full docs.')
        return

    if command not in techniques:
        print(f'Unknown technique: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(techniques))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_technique_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _check_fail_outside(report: Report, bounds: tuple[float, float]) -> bool:
    """Return True if any sample temperature falls outside bounds or could not be estimated."""
    low, high = bounds
    failures = [(name, f'{k:.2f} K') for name, k in report.kelvin_values().items() if not low <= k <= high]
    failures += list(report.temperature_errors().items())
    if failures:
        print(f'\nFAIL: {len(failures)} sample(s) outside {low:g}..{high:g} K or not estimated:')
        for name, reason in failures:
            print(f'  {name}: {reason}')
        return True
    return False


def _run_decode(value: str, as_json: bool, precision: int) -> None:
    try:
        data = analyse(decode(value), precision=precision)
    except LightTempError as e:
        print(f'lighttemp: {e}', file=sys.stderr)
        sys.exit(1)
    print(format_decode(value, data, as_json=as_json))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # OS env vars always win over .env
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'lighttemp: loaded {env_path}', file=sys.stderr)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f'lighttemp: {e}', file=sys.stderr)
        sys.exit(1)

    if not args.technique:
        parser.print_help()
        sys.exit(1)

    if args.technique == 'help':
        _print_help(getattr(args, 'command', None))
        return

    as_json = args.json or settings.output_format == 'json'

    if args.technique == 'decode':
        _run_decode(args.hex, as_json, settings.precision)
        return

    try:
        regions = [_parse_region(value, i) for i, value in enumerate(args.region, start=1)] or None
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        capture = pipeline.load_capture(args.image, raw_path=args.raw)
        report = pipeline.run(capture, args.technique, settings, regions=regions)
    except (FileNotFoundError, ValueError, LightTempError) as e:
        print(f'lighttemp: error: {e}', file=sys.stderr)
        sys.exit(1)

    print(format_json(report) if as_json else format_text(report))

    # CI gate runs after output so the report is visible on failure
    if args.fail_outside is not None and _check_fail_outside(report, args.fail_outside):
        sys.exit(1)


if __name__ == '__main__':
    main()
