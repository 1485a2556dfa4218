#!/usr/bin/env python3
"""
Camera Path Tool - Command Line Version
Apply FOV, position, rotation, mirror, time and smoothing transforms to
camera path JSON files
"""

import argparse
import sys
from pathlib import Path

from config import SUPPORTED_EXTENSIONS, TRANSFORM_DEFAULTS
from core.registry import OPERATIONS, list_operations
from path_converter import CameraPathConverter
from readers import is_supported_format


def build_params(args):
    """Map parsed CLI flags onto the selected operation's parameters

    Only flags the user actually gave are passed on, so the registry's own
    defaults apply to the rest.
    """
    op = args.op
    params = {}

    def take(name, value):
        if value is not None:
            params[name] = value

    if op in ('fov_add', 'fov_set'):
        take('value', args.value)
    elif op == 'fov_multiply':
        take('multiplier', args.value)
    elif op in ('position_offset', 'position_scale'):
        take('x', args.x)
        take('y', args.y)
        take('z', args.z)
    elif op == 'rotation_offset':
        for name in ('pitch', 'yaw', 'roll'):
            value = getattr(args, name)
            # whole numbers become engine units, fractions are rejected downstream
            if value is not None and not args.degrees and value.is_integer():
                value = int(value)
            take(name, value)
        params['use_degrees'] = args.degrees
    elif op == 'mirror':
        params['axis'] = args.axis
        params['flip_pitch'] = args.flip_pitch
        params['flip_yaw'] = args.flip_yaw
        params['flip_roll'] = args.flip_roll
        params['bounded'] = args.bounded
    elif op == 'speed':
        take('multiplier', args.value)
    elif op == 'time_offset':
        take('seconds', args.seconds)
    elif op == 'smooth':
        params['window_size'] = args.window

    return params


def create_parser():
    operations_help = "\n".join(
        f"  {name:<16} {OPERATIONS[name].description}" for name in list_operations()
    )
    parser = argparse.ArgumentParser(
        prog='CameraPathTool',
        description='Transform camera path JSON files (FOV, position, rotation, mirror, time, smoothing)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Widen the FOV of every keyframe by 10 degrees
  python cpt.py path.json out.json --op fov_add --value 10

  # Mirror the path about the middle of its X range, flipping yaw
  python cpt.py path.json out.json --op mirror --axis x --bounded --flip-yaw

  # Rotate 15 degrees of yaw
  python cpt.py path.json out.json --op rotation_offset --yaw 15 --degrees

  # Show duration and keyframe count
  python cpt.py path.json --stats

Operations:
{operations_help}
        """
    )

    parser.add_argument('input', type=str, nargs='?', help='Input camera path file (.json)')
    parser.add_argument('output', type=str, nargs='?',
                        help='Output camera path file (default: overwrite input)')
    parser.add_argument('--op', choices=list_operations(), help='Operation to apply')
    parser.add_argument('--stats', action='store_true', help='Print path statistics and exit')
    parser.add_argument('--list', action='store_true', help='List operations and exit')

    parser.add_argument('--value', type=float,
                        help='FOV value (fov_add, fov_set), FOV multiplier (fov_multiply), '
                             'or speed multiplier (speed)')
    parser.add_argument('--x', type=float, help='X offset / scale')
    parser.add_argument('--y', type=float, help='Y offset / scale')
    parser.add_argument('--z', type=float, help='Z offset / scale')

    parser.add_argument('--pitch', type=float, help='Pitch offset')
    parser.add_argument('--yaw', type=float, help='Yaw offset')
    parser.add_argument('--roll', type=float, help='Roll offset')
    parser.add_argument('--degrees', action='store_true',
                        help='Rotation offsets are in degrees (default: engine units)')

    parser.add_argument('--axis', default=TRANSFORM_DEFAULTS['mirror_axis'],
                        help='Mirror axis: x, y or z (default: %(default)s)')
    parser.add_argument('--flip-pitch', action='store_true', help='Negate pitch when mirroring')
    parser.add_argument('--flip-yaw', action='store_true', help='Negate yaw when mirroring')
    parser.add_argument('--flip-roll', action='store_true', help='Negate roll when mirroring')
    parser.add_argument('--bounded', action='store_true',
                        help='Mirror about the center of the path instead of the origin')

    parser.add_argument('--seconds', type=float, help='Time offset in seconds')
    parser.add_argument('--window', type=int, default=TRANSFORM_DEFAULTS['smooth_window'],
                        help='Smoothing window in keyframes (default: %(default)s)')
    return parser


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in list_operations():
            print(f"{name:<16} {OPERATIONS[name].description}")
        return 0

    if not args.input:
        print("Error: Please specify an input camera file", file=sys.stderr)
        return 1

    # Validate input file exists
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    # Validate file extension
    if not is_supported_format(input_path):
        print(f"Error: Unsupported file format: {input_path.suffix.lower()}", file=sys.stderr)
        print(f"Supported formats: {', '.join(sorted(SUPPORTED_EXTENSIONS))}", file=sys.stderr)
        return 1

    converter = CameraPathConverter()

    if args.stats:
        try:
            stats = converter.read_stats(str(input_path))
        except (ValueError, OSError) as e:
            print(f"\n✗ Could not read path: {e}", file=sys.stderr)
            return 1
        print(f"Keyframes: {stats.keyframe_count}")
        print(f"Duration:  {stats.duration:.3f}s")
        print(f"Start:     {stats.min_time:.3f}s")
        print(f"End:       {stats.max_time:.3f}s")
        return 0

    if not args.op:
        print("Error: Please specify --op <operation> (or --stats / --list)", file=sys.stderr)
        return 1

    output_file = args.output or str(input_path)
    params = build_params(args)

    results = converter.convert_file(str(input_path), output_file, args.op, **params)

    if results.get('success'):
        print("\n" + "="*60)
        print(f"✓ Saved: {results['output_file']}")
        print("="*60)
        return 0

    print(f"\n✗ {results.get('message', 'Conversion failed')}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
