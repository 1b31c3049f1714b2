"""
fracdiff Command Line Interface

Usage:
    python -m fracdiff <command> [args]

Commands:
    demo       Difference a sample series, then integrate it back
    weights    Print the weight sequence for an order and length

Examples:
    python -m fracdiff demo
    python -m fracdiff demo --d 0.3 --series 5 4 6 7 3
    python -m fracdiff weights --d 0.5 --length 10
    python -m fracdiff weights --d 0.5 --length 1000 --threshold 1e-4
"""

import argparse
import logging
import sys

import numpy as np
from pydantic import ValidationError

from fracdiff.config.schema import FilterConfig
from fracdiff.filtering import FractionalFilter
from fracdiff.weights import generate_weights

# Most recent value first: series[0] - series[1] = 2 - 1 is the latest one-step change
SAMPLE_SERIES = [2, 1, 3, 5, 6, 0, -1, 2, 2, 5] * 2


def _config_from_args(args) -> FilterConfig:
    return FilterConfig(d=args.d, threshold=args.threshold, max_count=args.max_count)


def cmd_demo(args):
    """Filter a series with d, invert with -d, and compare."""
    try:
        config = _config_from_args(args)
    except ValidationError as e:
        print(f"ERROR: {e}")
        return 1

    series = np.asarray(args.series if args.series else SAMPLE_SERIES, dtype=np.float64)
    n = len(series)

    print(config.summary())
    print()
    print(f"sum of orig series = {series.sum():f}")
    print()

    ffd = FractionalFilter.from_config(config)
    w = ffd.weights(n)
    for i, wi in enumerate(w):
        print(f"w[{i}] = {wi:f}")
    print(f"sum of wts = {w.sum():f}")
    print()

    fd = ffd.apply(series)
    for orig, val in zip(series, fd):
        print(f"orig = {orig:f} fd = {val:f}")
    print()

    fi = ffd.inverse().apply(fd)
    for orig, val in zip(series, fi):
        print(f"orig = {orig:f} fi = {val:f}")
    print()

    err = float(np.max(np.abs(fi - series))) if n else 0.0
    print(f"max round-trip error = {err:.3e}")
    if config.truncates:
        print("(weights truncated - round trip is approximate)")

    return 0


def cmd_weights(args):
    """Print the weight sequence."""
    try:
        config = _config_from_args(args)
    except ValidationError as e:
        print(f"ERROR: {e}")
        return 1

    w = generate_weights(config.d, args.length, config.threshold, config.max_count)
    for i, wi in enumerate(w):
        print(f"w[{i}] = {wi:f}")
    print(f"n weights = {len(w)}")
    print(f"sum of wts = {w.sum():f}")
    return 0


def _add_filter_args(parser, d_default=None):
    parser.add_argument(
        '--d',
        type=float,
        default=d_default,
        required=d_default is None,
        help='Differencing order (negative = integrate)',
    )
    parser.add_argument(
        '--threshold', '-t',
        type=float,
        default=0.0,
        help='Drop weights with |w| <= threshold (0 = keep all)',
    )
    parser.add_argument(
        '--max-count', '-m',
        type=int,
        default=0,
        help='Maximum number of weights (0 = unbounded)',
    )


def main(argv=None):
    """fracdiff CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='fracdiff',
        description='Fractional differencing and integration of time series',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m fracdiff demo
    python -m fracdiff demo --d 0.3 --series 5 4 6 7 3
    python -m fracdiff weights --d 0.5 --length 10
        """,
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log every weight candidate',
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # demo command
    demo_parser = subparsers.add_parser(
        'demo',
        help='Difference a series, integrate it back, compare',
    )
    _add_filter_args(demo_parser, d_default=0.5)
    demo_parser.add_argument(
        '--series', '-s',
        type=float,
        nargs='+',
        help='Series values, most recent first (default: built-in sample)',
    )

    # weights command
    weights_parser = subparsers.add_parser(
        'weights',
        help='Print the weight sequence',
    )
    _add_filter_args(weights_parser)
    weights_parser.add_argument(
        '--length', '-n',
        type=int,
        required=True,
        help='Maximum number of weights (series length)',
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if args.command is None:
        parser.print_help()
        return 0

    # Dispatch to command handler
    handlers = {
        'demo': cmd_demo,
        'weights': cmd_weights,
    }

    handler = handlers.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
