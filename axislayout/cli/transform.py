"""Transform subcommand - logical values to absolute positions"""

from __future__ import annotations
from typing import List
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from .options import add_layout_arguments, build_layout, configure_logging, resolver_config

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add transform subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for transform subcommand
    """
    parser = subparsers.add_parser(
        'transform',
        help='Map logical values onto the absolute extent of one element'
    )
    add_layout_arguments(parser)

    # Target element and its logical range
    parser.add_argument('-t', '--target', required=True,
                       help='Element to map onto')
    parser.add_argument('--input-start', type=float, default=0.0,
                       help='Logical value at the element start (default: 0)')
    parser.add_argument('--input-length', type=float, required=True,
                       help='Logical width of the element')
    parser.add_argument('values', nargs='+', type=float,
                       help='Logical values to map')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> List[float]:
    """
    Execute transform subcommand

    Prints one 'value<TAB>position' line per input value.

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        Mapped positions in input order
    """
    configure_logging(args)

    layout = build_layout(args).resolve(resolver_config(args))
    element = layout.require_element(args.target)
    logger.info(f"Target '{element.name}' spans {element.start:g} to {element.end:g}")

    linear_map = layout.transform(args.target, args.input_start, args.input_length)
    positions: List[float] = [float(p) for p in linear_map.map(args.values)]

    for value, position in zip(args.values, positions):
        print(f"{value:g}\t{position:g}")

    return positions
