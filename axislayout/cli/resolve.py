"""Resolve subcommand - absolute element positions"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..io import write_layout
from ..layout import Layout
from .options import add_layout_arguments, build_layout, configure_logging, resolver_config

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add resolve subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for resolve subcommand
    """
    parser = subparsers.add_parser(
        'resolve',
        help='Resolve element weights into absolute start and length'
    )
    add_layout_arguments(parser)
    parser.add_argument('-o', '--output', metavar='TSV',
                       help='Write the resolved table here instead of printing it')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> Layout:
    """
    Execute resolve subcommand

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        The resolved layout
    """
    configure_logging(args)

    layout = build_layout(args).resolve(resolver_config(args))
    logger.info(f"Resolved '{layout.name}': {layout.n_elements} elements "
                f"over length {layout.total_length:g}")

    if args.output:
        write_layout(layout, Path(args.output))
    else:
        print(layout.to_frame().to_string(index=False))

    return layout
