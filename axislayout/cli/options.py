"""Shared options for subcommands that build a layout"""

from __future__ import annotations
from typing import List
import logging
from argparse import ArgumentParser, Namespace

from ..config import AxisPreset, ResolverConfig
from ..io import read_elements
from ..layout import Layout
from ..types import ElementWeight
from ..utils import parse_element_arg

logger = logging.getLogger(__name__)


def add_layout_arguments(parser: ArgumentParser) -> None:
    """
    Add layout definition options to a subcommand parser

    Args:
        parser: Subcommand parser
    """
    parser.add_argument('--name',
                       help='Layout name (default: preset name or "layout")')
    parser.add_argument('-L', '--total-length', type=float, required=True,
                       help='Absolute length to partition (e.g. canvas width)')

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('-e', '--element', action='append', metavar='NAME=WEIGHT',
                       help='Element and its relative length; repeat in placement order')
    source.add_argument('-f', '--elements-file', metavar='TSV',
                       help='Tab-separated table with name and relative_length columns')
    source.add_argument('--preset', choices=AxisPreset.names(),
                       help='Built-in element list')

    parser.add_argument('--quiet-duplicates', action='store_true',
                       help='Do not warn about repeated element names')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def configure_logging(args: Namespace) -> None:
    """Configure logging for one subcommand run"""
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence noisy third-party loggers
    for noisy in ("numexpr", "numexpr.utils", "fsspec"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("axislayout").setLevel(logging.DEBUG if getattr(args, "debug", False) else logging.INFO)


def resolver_config(args: Namespace) -> ResolverConfig:
    """Resolver settings selected on the command line"""
    if getattr(args, 'quiet_duplicates', False):
        return ResolverConfig.quiet()
    return ResolverConfig()


def build_layout(args: Namespace) -> Layout:
    """
    Build the unresolved layout described by the parsed arguments

    Args:
        args: Parsed arguments from a parser set up by add_layout_arguments

    Returns:
        Unresolved Layout
    """
    if args.preset:
        preset = AxisPreset.get(args.preset)
        logger.info(f"Using preset '{args.preset}' ({len(preset.elements)} elements)")
        return preset.build(args.total_length, name=args.name)

    elements: List[ElementWeight]
    if args.elements_file:
        elements = read_elements(args.elements_file)
        logger.info(f"Loaded {len(elements)} elements from {args.elements_file}")
    else:
        elements = [parse_element_arg(text) for text in args.element]

    layout = Layout.create(args.name or 'layout', args.total_length)
    for name, weight in elements:
        layout = layout.add_element(name, weight)
    return layout
