"""
AxisLayout CLI

Command-line interface with subcommands over the layout resolver.
"""

import argparse
import logging
import sys
from .cli import resolve, transform
from .exceptions import LayoutError

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='axislayout',
        description='AxisLayout: proportional chart axis layouts and coordinate maps'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    resolve.add_parser(subparsers)
    transform.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    try:
        if args.command == 'resolve':
            resolve.run(args)
        elif args.command == 'transform':
            transform.run(args)
    except (LayoutError, FileNotFoundError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
