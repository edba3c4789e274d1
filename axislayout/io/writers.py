"""
I/O Writers

Handles writing of resolved layouts.
"""

from pathlib import Path
import logging

logger = logging.getLogger(__name__)


class LayoutWriter:
    """Writes layouts as tab-separated tables"""

    def __init__(self, float_format=None):
        """
        Initialize layout writer

        Args:
            float_format: printf-style format for numeric columns
                (default: shortest repr that reads back exactly)
        """
        self.float_format = float_format

    def write(self, layout, output_file):
        """
        Write one row per element in placement order

        Columns: name, relative_length, start, length, end.

        Args:
            layout: Layout to write (normally resolved)
            output_file: Path to output TSV file
        """
        if not layout.resolved:
            logger.warning(f"Layout '{layout.name}' is not resolved; writing zero positions")

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)

        frame = layout.to_frame()
        frame.to_csv(output_file, sep='\t', index=False, float_format=self.float_format)

        logger.info(f"Layout '{layout.name}' written to {output_file} ({len(frame)} elements)")


def write_layout(layout, output_file, float_format=None):
    """Convenience wrapper around LayoutWriter.write"""
    LayoutWriter(float_format).write(layout, output_file)
