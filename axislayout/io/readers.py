"""
I/O Readers

Handles reading of element tables.
"""

from __future__ import annotations
from typing import List
from pathlib import Path
import logging
import pandas as pd

from ..exceptions import ConfigurationError
from ..types import ELEMENT_COLUMNS, ElementWeight, PathLike
from ..utils import check_length

logger = logging.getLogger(__name__)


class ElementReader:
    """Reads element weights from tab-separated tables"""

    @staticmethod
    def load_elements(element_file: PathLike) -> List[ElementWeight]:
        """
        Load (name, relative_length) pairs in file order

        The file is tab-separated with a header row containing at least
        'name' and 'relative_length'. Lines starting with '#' are ignored.
        Extra columns (e.g. start/length from a previous resolve) are
        ignored, so a written layout table can be read back as input.

        Args:
            element_file: Path to the element table

        Returns:
            List of (name, relative_length) tuples

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If columns are missing or a weight is invalid
        """
        if not Path(element_file).exists():
            raise FileNotFoundError(f"Element file not found: {element_file}")

        try:
            table = pd.read_csv(element_file, sep='\t', comment='#', dtype={'name': str},
                                float_precision='round_trip')
        except pd.errors.EmptyDataError:
            raise ConfigurationError(f"Element file is empty: {element_file}") from None

        missing = [col for col in ELEMENT_COLUMNS if col not in table.columns]
        if missing:
            raise ConfigurationError(
                f"Element file {element_file} is missing columns: {', '.join(missing)}"
            )

        elements: List[ElementWeight] = []
        for row in table.itertuples(index=False):
            name = '' if pd.isna(row.name) else str(row.name).strip()
            if not name:
                raise ConfigurationError(f"Element file {element_file} has a row without a name")
            weight = check_length(row.relative_length, f"weight of element '{name}'")
            elements.append((name, weight))

        logger.debug(f"Loaded {len(elements)} elements from {element_file}")
        return elements


def read_elements(element_file: PathLike) -> List[ElementWeight]:
    """Convenience wrapper around ElementReader.load_elements"""
    return ElementReader.load_elements(element_file)
