"""
Type definitions for AxisLayout

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Literal, Tuple, Union
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

MapType = Literal['linear_map']
"""Kind of coordinate map (only linear maps are supported)"""

ElementWeight = Tuple[str, float]
"""Element declaration as (name, relative_length)"""

Extent = Tuple[float, float]
"""Absolute (start, end) of a resolved element"""


# Structured data types

class LinearMapParams(TypedDict, total=False):
    """Options accepted by linear_map.create"""
    type: MapType
    x1_in: float
    x1_out: float
    x2_in: float
    x2_out: float


class ElementRecord(TypedDict):
    """One row of a resolved layout table"""
    name: str
    relative_length: float
    start: float
    length: float
    end: float


ELEMENT_COLUMNS: Tuple[str, ...] = ('name', 'relative_length')
"""Required columns of an element table"""

LAYOUT_COLUMNS: Tuple[str, ...] = ('name', 'relative_length', 'start', 'length', 'end')
"""Columns of a resolved layout table, in output order"""
