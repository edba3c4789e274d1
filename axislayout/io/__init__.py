"""I/O utilities for AxisLayout"""

from .readers import ElementReader, read_elements
from .writers import LayoutWriter, write_layout

__all__ = [
    'ElementReader', 'read_elements',
    'LayoutWriter', 'write_layout']
