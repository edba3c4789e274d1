"""
Layout Module for AxisLayout
Proportional one-dimensional layout resolver

Public API:
    - Layout: Immutable layout / element value
    - LayoutEngine: Resolution and transform engine
    - create, add_element, resolve, get_element, require_element, transform:
      functional aliases of the Layout methods
"""

from .types import Layout
from .engine import (
    LayoutEngine,
    create,
    add_element,
    resolve,
    get_element,
    require_element,
    transform,
)

__all__ = [
    'Layout',
    'LayoutEngine',
    'create',
    'add_element',
    'resolve',
    'get_element',
    'require_element',
    'transform',
]
