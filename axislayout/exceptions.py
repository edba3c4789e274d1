"""
Exceptions for AxisLayout

Every failure raised by the resolver and the linear map derives from
LayoutError, so callers can handle the whole family in one place or
each outcome separately.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for all layout and mapping failures"""


class ConfigurationError(LayoutError, ValueError):
    """
    Invalid input supplied at construction time

    Raised for negative or non-finite lengths and weights, malformed
    linear map parameters and unreadable element tables.
    """


class DegenerateResolution(LayoutError):
    """
    Layout cannot be resolved because its total weight is zero

    Attributes:
        layout_name: Name of the layout that failed to resolve
        n_elements: Number of elements in the layout
    """

    def __init__(self, layout_name: str, n_elements: int) -> None:
        if n_elements == 0:
            detail = "it has no elements"
        else:
            detail = f"all {n_elements} element weights are zero"
        super().__init__(f"Cannot resolve layout '{layout_name}': {detail}")
        self.layout_name = layout_name
        self.n_elements = n_elements


class ElementNotFound(LayoutError, LookupError):
    """
    Named element is not part of the layout

    Attributes:
        layout_name: Name of the layout that was searched
        element_name: Name that was looked up
    """

    def __init__(self, layout_name: str, element_name: str) -> None:
        super().__init__(f"Layout '{layout_name}' has no element named '{element_name}'")
        self.layout_name = layout_name
        self.element_name = element_name


class DegenerateMap(LayoutError):
    """
    Linear map whose two reference points coincide

    Attributes:
        reference: The shared reference value
        side: Which side collapsed ('input' or 'output')
    """

    def __init__(self, reference: float, side: str = "input") -> None:
        super().__init__(
            f"Linear map is degenerate: both {side} reference points are {reference!r}"
        )
        self.reference = reference
        self.side = side
