"""
Layout types for AxisLayout
Data structures for one-dimensional chart layouts

All types are immutable (frozen) for safety and testability. Every
operation returns a new Layout; callers replace their reference.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, TYPE_CHECKING
import logging
import pandas as pd

from ..exceptions import ElementNotFound
from ..types import ElementRecord, Extent, LAYOUT_COLUMNS
from ..utils import check_length

if TYPE_CHECKING:
    from ..config import ResolverConfig
    from ..linear_map import LinearMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Layout:
    """
    One axis of a chart, split into weighted elements

    The root layout carries the total length; each element is itself a
    Layout carrying its relative length and, after resolution, its
    absolute start and length.

    Attributes:
        name: Label of the layout or element
        total_length: Absolute length to partition (root only)
        relative_length: Weight of this element among its siblings
        start: Absolute start (0.0 until resolved)
        length: Absolute length (0.0 until resolved)
        total_relative_length: Sum of child weights, set by resolve
        elements: Child elements in placement order
        resolved: Whether child positions reflect the current elements
    """
    name: str
    total_length: float = 0.0
    relative_length: float = 0.0
    start: float = 0.0
    length: float = 0.0
    total_relative_length: float = 0.0
    elements: Tuple['Layout', ...] = ()
    resolved: bool = False

    @classmethod
    def create(cls, name: str, total_length: float) -> 'Layout':
        """
        Create an empty, unresolved layout

        Args:
            name: Layout name
            total_length: Absolute length to partition (>= 0)

        Raises:
            ConfigurationError: If total_length is negative or not finite
        """
        total = check_length(total_length, f"total length of layout '{name}'")
        logger.debug(f"Created layout '{name}' with total length {total}")
        return cls(name=name, total_length=total)

    @property
    def end(self) -> float:
        """Absolute end (start + length)"""
        return self.start + self.length

    @property
    def extent(self) -> Extent:
        """Absolute (start, end)"""
        return (self.start, self.end)

    @property
    def element_names(self) -> List[str]:
        """Element names in placement order"""
        return [element.name for element in self.elements]

    @property
    def n_elements(self) -> int:
        """Number of direct elements"""
        return len(self.elements)

    def add_element(self, name: str, relative_length: float) -> 'Layout':
        """
        Append an element with the given weight

        A weight of 0.0 is allowed and yields a zero-length element. The
        layout must be resolved again before positions are meaningful.

        Args:
            name: Element name (should be unique among siblings)
            relative_length: Weight relative to the other elements (>= 0)

        Returns:
            New layout with the element appended
        """
        weight = check_length(relative_length, f"relative length of element '{name}'")

        logger.debug(f"Layout '{self.name}': added element '{name}' with weight {weight}")
        element = Layout(name=name, relative_length=weight)
        return replace(self, elements=self.elements + (element,), resolved=False)

    def get_element(self, name: str) -> Optional['Layout']:
        """First element with the given name, or None"""
        for element in self.elements:
            if element.name == name:
                return element
        return None

    def require_element(self, name: str) -> 'Layout':
        """
        First element with the given name

        Raises:
            ElementNotFound: If no element has that name
        """
        element = self.get_element(name)
        if element is None:
            raise ElementNotFound(self.name, name)
        return element

    def resolve(self, config: Optional['ResolverConfig'] = None) -> 'Layout':
        """Resolve element positions (see engine.LayoutEngine.resolve)"""
        from .engine import LayoutEngine
        return LayoutEngine(config).resolve(self)

    def transform(
        self,
        element_name: str,
        input_start: float,
        input_length: float
    ) -> 'LinearMap':
        """Linear map onto one element (see engine.LayoutEngine.transform)"""
        from .engine import LayoutEngine
        return LayoutEngine().transform(self, element_name, input_start, input_length)

    def to_frame(self) -> pd.DataFrame:
        """
        Element table in placement order

        Returns:
            DataFrame with columns name, relative_length, start, length, end
        """
        records: List[ElementRecord] = [
            {
                'name': element.name,
                'relative_length': element.relative_length,
                'start': element.start,
                'length': element.length,
                'end': element.end,
            }
            for element in self.elements
        ]
        return pd.DataFrame(records, columns=list(LAYOUT_COLUMNS))
