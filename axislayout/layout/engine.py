"""
Layout Engine for AxisLayout
Pure layout logic for one-dimensional proportional partitions

Algorithm:
1. Sum the relative lengths of all elements (left to right)
2. Scale = total length / total relative length
3. Walk elements in insertion order, placing each one directly after
   the previous: start = previous start + previous length
4. Element length = relative length * scale
"""
from __future__ import annotations
from collections import Counter
from dataclasses import replace
from typing import List, Optional
import logging
import math

from ..config import ResolverConfig
from ..exceptions import ConfigurationError, DegenerateResolution
from ..linear_map import LinearMap
from ..utils import check_finite
from .types import Layout

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Resolves layouts and builds coordinate maps onto their elements

    The engine holds only configuration; every call takes a Layout and
    returns a new value, so one engine can serve any number of layouts.
    """

    def __init__(self, config: Optional[ResolverConfig] = None) -> None:
        """
        Initialize layout engine

        Args:
            config: Resolver configuration. If None, uses default settings.
        """
        self.config: ResolverConfig = config or ResolverConfig()

    def resolve(self, layout: Layout) -> Layout:
        """
        Assign absolute start and length to every element

        Positions depend only on the current weights and total length, so
        resolving an already resolved layout gives identical results.

        Args:
            layout: Layout with at least one element of non-zero weight

        Returns:
            New layout with placed elements and total_relative_length set

        Raises:
            DegenerateResolution: If there are no elements or all weights are zero
        """
        total_relative_length = 0.0
        for element in layout.elements:
            total_relative_length += element.relative_length

        if total_relative_length == 0.0:
            raise DegenerateResolution(layout.name, len(layout.elements))
        if not math.isfinite(total_relative_length):
            raise ConfigurationError(
                f"Weights of layout '{layout.name}' overflow to {total_relative_length!r}"
            )

        scale = layout.total_length / total_relative_length
        if not math.isfinite(scale):
            raise ConfigurationError(
                f"Layout '{layout.name}' cannot scale total weight {total_relative_length!r} "
                f"to length {layout.total_length!r}"
            )

        placed: List[Layout] = []
        start, length = 0.0, 0.0
        for element in layout.elements:
            start = start + length
            length = element.relative_length * scale
            placed.append(replace(element, start=start, length=length))

        logger.debug(
            f"Resolved layout '{layout.name}': {len(placed)} elements, "
            f"total weight {total_relative_length}, scale {scale:.6g}"
        )

        self._check_end(layout, placed)
        if self.config.warn_on_duplicate_names:
            self._check_duplicate_names(layout)

        return replace(
            layout,
            total_relative_length=total_relative_length,
            elements=tuple(placed),
            resolved=True,
        )

    def transform(
        self,
        layout: Layout,
        element_name: str,
        input_start: float,
        input_length: float
    ) -> LinearMap:
        """
        Map a logical input range onto one element's absolute extent

        input_start maps to the element start and input_start + input_length
        maps to its end; other values are interpolated or extrapolated.

        Args:
            layout: Resolved layout
            element_name: Name of the target element
            input_start: Logical value at the element start
            input_length: Logical width of the element

        Returns:
            LinearMap from logical to absolute coordinates

        Raises:
            ElementNotFound: If the layout has no such element
            DegenerateMap: If input_length is zero
        """
        element = layout.require_element(element_name)
        if not layout.resolved:
            logger.warning(
                f"Layout '{layout.name}' is not resolved; "
                f"element '{element_name}' has no extent yet"
            )

        x1_in = check_finite(input_start, 'input start')
        x2_in = x1_in + check_finite(input_length, 'input length')

        return LinearMap(
            x1_in=x1_in,
            x1_out=element.start,
            x2_in=x2_in,
            x2_out=element.start + element.length,
        )

    def _check_end(self, layout: Layout, placed: List[Layout]) -> None:
        """Warn when accumulated rounding moves the last end off the total length"""
        end = placed[-1].start + placed[-1].length
        if not math.isclose(end, layout.total_length,
                            rel_tol=self.config.rel_tol, abs_tol=self.config.abs_tol):
            logger.warning(
                f"Layout '{layout.name}' ends at {end!r}, "
                f"expected total length {layout.total_length!r}"
            )

    @staticmethod
    def _check_duplicate_names(layout: Layout) -> None:
        counts = Counter(layout.element_names)
        repeated = [name for name, count in counts.items() if count > 1]
        if repeated:
            logger.warning(
                f"Layout '{layout.name}' repeats element names {repeated}; "
                f"lookups return the first match"
            )


def create(name: str, total_length: float) -> Layout:
    """Create an empty, unresolved layout"""
    return Layout.create(name, total_length)


def add_element(layout: Layout, name: str, relative_length: float) -> Layout:
    """Append an element to a layout"""
    return layout.add_element(name, relative_length)


def resolve(layout: Layout, config: Optional[ResolverConfig] = None) -> Layout:
    """Resolve all element positions of a layout"""
    return LayoutEngine(config).resolve(layout)


def get_element(layout: Layout, name: str) -> Optional[Layout]:
    """First element with the given name, or None"""
    return layout.get_element(name)


def require_element(layout: Layout, name: str) -> Layout:
    """First element with the given name, raising ElementNotFound if absent"""
    return layout.require_element(name)


def transform(
    layout: Layout,
    element_name: str,
    input_start: float,
    input_length: float
) -> LinearMap:
    """Linear map from a logical range onto one element"""
    return LayoutEngine().transform(layout, element_name, input_start, input_length)
