"""
AxisLayout Configuration

Resolver tolerances and reusable axis presets for common chart layouts.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, List, Optional, TYPE_CHECKING

from .exceptions import ConfigurationError
from .types import ElementWeight

if TYPE_CHECKING:
    from .layout.types import Layout


@dataclass
class ResolverConfig:
    """
    Numeric settings used while resolving layouts
    """

    # ============================================================
    # CONSISTENCY CHECK
    # ============================================================
    rel_tol: float = 1e-9
    """Relative tolerance when comparing the last element end to the total length"""

    abs_tol: float = 1e-9
    """Absolute tolerance for the same comparison (matters for zero-length axes)"""

    # ============================================================
    # ELEMENT NAMES
    # ============================================================
    warn_on_duplicate_names: bool = True
    """Log a warning when an element name repeats (lookup returns the first match)"""

    @classmethod
    def strict(cls) -> 'ResolverConfig':
        """
        Tight tolerances for callers that compare positions exactly

        Example:
            >>> layout.resolve(ResolverConfig.strict())
        """
        config = cls()
        config.rel_tol = 1e-12
        config.abs_tol = 1e-12
        return config

    @classmethod
    def quiet(cls) -> 'ResolverConfig':
        """Default tolerances without duplicate-name warnings"""
        config = cls()
        config.warn_on_duplicate_names = False
        return config


@dataclass
class AxisPreset:
    """
    Named list of element weights for a common chart axis

    Weights are relative: only their ratio to the preset total matters,
    so a preset fits any canvas size.
    """

    name: str
    """Preset name, also used as the default layout name"""

    elements: Tuple[ElementWeight, ...] = field(default_factory=tuple)
    """(element name, relative length) pairs in placement order"""

    @property
    def total_weight(self) -> float:
        """Sum of all element weights"""
        return sum(weight for _, weight in self.elements)

    @property
    def element_names(self) -> List[str]:
        """Element names in placement order"""
        return [name for name, _ in self.elements]

    def build(self, total_length: float, name: Optional[str] = None) -> 'Layout':
        """
        Create an unresolved layout from this preset

        Args:
            total_length: Absolute axis length (e.g. canvas width)
            name: Layout name (default: preset name)

        Returns:
            Layout with one element per preset entry, not yet resolved
        """
        from .layout.types import Layout

        layout = Layout.create(name or self.name, total_length)
        for element_name, weight in self.elements:
            layout = layout.add_element(element_name, weight)
        return layout

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def horizontal(cls) -> 'AxisPreset':
        """
        X direction of an X/Y chart

        - Margins on both sides
        - Rotated y axis title and y gridline labels left of the plot

        Example:
            >>> layout = AxisPreset.horizontal().build(800).resolve()
            >>> x_map = layout.transform('plot area', -0.5, 12)
        """
        return cls('chart horizontal', (
            ('left margin', 2.0),
            ('y axis title', 10.0),
            ('y axis labels', 20.0),
            ('plot area', 75.0),
            ('right margin', 2.0),
        ))

    @classmethod
    def vertical(cls) -> 'AxisPreset':
        """
        Y direction of an X/Y chart, top to bottom

        - Chart title above the plot
        - X axis labels and title below it
        """
        return cls('chart vertical', (
            ('top margin', 2.0),
            ('title', 8.0),
            ('plot area', 75.0),
            ('x axis labels', 10.0),
            ('x axis title', 6.0),
            ('bottom margin', 2.0),
        ))

    @classmethod
    def calendar(cls) -> 'AxisPreset':
        """Twelve month axis with equal margins"""
        return cls('calendar axis', (
            ('left margin', 15.0),
            ('months', 120.0),
            ('right margin', 15.0),
        ))

    @classmethod
    def names(cls) -> List[str]:
        """Names accepted by get()"""
        return list(_PRESETS)

    @classmethod
    def get(cls, name: str) -> 'AxisPreset':
        """
        Look up a preset by short name

        Raises:
            ConfigurationError: If no preset has that name
        """
        try:
            factory = _PRESETS[name]
        except KeyError:
            raise ConfigurationError(
                f"Unknown preset '{name}', choose from: {', '.join(_PRESETS)}"
            ) from None
        return factory()


_PRESETS = {
    'horizontal': AxisPreset.horizontal,
    'vertical': AxisPreset.vertical,
    'calendar': AxisPreset.calendar,
}
