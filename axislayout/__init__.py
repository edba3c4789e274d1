"""AxisLayout: proportional chart axis layouts and coordinate maps"""

from .config import ResolverConfig, AxisPreset
from .exceptions import (
    LayoutError,
    ConfigurationError,
    DegenerateResolution,
    ElementNotFound,
    DegenerateMap,
)
from .linear_map import LinearMap
from .layout import Layout, LayoutEngine
from . import linear_map
from . import layout

__version__ = "0.1.0"
__all__ = [
    "ResolverConfig", "AxisPreset",
    "LayoutError", "ConfigurationError", "DegenerateResolution", "ElementNotFound", "DegenerateMap",
    "LinearMap", "Layout", "LayoutEngine", "linear_map", "layout",
]
