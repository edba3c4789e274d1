"""
Linear Map

One-dimensional affine transform defined by two reference point pairs.
Used to carry logical (data) coordinates into the absolute extent of a
resolved layout element.

Example:
    >>> t = LinearMap.create({'type': 'linear_map',
    ...                       'x1_in': 0.0, 'x1_out': 10.0,
    ...                       'x2_in': 5.0, 'x2_out': 30.0})
    >>> t.map(2.5)
    20.0
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
import math
import numpy as np

from .exceptions import ConfigurationError, DegenerateMap
from .types import LinearMapParams, MapType
from .utils import check_finite

LINEAR_MAP: MapType = 'linear_map'

_REFERENCE_KEYS = ('x1_in', 'x1_out', 'x2_in', 'x2_out')


@dataclass(frozen=True)
class LinearMap:
    """
    Affine map f with f(x1_in) == x1_out and f(x2_in) == x2_out

    Attributes:
        x1_in: First input reference point
        x1_out: Output for x1_in
        x2_in: Second input reference point
        x2_out: Output for x2_in
        slope: (x2_out - x1_out) / (x2_in - x1_in), cached at creation
    """
    x1_in: float
    x1_out: float
    x2_in: float
    x2_out: float
    slope: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        for key in _REFERENCE_KEYS:
            object.__setattr__(self, key, check_finite(getattr(self, key), key))
        if self.x1_in == self.x2_in:
            raise DegenerateMap(self.x1_in, 'input')
        slope = (self.x2_out - self.x1_out) / (self.x2_in - self.x1_in)
        if not (math.isfinite(self.x2_in - self.x1_in) and math.isfinite(slope)):
            raise ConfigurationError(
                f"Linear map slope overflows: inputs {self.x1_in!r}, {self.x2_in!r}, "
                f"outputs {self.x1_out!r}, {self.x2_out!r}"
            )
        object.__setattr__(self, 'slope', slope)

    @classmethod
    def create(cls, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> 'LinearMap':
        """
        Build a map from an options mapping and/or keyword arguments

        Recognized options are 'type' (must be 'linear_map' when given),
        'x1_in', 'x1_out', 'x2_in' and 'x2_out'.

        Raises:
            ConfigurationError: Unknown type, unknown option or missing reference
            DegenerateMap: x1_in == x2_in
        """
        options: LinearMapParams = dict(params or {}, **kwargs)  # type: ignore[assignment]

        map_type = options.pop('type', LINEAR_MAP)
        if map_type != LINEAR_MAP:
            raise ConfigurationError(
                f"Unsupported map type {map_type!r}, only {LINEAR_MAP!r} is available"
            )

        unknown = sorted(set(options) - set(_REFERENCE_KEYS))
        if unknown:
            raise ConfigurationError(f"Unknown linear map options: {', '.join(unknown)}")
        missing = [key for key in _REFERENCE_KEYS if key not in options]
        if missing:
            raise ConfigurationError(f"Missing linear map options: {', '.join(missing)}")

        return cls(**options)

    def map(self, x: Any) -> Any:
        """
        Evaluate the map at x

        Values outside [x1_in, x2_in] are extrapolated along the same slope.
        Sequences and numpy arrays are mapped element-wise and returned as an
        array of the same shape; scalars come back as float.

        Args:
            x: Input value or array of values

        Returns:
            Mapped value(s)
        """
        if np.ndim(x) == 0:
            value = float(x)
            if value == self.x1_in:
                return self.x1_out
            if value == self.x2_in:
                return self.x2_out
            return self.x1_out + (value - self.x1_in) * self.slope

        values = np.asarray(x, dtype=float)
        mapped = self.x1_out + (values - self.x1_in) * self.slope
        # Reference inputs map to their outputs exactly
        mapped = np.where(values == self.x2_in, self.x2_out, mapped)
        return np.where(values == self.x1_in, self.x1_out, mapped)

    def __call__(self, x: Any) -> Any:
        return self.map(x)

    def inverse(self) -> 'LinearMap':
        """
        Map from output space back to input space

        Raises:
            DegenerateMap: If both output references are equal
        """
        if self.x1_out == self.x2_out:
            raise DegenerateMap(self.x1_out, 'output')
        return LinearMap(
            x1_in=self.x1_out, x1_out=self.x1_in,
            x2_in=self.x2_out, x2_out=self.x2_in,
        )

    def to_params(self) -> LinearMapParams:
        """Options dict that recreates this map through create()"""
        return {
            'type': LINEAR_MAP,
            'x1_in': self.x1_in,
            'x1_out': self.x1_out,
            'x2_in': self.x2_in,
            'x2_out': self.x2_out,
        }


def create(params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> LinearMap:
    """Module-level alias for LinearMap.create"""
    return LinearMap.create(params, **kwargs)


def map(linear_map: LinearMap, x: Any) -> Any:
    """Module-level alias for LinearMap.map"""
    return linear_map.map(x)
