"""
Utility functions

General-purpose validation helpers used across AxisLayout modules.
"""

from __future__ import annotations
from typing import Any
import math

from .exceptions import ConfigurationError
from .types import ElementWeight


def check_length(value: Any, label: str) -> float:
    """
    Validate a length or weight and return it as float

    Args:
        value: Candidate value (int, float or numeric string)
        label: Description used in the error message

    Returns:
        The value converted to float

    Raises:
        ConfigurationError: If the value is not numeric, not finite or negative
    """
    if isinstance(value, bool):
        raise ConfigurationError(f"{label} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{label} must be a number, got {value!r}") from None

    if not math.isfinite(number):
        raise ConfigurationError(f"{label} must be finite, got {number!r}")
    if number < 0:
        raise ConfigurationError(f"{label} must not be negative, got {number!r}")
    return number


def check_finite(value: Any, label: str) -> float:
    """Like check_length, but negative values are allowed"""
    if isinstance(value, bool):
        raise ConfigurationError(f"{label} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{label} must be a number, got {value!r}") from None

    if not math.isfinite(number):
        raise ConfigurationError(f"{label} must be finite, got {number!r}")
    return number


def parse_element_arg(text: str) -> ElementWeight:
    """
    Parse a 'NAME=WEIGHT' declaration

    The weight follows the last '=', so names may themselves contain '='.

    Args:
        text: Declaration such as 'plot area=75'

    Returns:
        (name, relative_length) tuple
    """
    name, sep, weight = text.rpartition('=')
    name = name.strip()
    if not sep or not name:
        raise ConfigurationError(f"Element must be given as NAME=WEIGHT, got {text!r}")
    return name, check_length(weight.strip(), f"weight of element '{name}'")
