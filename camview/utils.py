#!/usr/bin/env python3
"""
General utilities for the camera viewport.
"""
import math
from collections.abc import Sequence
from typing import Optional

from .vector_utils import Vec2


def try_float(val) -> Optional[float]:
    """Finite float value of val, or None. JSON Infinity/NaN count as malformed."""
    try:
        result = float(val)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def try_whole(val) -> Optional[int]:
    """Integer value of val when it is a finite whole number, else None."""
    result = try_float(val)
    if result is None or not result.is_integer():
        return None
    return int(result)


def try_vec2(val, default: Vec2) -> Optional[Vec2]:
    """
    Coerce a 2-element JSON list into a finite float pair.

    Returns `default` when val is None and None when val is malformed.
    """
    if val is None:
        return default
    if not isinstance(val, Sequence) or isinstance(val, str) or len(val) != 2:
        return None
    x, y = try_float(val[0]), try_float(val[1])
    if x is None or y is None:
        return None
    return (x, y)


def name_or(val, fallback: str) -> str:
    """val when it is a non-empty string, otherwise fallback."""
    if isinstance(val, str) and val:
        return val
    return fallback
