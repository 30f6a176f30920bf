#!/usr/bin/env python3
"""
Data models for the camera viewport.

This module defines the small value types shared between the camera, the scene
and the renderer.

Units and usage
- Transform.pos is in world units before projection and in screen pixels after
  Camera.transform(); Transform.scale is a unitless x/y multiplier.
- ZoomFactor only ever holds positive finite components. Anything else is
  rejected at construction, so the camera never sees a collapsing or inverting
  zoom.
"""
import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Transform:
    """
    Placement of a drawable object: position plus independent x/y scale.

    Fields:
    - pos: (x, y) offset
    - scale: (sx, sy) multiplier applied to the object's own geometry
    """
    pos: Tuple[float, float] = (0.0, 0.0)
    scale: Tuple[float, float] = (1.0, 1.0)


@dataclass(frozen=True)
class ZoomFactor:
    """Per-axis zoom multiplier. Both components must be > 0."""
    x: float
    y: float

    def __post_init__(self) -> None:
        for name, value in (("x", self.x), ("y", self.y)):
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"zoom factor {name} must be a positive finite number, got {value!r}")

    @classmethod
    def uniform(cls, factor: float) -> "ZoomFactor":
        return cls(factor, factor)

    def __iter__(self):
        """Allow tuple unpacking: fx, fy = factor"""
        return iter((self.x, self.y))
