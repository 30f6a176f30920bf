#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.
"""
from typing import Optional, Tuple

from .constants import DEFAULT_CAMERA_POS, DEFAULT_CAMERA_SCALE
from .data_models import Transform, ZoomFactor
from .vector_utils import vec_add, vec_div, vec_mul, vec_sub


class Camera:
    """
    Simple 2D camera with a world offset and independent x/y scale.

    transform() and inverse_transform() are not inverses of each
    other: the forward transform subtracts the offset without dividing it by
    scale (camera scale only multiplies the object's own scale), while the
    inverse divides both the point and the offset by scale. Anchored zoom is
    computed with the inverse, and the on-screen anchoring depends on exactly
    this pairing.
    """

    def __init__(self, pos=DEFAULT_CAMERA_POS, scale=DEFAULT_CAMERA_SCALE):
        self.pos = (float(pos[0]), float(pos[1]))
        self.scale = (float(scale[0]), float(scale[1]))

    def pan(self, dx: float, dy: float) -> None:
        self.pos = vec_add(self.pos, (dx, dy))

    def zoom(self, factor: ZoomFactor, anchor: Optional[Tuple[float, float]] = None) -> None:
        """
        Multiply scale by factor.

        With an anchor (screen space), pan afterwards so that the world point
        under the anchor is the same before and after. Scale must change
        before the compensation is measured.
        """
        if anchor is None:
            self.scale = vec_mul(self.scale, tuple(factor))
            return

        before = self.inverse_transform(anchor)
        self.scale = vec_mul(self.scale, tuple(factor))
        after = self.inverse_transform(anchor)

        dx, dy = vec_mul(vec_sub(before, after), self.scale)
        self.pan(dx, dy)

    def reset(self) -> None:
        self.pos = DEFAULT_CAMERA_POS
        self.scale = DEFAULT_CAMERA_SCALE

    def inverse_transform(self, screen: Tuple[float, float]) -> Tuple[float, float]:
        """Screen point -> world point under the current offset and scale."""
        return vec_add(vec_div(screen, self.scale), vec_div(self.pos, self.scale))

    def transform(self, placement: Transform) -> Transform:
        """World placement -> screen placement for drawing."""
        return Transform(
            pos=vec_sub(placement.pos, self.pos),
            scale=vec_mul(placement.scale, self.scale),
        )

    def __repr__(self) -> str:
        return f"Camera(pos={self.pos}, scale={self.scale})"
