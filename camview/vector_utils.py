#!/usr/bin/env python3
"""
Vector helper functions for 2D operations.

Vectors are plain (x, y) tuples. Multiplication and division are component-wise,
which is what independent x/y camera scale needs.
"""
from typing import Tuple

Vec2 = Tuple[float, float]


def vec_add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def vec_sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def vec_mul(a: Vec2, b: Vec2) -> Vec2:
    """Component-wise product."""
    return (a[0] * b[0], a[1] * b[1])


def vec_div(a: Vec2, b: Vec2) -> Vec2:
    """Component-wise quotient. b must have no zero components."""
    return (a[0] / b[0], a[1] / b[1])
