#!/usr/bin/env python3
"""
Debug grid construction.

A grid is built once into a LineMesh in the grid's own local space. The
renderer places it on screen with the Transform produced by the camera, so the
mesh itself never changes when the view pans or zooms.
"""
from dataclasses import dataclass
from typing import Tuple

from .constants import (
    GRID_COLOR,
    GRID_HIGHLIGHT_COLOR,
    GRID_HIGHLIGHT_INDEX,
    GRID_LINE_WIDTH,
    GRID_LINES,
    GRID_SPACING,
)

Point = Tuple[float, float]
Color = Tuple[int, int, int]


@dataclass(frozen=True)
class GridSpec:
    """
    Parameters for a square debug grid.

    Fields:
    - lines: number of lines per axis
    - spacing: distance between neighbouring lines in local units
    - highlight: index of the line drawn in the highlight colour (-1 for none)
    """
    lines: int = GRID_LINES
    spacing: float = GRID_SPACING
    highlight: int = GRID_HIGHLIGHT_INDEX

    @property
    def extent(self) -> float:
        return self.lines * self.spacing


@dataclass(frozen=True)
class LineMesh:
    """Immutable list of coloured segments in local space."""
    segments: Tuple[Tuple[Point, Point, Color], ...]
    width: int = GRID_LINE_WIDTH


def build_grid(spec: GridSpec = GridSpec()) -> LineMesh:
    """
    Build one vertical and one horizontal line per index, each spanning the
    full grid extent.
    """
    extent = spec.extent
    segments = []
    for i in range(spec.lines):
        color = GRID_HIGHLIGHT_COLOR if i == spec.highlight else GRID_COLOR
        offset = i * spec.spacing
        segments.append(((offset, 0.0), (offset, extent), color))
        segments.append(((0.0, offset), (extent, offset), color))
    return LineMesh(segments=tuple(segments))
