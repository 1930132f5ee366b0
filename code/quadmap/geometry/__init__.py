"""Grid geometry: points, areas and quadrant arithmetic."""

from __future__ import annotations

from .area import (
    NE,
    NW,
    SE,
    SW,
    Area,
    as_area,
    fully_contains,
    intersects,
    quadrant_containing,
    quadrants_of,
)
from .point import COORD_MAX, MAX_DEPTH, Point, as_point

__all__ = [
    "COORD_MAX",
    "MAX_DEPTH",
    "Point",
    "Area",
    "as_point",
    "as_area",
    "intersects",
    "fully_contains",
    "quadrants_of",
    "quadrant_containing",
    "NW",
    "NE",
    "SW",
    "SE",
]
