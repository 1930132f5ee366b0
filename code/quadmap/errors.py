from __future__ import annotations

from typing import Any


class QuadtreeError(Exception):
    pass


class InvalidArea(QuadtreeError, ValueError):
    """Degenerate geometry: non-positive dimensions, negative anchor or overflow."""


class OutOfBounds(QuadtreeError):
    """An inserted area is not fully contained by the tree's region."""

    def __init__(self, area: Any, bounds: Any) -> None:
        super().__init__(f"Area {area!r} does not fit inside quadtree region {bounds!r}")
        self.area = area
        self.bounds = bounds


class SnapshotError(QuadtreeError):
    pass


__all__ = ["QuadtreeError", "InvalidArea", "OutOfBounds", "SnapshotError"]
