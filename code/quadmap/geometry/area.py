from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from quadmap.errors import InvalidArea

from .point import COORD_MAX, Point, as_point


@dataclass(frozen=True)
class Area:
    """Axis-aligned rectangle on the integer grid.

    Defined by its top-left ``anchor`` plus a positive ``width`` and ``height``.
    Edges are half-open: the area covers ``[left_edge, right_edge)`` by
    ``[top_edge, bottom_edge)``. Construction validates the geometry and raises
    :class:`~quadmap.errors.InvalidArea` for zero, negative or overflowing
    dimensions.
    """

    anchor: Point
    width: int = 1
    height: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.anchor, Point):
            object.__setattr__(self, "anchor", as_point(self.anchor))
        for name in ("width", "height"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidArea(f"Area {name} must be an int, got {v!r}")
            if v <= 0:
                raise InvalidArea(f"Areas may not have nonpositive {name}s (got {v}).")
        if self.anchor.x + self.width > COORD_MAX or self.anchor.y + self.height > COORD_MAX:
            raise InvalidArea(f"Area {self!r} overflows the coordinate space")

    @classmethod
    def from_xywh(cls, x: int, y: int, width: int = 1, height: int = 1) -> "Area":
        return cls(Point(x, y), width, height)

    @classmethod
    def unit(cls, anchor: object) -> "Area":
        return cls(as_point(anchor), 1, 1)

    def __repr__(self) -> str:
        return f"({self.anchor!r})->{self.width}x{self.height}"

    @property
    def dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def left_edge(self) -> int:
        return self.anchor.x

    @property
    def right_edge(self) -> int:
        return self.anchor.x + self.width

    @property
    def top_edge(self) -> int:
        return self.anchor.y

    @property
    def bottom_edge(self) -> int:
        return self.anchor.y + self.height

    @property
    def center(self) -> Point:
        # Rounded down: a 2x2 area at (0, 0) has its center at (1, 1).
        return Point(self.anchor.x + self.width // 2, self.anchor.y + self.height // 2)

    def intersects(self, other: "Area") -> bool:
        return intersects(self, other)

    def contains(self, other: "Area") -> bool:
        return fully_contains(self, other)

    def contains_point(self, p: object) -> bool:
        return fully_contains(self, Area.unit(p))

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.anchor.x, self.anchor.y, self.width, self.height)


def intersects(a: Area, b: Area) -> bool:
    return (
        a.left_edge < b.right_edge
        and a.right_edge > b.left_edge
        and a.top_edge < b.bottom_edge
        and a.bottom_edge > b.top_edge
    )


def fully_contains(a: Area, b: Area) -> bool:
    return (
        b.left_edge >= a.left_edge
        and b.right_edge <= a.right_edge
        and b.top_edge >= a.top_edge
        and b.bottom_edge <= a.bottom_edge
    )


# Quadrant indices, in child-slot order.
NW, NE, SW, SE = 0, 1, 2, 3


def quadrants_of(area: Area) -> Tuple[Area, Area, Area, Area]:
    """Split ``area`` into four equal quadrants ordered (NW, NE, SW, SE)."""
    assert area.width % 2 == 0 and area.height % 2 == 0, f"cannot split {area!r} evenly"
    hw, hh = area.width // 2, area.height // 2
    x, y = area.anchor.x, area.anchor.y
    return (
        Area(Point(x, y), hw, hh),
        Area(Point(x + hw, y), hw, hh),
        Area(Point(x, y + hh), hw, hh),
        Area(Point(x + hw, y + hh), hw, hh),
    )


def quadrant_containing(outer: Area, target: Area) -> Optional[int]:
    """Index of the single quadrant of ``outer`` fully containing ``target``.

    ``target`` must already fit inside ``outer``. Returns ``None`` when it
    straddles a quadrant boundary.
    """
    mid = outer.center
    if target.right_edge <= mid.x:
        col = 0
    elif target.left_edge >= mid.x:
        col = 1
    else:
        return None
    if target.bottom_edge <= mid.y:
        row = 0
    elif target.top_edge >= mid.y:
        row = 1
    else:
        return None
    return row * 2 + col


def as_area(obj: object) -> Area:
    """Coerce ``obj`` into an :class:`Area`.

    Accepts an ``Area``, a ``Point`` or ``(x, y)`` (unit area), or
    ``((x, y), (width, height))``.
    """
    if isinstance(obj, Area):
        return obj
    if isinstance(obj, Point):
        return Area.unit(obj)
    try:
        first, second = obj  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise InvalidArea(f"Cannot interpret {obj!r} as an area") from exc
    if isinstance(first, int) and not isinstance(first, bool):
        return Area.unit((first, second))
    try:
        w, h = second
    except (TypeError, ValueError) as exc:
        raise InvalidArea(f"Cannot interpret {obj!r} as an area") from exc
    return Area(as_point(first), w, h)
