from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from quadmap.errors import InvalidArea

# Coordinates live in the unsigned 64-bit range.
COORD_MAX: int = 2**64 - 1
# Deepest tree whose square of side 2**depth still fits in that range.
MAX_DEPTH: int = 63


def _check_coord(v: object, name: str) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise InvalidArea(f"{name} must be an int, got {v!r}")
    if v < 0:
        raise InvalidArea(f"{name} must be >= 0, got {v}")
    if v > COORD_MAX:
        raise InvalidArea(f"{name}={v} overflows the coordinate space")
    return int(v)


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def __post_init__(self) -> None:
        _check_coord(self.x, "x")
        _check_coord(self.y, "y")

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"{self.x}x{self.y}"

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


def as_point(p: object) -> Point:
    if isinstance(p, Point):
        return p
    try:
        x, y = p  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise InvalidArea(f"Expected an (x, y) pair, got {p!r}") from exc
    return Point(x, y)
