from ._version import __version__
from .errors import InvalidArea, OutOfBounds, QuadtreeError, SnapshotError
from .geometry import Area, Point, as_area, fully_contains, intersects, quadrants_of
from .store import Entry, Handle
from .tree import Quadtree, Query
from .utils.snapshot import load_quadtree, save_quadtree

__all__ = (
    "__version__",
    "Area",
    "Point",
    "as_area",
    "intersects",
    "fully_contains",
    "quadrants_of",
    "Quadtree",
    "Query",
    "Entry",
    "Handle",
    "QuadtreeError",
    "InvalidArea",
    "OutOfBounds",
    "SnapshotError",
    "save_quadtree",
    "load_quadtree",
)
