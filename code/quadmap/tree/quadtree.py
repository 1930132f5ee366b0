from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Tuple

from quadmap.errors import InvalidArea, OutOfBounds, SnapshotError
from quadmap.geometry import COORD_MAX, MAX_DEPTH, Area, Point, as_area, as_point
from quadmap.store import Entry, Handle, ValueStore

from .node import QuadNode
from .query import Query, Traversal

SNAPSHOT_FORMAT = 1


class Quadtree:
    """Region quadtree mapping possibly-overlapping areas to values.

    The tree covers a square of side ``2**depth`` anchored at ``anchor``.
    Every insertion returns a fresh integer handle; handles are never reused,
    so looking up a deleted handle simply yields ``None``. The same area may
    hold any number of values.
    """

    def __init__(self, depth: int, anchor: object = (0, 0)) -> None:
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise ValueError(f"depth must be an int, got {depth!r}")
        if depth <= 0:
            raise ValueError("depth must be > 0")
        if depth > MAX_DEPTH:
            raise ValueError(f"depth must be <= {MAX_DEPTH}, got {depth}")
        origin = as_point(anchor)
        side = 2**depth
        if origin.x + side > COORD_MAX or origin.y + side > COORD_MAX:
            raise ValueError(f"depth={depth} at anchor {origin!r} overflows the coordinate space")

        self._depth = int(depth)
        self.root = QuadNode(area=Area(origin, side, side), depth=0, max_depth=self._depth)
        self.store = ValueStore()

    # Accessors

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def width(self) -> int:
        return self.root.area.width

    @property
    def height(self) -> int:
        return self.root.area.height

    @property
    def anchor(self) -> Point:
        return self.root.area.anchor

    @property
    def region(self) -> Area:
        return self.root.area

    def __len__(self) -> int:
        return len(self.store)

    def is_empty(self) -> bool:
        return self.store.is_empty()

    def __contains__(self, handle: object) -> bool:
        return handle in self.store

    def __repr__(self) -> str:
        return f"Quadtree(depth={self._depth}, region={self.region!r}, len={len(self)})"

    def contains(self, area: object) -> bool:
        """Whether ``area`` would fit inside the tree's region."""
        return self.root.area.contains(as_area(area))

    # Insertion

    def insert(self, area: object, value: Any) -> Handle:
        region = as_area(area)
        if not self.root.area.contains(region):
            raise OutOfBounds(region, self.root.area)
        handle = self.store.allocate(value, region)
        self.store.locate(handle, self.root.place(region, handle))
        return handle

    def insert_pt(self, point: object, value: Any) -> Handle:
        return self.insert(Area.unit(point), value)

    def bulk_insert(self, items: Iterable[Tuple[object, Any]]) -> List[Handle]:
        """Insert many ``(area, value)`` pairs; nothing is inserted if any area misses."""
        pending: List[Tuple[Area, Any]] = []
        for area, value in items:
            region = as_area(area)
            if not self.root.area.contains(region):
                raise OutOfBounds(region, self.root.area)
            pending.append((region, value))
        return [self.insert(region, value) for region, value in pending]

    # Lookup

    def get(self, handle: Handle, default: Any = None) -> Any:
        return self.store.get(handle, default)

    def get_mut(self, handle: Handle) -> Optional[Entry]:
        return self.store.get_mut(handle)

    def query(self, area: object) -> Query:
        return Query(self.root, self.store, as_area(area), Traversal.OVERLAPPING)

    def query_strict(self, area: object) -> Query:
        return Query(self.root, self.store, as_area(area), Traversal.STRICT)

    def iter(self) -> Query:
        return Query(self.root, self.store, self.root.area, Traversal.OVERLAPPING)

    def __iter__(self) -> Iterator[Entry]:
        return self.iter()

    def regions(self) -> Iterator[Area]:
        return (e.area for e in self.iter())

    def values(self) -> Iterator[Any]:
        return (e.value for e in self.iter())

    def handles(self) -> Iterator[Handle]:
        return (e.handle for e in self.iter())

    # Mutation

    def modify(self, area: object, fn: Callable[[Any], Any]) -> int:
        return self._modify(self.query(area), fn)

    def modify_strict(self, area: object, fn: Callable[[Any], Any]) -> int:
        return self._modify(self.query_strict(area), fn)

    def modify_all(self, fn: Callable[[Any], Any]) -> int:
        return self._modify(self.iter(), fn)

    def _modify(self, entries: Iterable[Entry], fn: Callable[[Any], Any]) -> int:
        n = 0
        for e in entries:
            e.value = fn(e.value)
            n += 1
        return n

    # Deletion

    def delete(self, handle: Handle) -> Any:
        entry = self.delete_entry(handle)
        return None if entry is None else entry.value

    def delete_entry(self, handle: Handle) -> Optional[Entry]:
        slot = self.store.slot(handle)
        if slot is None:
            return None
        node = self.root.descend(slot.path)
        assert node is not None, f"placement node for handle {handle} is missing"
        removed = node.remove(handle)
        assert removed, f"handle {handle} not found at its placement node"
        self.store.deregister(handle)
        return Entry(slot)

    def delete_in(self, area: object) -> List[Entry]:
        return self._delete_handles(self.query(area).handles())

    def delete_strict(self, area: object) -> List[Entry]:
        return self._delete_handles(self.query_strict(area).handles())

    def retain(self, predicate: Callable[[Any], bool]) -> List[Entry]:
        """Keep only values for which ``predicate`` holds; return the removed entries."""
        doomed = [e.handle for e in self.iter() if not predicate(e.value)]
        return self._delete_handles(doomed)

    def _delete_handles(self, handles: Iterable[Handle]) -> List[Entry]:
        out: List[Entry] = []
        for h in handles:
            entry = self.delete_entry(h)
            if entry is not None:
                out.append(entry)
        return out

    def reset(self) -> None:
        """Drop every value; the handle counter keeps counting."""
        self.store.clear()
        self.root.reset()

    # Structure

    def num_nodes(self) -> int:
        return self.root.node_count()

    def max_depth(self) -> int:
        return self.root.deepest()

    def iter_nodes(self) -> Iterator[QuadNode]:
        return self.root.iter_nodes()

    def as_dict(self) -> dict:
        return {
            "depth": self._depth,
            "anchor": list(self.anchor.as_tuple()),
            "len": len(self),
            "root": self.root.as_dict(),
        }

    # Snapshots

    def state_dict(self) -> dict:
        entries = []
        for h in sorted(self.store):
            slot = self.store.slot(h)
            assert slot is not None
            entries.append({"handle": h, "area": list(slot.area.as_tuple()), "value": slot.value})
        return {
            "format": SNAPSHOT_FORMAT,
            "depth": self._depth,
            "anchor": list(self.anchor.as_tuple()),
            "next_handle": self.store.next_handle,
            "entries": entries,
        }

    @classmethod
    def from_state_dict(cls, state: Mapping[str, Any]) -> "Quadtree":
        if not isinstance(state, Mapping):
            raise SnapshotError(f"Snapshot must be a mapping, got {type(state).__name__}")
        missing = {"depth", "entries"} - set(state.keys())
        if missing:
            raise SnapshotError(f"Snapshot missing field(s): {', '.join(sorted(missing))}")
        fmt = state.get("format", SNAPSHOT_FORMAT)
        if fmt != SNAPSHOT_FORMAT:
            raise SnapshotError(f"Unsupported snapshot format {fmt!r}")

        try:
            tree = cls(int(state["depth"]), anchor=tuple(state.get("anchor", (0, 0))))
        except (TypeError, ValueError) as exc:
            raise SnapshotError(f"Invalid snapshot header: {exc}") from exc

        entries = state["entries"]
        if not isinstance(entries, list):
            raise SnapshotError("Snapshot entries must be a list")
        for i, rec in enumerate(entries):
            try:
                handle = int(rec["handle"])
                area = Area.from_xywh(*rec["area"])
                value = rec["value"]
            except (KeyError, TypeError, ValueError, InvalidArea) as exc:
                raise SnapshotError(f"Invalid snapshot entry #{i}: {exc}") from exc
            if not tree.root.area.contains(area):
                raise SnapshotError(f"Snapshot entry #{i} lies outside {tree.region!r}")
            try:
                tree.store.restore(handle, value, area)
            except ValueError as exc:
                raise SnapshotError(f"Invalid snapshot entry #{i}: {exc}") from exc
            tree.store.locate(handle, tree.root.place(area, handle))

        next_handle = state.get("next_handle")
        if next_handle is not None:
            try:
                tree.store.next_handle = int(next_handle)
            except (TypeError, ValueError) as exc:
                raise SnapshotError(f"Invalid next_handle: {exc}") from exc
        return tree
