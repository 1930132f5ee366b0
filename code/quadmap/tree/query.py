from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional

from quadmap.geometry import Area, fully_contains, intersects
from quadmap.store import Entry, Handle, ValueStore

from .node import QuadNode


class Traversal(Enum):
    OVERLAPPING = "overlapping"
    STRICT = "strict"

    def matches(self, region: Area, query: Area) -> bool:
        if self is Traversal.STRICT:
            return fully_contains(query, region)
        return intersects(query, region)


def _walk(
    root: QuadNode, store: ValueStore, area: Area, traversal: Traversal
) -> Iterator[Entry]:
    stack: List[QuadNode] = [root]
    while stack:
        node = stack.pop()
        if not intersects(node.area, area):
            continue
        # Snapshot the local pairs so a delete between steps cannot skip one.
        for region, handle in tuple(node.items):
            if not traversal.matches(region, area):
                continue
            slot = store.slot(handle)
            if slot is None:
                continue
            yield Entry(slot)
        stack.extend(reversed(node.present_children()))


class Query:
    """Lazy, single-pass sequence of entries matching a query area.

    Nodes are visited depth first; a node whose area misses the query area is
    pruned together with its subtree. Result order is unspecified.
    """

    def __init__(
        self,
        root: QuadNode,
        store: ValueStore,
        area: Area,
        traversal: Traversal = Traversal.OVERLAPPING,
    ) -> None:
        self.area = area
        self.traversal = traversal
        self._it = _walk(root, store, area, traversal)

    def __iter__(self) -> "Query":
        return self

    def __next__(self) -> Entry:
        return next(self._it)

    def first(self) -> Optional[Entry]:
        return next(self._it, None)

    def handles(self) -> List[Handle]:
        return [e.handle for e in self._it]

    def count(self) -> int:
        return sum(1 for _ in self._it)
