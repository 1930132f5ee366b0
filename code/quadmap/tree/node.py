from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from quadmap.geometry import Area, quadrant_containing, quadrants_of
from quadmap.store import Handle, Path

Item = Tuple[Area, Handle]


@dataclass
class QuadNode:
    area: Area
    depth: int
    max_depth: int
    items: List[Item] = field(default_factory=list)
    # None until the first descent; then one slot per quadrant (NW, NE, SW, SE).
    children: Optional[List[Optional["QuadNode"]]] = None

    @property
    def is_leaf(self) -> bool:
        return self.children is None or all(c is None for c in self.children)

    def present_children(self) -> List["QuadNode"]:
        if self.children is None:
            return []
        return [c for c in self.children if c is not None]

    def child(self, index: int) -> "QuadNode":
        assert self.depth < self.max_depth, "nodes at max depth cannot subdivide"
        if self.children is None:
            self.children = [None, None, None, None]
        node = self.children[index]
        if node is None:
            node = QuadNode(
                area=quadrants_of(self.area)[index],
                depth=self.depth + 1,
                max_depth=self.max_depth,
            )
            self.children[index] = node
        return node

    def place(self, area: Area, handle: Handle) -> Path:
        """Store ``(area, handle)`` at the deepest node fully containing ``area``.

        Returns the quadrant path from this node to the placement node.
        """
        node: QuadNode = self
        path: List[int] = []
        while node.depth < node.max_depth:
            idx = quadrant_containing(node.area, area)
            if idx is None:
                break
            node = node.child(idx)
            path.append(idx)
        node.items.append((area, handle))
        return tuple(path)

    def descend(self, path: Path) -> Optional["QuadNode"]:
        node: Optional[QuadNode] = self
        for idx in path:
            if node is None or node.children is None:
                return None
            node = node.children[idx]
        return node

    def remove(self, handle: Handle) -> bool:
        for i, (_, h) in enumerate(self.items):
            if h == handle:
                del self.items[i]
                return True
        return False

    def reset(self) -> None:
        self.items.clear()
        self.children = None

    def iter_nodes(self) -> Iterator["QuadNode"]:
        stack: List[QuadNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.present_children()))

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def deepest(self) -> int:
        return max(n.depth for n in self.iter_nodes())

    def as_dict(self) -> dict:
        d = {
            "area": list(self.area.as_tuple()),
            "depth": self.depth,
            "handles": [h for _, h in self.items],
        }
        if self.children is not None:
            d["children"] = [None if c is None else c.as_dict() for c in self.children]
        return d
