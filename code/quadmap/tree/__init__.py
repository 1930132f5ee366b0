"""Quadtree engine: nodes, placement, lazy queries and the top-level tree.

Exports :class:`Quadtree`, :class:`QuadNode`, :class:`Query` and
:class:`Traversal`.
"""

from __future__ import annotations

from .node import QuadNode
from .quadtree import Quadtree
from .query import Query, Traversal

__all__ = ["Quadtree", "QuadNode", "Query", "Traversal"]
