"""Handle-indexed value store backing a quadtree.

Exports :class:`ValueStore`, the :class:`Slot` cells it owns and the
:class:`Entry` view handed to callers.
"""

from __future__ import annotations

from .value_store import Entry, Handle, Path, Slot, ValueStore

__all__ = ["ValueStore", "Slot", "Entry", "Handle", "Path"]
