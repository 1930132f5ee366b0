from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from quadmap.geometry import Area

Handle = int
Path = Tuple[int, ...]


@dataclass
class Slot:
    """Storage cell for one inserted value.

    ``path`` lists the quadrant indices leading from the root to the node
    where the value's area was placed.
    """

    handle: Handle
    area: Area
    value: Any
    path: Path = ()


class Entry:
    """A stored area, its handle and write-through access to its value."""

    __slots__ = ("_slot",)

    def __init__(self, slot: Slot) -> None:
        self._slot = slot

    @property
    def area(self) -> Area:
        return self._slot.area

    @property
    def handle(self) -> Handle:
        return self._slot.handle

    @property
    def value(self) -> Any:
        return self._slot.value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._slot.value = new_value

    @property
    def anchor(self):
        return self._slot.area.anchor

    @property
    def width(self) -> int:
        return self._slot.area.width

    @property
    def height(self) -> int:
        return self._slot.area.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return (self.handle, self.area, self.value) == (other.handle, other.area, other.value)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Entry(handle={self.handle}, area={self.area!r}, value={self.value!r})"


class ValueStore:
    """Handle-indexed table owning every value stored in a quadtree.

    Handles come from a monotonically increasing counter and are never
    reissued, so a stale handle always resolves to nothing.
    """

    def __init__(self) -> None:
        self._slots: Dict[Handle, Slot] = {}
        self._next_handle: Handle = 0
        self._live: int = 0

    def allocate(self, value: Any, area: Area) -> Handle:
        handle = self._next_handle
        self._next_handle += 1
        self._slots[handle] = Slot(handle=handle, area=area, value=value)
        self._live += 1
        return handle

    def restore(self, handle: Handle, value: Any, area: Area) -> None:
        handle = int(handle)
        if handle < 0:
            raise ValueError(f"handle must be >= 0, got {handle}")
        if handle in self._slots:
            raise ValueError(f"handle {handle} is already registered")
        self._slots[handle] = Slot(handle=handle, area=area, value=value)
        self._live += 1
        self._next_handle = max(self._next_handle, handle + 1)

    def locate(self, handle: Handle, path: Path) -> None:
        self._slots[handle].path = tuple(path)

    def slot(self, handle: Handle) -> Optional[Slot]:
        return self._slots.get(handle)

    def get(self, handle: Handle, default: Any = None) -> Any:
        slot = self._slots.get(handle)
        return default if slot is None else slot.value

    def get_mut(self, handle: Handle) -> Optional[Entry]:
        slot = self._slots.get(handle)
        return None if slot is None else Entry(slot)

    def deregister(self, handle: Handle) -> Optional[Slot]:
        slot = self._slots.pop(handle, None)
        if slot is not None:
            self._live -= 1
        return slot

    def clear(self) -> None:
        self._slots.clear()
        self._live = 0

    @property
    def next_handle(self) -> Handle:
        return self._next_handle

    @next_handle.setter
    def next_handle(self, value: Handle) -> None:
        if int(value) < self._next_handle:
            raise ValueError("the handle counter may not move backwards")
        self._next_handle = int(value)

    def __contains__(self, handle: object) -> bool:
        return handle in self._slots

    def __iter__(self) -> Iterator[Handle]:
        return iter(self._slots)

    def __len__(self) -> int:
        return self._live

    def is_empty(self) -> bool:
        return self._live == 0
