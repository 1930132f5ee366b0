from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from quadmap.errors import SnapshotError
from quadmap.tree import Quadtree

from .atomic import atomic_write_text
from .loggers import log_snapshot_loaded, log_snapshot_saved


def save_quadtree(tree: Quadtree, path: Union[str, Path]) -> Path:
    """Write ``tree`` as JSON; stored values must be JSON-serializable."""
    p = Path(path)
    try:
        text = json.dumps(tree.state_dict(), ensure_ascii=False, indent=2)
    except TypeError as exc:
        raise SnapshotError(f"Quadtree values are not JSON-serializable: {exc}") from exc
    atomic_write_text(p, text + "\n")
    log_snapshot_saved(p, len(tree))
    return p


def load_quadtree(path: Union[str, Path]) -> Quadtree:
    p = Path(path)
    if not p.exists():
        raise SnapshotError(f"Snapshot file not found: {p}")
    try:
        state = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SnapshotError(f"Failed to read snapshot {p}: {exc}") from exc
    tree = Quadtree.from_state_dict(state)
    log_snapshot_loaded(p, len(tree), tree.depth)
    return tree
