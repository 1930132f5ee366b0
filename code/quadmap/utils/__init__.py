from __future__ import annotations

from .atomic import atomic_replace, atomic_write_text
from .loggers import get_logger, set_log_level
from .snapshot import load_quadtree, save_quadtree

__all__ = [
    "atomic_replace",
    "atomic_write_text",
    "get_logger",
    "set_log_level",
    "save_quadtree",
    "load_quadtree",
]
