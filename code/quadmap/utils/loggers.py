from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path

_DEFAULT_LOGGER_NAME = "quadmap"


def get_logger(name: str | None = None) -> Logger:
    base = logging.getLogger(_DEFAULT_LOGGER_NAME)
    if not base.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        base.addHandler(handler)
        base.setLevel(logging.INFO)
        base.propagate = False
    return base if name is None else base.getChild(str(name))


def set_log_level(level: str | int) -> None:
    lvl = logging.getLevelName(str(level).upper()) if isinstance(level, str) else int(level)
    if not isinstance(lvl, int):
        raise ValueError(f"Unknown log level: {level!r}")
    get_logger().setLevel(lvl)


def log_snapshot_saved(path: Path | str, n_entries: int) -> None:
    get_logger("snapshot").info("Saved quadtree snapshot with %d entries to %s", n_entries, path)


def log_snapshot_loaded(path: Path | str, n_entries: int, depth: int) -> None:
    get_logger("snapshot").info(
        "Loaded quadtree snapshot from %s (depth=%d, entries=%d)", path, depth, n_entries
    )


def log_config_loaded(path: Path | str, n_regions: int) -> None:
    get_logger("cfg").debug("Loaded scene config %s with %d region(s)", path, n_regions)


def log_scene_built(depth: int, n_inserted: int, n_nodes: int) -> None:
    get_logger("build").info(
        "Built quadtree depth=%d with %d region(s) across %d node(s)", depth, n_inserted, n_nodes
    )


def log_figure_saved(path: Path | str) -> None:
    get_logger("plot").info("Saved quadtree figure to %s", path)
