from __future__ import annotations

import numpy as np

from quadmap.tree import Quadtree

_SHADES = (" ", "░", "▒", "▓", "█")


def occupancy_grid(tree: Quadtree) -> np.ndarray:
    """Per-cell count of stored regions, shaped ``(height, width)``.

    Cell ``[row, col]`` corresponds to grid point ``(anchor.x + col, anchor.y + row)``.
    """
    grid = np.zeros((tree.height, tree.width), dtype=np.int64)
    ox, oy = tree.anchor.x, tree.anchor.y
    for area in tree.regions():
        grid[
            area.top_edge - oy : area.bottom_edge - oy,
            area.left_edge - ox : area.right_edge - ox,
        ] += 1
    return grid


def render_ascii(grid: np.ndarray) -> str:
    g = np.asarray(grid)
    if g.ndim != 2:
        raise ValueError(f"grid must be 2-D, got shape {g.shape}")
    idx = np.clip(g, 0, len(_SHADES) - 1)
    width = g.shape[1]
    lines = ["┌" + "─" * width + "┐"]
    for row in idx:
        lines.append("│" + "".join(_SHADES[int(v)] for v in row) + "│")
    lines.append("└" + "─" * width + "┘")
    return "\n".join(lines)
