from __future__ import annotations

from .plot import draw_quadtree, plot_quadtree

__all__ = ["draw_quadtree", "plot_quadtree"]
