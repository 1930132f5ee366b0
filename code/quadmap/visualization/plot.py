from __future__ import annotations

from pathlib import Path
from typing import Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from quadmap.tree import Quadtree
from quadmap.utils.atomic import atomic_replace
from quadmap.utils.loggers import log_figure_saved

from .style import (
    DPI,
    FIGSIZE,
    NODE_EDGE_COLOR,
    NODE_LINEWIDTH,
    REGION_ALPHA,
    REGION_EDGE_COLOR,
    REGION_FACE_COLOR,
)


def draw_quadtree(ax, tree: Quadtree, *, show_nodes: bool = True) -> None:
    if show_nodes:
        for node in tree.iter_nodes():
            a = node.area
            ax.add_patch(
                Rectangle(
                    (a.left_edge, a.top_edge),
                    a.width,
                    a.height,
                    fill=False,
                    edgecolor=NODE_EDGE_COLOR,
                    linewidth=NODE_LINEWIDTH,
                )
            )
    for entry in tree.iter():
        a = entry.area
        ax.add_patch(
            Rectangle(
                (a.left_edge, a.top_edge),
                a.width,
                a.height,
                facecolor=REGION_FACE_COLOR,
                edgecolor=REGION_EDGE_COLOR,
                alpha=REGION_ALPHA,
            )
        )

    r = tree.region
    ax.set_xlim(r.left_edge, r.right_edge)
    # Grid rows grow downwards.
    ax.set_ylim(r.bottom_edge, r.top_edge)
    ax.set_aspect("equal")
    ax.set_xlabel("x")
    ax.set_ylabel("y")


def plot_quadtree(
    tree: Quadtree,
    out_path: Union[str, Path],
    *,
    show_nodes: bool = True,
    dpi: int = DPI,
) -> Path:
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=FIGSIZE)
    try:
        draw_quadtree(ax, tree, show_nodes=show_nodes)
        ax.set_title(f"depth={tree.depth} entries={len(tree)} nodes={tree.num_nodes()}")
        tmp = out.with_suffix(out.suffix + ".tmp")
        fmt = out.suffix.lstrip(".").lower() or "png"
        fig.savefig(str(tmp), dpi=int(dpi), bbox_inches="tight", format=fmt)
        atomic_replace(tmp, out)
    finally:
        plt.close(fig)
    log_figure_saved(out)
    return out
