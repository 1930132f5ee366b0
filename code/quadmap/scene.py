from __future__ import annotations

from typing import List, Tuple

from quadmap.cfg import Config
from quadmap.geometry import Area
from quadmap.store import Handle
from quadmap.tree import Quadtree
from quadmap.utils.loggers import log_scene_built


def build_quadtree(cfg: Config) -> Tuple[Quadtree, List[Handle]]:
    """Create the tree described by ``cfg`` and insert its regions in order."""
    tree = Quadtree(cfg.tree.depth, anchor=cfg.tree.anchor)
    handles = tree.bulk_insert(
        (Area.from_xywh(r.x, r.y, r.width, r.height), r.value) for r in cfg.regions
    )
    log_scene_built(tree.depth, len(handles), tree.num_nodes())
    return tree, handles
