import numpy as np

from quadmap.geometry import Area, fully_contains, quadrant_containing
from quadmap.tree import QuadNode, Quadtree


def _assert_placement_invariant(tree: Quadtree) -> None:
    for node in tree.iter_nodes():
        for region, handle in node.items:
            assert fully_contains(node.area, region)
            if node.depth < tree.depth:
                assert quadrant_containing(node.area, region) is None
            assert tree.store.slot(handle).area == region


def test_place_descends_to_shallowest_containing_node():
    root = QuadNode(area=Area.from_xywh(0, 0, 16, 16), depth=0, max_depth=4)

    assert root.place(Area.from_xywh(0, 0, 2, 1), 0) == (0, 0, 0)
    assert root.place(Area.from_xywh(8, 8), 1) == (3, 0, 0, 0)
    assert root.place(Area.from_xywh(7, 7, 2, 2), 2) == ()

    assert root.items == [(Area.from_xywh(7, 7, 2, 2), 2)]
    node = root.descend((0, 0, 0))
    assert node.area == Area.from_xywh(0, 0, 2, 2)
    assert node.depth == 3
    assert node.items == [(Area.from_xywh(0, 0, 2, 1), 0)]
    leaf = root.descend((3, 0, 0, 0))
    assert leaf.area == Area.from_xywh(8, 8)
    assert leaf.depth == 4


def test_children_are_materialized_lazily():
    root = QuadNode(area=Area.from_xywh(0, 0, 8, 8), depth=0, max_depth=3)
    assert root.children is None
    assert root.is_leaf

    root.place(Area.from_xywh(0, 0), 0)
    assert root.children is not None
    assert root.children[0] is not None
    assert root.children[1:] == [None, None, None]
    assert root.node_count() == 4
    assert root.deepest() == 3


def test_remove_scans_local_items_only():
    root = QuadNode(area=Area.from_xywh(0, 0, 4, 4), depth=0, max_depth=2)
    root.place(Area.from_xywh(1, 1, 2, 2), 5)
    root.place(Area.from_xywh(1, 1, 2, 2), 6)
    assert root.remove(5)
    assert not root.remove(5)
    assert root.items == [(Area.from_xywh(1, 1, 2, 2), 6)]


def test_emptied_children_stay_allocated(tree16):
    h = tree16.insert(Area.from_xywh(3, 3), "x")
    nodes_before = tree16.num_nodes()
    tree16.delete(h)
    assert tree16.num_nodes() == nodes_before


def test_placement_invariant_holds_for_random_regions():
    rng = np.random.default_rng(0)
    tree = Quadtree(5)
    for i in range(300):
        x, y = (int(v) for v in rng.integers(0, 32, size=2))
        w = int(rng.integers(1, 32 - x + 1))
        h = int(rng.integers(1, 32 - y + 1))
        tree.insert(Area.from_xywh(x, y, w, h), i)
    _assert_placement_invariant(tree)
    assert sum(len(n.items) for n in tree.iter_nodes()) == len(tree) == 300


def test_as_dict_describes_structure(tree16):
    tree16.insert(Area.from_xywh(7, 7, 2, 2), "root-level")
    d = tree16.as_dict()
    assert d["depth"] == 4
    assert d["len"] == 1
    assert d["root"]["area"] == [0, 0, 16, 16]
    assert d["root"]["handles"] == [0]
    assert "children" not in d["root"]
