from quadmap.geometry import Area
from quadmap.tree import Quadtree


def test_get_and_get_mut_for_unknown_handles(tree16):
    assert tree16.get(0) is None
    assert tree16.get_mut(0) is None
    assert tree16.delete(0) is None
    assert tree16.delete_entry(0) is None


def test_get_mut_replaces_value(tree16):
    h = tree16.insert(Area.from_xywh(0, 1, 2, 3), 9.87)
    entry = tree16.get_mut(h)
    entry.value += 1.0
    assert tree16.get(h) == 9.87 + 1.0
    assert entry.area == Area.from_xywh(0, 1, 2, 3)
    assert entry.handle == h
    assert (entry.width, entry.height) == (2, 3)


def test_delete_returns_value_then_nothing(tree16):
    h = tree16.insert(Area.from_xywh(3, 3), "v")
    assert tree16.delete(h) == "v"
    assert tree16.get(h) is None
    assert tree16.delete(h) is None
    assert len(tree16) == 0
    assert tree16.query(tree16.region).first() is None


def test_delete_in_removes_intersecting_entries(tree16):
    tree16.insert(Area.from_xywh(0, 0, 2, 2), 1.23)
    tree16.insert(Area.from_xywh(1, 1, 3, 2), 4.56)
    removed = tree16.delete_in(Area.from_xywh(2, 1))
    assert [e.value for e in removed] == [4.56]
    assert len(tree16) == 1
    assert list(tree16.values()) == [1.23]


def test_delete_strict_only_removes_contained_entries(tree16):
    tree16.insert(Area.from_xywh(0, 0, 2, 2), "in")
    tree16.insert(Area.from_xywh(1, 1, 4, 4), "partial")
    removed = tree16.delete_strict(Area.from_xywh(0, 0, 3, 3))
    assert [e.value for e in removed] == ["in"]
    assert list(tree16.values()) == ["partial"]


def test_retain_keeps_matching_values(tree16):
    for i in range(6):
        tree16.insert(Area.from_xywh(i, i), i)
    removed = tree16.retain(lambda v: v % 2 == 0)
    assert sorted(e.value for e in removed) == [1, 3, 5]
    assert sorted(tree16.values()) == [0, 2, 4]


def test_modify_variants(tree16):
    a = tree16.insert(Area.from_xywh(0, 0), True)
    b = tree16.insert(Area.from_xywh(0, 0, 4, 4), True)
    c = tree16.insert(Area.from_xywh(10, 10), True)

    assert tree16.modify(Area.from_xywh(0, 0), lambda v: False) == 2
    assert (tree16.get(a), tree16.get(b), tree16.get(c)) == (False, False, True)

    assert tree16.modify_strict(Area.from_xywh(0, 0, 2, 2), lambda v: "strict") == 1
    assert (tree16.get(a), tree16.get(b)) == ("strict", False)

    assert tree16.modify_all(lambda v: None) == 3
    assert tree16.get(c) is None
    assert c in tree16


def test_reset_empties_but_keeps_counting(tree16):
    tree16.insert(Area.from_xywh(1, 1), "a")
    tree16.insert(Area.from_xywh(9, 9), "b")
    tree16.reset()
    assert len(tree16) == 0
    assert tree16.num_nodes() == 1
    assert tree16.insert(Area.from_xywh(1, 1), "c") == 2


def test_delete_from_deep_and_shallow_nodes():
    qt = Quadtree(6)
    deep = qt.insert(Area.from_xywh(63, 63), "deep")
    shallow = qt.insert(Area.from_xywh(31, 31, 2, 2), "shallow")
    assert qt.store.slot(deep).path == (3, 3, 3, 3, 3, 3)
    assert qt.store.slot(shallow).path == ()
    assert qt.delete(deep) == "deep"
    assert qt.delete(shallow) == "shallow"
    assert all(not n.items for n in qt.iter_nodes())
