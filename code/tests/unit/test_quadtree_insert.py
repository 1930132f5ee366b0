import pytest

from quadmap.errors import OutOfBounds
from quadmap.geometry import Area, Point
from quadmap.tree import Quadtree


def test_construction_fixes_dimensions():
    qt = Quadtree(4)
    assert qt.depth == 4
    assert qt.width == 16
    assert qt.height == 16
    assert qt.anchor == Point(0, 0)
    assert qt.region == Area.from_xywh(0, 0, 16, 16)
    assert len(qt) == 0
    assert qt.is_empty()


@pytest.mark.parametrize("depth", [0, -1])
def test_nonpositive_depth_is_rejected(depth):
    with pytest.raises(ValueError):
        Quadtree(depth)


def test_depth_overflowing_coordinates_is_rejected():
    with pytest.raises(ValueError):
        Quadtree(64)


def test_huge_depth_is_rejected_without_sizing_the_region():
    with pytest.raises(ValueError, match="depth must be <= 63"):
        Quadtree(10**9)
    assert Quadtree(63).width == 2**63


def test_anchored_tree():
    qt = Quadtree(3, anchor=(2, 4))
    assert qt.region == Area.from_xywh(2, 4, 8, 8)
    assert qt.contains(Area.from_xywh(2, 4, 8, 8))
    assert not qt.contains(Area.from_xywh(1, 4))
    h = qt.insert(Area.from_xywh(9, 11), "corner")
    assert qt.get(h) == "corner"
    with pytest.raises(OutOfBounds):
        qt.insert(Area.from_xywh(10, 4), "outside")


def test_insert_returns_handle_and_get_returns_value(tree16):
    h = tree16.insert(Area.from_xywh(0, 0, 2, 1), "foo")
    assert tree16.get(h) == "foo"
    assert h in tree16
    assert len(tree16) == 1


def test_out_of_bounds_leaves_tree_untouched(tree16):
    tree16.insert(Area.from_xywh(0, 0), "a")
    for bad in [Area.from_xywh(15, 15, 2, 1), Area.from_xywh(0, 10, 1, 7), Area.from_xywh(16, 0)]:
        with pytest.raises(OutOfBounds) as exc_info:
            tree16.insert(bad, "b")
        assert exc_info.value.area == bad
        assert exc_info.value.bounds == tree16.region
    assert len(tree16) == 1
    assert tree16.store.next_handle == 1


def test_multiset_semantics(tree16):
    region = Area.from_xywh(4, 5, 2, 3)
    h1 = tree16.insert(region, 5)
    h2 = tree16.insert(region, 5)
    assert h1 != h2
    assert len(tree16) == 2
    assert tree16.delete(h1) == 5
    assert tree16.get(h2) == 5
    assert tree16.query(region).handles() == [h2]


def test_handles_are_never_reused(tree16):
    seen = []
    for i in range(50):
        h = tree16.insert(Area.from_xywh(i % 16, (i * 7) % 16), i)
        seen.append(h)
        if i % 3 == 0:
            tree16.delete(h)
        if i % 10 == 9:
            tree16.reset()
    assert len(set(seen)) == len(seen)
    assert seen == sorted(seen)


def test_unhashable_and_incomparable_values(tree16):
    h1 = tree16.insert(Area.from_xywh(1, 1), {"a": [1, 2]})
    h2 = tree16.insert(Area.from_xywh(1, 1), object())
    assert tree16.get(h1) == {"a": [1, 2]}
    assert tree16.get(h2) is not None


def test_insert_pt_uses_unit_area(tree16):
    h = tree16.insert_pt((1, 2), "p")
    assert tree16.get_mut(h).area == Area.from_xywh(1, 2)
    with pytest.raises(OutOfBounds):
        tree16.insert_pt(Point(16, 0), "q")


def test_bulk_insert_is_all_or_nothing(tree16):
    handles = tree16.bulk_insert([((0, 0), "a"), (((2, 2), (3, 3)), "b")])
    assert handles == [0, 1]

    with pytest.raises(OutOfBounds):
        tree16.bulk_insert([((1, 1), "c"), (((14, 14), (4, 4)), "d")])
    assert len(tree16) == 2
    assert tree16.store.next_handle == 2
