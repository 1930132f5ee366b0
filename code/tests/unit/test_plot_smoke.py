from pathlib import Path

from quadmap.geometry import Area
from quadmap.tree import Quadtree
from quadmap.visualization import plot_quadtree


def test_plot_quadtree_writes_file(tmp_path: Path) -> None:
    qt = Quadtree(4)
    qt.insert(Area.from_xywh(0, 0, 2, 1), "foo")
    qt.insert(Area.from_xywh(7, 7, 2, 2), "mid")
    qt.insert(Area.from_xywh(12, 3), "bar")

    out = plot_quadtree(qt, tmp_path / "plots" / "tree.png", dpi=50)
    assert out.exists()
    assert out.stat().st_size > 0
    assert not (tmp_path / "plots" / "tree.png.tmp").exists()


def test_plot_without_nodes(tmp_path: Path) -> None:
    out = plot_quadtree(Quadtree(2), tmp_path / "empty.png", show_nodes=False, dpi=50)
    assert out.exists()
