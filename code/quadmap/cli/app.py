from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

import typer
from typer.main import get_command

from quadmap.cfg import RenderConfig
from quadmap.errors import QuadtreeError
from quadmap.raster import occupancy_grid, render_ascii
from quadmap.scene import build_quadtree
from quadmap.utils.loggers import set_log_level
from quadmap.utils.snapshot import save_quadtree

from .common import check_renderable, open_config, open_tree, validate_area

app = typer.Typer(add_completion=False, no_args_is_help=True, rich_markup_mode="rich")


@app.command("build")
def cli_build(
    config: Path = typer.Option(..., "--config", "-c", exists=True, dir_okay=False),
    out: Path = typer.Option(Path("quadtree.json"), "--out", "-o", dir_okay=False),
) -> None:
    cfg = open_config(config)
    set_log_level(cfg.logging.level)

    try:
        tree, handles = build_quadtree(cfg)
        save_quadtree(tree, out)
    except QuadtreeError as exc:
        typer.echo(f"[error] {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Saved {len(handles)} region(s) to {out}")


@app.command("info")
def cli_info(
    tree_path: Path = typer.Option(..., "--tree", "-t", exists=True, dir_okay=False),
    nodes: bool = typer.Option(False, "--nodes/--no-nodes"),
) -> None:
    tree = open_tree(tree_path)
    summary = {
        "depth": tree.depth,
        "width": tree.width,
        "height": tree.height,
        "anchor": list(tree.anchor.as_tuple()),
        "len": len(tree),
        "nodes": tree.num_nodes(),
        "max_node_depth": tree.max_depth(),
        "next_handle": tree.store.next_handle,
    }
    if nodes:
        summary["root"] = tree.as_dict()["root"]
    typer.echo(json.dumps(summary, indent=2))


@app.command("query")
def cli_query(
    tree_path: Path = typer.Option(..., "--tree", "-t", exists=True, dir_okay=False),
    area: str = typer.Option(..., "--area", "-a", help="x,y or x,y,width,height"),
    strict: bool = typer.Option(False, "--strict/--overlapping"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1),
) -> None:
    region = validate_area(area)
    tree = open_tree(tree_path)
    results = tree.query_strict(region) if strict else tree.query(region)
    shown = 0
    for entry in results:
        if limit is not None and shown >= limit:
            break
        x, y, w, h = entry.area.as_tuple()
        typer.echo(f"{entry.handle}\t{x},{y},{w},{h}\t{json.dumps(entry.value, ensure_ascii=False)}")
        shown += 1
    if shown == 0:
        typer.echo("No entries found.", err=True)


@app.command("render")
def cli_render(
    tree_path: Path = typer.Option(..., "--tree", "-t", exists=True, dir_okay=False),
) -> None:
    tree = open_tree(tree_path)
    check_renderable(tree)
    typer.echo(render_ascii(occupancy_grid(tree)))


@app.command("plot")
def cli_plot(
    tree_path: Path = typer.Option(..., "--tree", "-t", exists=True, dir_okay=False),
    out: Path = typer.Option(Path("quadtree.png"), "--out", "-o", dir_okay=False),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="Scene config supplying render and logging defaults.",
    ),
    show_nodes: Optional[bool] = typer.Option(None, "--nodes/--no-nodes"),
    dpi: Optional[int] = typer.Option(None, "--dpi", min=1),
) -> None:
    from quadmap.visualization import plot_quadtree

    render = RenderConfig()
    if config is not None:
        cfg = open_config(config)
        set_log_level(cfg.logging.level)
        render = cfg.render
    if show_nodes is None:
        show_nodes = render.show_nodes
    if dpi is None:
        dpi = render.dpi

    tree = open_tree(tree_path)
    plot_quadtree(tree, out, show_nodes=show_nodes, dpi=dpi)
    typer.echo(f"Saved {out}")


def run(argv: Sequence[str] | None = None, *, prog_name: str | None = None) -> None:
    cmd = get_command(app)
    cmd.main(args=None if argv is None else list(argv), prog_name=prog_name)


def main(argv: list[str] | None = None) -> None:
    run(argv, prog_name="quadmap")


if __name__ == "__main__":
    main()
