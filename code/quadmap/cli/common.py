from __future__ import annotations

from pathlib import Path

import typer

from quadmap.cfg import Config, ConfigError, load_config
from quadmap.errors import QuadtreeError
from quadmap.geometry import Area
from quadmap.tree import Quadtree
from quadmap.utils.snapshot import load_quadtree

from .validators import parse_area

MAX_RENDER_DEPTH = 8


def validate_area(text: str, *, option: str = "--area") -> Area:
    try:
        return parse_area(text, name=option)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def open_tree(path: Path) -> Quadtree:
    try:
        return load_quadtree(path)
    except QuadtreeError as exc:
        raise typer.BadParameter(str(exc), param_hint="--tree") from exc


def open_config(path: Path) -> Config:
    try:
        return load_config(path)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def check_renderable(tree: Quadtree) -> None:
    if tree.depth > MAX_RENDER_DEPTH:
        raise typer.BadParameter(
            f"Tree depth {tree.depth} is too large to render (max {MAX_RENDER_DEPTH}).",
            param_hint="--tree",
        )
