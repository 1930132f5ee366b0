from __future__ import annotations

from .common import MAX_RENDER_DEPTH, check_renderable, open_config, open_tree, validate_area
from .validators import parse_area

__all__ = [
    "MAX_RENDER_DEPTH",
    "check_renderable",
    "open_config",
    "open_tree",
    "parse_area",
    "validate_area",
]
