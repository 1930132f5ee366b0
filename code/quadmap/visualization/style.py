from __future__ import annotations

FIGSIZE: tuple[float, float] = (6.0, 6.0)
DPI: int = 150

NODE_EDGE_COLOR: str = "#9a9a9a"
NODE_LINEWIDTH: float = 0.6
REGION_EDGE_COLOR: str = "#1f4e79"
REGION_FACE_COLOR: str = "#5b9bd5"
REGION_ALPHA: float = 0.35
