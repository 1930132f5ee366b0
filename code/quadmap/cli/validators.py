from __future__ import annotations

from quadmap.geometry import Area


def parse_area(text: str, *, name: str = "area") -> Area:
    """Parse ``x,y`` (unit area) or ``x,y,width,height``."""
    parts = [p.strip() for p in str(text).split(",") if p.strip()]
    if len(parts) not in (2, 4):
        raise ValueError(f"{name} must be 'x,y' or 'x,y,width,height', got {text!r}")
    try:
        nums = [int(p) for p in parts]
    except ValueError as exc:
        raise ValueError(f"{name} must contain integers, got {text!r}") from exc
    return Area.from_xywh(*nums)
