from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class TreeConfig:
    depth: int = 8
    anchor: tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class RegionConfig:
    x: int
    y: int
    width: int = 1
    height: int = 1
    value: Any = None


@dataclass(frozen=True)
class RenderConfig:
    dpi: int = 150
    show_nodes: bool = True


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = "INFO"


@dataclass(frozen=True)
class Config:
    tree: TreeConfig = field(default_factory=TreeConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    regions: tuple[RegionConfig, ...] = ()
