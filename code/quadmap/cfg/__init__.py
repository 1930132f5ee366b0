from __future__ import annotations

from .schema import Config, LoggingConfig, RegionConfig, RenderConfig, TreeConfig
from .loader import ConfigError, load_config, loads_config, to_dict, validate_config

__all__ = [
    "Config",
    "TreeConfig",
    "RegionConfig",
    "RenderConfig",
    "LoggingConfig",
    "ConfigError",
    "load_config",
    "loads_config",
    "validate_config",
    "to_dict",
]
