from __future__ import annotations

import sys
from collections.abc import Sequence as ABCSequence
from dataclasses import MISSING, asdict, fields, is_dataclass
from pathlib import Path
from typing import (
    Any,
    Literal,
    Mapping,
    MutableMapping,
    Sequence,
    Type,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

import yaml

from quadmap.errors import InvalidArea
from quadmap.geometry import COORD_MAX, MAX_DEPTH, Area, Point
from quadmap.utils.loggers import log_config_loaded

from .schema import Config


class ConfigError(ValueError):
    pass


def load_config(path: Union[str, Path]) -> Config:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read config file {p}: {exc}") from exc
    cfg = loads_config(text)
    log_config_loaded(p, len(cfg.regions))
    return cfg


def loads_config(yaml_text: str) -> Config:
    try:
        data = yaml.safe_load(yaml_text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid configuration data: {exc}") from exc

    if not isinstance(data, Mapping):
        raise ConfigError(f"Top-level configuration must be a mapping, got {type(data).__name__}")

    cfg = _from_mapping(Config, data, path="config")
    validate_config(cfg)
    return cfg


def validate_config(cfg: Config) -> None:
    depth = cfg.tree.depth
    if depth <= 0:
        raise ConfigError("tree.depth must be > 0")
    if depth > MAX_DEPTH:
        raise ConfigError(f"tree.depth must be <= {MAX_DEPTH}, got {depth}")
    if len(cfg.tree.anchor) != 2:
        raise ConfigError("tree.anchor must be an [x, y] pair")
    ax, ay = cfg.tree.anchor
    if ax < 0 or ay < 0:
        raise ConfigError("tree.anchor coordinates must be >= 0")
    side = 2**depth
    if ax + side > COORD_MAX or ay + side > COORD_MAX:
        raise ConfigError(f"tree.depth={depth} overflows the coordinate space at anchor {ax},{ay}")

    if cfg.render.dpi <= 0:
        raise ConfigError("render.dpi must be > 0")

    bounds = Area(Point(ax, ay), side, side)
    for i, r in enumerate(cfg.regions):
        try:
            area = Area.from_xywh(r.x, r.y, r.width, r.height)
        except InvalidArea as exc:
            raise ConfigError(f"regions[{i}]: {exc}") from exc
        if not bounds.contains(area):
            raise ConfigError(f"regions[{i}]: {area!r} lies outside the tree region {bounds!r}")


def to_dict(cfg: Config) -> dict:
    return asdict(cfg)


def _from_mapping(cls: Type[Any], data: Mapping[str, Any], path: str) -> Any:
    if not is_dataclass(cls):
        raise ConfigError(f"Internal error: target {cls!r} is not a dataclass")

    allowed = {f.name for f in fields(cls)}
    unknown = set(data.keys()) - allowed
    if unknown:
        pretty = ", ".join(sorted(map(str, unknown)))
        raise ConfigError(f"Unknown field(s) at {path}: {pretty}")

    mod = sys.modules.get(cls.__module__)
    gns = mod.__dict__ if mod is not None else None
    type_hints = get_type_hints(cls, globalns=gns, localns=None)

    kwargs: MutableMapping[str, Any] = {}
    for f in fields(cls):
        key = f.name
        target_type = type_hints.get(key, f.type)
        if key in data:
            kwargs[key] = _coerce_value_to_type(data[key], target_type, f"{path}.{key}")
        else:
            if f.default is not MISSING or f.default_factory is not MISSING:
                continue
            raise ConfigError(f"Missing required field: {path}.{key}")

    try:
        return cls(**kwargs)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Failed to construct {cls.__name__} at {path}: {exc}") from exc


def _coerce_value_to_type(value: Any, typ: Any, path: str) -> Any:
    origin = get_origin(typ)
    args = get_args(typ)

    if typ is Any:
        return value

    if is_dataclass(typ):
        if not isinstance(value, Mapping):
            raise ConfigError(f"Expected mapping at {path}, got {type(value).__name__}")
        return _from_mapping(typ, value, path)

    if origin is Literal:
        if value not in set(args):
            raise ConfigError(f"{path}: expected one of {sorted(map(repr, args))}, got {value!r}")
        return value

    if origin in (list, tuple, ABCSequence):
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise ConfigError(f"Expected sequence at {path}, got {type(value).__name__}")
        if origin is tuple and args and args[-1] is not Ellipsis:
            if len(value) != len(args):
                raise ConfigError(f"Expected {len(args)} item(s) at {path}, got {len(value)}")
            return tuple(
                _coerce_value_to_type(v, t, f"{path}[{i}]") for i, (v, t) in enumerate(zip(value, args))
            )
        elem_type = args[0] if args else Any
        items = [_coerce_value_to_type(v, elem_type, f"{path}[{i}]") for i, v in enumerate(value)]
        return tuple(items) if origin is tuple else items

    if typ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            low = value.strip().lower()
            if low in {"1", "true", "yes", "y", "on"}:
                return True
            if low in {"0", "false", "no", "n", "off"}:
                return False
        raise ConfigError(f"Expected bool at {path}, got {value!r}")

    if typ is int:
        if isinstance(value, bool):
            raise ConfigError(f"Expected int at {path}, got bool")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and float(value).is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Expected int at {path}, got {value!r}")

    if typ is str:
        return value if isinstance(value, str) else str(value)

    return value
