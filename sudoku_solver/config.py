from __future__ import annotations
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Iterable
import yaml

from .brute import MAX_SOLUTIONS


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: dict[str, Any], **overrides) -> dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def parse_overrides(items: Iterable[str]) -> dict[str, Any]:
    """`key=value` strings from the command line; values are parsed as YAML scalars/lists."""
    out = {}
    for item in items:
        key, sep, raw = item.partition("=")
        if not sep:
            raise ValueError(f"override must look like key=value: {item!r}")
        out[key.strip()] = yaml.safe_load(raw)
    return out


@dataclass
class SolverConfig:
    max_solutions: int = MAX_SOLUTIONS
    allow_guess: bool = True
    techniques: list[str] | None = None  # None = the whole catalogue
    log_level: str = "WARNING"
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_config(path: str | Path | None = None, overrides: Iterable[str] = ()) -> SolverConfig:
    cfg: dict[str, Any] = DotDict()
    if path is not None:
        cfg = load_yaml(path)
    cfg = merge_overrides(cfg, **parse_overrides(overrides))
    known = {f.name for f in fields(SolverConfig)} - {"extra"}
    kwargs = {k: v for k, v in cfg.items() if k in known}
    extra = {k: v for k, v in cfg.items() if k not in known}
    conf = SolverConfig(**kwargs, extra=extra)
    if int(conf.max_solutions) < 1:
        raise ValueError("max_solutions must be at least 1")
    return conf
