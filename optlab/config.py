from __future__ import annotations
import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import yaml

from .golden_section import StoppingCriterion

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG = PROJECT_ROOT / "config" / "problems.yml"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class NevilleDataset:
    name: str
    xs: Tuple[float, ...]
    ys: Tuple[float, ...]
    target: float


@dataclass(frozen=True)
class GssSettings:
    a: float = 0.0
    b: float = 2.0
    epsilon: float = 0.1
    max_iterations: int = 10000
    criterion: StoppingCriterion = StoppingCriterion.INTERVAL_WIDTH
    objective: str = "quadratic"


def configure_logging(level: Optional[str] = None) -> None:
    """Root logging setup for the CLI and the app; LOG_LEVEL env wins over the default."""
    name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)


def default_config_path() -> Path:
    if env := os.environ.get("OPTLAB_CONFIG"):
        return Path(env)
    return DEFAULT_CONFIG


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    path = Path(path) if path is not None else default_config_path()
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def deep_update(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for k, v in updates.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = v
    return out


def parse_criterion(name: str) -> StoppingCriterion:
    """Map the literal selector ("interval" / "function") to a StoppingCriterion."""
    for c in StoppingCriterion:
        if c.value == name:
            return c
    raise ValueError(
        f"Unknown stopping criterion '{name}'. Use one of: {[c.value for c in StoppingCriterion]}"
    )


def neville_datasets(cfg: Dict[str, Any]) -> Dict[str, NevilleDataset]:
    out: Dict[str, NevilleDataset] = {}
    for name, d in ((cfg.get("neville") or {}).get("datasets") or {}).items():
        xs = tuple(float(v) for v in d["x"])
        ys = tuple(float(v) for v in d["y"])
        if len(xs) != len(ys):
            raise ValueError(f"Dataset '{name}': x has {len(xs)} values but y has {len(ys)}")
        out[name] = NevilleDataset(name=name, xs=xs, ys=ys, target=float(d["target"]))
    return out


def dataset(cfg: Dict[str, Any], name: str) -> NevilleDataset:
    ds = neville_datasets(cfg)
    if name not in ds:
        raise KeyError(f"Unknown dataset '{name}'. Available: {list(ds.keys())}")
    return ds[name]


def gss_section(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Raw golden_section mapping; an empty YAML section loads as None."""
    return cfg.get("golden_section") or {}


def gss_settings(cfg: Dict[str, Any]) -> GssSettings:
    g = gss_section(cfg)
    defaults = GssSettings()
    return GssSettings(
        a=float(g.get("a", defaults.a)),
        b=float(g.get("b", defaults.b)),
        epsilon=float(g.get("epsilon", defaults.epsilon)),
        max_iterations=int(g.get("max_iterations", defaults.max_iterations)),
        criterion=parse_criterion(g.get("criterion", defaults.criterion.value)),
        objective=str(g.get("objective", defaults.objective)),
    )
