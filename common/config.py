import os
import yaml
from dataclasses import dataclass, replace
from typing import Optional


def _read(path: str):
    with open(path, "r") as f:
        return yaml.safe_load(f)


@dataclass(frozen=True)
class Paths:
    model_path: str = ""
    report_out: Optional[str] = None
    plot_out: Optional[str] = None

@dataclass(frozen=True)
class Logging:
    level: str = "INFO"

@dataclass(frozen=True)
class Pairing:
    epsilon: float = 1e-9
    backend: str = "numpy"

@dataclass(frozen=True)
class Routing:
    default_route_name_base: str = "Duct"
    require_supply_air: bool = True

@dataclass(frozen=True)
class Plot:
    dpi: int = 150
    annotate: bool = True


@dataclass(frozen=True)
class Config:
    paths: Paths = Paths()
    logging: Logging = Logging()
    pairing: Pairing = Pairing()
    routing: Routing = Routing()
    plot: Plot = Plot()

def load_config(path: Optional[str]) -> Config:
    cfg = Config()
    if path and os.path.isfile(path):
        data = _read(path) or {}
        paths = replace(cfg.paths, **(data.get("paths", {}) or {}))
        logging = replace(cfg.logging, **(data.get("logging", {}) or {}))
        pairing = replace(cfg.pairing, **(data.get("pairing", {}) or {}))
        routing = replace(cfg.routing, **(data.get("routing", {}) or {}))
        plot = replace(cfg.plot, **(data.get("plot", {}) or {}))
        cfg = replace(cfg, paths=paths, logging=logging, pairing=pairing, routing=routing, plot=plot)
    return cfg
