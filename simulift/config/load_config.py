from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from simulift.contracts.lift_config import Lift3DConfiguration, LiftConfiguration, normalize_keys

CONFIG_ENV = "SIMULIFT_CONFIG"


class LoggingCfg(BaseModel):
    level: str = "INFO"
    json_logs: bool = False


class RunCfg(BaseModel):
    scenario: str = "default"
    use_3d: bool = False
    verbose: bool = True
    model_path: str = "SimuLift_3D.slx"
    output_dir: str | None = None


class WindCfg(BaseModel):
    drag_coefficient: float = 1.0


class AppConfig(BaseModel):
    logging: LoggingCfg = Field(default_factory=LoggingCfg)
    run: RunCfg = Field(default_factory=RunCfg)
    wind: WindCfg = Field(default_factory=WindCfg)


def _read_mapping(path: Path, what: str) -> dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{what} YAML must be a mapping, got {type(raw).__name__}")
    return raw


def load_app_config(path: Path) -> AppConfig:
    return AppConfig(**_read_mapping(Path(path), "Config"))


def find_default_config() -> Path | None:
    """
    Resolution order (first hit wins):
      1) $SIMULIFT_CONFIG
      2) ./simulift.yaml
      3) ./config/simulift.yaml
    """
    env = os.getenv(CONFIG_ENV)
    candidates = [Path(env)] if env else []
    candidates += [Path("simulift.yaml"), Path("config") / "simulift.yaml"]
    for p in candidates:
        if p.exists() and p.is_file():
            return p
    return None


def load_lift_config(path: Path, *, three_d: bool = False) -> LiftConfiguration:
    """
    Read one lift from YAML. Never silently falls back: an existing but
    invalid file raises.
    """
    raw = normalize_keys(_read_mapping(Path(path), "Lift"))
    if three_d:
        return Lift3DConfiguration.model_validate(raw)
    # 3D-only keys are allowed in the file and ignored for a 2D run.
    only_3d = set(Lift3DConfiguration.model_fields) - set(LiftConfiguration.model_fields)
    return LiftConfiguration.model_validate({k: v for k, v in raw.items() if k not in only_3d})
