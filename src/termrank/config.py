"""
Engine configuration.

YAML layout (configs/default.yaml):

    engine:
      case_policy: preserve   # preserve | lower
    logging:
      level: INFO
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .tokenizer import check_policy

DEFAULTS: Dict[str, Any] = {
    "engine": {"case_policy": "preserve"},
    "logging": {"level": "INFO"},
}


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = cfg.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section {name!r} must be a mapping")
    return value


@dataclass(frozen=True)
class EngineConfig:
    case_policy: str = "preserve"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, cfg: Optional[Dict[str, Any]]) -> "EngineConfig":
        cfg = cfg or {}
        engine = _section(cfg, "engine")
        log = _section(cfg, "logging")
        policy = check_policy(str(engine.get("case_policy", DEFAULTS["engine"]["case_policy"])))
        level = str(log.get("level", DEFAULTS["logging"]["level"])).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {level!r}")
        return cls(case_policy=policy, log_level=level)


def load_cfg(path: Optional[str]) -> EngineConfig:
    """Read a YAML config file; None gives the defaults."""
    if path is None:
        return EngineConfig.from_dict(None)
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is not None and not isinstance(raw, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(raw).__name__}")
    return EngineConfig.from_dict(raw)
