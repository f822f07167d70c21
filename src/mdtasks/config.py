"""Settings for the command line: defaults, an optional YAML file, then env vars."""

from __future__ import annotations

import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

DEFAULT_CONFIG = ".mdtasks.yaml"

ENV_OVERRIDES = {
    "file": "MDTASKS_FILE",
    "heading": "MDTASKS_HEADING",
    "log_level": "MDTASKS_LOG_LEVEL",
}


@dataclass
class Settings:
    file: str = "README.md"
    heading: str = "Tasks"
    log_level: str = "WARNING"

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path: str | Path) -> dict:
    p = Path(path)
    with open(p, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {p} must be a mapping, got {type(data).__name__}")
    return data


def load_settings(config_path: Optional[str | Path] = None) -> Settings:
    load_dotenv()
    settings = Settings()
    path = Path(config_path) if config_path else Path(DEFAULT_CONFIG)
    if config_path or path.exists():
        data = load_config(path)
        for key in ENV_OVERRIDES:
            if data.get(key) is not None:
                setattr(settings, key, str(data[key]))
    for key, var in ENV_OVERRIDES.items():
        value = os.getenv(var)
        if value:
            setattr(settings, key, value)
    return settings
