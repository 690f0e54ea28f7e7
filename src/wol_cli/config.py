import json
import os
from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_CONFIG_PATH = os.path.expanduser("~/.config/wol-cli/config.json")


class ConfigError(ValueError):
    pass


@dataclass
class Config:
    networks: List[str] = field(default_factory=list)
    verbose: bool = False

    def __post_init__(self):
        if not isinstance(self.networks, list) or not all(isinstance(n, str) for n in self.networks):
            raise ConfigError("'networks' must be a list of CIDR strings")
        if not isinstance(self.verbose, bool):
            raise ConfigError("'verbose' must be true or false")


def load_config(path: Optional[str] = None) -> Optional[Config]:
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not os.path.exists(cfg_path):
        return None
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"cannot read config {cfg_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config {cfg_path} must contain a JSON object")
    known = {k: v for k, v in data.items() if k in Config.__dataclass_fields__}
    return Config(**known)
