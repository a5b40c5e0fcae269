import json
from typing import Dict, Optional

from data_types import Building

DEFAULT_CONFIG: Dict = {
    "seed": 30006,
    "floors": 14,
    "lowest_floor": 1,
    "mailroom_floor": 1,
    "robots": 3,
    "mail_to_create": 80,
    "last_delivery_time": 100,
    "priority_rate": 10,
    "delivery_penalty": 1.2,
    "max_ticks": 10000,
}

_POSITIVE_KEYS = ("floors", "robots", "last_delivery_time", "max_ticks")


def load_config(path: Optional[str] = None, overrides: Optional[Dict] = None) -> Dict:
    config = dict(DEFAULT_CONFIG)
    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("Config file must hold a JSON object")
        config.update(data)
    if overrides:
        config.update({k: v for k, v in overrides.items() if v is not None})
    validate_config(config)
    return config


def validate_config(config: Dict) -> None:
    unknown = sorted(set(config) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")
    for key in _POSITIVE_KEYS:
        if not isinstance(config[key], int) or config[key] < 1:
            raise ValueError(f"Config '{key}' must be a positive integer, got {config[key]!r}")
    if not isinstance(config["mail_to_create"], int) or config["mail_to_create"] < 0:
        raise ValueError("Config 'mail_to_create' must be a non-negative integer")
    if config["delivery_penalty"] <= 0:
        raise ValueError("Config 'delivery_penalty' must be positive")
    # Building validates the mailroom position
    build_building(config)


def build_building(config: Dict) -> Building:
    return Building(
        floors=config["floors"],
        lowest_floor=config["lowest_floor"],
        mailroom_floor=config["mailroom_floor"],
    )
