"""
Startup configuration.

A JSON file, when present, is merged over DEFAULT_CONFIG; command-line flags
override both.
"""

import json
import logging
import os

DEFAULT_CONFIG = {
    "rows": 3,
    "row_sequence": "Unconstrained,Unconstrained,Constrained,Unconstrained",
    "admin_type": "COMPACT_REGULAR",
    "mode": "test",
    "log_level": "WARNING",
}

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)-28s %(message)s"


class ConfigError(Exception):
    pass


def load_config(path: str = "parking.json") -> dict:
    if path and os.path.exists(path):
        try:
            with open(path) as f:
                cfg = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e
        if not isinstance(cfg, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        return {**DEFAULT_CONFIG, **cfg}
    return DEFAULT_CONFIG.copy()


def configure_logging(level: str = "WARNING"):
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise ConfigError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
