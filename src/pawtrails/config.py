"""Configuration loading.

Config is merged from two JSON files, global first and local second:
1. ~/.config/pawtrails/pawtrails.json
2. ./pawtrails.json
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "pawtrails"
CONFIG_PATH = CONFIG_DIR / "pawtrails.json"
LOCAL_CONFIG_PATH = Path("pawtrails.json")
DATA_DIR = Path.home() / ".local" / "share" / "pawtrails"

FEET_PER_METER = 3.28084

DEFAULTS = {
    "max_samples": 1000,
    "tick_interval": 1.0,
    "store_path": str(DATA_DIR / "hikes.json"),
    # GPX elevations are metres; the app reports feet
    "elevation_scale": FEET_PER_METER,
}


def load_config() -> dict:
    """Load configuration from config files.

    Returns:
        Dict with merged config values, empty dict if no files exist.
    """
    config = {}
    for config_path in [CONFIG_PATH, LOCAL_CONFIG_PATH]:
        if config_path.exists():
            try:
                with config_path.open() as f:
                    config.update(json.load(f))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", config_path, e)
                continue
    return config


def get_setting(config: dict, key: str):
    """Return a config value, falling back to DEFAULTS."""
    return config.get(key, DEFAULTS[key])
