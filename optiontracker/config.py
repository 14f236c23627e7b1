"""CLI configuration for OptionTracker.

Settings live in ``~/.config/optiontracker/config.toml``; the
``OPTIONTRACKER_CONFIG`` environment variable points elsewhere. Only the
CLI reads them. The analytics engine receives explicit parameters.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "OPTIONTRACKER_CONFIG"

DEFAULT_CONFIG = {
    "display": {
        "currency": "USD",
    },
    "analytics": {
        "default_window": "Max",
        "top_count": 3,
    },
}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
}


def get_config_path() -> Path:
    """Return the config file location."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "optiontracker" / "config.toml"


def load_config(path: Optional[Path] = None) -> dict:
    """Load settings merged over the defaults.

    A missing or unreadable file yields the defaults.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = path or get_config_path()

    if not config_path.exists():
        return config

    try:
        loaded = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return config

    for section, values in loaded.items():
        if isinstance(values, dict) and section in config:
            config[section].update(values)
        else:
            config[section] = values
    return config


def currency_symbol(config: dict) -> str:
    """Symbol for the configured currency code, or the code itself."""
    code = config.get("display", {}).get("currency", "USD")
    return CURRENCY_SYMBOLS.get(code.upper(), f"{code} ")
