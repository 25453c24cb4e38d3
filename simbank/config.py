"""
SimBank Configuration
=====================
Central config for the console session.

The interactive CLI always runs on the defaults below. A JSON file is only
read when a caller hands an explicit path to ``load_config``.
"""

import os
import json
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# ── Default configuration ──────────────────────────────────────────────────────
DEFAULT_ANNUAL_INTEREST_RATE = 0.05
DEFAULT_DAYS_IN_YEAR = 365

# Kept at WARNING so log lines do not interleave with the prompts.
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def default_config() -> dict:
    return {
        "app_name":             "SimBank",
        "annual_interest_rate": DEFAULT_ANNUAL_INTEREST_RATE,
        "days_in_year":         DEFAULT_DAYS_IN_YEAR,
        "log_level":            DEFAULT_LOG_LEVEL,
    }


def load_config(path: Optional[str] = None) -> dict:
    """Return the defaults, overlaid with the JSON file at `path` if one is given."""
    defaults = default_config()
    if path is None:
        return defaults
    if not os.path.exists(path):
        logger.warning("Config file %s not found, using defaults.", path)
        return defaults
    try:
        with open(path, "r") as f:
            loaded = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not load config file %s: %s", path, e)
        return defaults
    if not isinstance(loaded, dict):
        logger.warning("Config file %s does not hold a JSON object, using defaults.", path)
        return defaults
    return {**defaults, **loaded}


def configure_logging(cfg: dict) -> None:
    """Install the root logging handler at the configured level."""
    level = getattr(logging, str(cfg.get("log_level", DEFAULT_LOG_LEVEL)).upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


# Global config object
CONFIG = load_config()
