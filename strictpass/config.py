# strictpass/config.py
"""
Persisted default generation options for StrictPass.
Saved as JSON in %APPDATA%/StrictPass/config.json (Windows) or ~/.strictpass/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any

from .options import Options

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = Options().to_dict()

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        d = os.path.join(appdata, "StrictPass")
    else:
        d = os.path.join(os.path.expanduser("~"), ".strictpass")
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def load_options() -> Options:
    return Options.from_dict(load_config())

def save_config(cfg: Dict[str, Any]) -> None:
    # refuse to persist anything generate() would reject
    cfg = Options.from_dict(cfg).to_dict()
    p = config_path()
    # only saving creates the settings directory
    os.makedirs(os.path.dirname(p), exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def reset_config() -> None:
    p = config_path()
    if os.path.exists(p):
        os.remove(p)
