"""CLI configuration file support.

Loads the optional YAML (or JSON) configuration file and folds it into the
parsed arguments. Command-line flags keep the highest precedence.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# config key -> argparse dest
CONFIG_KEYS = {
    "cwd": "CWD",
    "loglevel": "LOG_LEVEL",
    "logfile": "LOG_FILE",
}


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load configuration from file.

    Args:
        config_path: Path to a YAML/JSON config file.

    Returns:
        Configuration dict; empty when the file is absent or unusable.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Failed to load config file %s: %s", config_path, exc)
        return {}

    if not isinstance(data, dict):
        logger.warning("Config file %s does not contain a mapping, ignoring", config_path)
        return {}

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
    return {key: data[key] for key in CONFIG_KEYS if data.get(key) is not None}


def apply_config(args, config: Dict[str, Any]) -> None:
    """Fill argument values left unset on the command line from ``config``."""
    for key, dest in CONFIG_KEYS.items():
        if key not in config:
            continue
        # Subcommands without --cwd have no CWD attribute
        if dest == "CWD" and not hasattr(args, dest):
            continue
        if getattr(args, dest, None) is None:
            value = config[key]
            if dest == "LOG_LEVEL":
                value = str(value).upper()
            setattr(args, dest, str(value))
