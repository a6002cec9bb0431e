import json
import os
import sys
from pathlib import Path

TRUE_VALUES = ("1", "true", "yes", "on")


def load_config(path) -> dict:
    """Loads config.json; a missing file gives an empty config."""
    path = Path(path)
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def get_effective_config_value(name: str, config: dict, argv=None) -> str | None:
    """
    Returns the effective configuration value for a given name, following priority:
        1. Command-line parameter (--name=value)
        2. Config file value (case-insensitive)
        3. System environment variable (case-insensitive)

    Args:
        name (str): Variable name (case-insensitive, e.g. "BASE_URL")
        config (dict): Configuration dictionary loaded from config.json
        argv (list): Command line to scan, sys.argv by default

    Returns:
        str | None: Effective value or None if not found
    """
    name_lower = name.lower()

    # Command-line via raw argv (--name=value)
    for arg in sys.argv if argv is None else argv:
        if arg.startswith("--") and "=" in arg:
            arg_name, arg_val = arg[2:].split("=", 1)
            if arg_name.lower() == name_lower:
                return arg_val.strip()

    # Config file
    for key, value in config.items():
        if key.lower() == name_lower:
            return str(value)

    # Environment variable
    for key, value in os.environ.items():
        if key.lower() == name_lower:
            return str(value)

    return None


def to_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUE_VALUES
