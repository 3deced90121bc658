"""
Alias configuration.

Aliases map an import location to the address of a contract that is
already deployed outside of the current deployment. They are read from a
JSON file of the form:

    {
        "aliases": {
            "./FungibleToken.cdc": "0xee82856bf20e2aa6"
        }
    }
"""

import json
from pathlib import Path
from typing import Dict

from .errors import ConfigError


def load_aliases(path: str) -> Dict[str, str]:
    """
    Load alias configuration from a JSON file.

    A missing file means no aliases. Malformed files raise ConfigError.
    """
    config_path = Path(path)
    if not config_path.exists():
        return {}

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"failed to parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")

    aliases = data.get('aliases', {})
    if not isinstance(aliases, dict):
        raise ConfigError(f"{path}: 'aliases' must be an object")

    for location, address in aliases.items():
        if not isinstance(address, str):
            raise ConfigError(f"{path}: alias for {location!r} must be a string")

    return dict(aliases)
