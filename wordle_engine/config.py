"""
JSON configuration file.

Every key is optional; anything given on the command line takes priority.

    {
        "random": false,
        "difficult": true,
        "stats": true,
        "day": 5,
        "seed": 20220123,
        "final_set": "fin.txt",
        "acceptable_set": "acc.txt",
        "state": "state.json",
        "word": "cargo"
    }
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

log = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Invalid configuration file or inconsistent options."""


@dataclass
class Config:
    random: Optional[bool] = None
    difficult: Optional[bool] = None
    stats: Optional[bool] = None
    day: Optional[int] = None
    seed: Optional[int] = None
    final_set: Optional[str] = None
    acceptable_set: Optional[str] = None
    state: Optional[str] = None
    word: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        if not isinstance(data, dict):
            raise ConfigError("config file must contain a JSON object")

        values = {}
        for key, value in data.items():
            if key not in _FIELD_TYPES:
                log.warning("Ignoring unknown config key %r", key)
                continue
            expected = _FIELD_TYPES[key]
            # bool is an int subclass; don't let true pass as a day
            if value is not None and (not isinstance(value, expected) or
                                      (expected is int and isinstance(value, bool))):
                raise ConfigError(f"config key {key!r} must be {expected.__name__}")
            values[key] = value
        return cls(**values)


_FIELD_TYPES = {
    "random": bool, "difficult": bool, "stats": bool,
    "day": int, "seed": int,
    "final_set": str, "acceptable_set": str, "state": str, "word": str,
}


def load_config(path: Union[str, Path]) -> Config:
    """
    Read a config file.

    A file that cannot be read gives the default config; a file that
    cannot be parsed is an error.
    """
    try:
        text = Path(path).read_text()
    except OSError as e:
        log.warning("Ignoring unreadable config file %s: %s", path, e)
        return Config()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"error parsing config file {path}: {e}") from e
    return Config.from_dict(data)
