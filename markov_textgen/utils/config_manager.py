# config_manager.py - JSON config manager

import codecs
import json
import os

from markov_textgen.core.errors import InvalidConfiguration
from markov_textgen.utils.logger_utils import LEVELS

DEFAULTS = {
    "seed": 20,  # seed used by "fixed" mode
    "strict_training": False,
    "encoding": "utf-8",
    "log_path": None,
    "log_level": "WARNING",
}


class Config:
    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if self.path is None:
            return
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidConfiguration(f"bad config file {self.path}: {e}") from e
            if not isinstance(loaded, dict):
                raise InvalidConfiguration(f"config file {self.path} must hold a JSON object")
            self.data.update(loaded)
        else:
            self.save()

    def save(self):
        if self.path is None:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, val):
        if key not in DEFAULTS:
            raise InvalidConfiguration(f"no such option: {key}")
        cur = DEFAULTS[key]
        if cur is None:
            self.data[key] = val
        elif isinstance(cur, bool):
            self.data[key] = str(val).lower() in ("1", "true", "yes", "on")
        else:
            try:
                self.data[key] = type(cur)(val)
            except (TypeError, ValueError) as e:
                raise InvalidConfiguration(f"bad value for {key}: {val!r}") from e
        self.save()

    def validate(self):
        """Fail fast on values the model, source or logger cannot be built from."""
        seed = self.data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise InvalidConfiguration(f"seed must be an int or null, got {seed!r}")
        strict = self.data.get("strict_training")
        if not isinstance(strict, bool):
            raise InvalidConfiguration(f"strict_training must be true or false, got {strict!r}")
        enc = self.data.get("encoding")
        if not isinstance(enc, str):
            raise InvalidConfiguration(f"encoding must be a string, got {enc!r}")
        try:
            codecs.lookup(enc)
        except LookupError as e:
            raise InvalidConfiguration(f"unknown encoding {enc!r}") from e
        level = self.data.get("log_level")
        if not isinstance(level, str) or level.upper() not in LEVELS:
            raise InvalidConfiguration(
                f"log_level must be one of {', '.join(LEVELS)}, got {level!r}"
            )
        path = self.data.get("log_path")
        if path is not None and not isinstance(path, str):
            raise InvalidConfiguration(f"log_path must be a string or null, got {path!r}")
        return self
