# config_manager.py - JSON config manager

import json
import os
from typing import Any, Dict, Optional

DEFAULTS: Dict[str, Any] = {
    "online_max_distance": 2,       # VoteLedger merge radius
    "consolidate_max_distance": 5,  # NameConsolidator cluster radius
    "noise_alphabet": "latin",
    "primary_alphabet": "cyrillic",
    "log_path": os.path.join("logs", "vote_muncher.log"),
    "top": 0,                       # rows to print, 0 = all
}

_NON_NEGATIVE = ("online_max_distance", "consolidate_max_distance", "top")


class ConfigError(ValueError):
    """Raised for unreadable config files, unknown keys or bad values."""


class Config:
    """
    Settings with defaults, optionally backed by a JSON file.
    With no path nothing touches the disk.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        if path and os.path.exists(path):
            self._load()

    def _load(self):
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{self.path}: invalid JSON ({e})") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"{self.path}: expected a JSON object")
        for k, v in loaded.items():
            self.set(k, v, persist=False)

    def save(self):
        if not self.path:
            raise ConfigError("no config path to save to")
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2, ensure_ascii=False)

    def show(self):
        for k, v in self.data.items():
            print(f"{k:26} = {v}")

    def get(self, key: str) -> Any:
        return self.data[key]

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any, persist: bool = False):
        """Set key, coercing val to the type of its default. Saves when persist is True."""
        if key not in self.data:
            raise ConfigError(f"no such option: {key}")
        try:
            val = type(DEFAULTS[key])(val)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"bad value for {key}: {val!r}") from e
        if key in _NON_NEGATIVE and val < 0:
            raise ConfigError(f"{key} must be >= 0, got {val}")
        self.data[key] = val
        if persist:
            self.save()
