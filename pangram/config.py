"""Configuration management — JSON-based, stored in ~/.config/pangram/."""
import json
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "pangram"
CONFIG_FILE = CONFIG_DIR / "config.json"
LOG_FILE = CONFIG_DIR / "pangram.log"

COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

DEFAULT_CONFIG = {
    "debug_logging": False,
    "log_file": str(LOG_FILE),
    "alphabet_title": "Press 'ESC' to quit",
    "input_title": "Start typing to check for a pangram",
    "complete_color": "green",
    "incomplete_color": "red",
    "placeholder": ".",
}


class Config:
    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if self.path.exists():
            try:
                with open(self.path, "r") as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    self._data.update(stored)
            except (json.JSONDecodeError, IOError):
                pass

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def _color(self, key):
        value = str(self._data.get(key, "")).lower()
        if value in COLORS:
            return value
        return DEFAULT_CONFIG[key]

    @property
    def debug_logging(self):
        return bool(self._data["debug_logging"])

    @property
    def log_file(self):
        return Path(self._data.get("log_file") or LOG_FILE).expanduser()

    @property
    def alphabet_title(self):
        return self._data["alphabet_title"]

    @property
    def input_title(self):
        return self._data["input_title"]

    @property
    def complete_color(self):
        return self._color("complete_color")

    @property
    def incomplete_color(self):
        return self._color("incomplete_color")

    @property
    def placeholder(self):
        value = str(self._data.get("placeholder") or "")
        return value[:1] or DEFAULT_CONFIG["placeholder"]
