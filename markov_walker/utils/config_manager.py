# config_manager.py - JSON config manager

import json
import os

from rich.console import Console
from rich.table import Table
from rich import box

from markov_walker.utils.logger_utils import Log

DEFAULTS = {
    "walks": 5,           # walks printed by /walk and --walks
    "max_tokens": 60,     # display cap for one random walk
    "seed": None,         # seed for the random generator, None = fresh entropy
    "lowercase": False,   # lowercase tokens when reading a corpus
    "model_path": os.path.join("data", "markov_chain.json"),
}

# keys whose value may be null
NULLABLE = {"seed": int}

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def _convert(key, current, val):
    """Turn a string from the command line into the type of the existing value."""
    if not isinstance(val, str):
        return val
    if key in NULLABLE:
        if val.lower() in ("none", "null", ""):
            return None
        return NULLABLE[key](val)
    if isinstance(current, bool):
        low = val.lower()
        if low in _TRUE:
            return True
        if low in _FALSE:
            return False
        raise ValueError(f"not a boolean: {val!r}")
    return type(current)(val)


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("config root must be an object")
                self.data.update(loaded)
            except (OSError, ValueError) as e:
                Log.warning(f"[Config] ignoring unreadable {self.path}: {e}")
        else:
            self.save()

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def show(self, console: Console = None):
        console = console or Console()
        table = Table(title="Config", box=box.SIMPLE)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            table.add_row(k, repr(v))
        console.print(table)

    def set(self, key, val) -> bool:
        """Convert and store val under an existing key. Returns False if rejected."""
        if key not in self.data:
            Log.warning(f"[Config] no such option: {key}")
            return False
        try:
            self.data[key] = _convert(key, self.data[key], val)
        except (TypeError, ValueError) as e:
            Log.warning(f"[Config] bad value for {key}: {e}")
            return False
        self.save()
        return True
