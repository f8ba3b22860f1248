# config_manager.py - JSON config manager

import json
import logging
import os

from rich.console import Console
from rich.table import Table

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 10,  # cap on suggest() results
    "prefix_short_circuit": 5,  # enough prefix hits -> skip fuzzy phase
    "min_fuzzy_query_length": 3,  # shorter queries never go fuzzy
    "catalog_path": os.path.join("data", "catalog.json"),
    "log_level": "INFO",
}


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
            except (OSError, ValueError) as e:
                logger.warning("config %s unreadable (%s); using defaults", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("config %s is not a JSON object; using defaults", self.path)
                return
            # unknown keys are ignored
            for k, v in loaded.items():
                if k in self.data:
                    self.data[k] = v
        else:
            self.save()

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def __getitem__(self, key):
        return self.data[key]

    def show(self, console=None):
        table = Table(title="Config")
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            table.add_row(k, str(v))
        (console or Console()).print(table)

    def set(self, key, val):
        if key not in self.data:
            logger.warning("No such option: %s", key)
            return False
        self.data[key] = type(DEFAULTS[key])(val)
        self.save()
        return True
