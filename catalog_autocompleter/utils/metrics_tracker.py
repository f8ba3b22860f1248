# metrics_tracker.py - running averages (e.g. suggest latency), optionally persisted

import json
import os
import threading
from collections import defaultdict

from rich.table import Table


class Metrics:
    def __init__(self, path=None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._lock = threading.Lock()
        self._load()

    def _load(self):
        if self.path and os.path.exists(self.path):
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            for k, v in d.items():
                self.m[k] = v["sum"]
                self.n[k] = v["count"]

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        with self._lock:
            self.m[key] += val
            self.n[key] += 1

    def count(self, key):
        return self.n.get(key, 0)

    def avg(self, key):
        if self.n.get(key, 0) == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def table(self):
        t = Table(title="Metrics")
        t.add_column("Metric", style="cyan")
        t.add_column("Count", justify="right")
        t.add_column("Avg", justify="right", style="magenta")
        for k in sorted(self.m):
            t.add_row(k, str(self.n[k]), f"{self.avg(k):.4f}")
        return t
