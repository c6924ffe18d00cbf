# metrics_tracker.py - running sums/counts for build and query timings

from collections import defaultdict


class Metrics:
    """In-memory timing stats keyed by name."""

    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def count(self, key):
        return self.n.get(key, 0)

    def avg(self, key):
        if self.n.get(key, 0) == 0: return 0.0
        return self.m[key] / self.n[key]

    def as_dict(self):
        return {k: {"avg": self.avg(k), "count": self.n[k]} for k in self.m}
