from collections import defaultdict
from typing import Dict


class BankMetrics:
    """
    Bank-owned metrics collector.

    Used for:
    - the `--stats` table of the CLI
    - assertions in tests
    """

    def __init__(self):
        self.counters: Dict[str, int] = defaultdict(int)
        self.gauges: Dict[str, int] = {}

    # ---- counters ----
    def inc(self, name: str, value: int = 1) -> None:
        self.counters[name] += value

    # ---- gauges ----
    def set_gauge(self, name: str, value: int) -> None:
        self.gauges[name] = value

    def snapshot(self) -> Dict[str, int]:
        """Flat copy of every counter and gauge, sorted by name."""
        merged = {**self.counters, **self.gauges}
        return dict(sorted(merged.items()))
