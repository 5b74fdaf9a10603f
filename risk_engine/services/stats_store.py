from __future__ import annotations

import threading

from pydantic import BaseModel

COUNTER_FIELDS = ("total_checks", "total_margin_calcs", "total_alerts", "trades_blocked")


class Stats(BaseModel):
    total_checks: int = 0
    total_margin_calcs: int = 0
    total_alerts: int = 0
    trades_blocked: int = 0

    @property
    def total_ops(self) -> int:
        return self.total_checks + self.total_margin_calcs

    @property
    def block_rate_pct(self) -> float:
        if self.total_checks == 0:
            return 0.0
        return self.trades_blocked / self.total_checks * 100.0


class StatsStore:
    """Process-wide risk counters behind a single lock.

    Every increment and every snapshot takes the same lock, so a snapshot
    never sees half of a multi-field update (e.g. a blocked pre-trade check
    bumps three counters at once).
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters = {name: 0 for name in COUNTER_FIELDS}

    def increment(self, *fields: str) -> None:
        for name in fields:
            if name not in self._counters:
                raise KeyError(name)
        with self._lock:
            for name in fields:
                self._counters[name] += 1

    def record_check(self, *, blocked: bool) -> None:
        if blocked:
            self.increment("total_checks", "trades_blocked", "total_alerts")
        else:
            self.increment("total_checks")

    def record_margin_calc(self) -> None:
        self.increment("total_margin_calcs")

    def record_alert(self) -> None:
        self.increment("total_alerts")

    def snapshot(self) -> Stats:
        with self._lock:
            counters = dict(self._counters)
        return Stats(**counters)

    def reset(self) -> None:
        with self._lock:
            for name in self._counters:
                self._counters[name] = 0


stats_store = StatsStore()
