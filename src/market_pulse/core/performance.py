"""In-memory performance store for ad networks."""

import threading
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Optional

from market_pulse.core.entities import NetworkPerformance


class PerformanceTracker:
    """Rolling per-network counters, shared by every request in the process.

    Updates happen under a lock so `requests`, `successes` and
    `success_rate` always change together.
    """

    def __init__(self, best_performing: str = "adsense") -> None:
        self._lock = threading.Lock()
        self._networks: dict[str, NetworkPerformance] = {}
        self._hourly_revenue: dict[int, float] = {}
        self.total_revenue = 0.0
        self.best_performing = best_performing

    def get(self, network: str) -> Optional[NetworkPerformance]:
        """Snapshot of a network's record, or None if never attempted."""
        with self._lock:
            perf = self._networks.get(network)
            return NetworkPerformance(**asdict(perf)) if perf else None

    def record(self, network: str, success: bool, revenue: float = 0.0) -> NetworkPerformance:
        """Record one attempt against a network."""
        with self._lock:
            perf = self._networks.setdefault(network, NetworkPerformance())
            perf.requests += 1

            if success:
                perf.successes += 1
                perf.total_revenue += revenue
                self.total_revenue += revenue

            perf.success_rate = perf.successes / perf.requests

            self.best_performing = self._leader()
            return NetworkPerformance(**asdict(perf))

    def _leader(self) -> str:
        # Ties go to the network recorded later
        best = None
        for name, perf in self._networks.items():
            if best is None or perf.total_revenue >= self._networks[best].total_revenue:
                best = name
        return best

    def track_request(self, revenue: float, when: Optional[datetime] = None) -> None:
        """Add served revenue to the hourly bucket."""
        hour = (when or datetime.now(timezone.utc)).hour
        with self._lock:
            self._hourly_revenue[hour] = self._hourly_revenue.get(hour, 0.0) + revenue

    def hourly_revenue(self) -> dict[int, float]:
        with self._lock:
            return dict(self._hourly_revenue)

    def snapshot(self) -> dict:
        """Revenue metrics in response shape."""
        with self._lock:
            return {
                "totalRevenue": self.total_revenue,
                "bestPerforming": self.best_performing,
                "networkPerformance": {
                    name: {
                        "requests": perf.requests,
                        "successes": perf.successes,
                        "successRate": perf.success_rate,
                        "totalRevenue": perf.total_revenue,
                    }
                    for name, perf in self._networks.items()
                },
            }
