"""Weighted scoring of ad networks from configuration and live performance."""

from market_pulse.config import AdNetworkConfig, AdsConfig
from market_pulse.core.performance import PerformanceTracker


def network_score(
    network: str,
    profile: AdNetworkConfig,
    tracker: PerformanceTracker,
    config: AdsConfig,
) -> float:
    """Weighted sum of revenue, success rate, speed and fill rate."""
    perf = tracker.get(network)
    total_revenue = perf.total_revenue if perf else 0.0
    success_rate = perf.success_rate if perf else config.default_success_rate

    revenue_score = min(total_revenue / config.revenue_ceiling, 1.0)
    speed_score = (1000 - profile.load_time) / 1000

    return (
        revenue_score * config.revenue_weight
        + success_rate * config.success_weight
        + speed_score * config.speed_weight
        + profile.fill_rate * config.fill_weight
    )


def rank_networks(config: AdsConfig, tracker: PerformanceTracker) -> list[str]:
    """Enabled networks by descending score; ties keep configuration order."""
    enabled = [key for key, profile in config.networks.items() if profile.enabled]
    scores = {key: network_score(key, config.networks[key], tracker, config) for key in enabled}
    return sorted(enabled, key=lambda key: scores[key], reverse=True)
