"""Single-upstream market data clients."""

from market_pulse.adapters.market_data.client import MarketDataClient

__all__ = ["MarketDataClient"]
