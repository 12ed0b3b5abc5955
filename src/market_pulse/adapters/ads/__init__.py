"""Ad network adapters."""

from market_pulse.adapters.ads.networks import (
    AdNetwork,
    AdSenseNetwork,
    AdsterraNetwork,
    MediaNetNetwork,
    PropellerAdsNetwork,
)
from market_pulse.adapters.ads.registry import AD_NETWORKS, build_ad_networks

__all__ = [
    "AdNetwork",
    "AdSenseNetwork",
    "PropellerAdsNetwork",
    "AdsterraNetwork",
    "MediaNetNetwork",
    "AD_NETWORKS",
    "build_ad_networks",
]
