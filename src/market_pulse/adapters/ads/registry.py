"""Registry of ad network adapters."""

from market_pulse.adapters.ads.networks import (
    AdNetwork,
    AdSenseNetwork,
    AdsterraNetwork,
    MediaNetNetwork,
    PropellerAdsNetwork,
)
from market_pulse.config import Settings
from market_pulse.core import AdNetworkId

AD_NETWORKS: dict[AdNetworkId, type[AdNetwork]] = {
    AdNetworkId.ADSENSE: AdSenseNetwork,
    AdNetworkId.PROPELLERADS: PropellerAdsNetwork,
    AdNetworkId.ADSTERRA: AdsterraNetwork,
    AdNetworkId.MEDIANET: MediaNetNetwork,
}


def build_ad_networks(settings: Settings) -> dict[str, AdNetwork]:
    """Instantiate one adapter per configured network, in configuration order."""
    return {
        key: AD_NETWORKS[AdNetworkId(key)](profile, settings.ad_credentials)
        for key, profile in settings.ads.networks.items()
    }
