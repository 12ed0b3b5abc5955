"""Ad network adapters rendering each network's embed markup."""

import time
from typing import Optional

from market_pulse.config import AdCredentials, AdNetworkConfig
from market_pulse.core import AdNetworkId, AdRequest, Item, ItemSource, ItemType


class AdNetwork(ItemSource):
    """Base adapter: one ad network, one creative per request."""

    # ad type -> (format key, estimated revenue); "banner" is the default unit
    formats: dict[str, tuple[str, float]] = {}

    def __init__(self, profile: AdNetworkConfig, credentials: AdCredentials) -> None:
        self.profile = profile
        self.credentials = credentials

    def resolve_format(self, ad_type: str) -> tuple[str, float]:
        return self.formats.get(ad_type) or self.formats["banner"]

    def _creative(self, html: str, estimated_revenue: float) -> Item:
        return Item(
            type=ItemType.AD_CREATIVE,
            identity=self.source_id,
            source=self.source_id,
            payload={
                "html": html,
                "revenueScore": self.profile.revenue_score,
                "loadTime": self.profile.load_time,
                "estimatedRevenue": estimated_revenue,
            },
        )


class AdSenseNetwork(AdNetwork):
    """Google AdSense display units."""

    source_id = AdNetworkId.ADSENSE.value

    units = {
        "banner": {"slot": "1234567890", "format": "auto", "responsive": True, "revenue": 0.8},
        "incontent": {"slot": "0987654321", "format": "fluid", "layout": "in-article", "revenue": 1.2},
        "sidebar": {"slot": "1357924680", "format": "rectangle", "revenue": 0.5},
    }

    def is_configured(self, request: AdRequest) -> bool:
        return bool(self.credentials.adsense_client)

    async def fetch_items(self, request: AdRequest) -> list[Item]:
        unit = self.units.get(request.ad_type) or self.units["banner"]
        client = self.credentials.adsense_client
        responsive = 'data-full-width-responsive="true"' if unit.get("responsive") else ""
        layout = f'data-ad-layout="{unit["layout"]}"' if unit.get("layout") else ""
        html = f"""
      <script async src="https://pagead2.googlesyndication.com/pagead/js/adsbygoogle.js?client={client}" crossorigin="anonymous"></script>
      <ins class="adsbygoogle"
           style="display:block;"
           data-ad-client="{client}"
           data-ad-slot="{unit["slot"]}"
           data-ad-format="{unit["format"]}"
           {layout}
           {responsive}>
      </ins>
      <script>
        (adsbygoogle = window.adsbygoogle || []).push({{}});
      </script>
    """
        return [self._creative(html, unit["revenue"])]


class PropellerAdsNetwork(AdNetwork):
    """PropellerAds banner, popunder and in-page push."""

    source_id = AdNetworkId.PROPELLERADS.value
    formats = {
        "banner": ("banner", 0.6),
        "popunder": ("popunder", 0.9),
        "inpage": ("inpage", 0.7),
    }

    def _zone(self, format_key: str) -> Optional[str]:
        return {
            "banner": self.credentials.propeller_banner_zone,
            "popunder": self.credentials.propeller_popunder_zone,
            "inpage": self.credentials.propeller_inpage_zone,
        }[format_key]

    def is_configured(self, request: AdRequest) -> bool:
        format_key, _ = self.resolve_format(request.ad_type)
        return bool(self._zone(format_key))

    async def fetch_items(self, request: AdRequest) -> list[Item]:
        format_key, revenue = self.resolve_format(request.ad_type)
        zone = self._zone(format_key)
        container = f"propeller-{format_key}-{int(time.time() * 1000)}"

        container_div = "" if format_key == "popunder" else f'<div id="{container}"></div>'
        container_opt = "" if format_key == "popunder" else f",\n            container: '{container}'"
        html = f"""
        {container_div}
        <script type="text/javascript">
          (function(w, d, n) {{
            w[n] = w[n] || d.currentScript || function() {{
              (w[n].q = w[n].q || []).push(arguments);
            }};
          }})(window, document, 'propellerads');
          propellerads({{
            zone: '{zone}',
            format: '{format_key}'{container_opt}
          }});
        </script>
      """
        return [self._creative(html, revenue)]


class AdsterraNetwork(AdNetwork):
    """Adsterra banner, popunder and native units."""

    source_id = AdNetworkId.ADSTERRA.value
    formats = {
        "banner": ("banner", 0.5),
        "popunder": ("popunder", 0.8),
        "native": ("native", 0.6),
    }
    sizes = {"banner": (468, 60), "native": (300, 250)}

    def _zone(self, format_key: str) -> Optional[str]:
        return {
            "banner": self.credentials.adsterra_banner_zone,
            "popunder": self.credentials.adsterra_popunder_zone,
            "native": self.credentials.adsterra_native_zone,
        }[format_key]

    def is_configured(self, request: AdRequest) -> bool:
        format_key, _ = self.resolve_format(request.ad_type)
        return bool(self._zone(format_key))

    async def fetch_items(self, request: AdRequest) -> list[Item]:
        format_key, revenue = self.resolve_format(request.ad_type)
        zone = self._zone(format_key)
        invoke_url = f"//www.highperformanceformat.com/{zone}/invoke.js"

        if format_key == "popunder":
            html = f"""
        <script type="text/javascript">
          (function() {{
            var s = document.createElement('script');
            s.type = 'text/javascript';
            s.async = true;
            s.src = '{invoke_url}';
            document.head.appendChild(s);
          }})();
        </script>
      """
        else:
            width, height = self.sizes[format_key]
            frame = "iframe" if format_key == "banner" else "native"
            html = f"""
        <script type="text/javascript">
          atOptions = {{
            'key' : '{zone}',
            'format' : '{frame}',
            'height' : {height},
            'width' : {width},
            'params' : {{}}
          }};
          document.write('<scr' + 'ipt type="text/javascript" src="{invoke_url}"></scr' + 'ipt>');
        </script>
      """
        return [self._creative(html, revenue)]


class MediaNetNetwork(AdNetwork):
    """Media.net contextual units."""

    source_id = AdNetworkId.MEDIANET.value
    estimated_revenue = 0.7

    def is_configured(self, request: AdRequest) -> bool:
        return bool(self.credentials.medianet_customer)

    async def fetch_items(self, request: AdRequest) -> list[Item]:
        container = f"media-net-ad-{int(time.time() * 1000)}"
        html = f"""
      <div id="{container}"></div>
      <script type="text/javascript">
        var _mnet = _mnet || [];
        _mnet.push(['_setCustomer', '{self.credentials.medianet_customer}']);
        _mnet.push(['_addUnit', {{
          type: '{request.ad_type}',
          selector: '#{container}',
          params: {{
            placement: '{request.placement}',
            taxonomy: 'trading,finance,investing',
            keywords: 'stocks,crypto,forex,signals'
          }}
        }}]);
        (function() {{
          var s = document.createElement('script');
          s.type = 'text/javascript';
          s.async = true;
          s.src = '//contextual.media.net/dloader.js';
          document.head.appendChild(s);
        }})();
      </script>
    """
        return [self._creative(html, self.estimated_revenue)]
