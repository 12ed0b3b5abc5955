"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class HttpConfig:
    """Outbound HTTP settings."""
    timeout: float = 5.0


@dataclass
class NewsConfig:
    """News aggregation settings."""
    default_category: str = "business"
    default_page_size: int = 15
    newsapi_query: str = "stock OR crypto OR forex OR trading OR market OR federal OR earnings"
    alpha_vantage_topics: str = "financial_markets,economy,fiscal_policy,monetary_policy"
    max_items_per_source: int = 10


@dataclass
class ScoringConfig:
    """Keyword rosters and thresholds for article scoring."""
    high_impact_keywords: list[str] = field(default_factory=lambda: [
        "fed", "interest rates", "inflation", "earnings", "merger", "acquisition",
        "federal reserve", "ecb", "central bank", "gdp", "unemployment", "rate hike",
        "quarterly results", "profit", "revenue", "dividend",
    ])
    medium_impact_keywords: list[str] = field(default_factory=lambda: [
        "economic", "growth", "market", "trading", "investment", "forecast",
        "outlook", "analysis", "price target", "upgrade", "downgrade",
    ])
    high_impact_threshold: int = 2
    medium_impact_threshold: int = 2
    positive_words: list[str] = field(default_factory=lambda: [
        "gain", "rise", "profit", "growth", "bullish", "surge", "rally", "increase",
        "positive", "strong", "beat", "upgrade", "buy", "outperform", "success",
    ])
    negative_words: list[str] = field(default_factory=lambda: [
        "fall", "drop", "loss", "decline", "bearish", "slump", "plunge", "decrease",
        "negative", "weak", "miss", "downgrade", "sell", "underperform", "failure",
    ])
    sentiment_threshold: int = 2
    stock_symbols: list[str] = field(default_factory=lambda: [
        "AAPL", "MSFT", "GOOGL", "AMZN", "TSLA", "META", "NFLX", "NVDA", "AMD", "IBM",
    ])
    crypto_names: dict[str, list[str]] = field(default_factory=lambda: {
        "BTC": ["BITCOIN", "BTC"],
        "ETH": ["ETHEREUM", "ETH"],
        "ADA": ["CARDANO", "ADA"],
        "SOL": ["SOLANA", "SOL"],
    })
    currency_codes: list[str] = field(default_factory=lambda: [
        "USD", "EUR", "GBP", "JPY", "CAD", "AUD",
    ])
    stock_confidence: float = 0.9
    crypto_confidence: float = 0.8
    forex_confidence: float = 0.7
    max_related_assets: int = 5
    breaking_keywords: list[str] = field(default_factory=lambda: [
        "breaking", "urgent", "immediate", "alert", "just in",
    ])
    urgency_window_hours: float = 24.0
    breaking_boost: float = 0.3
    trading_implications: list[dict] = field(default_factory=lambda: [
        {
            "keywords": ["interest rate", "federal reserve"],
            "advice": "Monitor bond yields and currency pairs",
        },
        {
            "keywords": ["earnings", "quarterly results"],
            "advice": "Check specific stock volatility and options activity",
        },
        {
            "keywords": ["inflation", "cpi"],
            "advice": "Watch gold, commodities, and inflation-protected securities",
        },
        {
            "keywords": ["crypto", "bitcoin"],
            "advice": "Monitor cryptocurrency market sentiment and regulatory news",
        },
    ])
    default_implication: str = "General market sentiment analysis recommended"
    impact_weights: dict[str, int] = field(default_factory=lambda: {
        "high": 3,
        "medium": 2,
        "low": 1,
    })


@dataclass
class AdNetworkConfig:
    """Static profile of one ad network."""
    name: str
    enabled: bool = True
    revenue_score: float = 0.5
    load_time: int = 200
    fill_rate: float = 0.75
    priority: int = 1
    payment_threshold: int = 100
    payment_method: str = "bank_transfer"


def _default_ad_networks() -> dict[str, AdNetworkConfig]:
    return {
        "adsense": AdNetworkConfig(
            name="Google AdSense", revenue_score=0.9, load_time=120, fill_rate=0.85,
            priority=1, payment_threshold=100, payment_method="bank_transfer",
        ),
        "propellerads": AdNetworkConfig(
            name="PropellerAds", revenue_score=0.7, load_time=180, fill_rate=0.75,
            priority=2, payment_threshold=50, payment_method="skrill",
        ),
        "adsterra": AdNetworkConfig(
            name="Adsterra", revenue_score=0.65, load_time=200, fill_rate=0.80,
            priority=3, payment_threshold=25, payment_method="skrill",
        ),
        "medianet": AdNetworkConfig(
            name="Media.net", revenue_score=0.75, load_time=150, fill_rate=0.78,
            priority=2, payment_threshold=100, payment_method="paypal",
        ),
    }


@dataclass
class AdsConfig:
    """Ad network selection settings."""
    networks: dict[str, AdNetworkConfig] = field(default_factory=_default_ad_networks)
    revenue_weight: float = 0.4
    success_weight: float = 0.3
    speed_weight: float = 0.2
    fill_weight: float = 0.1
    revenue_ceiling: float = 1000.0
    default_success_rate: float = 0.8


@dataclass
class AdCredentials:
    """Ad network identifiers (from environment only)."""
    adsense_client: Optional[str] = None
    propeller_api_key: Optional[str] = None
    propeller_banner_zone: Optional[str] = None
    propeller_popunder_zone: Optional[str] = None
    propeller_inpage_zone: Optional[str] = None
    adsterra_api_key: Optional[str] = None
    adsterra_banner_zone: Optional[str] = None
    adsterra_popunder_zone: Optional[str] = None
    adsterra_native_zone: Optional[str] = None
    medianet_customer: Optional[str] = None


@dataclass
class Settings:
    """Application settings."""

    # API Keys (from environment only)
    news_api_key: Optional[str] = None
    alpha_vantage_key: Optional[str] = None
    finnhub_key: Optional[str] = None
    cryptocompare_api_key: Optional[str] = None
    ad_credentials: AdCredentials = field(default_factory=AdCredentials)

    # Config sections
    http: HttpConfig = field(default_factory=HttpConfig)
    news: NewsConfig = field(default_factory=NewsConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    ads: AdsConfig = field(default_factory=AdsConfig)

    @property
    def request_timeout(self) -> float:
        return self.http.timeout

    @property
    def default_page_size(self) -> int:
        return self.news.default_page_size

    @property
    def default_category(self) -> str:
        return self.news.default_category

    def service_status(self) -> dict[str, str]:
        """Credential status per market data provider."""
        keys = {
            "newsAPI": self.news_api_key,
            "alphaVantage": self.alpha_vantage_key,
            "finnhub": self.finnhub_key,
            "cryptoCompare": self.cryptocompare_api_key,
        }
        return {name: "operational" if key else "missing_key" for name, key in keys.items()}


def default_config_path() -> Path:
    """Config file location, overridable through MARKET_PULSE_CONFIG."""
    return Path(os.getenv("MARKET_PULSE_CONFIG", "config.yaml"))


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_ad_networks(raw: dict) -> dict[str, AdNetworkConfig]:
    known = _default_ad_networks()
    networks = {}
    for key, values in raw.items():
        if key not in known:
            raise ValueError(f"Unknown ad network in config: {key}")
        base = known[key]
        for attr, value in (values or {}).items():
            setattr(base, attr, value)
        networks[key] = base
    return networks


def get_settings(config_path: Optional[Path] = None) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path or default_config_path())

    settings = Settings(
        news_api_key=os.getenv("NEWS_API_KEY"),
        alpha_vantage_key=os.getenv("ALPHA_VANTAGE_KEY"),
        finnhub_key=os.getenv("FINNHUB_KEY"),
        cryptocompare_api_key=os.getenv("CRYPTOCOMPARE_API_KEY"),
        ad_credentials=AdCredentials(
            adsense_client=os.getenv("GOOGLE_ADSENSE_CLIENT"),
            propeller_api_key=os.getenv("PROPELLER_ADS_API_KEY"),
            propeller_banner_zone=os.getenv("PROPELLER_BANNER_ZONE"),
            propeller_popunder_zone=os.getenv("PROPELLER_POPUNDER_ZONE"),
            propeller_inpage_zone=os.getenv("PROPELLER_INPAGE_ZONE"),
            adsterra_api_key=os.getenv("ADSTERRA_API_KEY"),
            adsterra_banner_zone=os.getenv("ADSTERRA_BANNER_ZONE"),
            adsterra_popunder_zone=os.getenv("ADSTERRA_POPUNDER_ZONE"),
            adsterra_native_zone=os.getenv("ADSTERRA_NATIVE_ZONE"),
            medianet_customer=os.getenv("MEDIA_NET_CUSTOMER"),
        ),
    )

    # Apply YAML config
    if "http" in config:
        for key, value in config["http"].items():
            setattr(settings.http, key, value)

    if "news" in config:
        for key, value in config["news"].items():
            setattr(settings.news, key, value)

    if "scoring" in config:
        settings.scoring = ScoringConfig(**config["scoring"])

    if "ads" in config:
        ads = dict(config["ads"])
        networks = ads.pop("networks", None)
        for key, value in ads.items():
            setattr(settings.ads, key, value)
        if networks is not None:
            settings.ads.networks = _load_ad_networks(networks)

    return settings
