"""Market news aggregation and ad network selection service."""

__version__ = "0.1.0"
