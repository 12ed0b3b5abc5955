"""Adapters for upstream services and output formats."""
