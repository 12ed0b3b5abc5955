"""Briefing generators."""

from market_pulse.adapters.briefing.markdown_briefing import MarkdownBriefingGenerator

__all__ = ["MarkdownBriefingGenerator"]
