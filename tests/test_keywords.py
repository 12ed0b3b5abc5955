"""Tests for shared keyword matching utilities."""

from market_pulse.core.keywords import contains_any, count_matches


def test_count_matches_case_insensitive():
    """Test keyword matching ignores case on both sides."""
    keywords = ["Fed", "earnings"]

    assert count_matches("FED signals pause before EARNINGS", keywords) == 2
    assert count_matches("fed signals pause", ["FED"]) == 1


def test_count_matches_counts_distinct_keywords():
    """Test repeated mentions of one keyword count once."""
    assert count_matches("rally after rally after rally", ["rally", "surge"]) == 1


def test_count_matches_substrings():
    """Test keywords match inside longer words."""
    # "rise" occurs in "enterprise"
    assert count_matches("Enterprise software demand", ["rise"]) == 1


def test_count_matches_no_match():
    assert count_matches("Image classification with CNNs", ["inflation", "gdp"]) == 0
    assert count_matches("", ["inflation"]) == 0


def test_contains_any():
    assert contains_any("BREAKING: rate decision", ["breaking", "urgent"])
    assert not contains_any("Weekly recap", ["breaking", "urgent"])
