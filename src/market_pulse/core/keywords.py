"""Shared keyword matching utilities."""


def count_matches(text: str, keywords: list[str]) -> int:
    """
    Count how many keywords occur in the text.

    Args:
        text: Text to search
        keywords: Keywords to look for

    Returns:
        Number of distinct keywords found as substrings (case-insensitive).
        Repeated occurrences of one keyword count once.
    """
    lowered = text.lower()
    return sum(1 for keyword in keywords if keyword.lower() in lowered)


def contains_any(text: str, keywords: list[str]) -> bool:
    """True if any keyword occurs in the text (case-insensitive)."""
    lowered = text.lower()
    return any(keyword.lower() in lowered for keyword in keywords)
