"""Fuzzy scoring of search results against the typed pattern."""

from rapidfuzz import fuzz, process, utils


def is_subsequence(pattern: str, text: str) -> bool:
    """Case-insensitive check that every char of pattern appears in order in text."""
    chars = iter(text.lower())
    return all(char in chars for char in pattern.lower())


def fuzzy_filter(pattern: str, candidates: list[str]) -> list[tuple[str, int, int]]:
    """Score ``candidates`` against ``pattern``.

    A candidate matches only when the pattern is a subsequence of it; matches
    are ranked by RapidFuzz's weighted ratio.

    Returns:
        List of (candidate, rank, score), best first. Empty when nothing matches.
    """
    matching = [c for c in candidates if is_subsequence(pattern, c)]
    if not matching:
        return []

    results = process.extract(
        pattern,
        matching,
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=None,
    )
    # results: List of (choice, score, index)
    return [
        (choice, rank, int(round(score)))
        for rank, (choice, score, _) in enumerate(results, 1)
    ]
