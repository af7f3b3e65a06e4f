"""N-gram extraction

Turns a token sequence into a multiset of contiguous n-token windows.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from text_score.exceptions import InvalidArgumentError

NGram = tuple[str, ...]
NGramCounts = Counter[NGram]


def validate_n(n: int) -> int:
    """Check that n is a positive integer and return it."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"n must be an integer, got {type(n).__name__}")
    if n < 1:
        raise InvalidArgumentError(f"n should be >= 1, got {n}")
    return n


def extract_ngrams(tokens: Sequence[str], n: int) -> NGramCounts:
    """Count every n-gram in a token sequence.

    A window of width n slides over the tokens with stride 1, so a
    sequence of L tokens yields max(0, L - n + 1) n-gram instances.
    Sequences shorter than n produce an empty multiset.

    Args:
        tokens: Ordered tokens, usually from tokenize().
        n: Window width, must be >= 1.

    Returns:
        Counter mapping each n-gram tuple to its occurrence count.

    Raises:
        InvalidArgumentError: If n is not a positive integer.
    """
    validate_n(n)
    return Counter(tuple(tokens[i : i + n]) for i in range(len(tokens) - n + 1))
