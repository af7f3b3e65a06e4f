"""Clipped n-gram overlap counting."""

from __future__ import annotations

from collections.abc import Mapping

from text_score.ngrams import NGram


def total_count(ngrams: Mapping[NGram, int]) -> int:
    """Number of n-gram instances in a multiset (not distinct n-grams)."""
    return sum(ngrams.values())


def clipped_overlap(candidate: Mapping[NGram, int], reference: Mapping[NGram, int]) -> int:
    """Count candidate n-grams found in the reference, clipped per n-gram.

    Each distinct candidate n-gram is credited at most as many times as it
    occurs in the reference. N-grams present only in the reference add
    nothing.
    """
    return sum(min(count, reference.get(ngram, 0)) for ngram, count in candidate.items())
