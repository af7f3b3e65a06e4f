"""Tests for overlap.py"""

from __future__ import annotations

from collections import Counter

from text_score.ngrams import extract_ngrams
from text_score.overlap import clipped_overlap, total_count
from text_score.tokenizer import tokenize


class TestTotalCount:
    """Tests for total_count"""

    def test_counts_instances_not_distinct_keys(self) -> None:
        ngrams = Counter({("the",): 2, ("cat",): 1})
        assert total_count(ngrams) == 3

    def test_empty_multiset(self) -> None:
        assert total_count(Counter()) == 0


class TestClippedOverlap:
    """Tests for clipped_overlap"""

    def test_cat_mat_unigrams(self, cat_mat_pair: tuple[str, str]) -> None:
        candidate, reference = cat_mat_pair
        overlap = clipped_overlap(
            extract_ngrams(tokenize(candidate), 1),
            extract_ngrams(tokenize(reference), 1),
        )
        assert overlap == 5

    def test_cat_mat_bigrams(self, cat_mat_pair: tuple[str, str]) -> None:
        candidate, reference = cat_mat_pair
        overlap = clipped_overlap(
            extract_ngrams(tokenize(candidate), 2),
            extract_ngrams(tokenize(reference), 2),
        )
        assert overlap == 4

    def test_repeated_candidate_ngram_is_clipped(self) -> None:
        """A candidate repeating a word is credited only as often as the reference has it"""
        candidate = Counter({("the",): 7})
        reference = Counter({("the",): 2, ("cat",): 1})

        assert clipped_overlap(candidate, reference) == 2

    def test_reference_only_ngrams_contribute_nothing(self) -> None:
        candidate = Counter({("cat",): 1})
        reference = Counter({("cat",): 1, ("dog",): 5})

        assert clipped_overlap(candidate, reference) == 1

    def test_self_overlap_equals_total_count(self) -> None:
        ngrams = extract_ngrams(tokenize("it is what it is and it is"), 2)
        assert clipped_overlap(ngrams, ngrams) == total_count(ngrams)

    def test_disjoint_multisets(self) -> None:
        assert clipped_overlap(Counter({("a",): 1}), Counter({("b",): 1})) == 0

    def test_empty_candidate(self) -> None:
        assert clipped_overlap(Counter(), Counter({("a",): 3})) == 0
