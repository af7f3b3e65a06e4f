"""Precision/recall/F1 primitives and multi-reference aggregation.

All ratios follow the evaluation-metric convention that a zero
denominator yields 0.0 rather than an error.
"""

from __future__ import annotations

from collections.abc import Sequence
from statistics import fmean

from text_score.exceptions import InvalidArgumentError
from text_score.models import Aggregation, Score


def precision(true_pos: int, false_pos: int) -> float:
    """Fraction of predicted items that are correct."""
    total = true_pos + false_pos
    if total == 0:
        return 0.0
    return true_pos / total


def recall(true_pos: int, false_neg: int) -> float:
    """Fraction of expected items that were predicted."""
    total = true_pos + false_neg
    if total == 0:
        return 0.0
    return true_pos / total


def f1(precision: float, recall: float) -> float:
    """Harmonic mean of precision and recall."""
    if precision + recall == 0:
        return 0.0
    return min(1.0, 2.0 * precision * recall / (precision + recall))


def score_counts(overlap: int, candidate_total: int, reference_total: int) -> Score:
    """Build a Score from an overlap count and the two n-gram totals.

    Args:
        overlap: Clipped overlap between candidate and reference.
        candidate_total: Number of candidate n-gram instances.
        reference_total: Number of reference n-gram instances.
    """
    p = precision(overlap, candidate_total - overlap)
    r = recall(overlap, reference_total - overlap)
    return Score(precision=p, recall=r, f1=f1(p, r))


def aggregate(scores: Sequence[Score], aggregation: Aggregation | str = Aggregation.MAX) -> Score:
    """Collapse per-reference scores into a single Score.

    MAX picks the best value of each metric independently, so precision,
    recall and f1 may come from different references. AVERAGE takes the
    arithmetic mean of each metric.

    Raises:
        InvalidArgumentError: If scores is empty or the policy is unknown.
    """
    policy = Aggregation.from_value(aggregation)
    if not scores:
        raise InvalidArgumentError("Cannot aggregate an empty list of scores")
    if len(scores) == 1:
        return scores[0]

    combine = max if policy is Aggregation.MAX else fmean
    return Score(
        precision=combine(s.precision for s in scores),
        recall=combine(s.recall for s in scores),
        f1=combine(s.f1 for s in scores),
    )
