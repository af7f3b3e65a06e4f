"""ROUGE-N evaluation for generated text.

This module provides ROUGE-N (Recall-Oriented Understudy for Gisting
Evaluation) scores by n-gram overlap between a candidate text and one or
more references. Texts are split on whitespace only; callers wanting case
folding or stemming must normalize before scoring.

References:
- ROUGE Paper: https://aclanthology.org/W04-1013/
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import Executor

import structlog

from text_score.exceptions import InvalidArgumentError
from text_score.models import Aggregation, BatchResult, Score
from text_score.ngrams import NGram, extract_ngrams, validate_n
from text_score.overlap import clipped_overlap, total_count
from text_score.scoring import aggregate, score_counts
from text_score.tokenizer import tokenize

# Silent until the application configures stdlib logging handlers
_stdlib_logger = logging.getLogger(__name__)
logger = structlog.wrap_logger(_stdlib_logger)

References = Iterable[str] | str


def _as_reference_list(references: References) -> list[str]:
    if isinstance(references, str):
        return [references]
    reference_list = list(references)
    if not reference_list:
        raise InvalidArgumentError("At least one reference text is required")
    return reference_list


def ngram_based_score(
    candidate_ngrams: Mapping[NGram, int],
    reference_ngrams: Mapping[NGram, int],
) -> Score:
    """Score a candidate n-gram multiset against one reference multiset."""
    overlap = clipped_overlap(candidate_ngrams, reference_ngrams)
    return score_counts(overlap, total_count(candidate_ngrams), total_count(reference_ngrams))


def rouge_n(
    candidate: str,
    references: References,
    n: int,
    aggregation: Aggregation | str = Aggregation.MAX,
) -> Score:
    """Compute ROUGE-N between a candidate and its references.

    Args:
        candidate: The generated/candidate text.
        references: One or more reference texts. A plain string is treated
            as a single reference.
        n: N-gram size, must be >= 1.
        aggregation: How per-reference scores are combined. MAX (default)
            keeps the best value per metric, AVERAGE takes the mean.

    Returns:
        Score with precision, recall and F1. An empty candidate or a text
        shorter than n tokens yields zeros rather than an error.

    Raises:
        InvalidArgumentError: If n is not positive, references is empty or
            aggregation is unknown.

    Example:
        >>> score = rouge_n("the cat sat", ["the cat sat down"], n=1)
        >>> round(score.recall, 2)
        0.75
    """
    validate_n(n)
    policy = Aggregation.from_value(aggregation)
    reference_texts = _as_reference_list(references)

    candidate_ngrams = extract_ngrams(tokenize(candidate), n)
    per_reference = [
        ngram_based_score(candidate_ngrams, extract_ngrams(tokenize(reference), n))
        for reference in reference_texts
    ]
    result = aggregate(per_reference, policy)

    if _stdlib_logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "ROUGE-N computed",
            n=n,
            aggregation=policy.value,
            num_references=len(reference_texts),
            precision=result.precision,
            recall=result.recall,
            f1=result.f1,
        )

    return result


class RougeNEvaluator:
    """ROUGE-N evaluator bound to a fixed n and aggregation policy.

    Example:
        >>> evaluator = RougeNEvaluator(n=2)
        >>> batch = evaluator.compute_batch(
        ...     ["the cat sat on the mat"],
        ...     [["the cat sat on the rug"]],
        ... )
        >>> round(batch.f1, 2)
        0.8
    """

    def __init__(
        self,
        n: int = 1,
        aggregation: Aggregation | str = Aggregation.MAX,
        executor: Executor | None = None,
    ) -> None:
        """Initialize the evaluator.

        Args:
            n: N-gram size used for every call.
            aggregation: Multi-reference policy used for every call.
            executor: Optional executor used to score batch pairs
                concurrently. Pairs are scored sequentially without one.
        """
        self.n = validate_n(n)
        self.aggregation = Aggregation.from_value(aggregation)
        self._executor = executor

    def score(self, candidate: str, references: References) -> Score:
        """Score a single candidate against its references."""
        return rouge_n(candidate, references, self.n, self.aggregation)

    def _score_pair(self, pair: tuple[str, list[str]]) -> Score:
        candidate, references = pair
        return self.score(candidate, references)

    def compute_batch(
        self,
        candidates: Sequence[str],
        references: Sequence[References],
        return_individual: bool = False,
    ) -> BatchResult:
        """Compute ROUGE-N for a batch of candidate/reference-set pairs.

        Args:
            candidates: Candidate texts.
            references: references[i] is the reference set (or single
                reference string) for candidates[i].
            return_individual: Whether to keep per-pair scores.

        Returns:
            BatchResult with mean precision, recall and F1.

        Raises:
            InvalidArgumentError: If candidates and references have different
                lengths or any pair has an empty reference set.
        """
        if len(candidates) != len(references):
            raise InvalidArgumentError(
                f"Mismatched lengths: {len(candidates)} candidates vs {len(references)} references"
            )

        if not candidates:
            return BatchResult(individual_scores=[] if return_individual else None)

        # Fail before scoring anything
        reference_sets = [_as_reference_list(reference_set) for reference_set in references]

        pairs = list(zip(candidates, reference_sets))
        if self._executor is not None:
            scores = list(self._executor.map(self._score_pair, pairs))
        else:
            scores = [self._score_pair(pair) for pair in pairs]

        num_samples = len(scores)
        result = BatchResult(
            precision=sum(s.precision for s in scores) / num_samples,
            recall=sum(s.recall for s in scores) / num_samples,
            f1=sum(s.f1 for s in scores) / num_samples,
            num_samples=num_samples,
            individual_scores=scores if return_individual else None,
        )

        logger.info(
            "Batch ROUGE-N computed",
            n=self.n,
            aggregation=self.aggregation.value,
            num_samples=num_samples,
            avg_f1=result.f1,
        )

        return result
