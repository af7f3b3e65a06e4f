"""text-score: ROUGE-N evaluation for generated text

Splits texts on whitespace, counts n-grams and scores clipped n-gram
overlap as precision, recall and F1, with max or average aggregation
over multiple references.

Usage:
    >>> from text_score import rouge_n
    >>> score = rouge_n("the cat sat on the mat", ["the cat sat on the rug"], n=2)
    >>> round(score.f1, 2)
    0.8
"""

from text_score.exceptions import InvalidArgumentError, TextScoreError
from text_score.models import Aggregation, BatchResult, Score
from text_score.ngrams import extract_ngrams
from text_score.overlap import clipped_overlap, total_count
from text_score.rouge import RougeNEvaluator, rouge_n
from text_score.tokenizer import tokenize

__all__ = [
    "Aggregation",
    "BatchResult",
    "InvalidArgumentError",
    "RougeNEvaluator",
    "Score",
    "TextScoreError",
    "clipped_overlap",
    "extract_ngrams",
    "rouge_n",
    "tokenize",
    "total_count",
]
__version__ = "0.1.0"
