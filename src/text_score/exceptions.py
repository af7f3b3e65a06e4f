"""Custom exception classes.

Every error raised by text-score derives from TextScoreError so callers can
catch the whole family in one place.
"""

from __future__ import annotations


class TextScoreError(Exception):
    """Base class for text-score errors."""


class InvalidArgumentError(TextScoreError, ValueError):
    """Invalid scoring argument.

    Raised for a non-positive n, an empty reference set, an unknown
    aggregation policy or mismatched batch inputs. Always raised before
    any scoring begins.
    """
