"""Whitespace tokenizer."""

from __future__ import annotations


def tokenize(text: str) -> list[str]:
    """Split text into tokens on runs of whitespace.

    No case folding, punctuation stripping or unicode normalization is
    applied. Empty or whitespace-only text yields an empty list.
    """
    return text.split()
