"""Shared test fixtures"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest
import structlog

from text_score.models import Score


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo logging configuration done by CLI tests."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """Environment without TEXT_SCORE_* variables or a .env file."""
    for key in list(os.environ.keys()):
        if key.startswith("TEXT_SCORE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def cat_mat_pair() -> tuple[str, str]:
    """Candidate and reference differing in the last word"""
    return "the cat sat on the mat", "the cat sat on the rug"


@pytest.fixture
def sample_scores() -> list[Score]:
    """Per-reference scores with different best references per metric"""
    return [
        Score(precision=0.9, recall=0.3, f1=0.45),
        Score(precision=0.5, recall=0.7, f1=0.5833333333333334),
        Score(precision=0.1, recall=0.2, f1=0.13333333333333333),
    ]
