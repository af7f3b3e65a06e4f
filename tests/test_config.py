"""Tests for config.py"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from text_score.config import Settings
from text_score.models import Aggregation


class TestSettings:
    """Tests for Settings"""

    def test_default_values(self, clean_env: pytest.MonkeyPatch) -> None:
        """Defaults apply when no environment variables are set"""
        s = Settings()
        assert s.default_n == 1
        assert s.default_aggregation is Aggregation.MAX
        assert s.batch_workers == 1
        assert s.log_level == "WARNING"
        assert s.log_format == "console"

    def test_from_env_with_custom_values(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("TEXT_SCORE_DEFAULT_N", "2")
        clean_env.setenv("TEXT_SCORE_DEFAULT_AGGREGATION", "average")
        clean_env.setenv("TEXT_SCORE_BATCH_WORKERS", "4")
        clean_env.setenv("TEXT_SCORE_LOG_LEVEL", "DEBUG")
        clean_env.setenv("TEXT_SCORE_LOG_FORMAT", "json")

        s = Settings()
        assert s.default_n == 2
        assert s.default_aggregation is Aggregation.AVERAGE
        assert s.batch_workers == 4
        assert s.log_level == "DEBUG"
        assert s.log_format == "json"

    def test_reads_dotenv_file(self, clean_env: pytest.MonkeyPatch, tmp_path) -> None:
        (tmp_path / ".env").write_text("TEXT_SCORE_DEFAULT_N=3\n")

        assert Settings().default_n == 3

    def test_rejects_non_positive_n(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("TEXT_SCORE_DEFAULT_N", "0")

        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_unknown_aggregation(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("TEXT_SCORE_DEFAULT_AGGREGATION", "median")

        with pytest.raises(ValidationError):
            Settings()
