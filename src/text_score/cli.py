"""CLI command handling

Provides the score and batch commands. Everything here is glue around
rouge_n() and RougeNEvaluator: read texts, score, print JSON.
"""

from __future__ import annotations

import argparse
import json
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

import structlog

from text_score.config import Settings
from text_score.exceptions import InvalidArgumentError, TextScoreError
from text_score.models import Aggregation
from text_score.rouge import RougeNEvaluator, rouge_n
from text_score.utils.logging import configure_logging

logger = structlog.get_logger(__name__)


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def load_batch(path: Path) -> tuple[list[str], list[list[str]]]:
    """Read a JSONL batch file.

    Each non-blank line must be an object with a "candidate" string and a
    "references" list of strings (a single string is also accepted).

    Raises:
        InvalidArgumentError: If a line is not a valid batch record.
    """
    candidates: list[str] = []
    references: list[list[str]] = []

    with path.open(encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise InvalidArgumentError(f"{path}:{line_no}: invalid JSON ({e.msg})") from e

            if not isinstance(record, dict):
                raise InvalidArgumentError(f"{path}:{line_no}: expected a JSON object")
            candidate = record.get("candidate")
            refs = record.get("references")
            if isinstance(refs, str):
                refs = [refs]
            if not isinstance(candidate, str):
                raise InvalidArgumentError(f"{path}:{line_no}: 'candidate' must be a string")
            if not isinstance(refs, list) or not all(isinstance(r, str) for r in refs):
                raise InvalidArgumentError(
                    f"{path}:{line_no}: 'references' must be a list of strings"
                )

            candidates.append(candidate)
            references.append(refs)

    return candidates, references


def _print_json(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def cmd_score(args: argparse.Namespace, settings: Settings) -> int:
    """Run the score command."""
    if args.candidate_file is not None:
        candidate = _read_text(args.candidate_file)
    else:
        candidate = args.candidate

    references = list(args.reference or [])
    references.extend(_read_text(path) for path in args.reference_file or [])

    n = args.n if args.n is not None else settings.default_n
    aggregation = args.aggregation or settings.default_aggregation

    score = rouge_n(candidate, references, n, aggregation)
    _print_json({"n": n, "aggregation": Aggregation.from_value(aggregation).value, **score.to_dict()})
    return 0


def cmd_batch(args: argparse.Namespace, settings: Settings) -> int:
    """Run the batch command."""
    candidates, references = load_batch(args.input)

    n = args.n if args.n is not None else settings.default_n
    aggregation = args.aggregation or settings.default_aggregation
    workers = args.workers if args.workers is not None else settings.batch_workers
    if workers < 1:
        raise InvalidArgumentError(f"workers should be >= 1, got {workers}")

    log = logger.bind(input=str(args.input), n=n, workers=workers)
    log.info("Scoring batch", num_pairs=len(candidates))

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            evaluator = RougeNEvaluator(n=n, aggregation=aggregation, executor=executor)
            result = evaluator.compute_batch(candidates, references, args.individual)
    else:
        evaluator = RougeNEvaluator(n=n, aggregation=aggregation)
        result = evaluator.compute_batch(candidates, references, args.individual)

    _print_json({"n": n, "aggregation": evaluator.aggregation.value, **result.to_dict()})
    return 0


COMMANDS = {
    "score": cmd_score,
    "batch": cmd_batch,
}


def run(args: argparse.Namespace) -> int:
    """Dispatch a parsed command, mapping errors to exit code 1."""
    settings = Settings()
    verbose = getattr(args, "verbose", False)
    configure_logging("DEBUG" if verbose else settings.log_level, settings.log_format)

    try:
        return COMMANDS[args.command](args, settings)
    except (TextScoreError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-n",
        type=int,
        default=None,
        help="N-gram size (default: TEXT_SCORE_DEFAULT_N or 1)",
    )
    parser.add_argument(
        "--aggregation",
        choices=[a.value for a in Aggregation],
        default=None,
        help="Multi-reference aggregation (default: max)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="text-score",
        description="ROUGE-N scoring of candidate texts against references",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # score command
    score_parser = subparsers.add_parser(
        "score",
        help="Score one candidate against one or more references",
    )
    candidate_group = score_parser.add_mutually_exclusive_group(required=True)
    candidate_group.add_argument("--candidate", help="Candidate text")
    candidate_group.add_argument("--candidate-file", type=Path, help="File holding the candidate text")
    score_parser.add_argument(
        "--reference",
        action="append",
        help="Reference text (repeatable)",
    )
    score_parser.add_argument(
        "--reference-file",
        action="append",
        type=Path,
        help="File holding one reference text (repeatable)",
    )
    _add_common_arguments(score_parser)

    # batch command
    batch_parser = subparsers.add_parser(
        "batch",
        help="Score a JSONL file of candidate/references records",
    )
    batch_parser.add_argument("input", type=Path, help="JSONL input file")
    batch_parser.add_argument(
        "--individual",
        action="store_true",
        help="Include per-record scores in the output",
    )
    batch_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads (default: TEXT_SCORE_BATCH_WORKERS or 1)",
    )
    _add_common_arguments(batch_parser)

    return parser
