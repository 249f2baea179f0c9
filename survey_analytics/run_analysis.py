#!/usr/bin/env python3
"""
Survey analytics CLI: load a survey export and analyze questions.

Usage:
    survey-analytics sources
    survey-analytics analyze --source SYEP.csv --question-id 61
    survey-analytics analyze --source BGC.csv --question "Gender" --type multiple-choice --json
    survey-analytics compare --source SYEP.csv --question-id 1 --question-id 17
    survey-analytics report --question-id 7 --source SYEP.csv --source BGC.csv
    survey-analytics validate --source SYEP.csv
"""
import argparse
import json
import logging
import sys
from typing import Callable, List, Optional

import pandas as pd

from . import config
from .analyze import analyze_question, summarize_sources
from .catalog import get_question
from .compare import compare_questions, describe_difference
from .loader import LoaderError, discover_sources, fetch_csv
from .models import Question, QuestionAnalysis, QuestionType, format_number
from .validations import run_all_validations

Log = Callable[[str], None]


def _default_log(msg: str = "") -> None:
    print(msg, flush=True)


def _resolve_question(args, question_id: Optional[int] = None) -> Question:
    """Question from the catalog by id, or from --question/--type."""
    qid = question_id if question_id is not None else getattr(args, "question_id", None)
    if isinstance(qid, list):
        qid = qid[0] if qid else None
    if qid is not None:
        question = get_question(qid)
        if question is None:
            raise ValueError(f"Unknown question id: {qid}")
        return question
    if not getattr(args, "question", None):
        raise ValueError("Provide --question-id or --question")
    return Question(id=0, text=args.question, type=args.type)


def print_analysis(question: Question, analysis: QuestionAnalysis, log: Log = _default_log) -> None:
    overview = analysis.overview
    log(f"\n{'='*60}")
    log(f"Q{question.id}: {question.text}")
    log(f"{'='*60}")
    log(
        f"Responses: {overview.completed_responses}/{overview.total_responses} "
        f"({format_number(overview.completion_rate)}% complete, {overview.skipped_responses} skipped)"
    )
    log("\nDistribution:")
    if analysis.distribution:
        log(analysis.distribution_frame().to_string(index=False))
    else:
        log("  (no responses)")
    log(f"\nMost common answer: {analysis.trends.most_common_answer}")
    if analysis.trends.average_rating is not None:
        log(f"Average rating: {analysis.trends.average_rating:.1f}")
    for insight in analysis.trends.insights:
        log(f"  - {insight}")


def cmd_sources(args, log: Log = _default_log) -> int:
    known = config.get_available_sources()
    for name in known:
        log(f"{name:<45} {config.get_friendly_name(name)}")
    # Local exports that are not in the known list
    for name in discover_sources():
        if name not in known:
            log(f"{name:<45} {config.get_friendly_name(name)} (unlisted)")
    return 0


def cmd_analyze(args, log: Log = _default_log) -> int:
    question = _resolve_question(args)
    rows = fetch_csv(args.source)
    analysis = analyze_question(rows, question)
    if analysis is None:
        log(f"Could not find data for question: {question.text}")
        return 1
    if args.json:
        log(json.dumps(analysis.to_dict(), indent=2))
    else:
        print_analysis(question, analysis, log=log)
    return 0


def cmd_compare(args, log: Log = _default_log) -> int:
    if not args.question_id or len(args.question_id) != 2:
        raise ValueError("compare needs exactly two --question-id values")
    first = _resolve_question(args, question_id=args.question_id[0])
    second = _resolve_question(args, question_id=args.question_id[1])

    rows = fetch_csv(args.source)
    comparison = compare_questions(rows, first, second)
    if comparison is None:
        log("Could not find data for one or both selected questions in this dataset.")
        return 1
    if args.json:
        log(json.dumps(comparison.to_dict(), indent=2))
        return 0

    deltas = comparison.deltas
    table = pd.DataFrame(
        [
            ["Total responses", comparison.question1.overview.total_responses,
             comparison.question2.overview.total_responses],
            ["Completion rate (%)", comparison.question1.overview.completion_rate,
             comparison.question2.overview.completion_rate],
            ["Most common answer", comparison.question1.most_common_answer,
             comparison.question2.most_common_answer],
        ],
        columns=["metric", f"Q{first.id}", f"Q{second.id}"],
    )
    log(table.to_string(index=False))
    log(
        f"\nCompletion difference: {deltas.completion_rate_diff:.1f} percentage points "
        f"({describe_difference(deltas.completion_rate_diff)})"
    )
    if deltas.top_option_percentage_diff is not None:
        log(f"Top response difference: {deltas.top_option_percentage_diff:.1f} percentage points")
    else:
        log("Top response difference: N/A")
    return 0


def cmd_report(args, log: Log = _default_log) -> int:
    question = _resolve_question(args)
    frame = summarize_sources(question, args.source or None)
    log(f"Q{question.id}: {question.text}\n")
    log(frame.to_string(index=False))
    return 0 if (frame["status"] == "ok").any() else 1


def cmd_validate(args, log: Log = _default_log) -> int:
    results = run_all_validations(args.source, min_rows=args.min_rows)
    if args.json:
        log(json.dumps(results, indent=2, default=str))
    else:
        for r in results:
            status = "PASS" if r.get("passed") else "FAIL"
            log(f"  [{status}] {r['name']}: {r['message']}")
    return 0 if all(r.get("passed") for r in results) else 1


def _add_question_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--question-id", type=int, help="Catalog question id (1-64)")
    parser.add_argument("--question", help="Question text, when not using the catalog")
    parser.add_argument(
        "--type",
        default=QuestionType.MULTIPLE_CHOICE.value,
        choices=[t.value for t in QuestionType],
        help="Question type for --question (default: multiple-choice)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Survey question analytics over CSV exports")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("sources", help="List known survey exports")
    p.set_defaults(func=cmd_sources)

    p = sub.add_parser("analyze", help="Analyze one question")
    p.add_argument("--source", "-s", default=config.DEFAULT_SOURCE, help="Source CSV name")
    _add_question_args(p)
    p.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    p.set_defaults(func=cmd_analyze)

    p = sub.add_parser("compare", help="Compare two catalog questions")
    p.add_argument("--source", "-s", default=config.DEFAULT_SOURCE, help="Source CSV name")
    p.add_argument("--question-id", type=int, action="append", help="Catalog question id (give twice)")
    p.add_argument("--json", action="store_true", help="Print the comparison as JSON")
    p.set_defaults(func=cmd_compare)

    p = sub.add_parser("report", help="Analyze one question across sources")
    p.add_argument("--source", "-s", action="append", help="Source CSV name (repeatable, default: all)")
    _add_question_args(p)
    p.set_defaults(func=cmd_report)

    p = sub.add_parser("validate", help="Run source validations")
    p.add_argument("--source", "-s", default=config.DEFAULT_SOURCE, help="Source CSV name")
    p.add_argument("--min-rows", type=int, default=1, help="Min rows required (default 1)")
    p.add_argument("--json", action="store_true", help="Print results as JSON")
    p.set_defaults(func=cmd_validate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.func(args)
    except LoaderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
