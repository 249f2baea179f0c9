"""
Question analysis: rows + question → overview, distribution and trends.

    rows = fetch_csv("SYEP.csv")
    analysis = analyze_question(rows, Question(id=61, text="Gender", type="multiple-choice"))

A result of None means there is no data for the question in this source
(no rows, or no column answers it). It is an expected outcome, not an error.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from . import config
from .loader import FetchError, FormatError, Row, fetch_csv, get_columns
from .models import Question, QuestionAnalysis
from .stages import (
    calculate_distribution,
    calculate_response_overview,
    calculate_trends,
    extract_responses,
    find_column,
)

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "source",
    "label",
    "status",
    "column",
    "total_responses",
    "completed_responses",
    "completion_rate",
    "most_common_answer",
    "top_percentage",
    "average_rating",
]


def resolve_question_column(rows: List[Row], question: Question) -> Optional[str]:
    """Column answering the question in this row set, or None."""
    if not rows:
        return None
    return find_column(get_columns(rows), question.text)


def analyze_question(rows: List[Row], question: Question) -> Optional[QuestionAnalysis]:
    """Analyze one question over a row set; None when there is no data for it."""
    if not rows:
        return None

    column = resolve_question_column(rows, question)
    if column is None:
        logger.warning("Could not find CSV column for question: %s", question.text)
        return None
    return analyze_column(rows, column, question)


def analyze_column(rows: List[Row], column: str, question: Question) -> QuestionAnalysis:
    """Analyze an already resolved column as answers to the question."""
    responses = extract_responses(rows, column)
    overview = calculate_response_overview(responses, len(rows))
    distribution = calculate_distribution(responses, question.type)
    trends = calculate_trends(distribution, question.type)

    logger.debug(
        "Question %s -> column %r: %d/%d answered, %d distinct",
        question.id, column, overview.completed_responses, overview.total_responses, len(distribution),
    )
    return QuestionAnalysis(overview=overview, distribution=distribution, trends=trends)


def analyze_source(source_name: str, question: Question) -> Optional[QuestionAnalysis]:
    """Load a source and analyze one question. Loader errors propagate."""
    rows = fetch_csv(source_name)
    return analyze_question(rows, question)


def _summary_row(source_name: str, question: Question) -> Dict[str, Any]:
    row: Dict[str, Any] = {key: None for key in REPORT_COLUMNS}
    row["source"] = source_name
    row["label"] = config.get_friendly_name(source_name)

    try:
        rows = fetch_csv(source_name)
    except (FetchError, FormatError) as exc:
        logger.warning("Skipping %s: %s", source_name, exc)
        row["status"] = "fetch_error"
        return row

    column = resolve_question_column(rows, question)
    if column is None:
        logger.warning("No column for question %s in %s", question.id, source_name)
        row["status"] = "not_found"
        return row

    analysis = analyze_column(rows, column, question)

    top = analysis.distribution[0] if analysis.distribution else None
    row.update({
        "status": "ok",
        "column": column,
        "total_responses": analysis.overview.total_responses,
        "completed_responses": analysis.overview.completed_responses,
        "completion_rate": analysis.overview.completion_rate,
        "most_common_answer": analysis.trends.most_common_answer,
        "top_percentage": top.percentage if top else None,
        "average_rating": analysis.trends.average_rating,
    })
    return row


def summarize_sources(question: Question, sources: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """
    Analyze one question across several sources, one report row per source.

    Sources that fail to load are reported with status "fetch_error" rather
    than aborting the report.
    """
    names = list(sources) if sources else config.get_available_sources()
    records = [_summary_row(name, question) for name in names]
    return pd.DataFrame.from_records(records, columns=REPORT_COLUMNS)
