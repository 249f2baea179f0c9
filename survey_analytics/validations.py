"""
Validations for survey export sources.

Each validation returns a dict: {"name", "passed", "message", "details"}.
The source is loaded once by run_all_validations and its rows are handed to
every check. Run via scripts/run_validations.py for a report over every known
source.
"""
from typing import Any, Dict, List, Optional, Tuple

from .analyze import resolve_question_column
from .catalog import get_questions
from .loader import LoaderError, Row, fetch_csv, get_columns
from .models import Question
from .stages.resolve import is_sectioned


def load_source(source_name: str) -> Tuple[Optional[List[Row]], Optional[str]]:
    """Return (rows, error message)."""
    try:
        return fetch_csv(source_name), None
    except LoaderError as e:
        return None, str(e)


def validation_source_loadable(
    source_name: str,
    rows: Optional[List[Row]],
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """Check that the source could be fetched and parsed."""
    passed = rows is not None
    return {
        "name": "source_loadable",
        "passed": passed,
        "message": f"Loaded {source_name}" if passed else f"Could not load {source_name}",
        "details": {"source": source_name, "error": error} if error else {"source": source_name},
    }


def validation_source_has_rows(rows: Optional[List[Row]], min_rows: int = 1) -> Dict[str, Any]:
    """Check that the source has at least min_rows data rows."""
    count = len(rows) if rows is not None else 0
    passed = count >= min_rows
    return {
        "name": "source_has_rows",
        "passed": passed,
        "message": f"Row count {count} >= {min_rows}" if passed else f"Row count {count} < {min_rows}",
        "details": {"rows": count, "min_required": min_rows},
    }


def validation_header_convention(rows: Optional[List[Row]]) -> Dict[str, Any]:
    """Report which column-naming convention the source uses."""
    if not rows:
        return {"name": "header_convention", "passed": False, "message": "No data", "details": {}}
    columns = get_columns(rows)
    convention = "sectioned" if is_sectioned(columns) else "flat"
    return {
        "name": "header_convention",
        "passed": True,
        "message": f"{convention.capitalize()} column names ({len(columns)} columns)",
        "details": {"convention": convention, "columns": len(columns)},
    }


def validation_question_coverage(
    rows: Optional[List[Row]],
    questions: Optional[List[Question]] = None,
) -> Dict[str, Any]:
    """Check how many catalog questions resolve to a column in the source."""
    if not rows:
        return {"name": "question_coverage", "passed": False, "message": "No data", "details": {}}
    questions = questions if questions is not None else get_questions()

    unresolved = [q.id for q in questions if resolve_question_column(rows, q) is None]
    resolved = len(questions) - len(unresolved)
    total = len(questions)
    pct = (resolved / total * 100) if total else 0
    return {
        "name": "question_coverage",
        "passed": resolved > 0,
        "message": f"{resolved}/{total} questions resolve ({pct:.1f}%)",
        "details": {"resolved": resolved, "total": total, "unresolved_ids": unresolved},
    }


def run_all_validations(source_name: str, min_rows: int = 1) -> List[Dict[str, Any]]:
    """Run all validation checks for one source. Returns list of result dicts."""
    rows, error = load_source(source_name)
    return [
        validation_source_loadable(source_name, rows, error),
        validation_source_has_rows(rows, min_rows=min_rows),
        validation_header_convention(rows),
        validation_question_coverage(rows),
    ]
