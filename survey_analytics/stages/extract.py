"""Stage 2: Extract answered responses and compute the response overview."""
from typing import Dict, List

from ..models import ResponseOverview, round1, trim


def extract_responses(rows: List[Dict[str, str]], column: str) -> List[str]:
    """Non-blank values of a column, in row order. Missing keys count as blank."""
    return [
        value for value in (row.get(column, "") or "" for row in rows)
        if trim(value) != ""
    ]


def calculate_response_overview(responses: List[str], total_rows: int) -> ResponseOverview:
    completed = len(responses)
    completion_rate = (completed / total_rows) * 100 if total_rows > 0 else 0

    return ResponseOverview(
        total_responses=total_rows,
        completed_responses=completed,
        skipped_responses=total_rows - completed,
        completion_rate=round1(completion_rate),
    )
