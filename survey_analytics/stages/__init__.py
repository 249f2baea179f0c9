"""Analysis stages: resolve → extract → distribution → trends."""
from .resolve import find_column, is_sectioned, normalize_text
from .extract import extract_responses, calculate_response_overview
from .distribution import calculate_distribution
from .trends import calculate_trends

__all__ = [
    "find_column",
    "is_sectioned",
    "normalize_text",
    "extract_responses",
    "calculate_response_overview",
    "calculate_distribution",
    "calculate_trends",
]
