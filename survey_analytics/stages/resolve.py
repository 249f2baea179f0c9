"""
Stage 1: Resolve a question's text to the column that holds its answers.

Two header conventions exist across exports:

    sectioned: "Demographics: Gender", "Work Habits: Indicate how much ..."
    flat:      "gender", "usually_on_time_school_work"

Resolution depends only on the column names and the question text, never on
cell values. Each convention has an ordered list of strategies; the first one
returning a column wins.

The containment checks can match short or generic question text against the
wrong column. That behaviour is relied on for slightly reworded questions
and is kept as is.
"""
import re
from typing import Callable, List, Optional, Sequence

from ..mappings import QUESTION_TO_COLUMN_MAP, SECTION_PREFIXES
from ..models import trim

Strategy = Callable[[Sequence[str], str], Optional[str]]

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase and collapse runs of whitespace to a single space."""
    return _WHITESPACE_RE.sub(" ", text.lower())


def texts_match(a: str, b: str) -> bool:
    """Normalized equality, or either text containing the other."""
    na = normalize_text(a)
    nb = normalize_text(b)
    return na == nb or nb in na or na in nb


def is_sectioned(columns: Sequence[str]) -> bool:
    """True when any column carries a survey-section prefix."""
    return any(col.startswith(SECTION_PREFIXES) for col in columns)


# ---------------------------------------------------------------------------
# Sectioned exports
# ---------------------------------------------------------------------------

def match_prefixed_exact(columns: Sequence[str], question_text: str) -> Optional[str]:
    column_set = set(columns)
    for prefix in SECTION_PREFIXES:
        candidate = f"{prefix} {question_text}"
        if candidate in column_set:
            return candidate
    return None


def match_prefixed_fuzzy(columns: Sequence[str], question_text: str) -> Optional[str]:
    for column in columns:
        for prefix in SECTION_PREFIXES:
            if not column.startswith(prefix):
                continue
            column_question = trim(column[len(prefix):])
            if column_question == question_text:
                return column
            if texts_match(column_question, question_text):
                return column
    return None


# ---------------------------------------------------------------------------
# Flat exports
# ---------------------------------------------------------------------------

def match_mapped_exact(columns: Sequence[str], question_text: str) -> Optional[str]:
    mapped = QUESTION_TO_COLUMN_MAP.get(question_text)
    if mapped and mapped in columns:
        return mapped
    return None


def match_mapped_fuzzy(columns: Sequence[str], question_text: str) -> Optional[str]:
    column_set = set(columns)
    for mapped_text, column in QUESTION_TO_COLUMN_MAP.items():
        if texts_match(mapped_text, question_text) and column in column_set:
            return column
    return None


def match_column_words(columns: Sequence[str], question_text: str) -> Optional[str]:
    """Accept the first column whose name tokens cover enough of the question's words."""
    question_words = [w for w in normalize_text(question_text).split(" ") if len(w) > 3]
    threshold = min(3, len(question_words) * 0.6)

    for column in columns:
        column_words = column.lower().replace("_", " ").split(" ")
        matching = [
            word for word in question_words
            if any(cw in word or word in cw for cw in column_words)
        ]
        if len(matching) >= threshold:
            return column
    return None


SECTIONED_STRATEGIES: List[Strategy] = [match_prefixed_exact, match_prefixed_fuzzy]
FLAT_STRATEGIES: List[Strategy] = [match_mapped_exact, match_mapped_fuzzy, match_column_words]


def find_column(columns: Sequence[str], question_text: str) -> Optional[str]:
    """
    Find the column answering a question, or None.

    The header convention is detected first; only that convention's
    strategies are tried, in order.
    """
    text = trim(question_text)
    strategies = SECTIONED_STRATEGIES if is_sectioned(columns) else FLAT_STRATEGIES
    for strategy in strategies:
        column = strategy(columns, text)
        if column is not None:
            return column
    return None
