"""Survey analytics: CSV survey exports → per-question overview, distribution and trends."""
from .analyze import analyze_question, analyze_source, summarize_sources
from .compare import compare_questions
from .loader import FetchError, FormatError, LoaderError, clear_csv_cache, fetch_csv, parse_csv
from .models import DistributionItem, Question, QuestionAnalysis, QuestionType

__version__ = "0.1.0"

__all__ = [
    "analyze_question",
    "analyze_source",
    "summarize_sources",
    "compare_questions",
    "fetch_csv",
    "parse_csv",
    "clear_csv_cache",
    "LoaderError",
    "FetchError",
    "FormatError",
    "Question",
    "QuestionType",
    "QuestionAnalysis",
    "DistributionItem",
]
