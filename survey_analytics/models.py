"""Question descriptors and the analysis result structures."""
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd


class QuestionType(str, Enum):
    YES_NO = "yes-no"
    MULTIPLE_CHOICE = "multiple-choice"
    RATING = "rating"
    TEXT = "text"

    @classmethod
    def coerce(cls, value) -> Optional["QuestionType"]:
        """Return the matching member, or None for an unrecognized type string."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Question:
    id: int
    text: str
    type: str


@dataclass
class ResponseOverview:
    total_responses: int
    completed_responses: int
    skipped_responses: int
    completion_rate: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalResponses": self.total_responses,
            "completedResponses": self.completed_responses,
            "skippedResponses": self.skipped_responses,
            "completionRate": self.completion_rate,
        }


@dataclass
class DistributionItem:
    name: str
    value: int
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value, "percentage": self.percentage}


@dataclass
class Trends:
    most_common_answer: str
    average_rating: Optional[float] = None
    insights: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"mostCommonAnswer": self.most_common_answer}
        if self.average_rating is not None:
            out["averageRating"] = self.average_rating
        out["insights"] = list(self.insights)
        return out


@dataclass
class QuestionAnalysis:
    overview: ResponseOverview
    distribution: List[DistributionItem]
    trends: Trends

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overview": self.overview.to_dict(),
            "distribution": [item.to_dict() for item in self.distribution],
            "trends": self.trends.to_dict(),
        }

    def distribution_frame(self) -> pd.DataFrame:
        """Distribution as a DataFrame with name, value and percentage columns."""
        return pd.DataFrame(
            [item.to_dict() for item in self.distribution],
            columns=["name", "value", "percentage"],
        )


def round1(value: float) -> float:
    """Round to one decimal place, halves rounding up."""
    return math.floor(value * 10 + 0.5) / 10


def format_number(value: float) -> str:
    """Render a number the way it reads in insight text: 50 not 50.0, 66.7 as is."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


# Whitespace removed around cell values: ASCII and Unicode space separators,
# line terminators and the byte order mark.
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_ARRAY_INDEX = re.compile(r"(?:0|[1-9][0-9]*)")
_MAX_ARRAY_INDEX = 2 ** 32 - 2


def trim(value: str) -> str:
    return value.strip(TRIM_CHARS)


def is_array_index(key: str) -> bool:
    """True for canonical non-negative integer names such as "0" or "15" (not "015")."""
    return bool(_ARRAY_INDEX.fullmatch(key)) and int(key) <= _MAX_ARRAY_INDEX


def integer_keys_first(keys: Iterable[str]) -> List[str]:
    """
    Order answer labels and header names for display: integer-like keys come
    first in ascending numeric order, the rest keep their given order.
    """
    keys = list(keys)
    numeric = sorted((key for key in keys if is_array_index(key)), key=int)
    return numeric + [key for key in keys if not is_array_index(key)]
