"""Side-by-side comparison of two questions from the same source."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .analyze import analyze_question
from .loader import Row
from .models import DistributionItem, Question, QuestionAnalysis, ResponseOverview

SMALL_DIFF_PCT = 5
MODERATE_DIFF_PCT = 10


@dataclass
class QuestionSummary:
    question: Question
    overview: ResponseOverview
    distribution: List[DistributionItem] = field(default_factory=list)
    most_common_answer: str = "N/A"
    average_rating: Optional[float] = None

    @classmethod
    def build(cls, question: Question, analysis: QuestionAnalysis) -> "QuestionSummary":
        return cls(
            question=question,
            overview=analysis.overview,
            distribution=list(analysis.distribution),
            most_common_answer=analysis.trends.most_common_answer,
            average_rating=analysis.trends.average_rating,
        )

    def to_dict(self) -> Dict[str, Any]:
        out = {
            "questionId": self.question.id,
            "questionText": self.question.text,
            "questionType": self.question.type,
            "overview": self.overview.to_dict(),
            "distribution": [item.to_dict() for item in self.distribution],
            "mostCommonAnswer": self.most_common_answer,
        }
        if self.average_rating is not None:
            out["averageRating"] = self.average_rating
        return out


@dataclass
class ComparisonDeltas:
    completion_rate_diff: float
    total_responses_diff: int
    top_option_percentage_diff: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "completionRateDiff": self.completion_rate_diff,
            "totalResponsesDiff": self.total_responses_diff,
        }
        if self.top_option_percentage_diff is not None:
            out["topOptionPercentageDiff"] = self.top_option_percentage_diff
        return out


@dataclass
class ComparisonAnalysis:
    question1: QuestionSummary
    question2: QuestionSummary
    deltas: ComparisonDeltas

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question1": self.question1.to_dict(),
            "question2": self.question2.to_dict(),
            "deltas": self.deltas.to_dict(),
        }


def describe_difference(diff: float) -> str:
    """Rough size label for a percentage-point difference."""
    size = abs(diff)
    if size < SMALL_DIFF_PCT:
        return "Small difference"
    if size < MODERATE_DIFF_PCT:
        return "Moderate difference"
    return "Large difference"


def compare_questions(rows: List[Row], first: Question, second: Question) -> Optional[ComparisonAnalysis]:
    """Analyze two questions over the same rows; None when either has no data."""
    analysis1 = analyze_question(rows, first)
    analysis2 = analyze_question(rows, second)
    if analysis1 is None or analysis2 is None:
        return None

    summary1 = QuestionSummary.build(first, analysis1)
    summary2 = QuestionSummary.build(second, analysis2)

    top1 = summary1.distribution[0] if summary1.distribution else None
    top2 = summary2.distribution[0] if summary2.distribution else None

    deltas = ComparisonDeltas(
        completion_rate_diff=summary1.overview.completion_rate - summary2.overview.completion_rate,
        total_responses_diff=summary1.overview.total_responses - summary2.overview.total_responses,
        top_option_percentage_diff=(top1.percentage - top2.percentage) if top1 and top2 else None,
    )
    return ComparisonAnalysis(question1=summary1, question2=summary2, deltas=deltas)
