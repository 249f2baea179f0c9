"""Stage 4: Trends (most common answer, average rating, insight text)."""
from typing import List, Optional, Union

from ..mappings import rating_ordinal
from ..models import DistributionItem, QuestionType, Trends, format_number, round1

NO_ANSWER = "N/A"
DOMINANT_PCT = 50
SPLIT_PCT = 40
HIGH_VARIETY_ITEMS = 5


def average_rating(distribution: List[DistributionItem]) -> Optional[float]:
    """Count-weighted mean ordinal; labels off the known scales are left out."""
    total_rating = 0
    count = 0
    for item in distribution:
        ordinal = rating_ordinal(item.name)
        if ordinal > 0:
            total_rating += ordinal * item.value
            count += item.value
    if count == 0:
        return None
    return round1(total_rating / count)


def _headline(distribution: List[DistributionItem]) -> str:
    top = distribution[0]
    if top.percentage >= DOMINANT_PCT:
        return f"{top.name} is the dominant response ({format_number(top.percentage)}%)"
    if len(distribution) == 2 and top.percentage >= SPLIT_PCT:
        second = distribution[1]
        return (
            f"Responses are split between {top.name} ({format_number(top.percentage)}%) "
            f"and {second.name} ({format_number(second.percentage)}%)"
        )
    return f"Most common response: {top.name} ({format_number(top.percentage)}%)"


def calculate_trends(
    distribution: List[DistributionItem],
    question_type: Union[QuestionType, str],
) -> Trends:
    if not distribution:
        return Trends(most_common_answer=NO_ANSWER)

    insights = [_headline(distribution)]
    avg = None

    if QuestionType.coerce(question_type) is QuestionType.RATING:
        avg = average_rating(distribution)
        if avg is not None:
            insights.append(f"Average rating: {avg:.1f} out of 5")

    if len(distribution) > HIGH_VARIETY_ITEMS:
        insights.append(f"High variety: {len(distribution)} different responses")

    return Trends(
        most_common_answer=distribution[0].name,
        average_rating=avg,
        insights=insights,
    )
