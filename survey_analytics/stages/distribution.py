"""
Stage 3: Response distributions, one counting function per question type.

Percentages are taken over the number of answered responses, not over the
number of rows. Items with equal counts are listed integer-like labels first
(ascending), then the other labels in the order they were first seen.
"""
from typing import Callable, Dict, Iterable, List, Union

from ..mappings import rating_ordinal
from ..models import DistributionItem, QuestionType, integer_keys_first, round1, trim

DistributionFn = Callable[[List[str]], List[DistributionItem]]


def _count(values: Iterable[str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def _to_items(counts: Dict[str, int], total: int) -> List[DistributionItem]:
    return [
        DistributionItem(
            name=name,
            value=counts[name],
            percentage=round1((counts[name] / total) * 100) if total > 0 else 0,
        )
        for name in integer_keys_first(counts)
    ]


def _trimmed(responses: List[str]) -> Iterable[str]:
    for response in responses:
        normalized = trim(response)
        if normalized:
            yield normalized


def yes_no_distribution(responses: List[str]) -> List[DistributionItem]:
    items = _to_items(_count(_trimmed(responses)), len(responses))
    return sorted(items, key=lambda item: -item.value)


def _split_votes(responses: List[str]) -> Iterable[str]:
    for response in responses:
        options = [trim(opt) for opt in response.split(",")]
        options = [opt for opt in options if opt]
        if options:
            yield from options
        else:
            normalized = trim(response)
            if normalized:
                yield normalized


def multiple_choice_distribution(responses: List[str]) -> List[DistributionItem]:
    """
    Count multi-select answers: "Healthcare, Technology" is one vote for each
    option, so votes can outnumber responses.
    """
    items = _to_items(_count(_split_votes(responses)), len(responses))
    return sorted(items, key=lambda item: -item.value)


def rating_distribution(responses: List[str]) -> List[DistributionItem]:
    """Highest rating first; unrecognized labels rank below every known one."""
    items = _to_items(_count(_trimmed(responses)), len(responses))
    return sorted(items, key=lambda item: (-rating_ordinal(item.name), -item.value))


DISTRIBUTIONS: Dict[QuestionType, DistributionFn] = {
    QuestionType.YES_NO: yes_no_distribution,
    QuestionType.MULTIPLE_CHOICE: multiple_choice_distribution,
    QuestionType.RATING: rating_distribution,
}


def calculate_distribution(
    responses: List[str],
    question_type: Union[QuestionType, str],
) -> List[DistributionItem]:
    """Dispatch on question type; text and unrecognized types count as multiple choice."""
    kind = QuestionType.coerce(question_type)
    handler = DISTRIBUTIONS.get(kind, multiple_choice_distribution)
    return handler(responses)
