"""Tests for two-question comparisons."""
import pytest

from survey_analytics.compare import compare_questions, describe_difference
from survey_analytics.models import Question

SAME_EMPLOYER = Question(id=1, text="Did you work at the same location/employer last summer?", type="yes-no")
RECOMMEND = Question(id=17, text="Now that the summer is over - Would you recommend this job to a friend?", type="yes-no")


@pytest.fixture
def rows():
    return [
        {"same_employer": "Yes", "recommend_job": "Yes"},
        {"same_employer": "No", "recommend_job": "Yes"},
        {"same_employer": "Yes", "recommend_job": ""},
        {"same_employer": "", "recommend_job": ""},
    ]


class TestCompareQuestions:
    def test_deltas(self, rows):
        comparison = compare_questions(rows, SAME_EMPLOYER, RECOMMEND)
        assert comparison.question1.overview.completion_rate == 75.0
        assert comparison.question2.overview.completion_rate == 50.0
        assert comparison.deltas.completion_rate_diff == pytest.approx(25.0)
        assert comparison.deltas.total_responses_diff == 0
        assert comparison.deltas.top_option_percentage_diff == pytest.approx(-33.3)

    def test_summaries_carry_question_and_top_answer(self, rows):
        comparison = compare_questions(rows, SAME_EMPLOYER, RECOMMEND)
        data = comparison.to_dict()
        assert data["question1"]["questionId"] == 1
        assert data["question2"]["questionType"] == "yes-no"
        assert data["question2"]["mostCommonAnswer"] == "Yes"
        assert data["question2"]["distribution"] == [{"name": "Yes", "value": 2, "percentage": 100.0}]
        assert "averageRating" not in data["question1"]

    def test_no_top_delta_when_a_question_has_no_answers(self, rows):
        for row in rows:
            row["recommend_job"] = ""
        comparison = compare_questions(rows, SAME_EMPLOYER, RECOMMEND)
        assert comparison.deltas.top_option_percentage_diff is None
        assert "topOptionPercentageDiff" not in comparison.deltas.to_dict()

    def test_missing_question_gives_none(self, rows):
        other = Question(id=0, text="Favourite colour", type="text")
        assert compare_questions(rows, SAME_EMPLOYER, other) is None
        assert compare_questions(rows, other, SAME_EMPLOYER) is None

    def test_empty_rows_give_none(self):
        assert compare_questions([], SAME_EMPLOYER, RECOMMEND) is None


class TestDescribeDifference:
    @pytest.mark.parametrize("diff,label", [
        (0, "Small difference"),
        (-4.9, "Small difference"),
        (5, "Moderate difference"),
        (-9.9, "Moderate difference"),
        (10, "Large difference"),
        (25.0, "Large difference"),
    ])
    def test_labels(self, diff, label):
        assert describe_difference(diff) == label


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
