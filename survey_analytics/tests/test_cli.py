"""Tests for the survey-analytics command line."""
import json

import pytest

from survey_analytics.run_analysis import main


class TestCli:
    def test_sources(self, capsys):
        assert main(["sources"]) == 0
        out = capsys.readouterr().out
        assert "West End House Boys & Girls Club" in out

    def test_analyze_json(self, csv_dir, capsys):
        assert main(["analyze", "--source", "SYEP.csv", "--question-id", "1", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["overview"]["completionRate"] == 75.0
        assert payload["trends"]["mostCommonAnswer"] == "Yes"

    def test_analyze_free_text_question(self, csv_dir, capsys):
        code = main(["analyze", "--source", "BGC.csv", "--question", "Gender", "--type", "multiple-choice"])
        assert code == 0
        out = capsys.readouterr().out
        assert "Most common answer: Female" in out

    def test_analyze_table_output(self, csv_dir, capsys):
        assert main(["analyze", "--source", "SYEP.csv", "--question-id", "7"]) == 0
        out = capsys.readouterr().out
        assert "Very Supportive" in out
        assert "Average rating: 4.0" in out

    def test_analyze_not_found(self, csv_dir, capsys):
        code = main(["analyze", "--source", "BGC.csv", "--question", "Favourite colour"])
        assert code == 1
        assert "Could not find data" in capsys.readouterr().out

    def test_analyze_missing_source(self, csv_dir, capsys):
        assert main(["analyze", "--source", "missing.csv", "--question-id", "1"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_unknown_question_id(self, csv_dir, capsys):
        assert main(["analyze", "--source", "SYEP.csv", "--question-id", "999"]) == 2

    def test_compare(self, csv_dir, capsys):
        code = main(["compare", "--source", "BGC.csv", "--question-id", "1", "--question-id", "61", "--json"])
        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["deltas"]["totalResponsesDiff"] == 0
        assert payload["deltas"]["topOptionPercentageDiff"] == pytest.approx(50.0)

    def test_compare_needs_two_questions(self, csv_dir):
        assert main(["compare", "--source", "BGC.csv", "--question-id", "1"]) == 2

    def test_report(self, csv_dir, capsys):
        code = main(["report", "--question-id", "7", "--source", "SYEP.csv", "--source", "missing.csv"])
        assert code == 0
        out = capsys.readouterr().out
        assert "fetch_error" in out

    def test_validate(self, csv_dir, capsys):
        assert main(["validate", "--source", "SYEP.csv"]) == 0
        assert "[PASS] header_convention" in capsys.readouterr().out

    def test_validate_missing_source(self, csv_dir):
        assert main(["validate", "--source", "missing.csv"]) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
