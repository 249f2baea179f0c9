"""Shared fixtures: sample rows, CSV sources on disk, and a clean loader cache."""
import pytest

from survey_analytics import config
from survey_analytics.loader import clear_csv_cache

SECTIONED_CSV = (
    "Respondent,"
    "Summer Job Experience: Did you work at the same location/employer last summer?,"
    '"Summer Job Experience: If you had a job supervisor, how supportive were they overall?",'
    "Summer Job Experience: Which of the following industries are you most interested in pursuing as a career?,"
    "Demographics: Gender\n"
    '1,Yes,Very Supportive,"Healthcare, Technology",Female\n'
    "2,No,Very Supportive,Technology,Male\n"
    "3,Yes,Not Very Supportive,,Female\n"
    "4,,,Arts,\n"
)

FLAT_CSV = (
    "response_id,same_employer,supervisor_support,gender\n"
    "1,Yes,Mostly Supportive,Female\n"
    "2,Yes,Somewhat Supportive,Male\n"
)


@pytest.fixture(autouse=True)
def clean_cache():
    clear_csv_cache()
    yield
    clear_csv_cache()


@pytest.fixture
def csv_dir(tmp_path, monkeypatch):
    """A local source directory with one sectioned and one flat export."""
    (tmp_path / "SYEP.csv").write_text(SECTIONED_CSV, encoding="utf-8")
    (tmp_path / "BGC.csv").write_text(FLAT_CSV, encoding="utf-8")
    monkeypatch.setattr(config, "CSV_ROOT", str(tmp_path))
    return tmp_path


@pytest.fixture
def same_employer_rows():
    return [
        {"same_employer": "Yes"},
        {"same_employer": "No"},
        {"same_employer": "Yes"},
        {"same_employer": ""},
    ]


@pytest.fixture
def sectioned_rows():
    return [
        {"Demographics: Gender": "Female", "Demographics: Race": "Asian"},
        {"Demographics: Gender": "Male", "Demographics: Race": "Black"},
        {"Demographics: Gender": "Female", "Demographics: Race": ""},
    ]
