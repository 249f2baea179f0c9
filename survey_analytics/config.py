"""Survey analytics configuration."""
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")

DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_CSV_DIR = DATA_DIR / "csv"

# Local directory or http(s) base URL the survey exports are served from
CSV_ROOT = os.getenv("SURVEY_CSV_ROOT", str(DEFAULT_CSV_DIR)).strip()
HTTP_TIMEOUT_SECONDS = int(os.getenv("SURVEY_HTTP_TIMEOUT", "30"))
LOG_LEVEL = os.getenv("SURVEY_LOG_LEVEL", "WARNING").upper()

DEFAULT_SOURCE = "SYEP.csv"

AVAILABLE_SOURCES = [
    "SYEP.csv",
    "Bikes_Not_Bombs.csv",
    "Courageous_Sailing.csv",
    "YOU.csv",
    "SpokeArt.csv",
    "BGC.csv",
    "MLK.csv",
    "PIC.csv",
    "Franklin_Park.csv",
    "Boston_Police_Department.csv",
    "Mattapan_Greater_Boston_Technology.csv",
    "West_End_House_Boys_Girls_Club.csv",
    "Vine_St_Community_Center.csv",
]

FRIENDLY_NAMES = {
    "SYEP.csv": "SYEP",
    "Bikes_Not_Bombs.csv": "Bikes Not Bombs",
    "Courageous_Sailing.csv": "Courageous Sailing",
    "YOU.csv": "YOU",
    "SpokeArt.csv": "SpokeArt",
    "BGC.csv": "BGC",
    "MLK.csv": "MLK",
    "PIC.csv": "PIC",
    "Franklin_Park.csv": "Franklin Park",
    "Boston_Police_Department.csv": "Boston Police Department",
    "Mattapan_Greater_Boston_Technology.csv": "Mattapan Greater Boston Technology",
    "West_End_House_Boys_Girls_Club.csv": "West End House Boys & Girls Club",
    "Vine_St_Community_Center.csv": "Vine St Community Center",
}


def is_remote_root(root: str) -> bool:
    return root.lower().startswith(("http://", "https://"))


def get_available_sources() -> List[str]:
    """Known survey export names, in display order."""
    return list(AVAILABLE_SOURCES)


def get_friendly_name(source_name: str) -> str:
    """Display label for a source; unknown names are derived from the file name."""
    if source_name in FRIENDLY_NAMES:
        return FRIENDLY_NAMES[source_name]
    return source_name.replace(".csv", "", 1).replace("_", " ")
