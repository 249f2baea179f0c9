"""Load survey export CSVs into `{column: value}` rows, cached per source name."""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import config
from .models import integer_keys_first, trim

logger = logging.getLogger(__name__)

Row = Dict[str, str]

# Parsed rows per source name, kept for the life of the process
_csv_cache: Dict[str, List[Row]] = {}

_SESSION: Optional[requests.Session] = None


class LoaderError(Exception):
    """Base class for loader failures."""


class FetchError(LoaderError):
    """Raised when a source cannot be retrieved."""


class FormatError(LoaderError):
    """Raised when a retrieved source cannot be parsed at all."""


def parse_csv_line(line: str) -> List[str]:
    """
    Split one CSV line on commas, honouring double quotes.

    A doubled quote inside a quoted field is a literal quote. Every field is
    trimmed of surrounding whitespace.
    """
    values: List[str] = []
    current: List[str] = []
    in_quotes = False

    i = 0
    n = len(line)
    while i < n:
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append(trim("".join(current)))
            current = []
        else:
            current.append(char)
        i += 1

    values.append(trim("".join(current)))
    return values


def parse_csv(text: str) -> List[Row]:
    """
    Parse CSV text into a list of rows keyed by header name.

    Blank lines are dropped, so quoted fields spanning a blank line are not
    supported. Short rows are padded with "", extra values are dropped, and a
    repeated header name keeps the value of its last occurrence. Integer-like
    header names come first in each row, in ascending order.
    """
    lines = [line for line in text.split("\n") if trim(line)]
    if not lines:
        return []

    headers = parse_csv_line(lines[0])
    column_order = integer_keys_first(dict.fromkeys(headers))

    rows: List[Row] = []
    for line in lines[1:]:
        values = parse_csv_line(line)
        by_header: Row = {}
        for index, header in enumerate(headers):
            by_header[header] = values[index] if index < len(values) else ""
        rows.append({header: by_header[header] for header in column_order})

    return rows


def get_columns(rows: List[Row]) -> List[str]:
    """Column names of a row set, in header order."""
    if not rows:
        return []
    return list(rows[0].keys())


def rows_to_frame(rows: List[Row]) -> pd.DataFrame:
    """DataFrame view of parsed rows (all values stay strings)."""
    return pd.DataFrame.from_records(rows, columns=get_columns(rows))


def _build_retry_session() -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=3,
        connect=3,
        read=3,
        status=3,
        backoff_factor=0.5,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset({"GET"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def _get_session() -> requests.Session:
    global _SESSION
    if _SESSION is None:
        _SESSION = _build_retry_session()
    return _SESSION


def _read_remote(base_url: str, source_name: str) -> bytes:
    url = f"{base_url.rstrip('/')}/{source_name}"
    try:
        resp = _get_session().get(url, timeout=config.HTTP_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch CSV {source_name}: {exc}") from exc

    if not resp.ok:
        raise FetchError(f"Failed to fetch CSV {source_name}: {resp.status_code} {resp.reason}")
    return resp.content


def _read_local(root: str, source_name: str) -> bytes:
    path = Path(root) / source_name
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FetchError(f"Failed to fetch CSV {source_name}: {exc}") from exc


def read_source(source_name: str, root: Optional[str] = None) -> str:
    """Retrieve the raw text of a source from a local directory or base URL."""
    root = root or config.CSV_ROOT
    if config.is_remote_root(root):
        raw = _read_remote(root, source_name)
    else:
        raw = _read_local(root, source_name)

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise FormatError(f"CSV {source_name} is not valid UTF-8 text: {exc}") from exc


def fetch_csv(source_name: str = config.DEFAULT_SOURCE, root: Optional[str] = None) -> List[Row]:
    """
    Fetch and parse a survey export, returning cached rows when available.

    Raises FetchError when the source cannot be retrieved and FormatError when
    it cannot be decoded. An empty source gives an empty list.
    """
    if source_name in _csv_cache:
        return _csv_cache[source_name]

    try:
        text = read_source(source_name, root=root)
    except LoaderError as exc:
        logger.error("Error loading CSV file %s: %s", source_name, exc)
        raise

    rows = parse_csv(text)
    _csv_cache[source_name] = rows
    logger.info("Loaded %s: %d rows", source_name, len(rows))
    return rows


def clear_csv_cache(source_name: Optional[str] = None) -> None:
    """Drop one cached source, or every cached source when no name is given."""
    if source_name:
        _csv_cache.pop(source_name, None)
    else:
        _csv_cache.clear()


def get_cache_stats() -> Dict[str, Any]:
    """Return cache statistics."""
    return {
        "sources": len(_csv_cache),
        "rows": {name: len(rows) for name, rows in _csv_cache.items()},
        "total_rows": sum(len(rows) for rows in _csv_cache.values()),
    }


def discover_sources(root: Optional[str] = None) -> List[str]:
    """CSV file names present in a local source directory."""
    root = root or config.CSV_ROOT
    if config.is_remote_root(root):
        return []
    p = Path(root)
    if not p.is_dir():
        return []
    return sorted(f.name for f in p.glob("*.csv"))
