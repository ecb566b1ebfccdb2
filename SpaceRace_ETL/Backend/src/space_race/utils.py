from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
from datetime import datetime
import json
import csv
import logging
import os
import pytz
import requests
from dateutil.parser import parse

from .exceptions_file import InvalidDatetimeError

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)


#------------------#
#      TIME        #
#------------------#

# Fills in whatever the date string leaves out ("2020" -> 2020-01-01).
DATE_DEFAULT = datetime(2000, 1, 1)


def parse_launch_date(date_str: Optional[str], tz=pytz.UTC) -> datetime:
    """Parse a free-text launch date into an aware datetime in ``tz``.

    Aware inputs ("Fri Aug 07, 2020 05:12 UTC") are converted, naive ones are
    taken to already be local to ``tz``.
    """
    if not date_str:
        raise InvalidDatetimeError("Empty date string")
    try:
        dt = parse(date_str, default=DATE_DEFAULT)
    except (ValueError, OverflowError) as e:
        raise InvalidDatetimeError(f"Invalid date format: {date_str!r} ({e})")

    if dt.tzinfo is None:
        return tz.localize(dt)
    return dt.astimezone(tz)


#------------------#
#       DICT       #
#------------------#

def resolve_field(row: Dict[str, str], keys: Sequence[str], default: Any = None) -> Any:
    """Return the first non-empty value among ``keys`` in ``row``."""
    for key in keys:
        value = row.get(key)
        if value:
            return value
    return default


#------------------#
#       I/O        #
#------------------#

def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def read_text_source(source: str, timeout: float = 30.0) -> Optional[str]:
    """Read a local file or fetch an http(s) URL. Returns None on failure."""
    try:
        if is_url(source):
            resp = requests.get(source, timeout=timeout)
            resp.raise_for_status()
            resp.encoding = resp.encoding or "utf-8"
            return resp.text.lstrip("\ufeff")

        with open(source, "r", encoding="utf-8-sig") as f:
            return f.read()

    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        logger.error(f"Error reading {source}: {e}")
        return None


def write_json_file(path: str, data: Any) -> None:
    os.makedirs(os.path.dirname(path), exist_ok = True)
    with open(path, "w", encoding = "utf-8") as f:
        json.dump(data, f, indent = 2, ensure_ascii = False, default = str)


def write_text_file(path: str, text: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok = True)
    with open(path, "w", encoding = "utf-8") as f:
        f.write(text)


def write_csv_file(path: str, rows: List[Dict[str, Any]], fieldnames: List[str]):
    os.makedirs(os.path.dirname(path), exist_ok = True)
    with open(path, "w", newline="", encoding = "utf-8") as f:
        writer = csv.DictWriter(f, fieldnames = fieldnames, extrasaction='ignore')
        writer.writeheader()

        for row in rows:
            writer.writerow(row)
