from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional, Tuple
import logging

from .config import Settings, SUCCESS_KEYWORDS
from .exceptions_file import InvalidDatetimeError
from .utils import parse_launch_date, resolve_field


logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)


#------------------#
#      RECORD      #
#------------------#

@dataclass(frozen=True)
class MissionRecord:
    id: Optional[str]
    name: str
    rocket: str
    rocket_family: str
    date: datetime
    year: int
    month: int  # 0-based
    month_name: str
    day_of_week: str
    decade: int
    status: str
    # "Partial Failure" counts as a success, kept as in the source dataset.
    success: bool
    country: str
    country_full: str
    location_name: str
    agency: str
    mission_type: Optional[str] = None
    mission_orbit: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        row = asdict(self)
        row["date"] = self.date.isoformat()
        return row


def extract_country(location: str) -> str:
    return location.split(",")[-1].strip()


def extract_rocket_family(detail: str) -> str:
    return detail.split("|")[0].strip()


def is_success(status: str) -> bool:
    return status in SUCCESS_KEYWORDS


#------------------#
#     DERIVER      #
#------------------#

def derive_mission(row: Dict[str, str], settings: Settings) -> Tuple[Optional[MissionRecord], str]:
    """Derive a MissionRecord from one raw CSV row.

    Returns ``(record, "")`` or ``(None, reason)`` when the row is skipped.
    """
    keys = settings.field_keys
    try:
        date_str = resolve_field(row, keys["date"])
        try:
            date = parse_launch_date(date_str, settings.tz)
        except InvalidDatetimeError as e:
            reason = "Missing date" if not date_str else "Invalid date"
            logger.debug(f"[derive_mission] Skipping row {resolve_field(row, keys['id'], 'unknown')}: {e}")
            return None, reason

        location = resolve_field(row, keys["location"], "")
        detail = resolve_field(row, keys["detail"], "")
        status = resolve_field(row, keys["status"], "Unknown")
        country = extract_country(location)
        names = settings.calendar

        record = MissionRecord(
            id=resolve_field(row, keys["id"]),
            name=detail,
            rocket=detail,
            rocket_family=extract_rocket_family(detail),
            date=date,
            year=date.year,
            month=date.month - 1,
            month_name=names.months[date.month - 1],
            day_of_week=names.weekdays[date.weekday()],
            decade=(date.year // 10) * 10,
            status=status,
            success=is_success(status),
            country=country,
            country_full=country,
            location_name=location,
            agency=resolve_field(row, keys["agency"], "Unknown"),
        )
        return record, ""

    except Exception as e:
        logger.debug(f"[derive_mission] Unexpected error deriving row {resolve_field(row, keys['id'], 'unknown')}: {e}")
        return None, f"Derivation error: {e}"
