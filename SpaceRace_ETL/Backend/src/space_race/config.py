from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple
import logging
import os

import pytz

from .exceptions_file import ConfigError

logger = logging.getLogger(__name__)


BASE_DIR = Path(__file__).resolve().parents[2]
DATA_DIR = BASE_DIR / "data"
DEFAULT_CSV_PATH = DATA_DIR / "raw" / "mission_launches.csv"


#------------------#
#   CSV HEADERS    #
#------------------#

# Candidate headers per logical field, first non-empty value wins.
DEFAULT_FIELD_KEYS: Dict[str, Tuple[str, ...]] = {
    "id": ("Unnamed: 0", "id"),
    "date": ("Date", "date"),
    "location": ("Location", "location_name"),
    "detail": ("Detail", "rocket"),
    "status": ("Mission_Status", "status"),
    "agency": ("Organisation", "agency"),
}

SUCCESS_KEYWORDS = frozenset({"Success", "Partial Failure"})

DEFAULT_MAJOR_POWERS: Tuple[str, ...] = ("USA", "Russia", "China")


#------------------#
#     CALENDAR     #
#------------------#

@dataclass(frozen=True)
class CalendarNames:
    months: Tuple[str, ...]
    # Monday first, same as datetime.weekday()
    weekdays: Tuple[str, ...]


CALENDAR_NAMES: Dict[str, CalendarNames] = {
    "en": CalendarNames(
        months=("January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December"),
        weekdays=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    ),
    "pt": CalendarNames(
        months=("janeiro", "fevereiro", "março", "abril", "maio", "junho",
                "julho", "agosto", "setembro", "outubro", "novembro", "dezembro"),
        weekdays=("segunda-feira", "terça-feira", "quarta-feira", "quinta-feira",
                  "sexta-feira", "sábado", "domingo"),
    ),
}


#------------------#
#     SETTINGS     #
#------------------#

@dataclass(frozen=True)
class Settings:
    csv_source: str = str(DEFAULT_CSV_PATH)
    output_dir: str = str(DATA_DIR)
    timezone: str = "UTC"
    locale: str = "en"
    log_level: str = "INFO"
    major_powers: Tuple[str, ...] = DEFAULT_MAJOR_POWERS
    field_keys: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_FIELD_KEYS))

    @property
    def tz(self):
        return pytz.timezone(self.timezone)

    @property
    def calendar(self) -> CalendarNames:
        return CALENDAR_NAMES[self.locale]


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from SPACE_RACE_* environment variables."""
    env = os.environ if env is None else env

    timezone = env.get("SPACE_RACE_TZ", "UTC")
    try:
        pytz.timezone(timezone)
    except pytz.UnknownTimeZoneError:
        raise ConfigError(f"Unknown timezone: {timezone}")

    locale = env.get("SPACE_RACE_LOCALE", "en").lower()
    if locale not in CALENDAR_NAMES:
        raise ConfigError(f"Unsupported locale '{locale}', expected one of {sorted(CALENDAR_NAMES)}")

    log_level = env.get("SPACE_RACE_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown log level: {log_level}")

    powers = env.get("SPACE_RACE_MAJOR_POWERS")
    major_powers = DEFAULT_MAJOR_POWERS
    if powers is not None:
        major_powers = tuple(p.strip() for p in powers.split(",") if p.strip())
        if not major_powers:
            raise ConfigError("SPACE_RACE_MAJOR_POWERS is set but empty")

    settings = Settings(
        csv_source=env.get("SPACE_RACE_CSV") or str(DEFAULT_CSV_PATH),
        output_dir=env.get("SPACE_RACE_OUTPUT_DIR") or str(DATA_DIR),
        timezone=timezone,
        locale=locale,
        major_powers=major_powers,
        log_level=log_level,
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings
