import pytest

from space_race.config import DEFAULT_CSV_PATH, DEFAULT_MAJOR_POWERS, load_settings
from space_race.exceptions_file import ConfigError


def test_defaults():
    settings = load_settings({})
    assert settings.csv_source == str(DEFAULT_CSV_PATH)
    assert settings.timezone == "UTC"
    assert settings.calendar.months[0] == "January"
    assert settings.major_powers == DEFAULT_MAJOR_POWERS
    assert settings.field_keys["date"] == ("Date", "date")


def test_env_overrides():
    settings = load_settings({
        "SPACE_RACE_CSV": "https://example.com/launches.csv",
        "SPACE_RACE_OUTPUT_DIR": "/tmp/out",
        "SPACE_RACE_LOCALE": "PT",
        "SPACE_RACE_MAJOR_POWERS": "USA, Kazakhstan ,",
    })
    assert settings.csv_source == "https://example.com/launches.csv"
    assert settings.output_dir == "/tmp/out"
    assert settings.locale == "pt"
    assert settings.major_powers == ("USA", "Kazakhstan")


@pytest.mark.parametrize("env", [
    {"SPACE_RACE_TZ": "Mars/Olympus_Mons"},
    {"SPACE_RACE_LOCALE": "xx"},
    {"SPACE_RACE_MAJOR_POWERS": " , "},
    {"SPACE_RACE_LOG_LEVEL": "LOUD"},
])
def test_invalid_settings(env):
    with pytest.raises(ConfigError):
        load_settings(env)


def test_log_level():
    assert load_settings({}).log_level == "INFO"
    assert load_settings({"SPACE_RACE_LOG_LEVEL": "debug"}).log_level == "DEBUG"
    with pytest.raises(ConfigError):
        load_settings({"SPACE_RACE_LOG_LEVEL": "chatty"})
