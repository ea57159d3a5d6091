from datetime import date

import pytest

from models import ConfigurationError
from timeslots import WEEKDAYS, count_weekly_slots, normalize_availability, weekday_name


def test_normalize_sorts_and_dedupes():
    avail = normalize_availability({"Monday": ["10:00", "09:00", "10:00"]})
    assert avail["Monday"] == ("09:00", "10:00")
    assert set(avail) == set(WEEKDAYS)
    assert avail["Sunday"] == ()


def test_sorts_by_hour_not_insertion():
    avail = normalize_availability({"Friday": ["21:00", "08:00", "13:00"]})
    assert avail["Friday"] == ("08:00", "13:00", "21:00")


def test_single_label_string_is_accepted():
    assert normalize_availability({"Tuesday": "09:00"})["Tuesday"] == ("09:00",)


def test_empty_mapping_is_valid():
    avail = normalize_availability({})
    assert count_weekly_slots(avail) == 0


@pytest.mark.parametrize("raw", [
    {"Funday": ["09:00"]},
    {"Monday": ["07:00"]},
    {"Monday": ["9am"]},
    ["Monday"],
    None,
    {"Monday": 9},
    {"Monday": [["09:00"]]},
    {"Monday": ["09:00", 9, "noon"]},
])
def test_invalid_availability(raw):
    with pytest.raises(ConfigurationError):
        normalize_availability(raw)


def test_weekday_name():
    assert weekday_name(date(2025, 4, 4)) == "Friday"
    assert weekday_name(date(2025, 4, 7)) == "Monday"
    assert weekday_name(date(2025, 4, 21)) == "Monday"
