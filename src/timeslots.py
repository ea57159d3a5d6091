# timeslots.py
#
# Hourly revision slots a student can tick for each weekday.
# Every slot is a one-hour block starting at the listed label.

from collections.abc import Mapping
from datetime import date
from typing import Dict, Iterable, Tuple

from models import ConfigurationError

WEEKDAYS = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
]

TIME_SLOTS = [
    "08:00", "09:00", "10:00", "11:00",
    "12:00", "13:00", "14:00", "15:00", "16:00",
    "17:00", "18:00", "19:00", "20:00", "21:00",
]

# Slot label -> position in the day (used for sorting)
SLOT_INDEX = {t: i for i, t in enumerate(TIME_SLOTS)}


def weekday_name(day: date) -> str:
    """2025-04-07 -> 'Monday'."""
    return WEEKDAYS[day.weekday()]


def empty_availability() -> Dict[str, Tuple[str, ...]]:
    return {d: () for d in WEEKDAYS}


def sort_slots(slots: Iterable[str]) -> Tuple[str, ...]:
    """Unique labels, earliest hour first."""
    try:
        unique = set(slots)
    except TypeError as e:
        raise ConfigurationError(f"Time slots must be a list of labels, got {slots!r}") from e
    unknown = [s for s in unique if s not in SLOT_INDEX]
    if unknown:
        raise ConfigurationError(
            f"Unknown time slot(s) {sorted(unknown, key=repr)}; expected labels from {TIME_SLOTS[0]} to {TIME_SLOTS[-1]}"
        )
    return tuple(sorted(unique, key=SLOT_INDEX.__getitem__))


def normalize_availability(raw) -> Dict[str, Tuple[str, ...]]:
    """
    Validates a weekday -> slots mapping and returns one entry for every
    weekday, slots sorted and de-duplicated.

    Missing weekdays mean "not available". An empty mapping is valid and
    simply produces no revision sessions.
    """
    if not isinstance(raw, Mapping):
        raise ConfigurationError(
            f"Availability must map weekday names to time slots, got {type(raw).__name__}"
        )

    result = empty_availability()
    for day, slots in raw.items():
        if day not in result:
            raise ConfigurationError(f"Unknown weekday {day!r}; expected one of {WEEKDAYS}")
        if isinstance(slots, str):
            slots = [slots]
        result[day] = sort_slots(slots or [])
    return result


def count_weekly_slots(availability: Mapping) -> int:
    return sum(len(v) for v in availability.values())
