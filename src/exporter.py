# exporter.py
"""
iCalendar export of a revision plan.

Exams become all-day events, revision sessions one-hour timed events.
Both take the plain dicts produced by RevisionSession.as_dict() /
ExamSession.as_dict(), which is what the pipeline state carries.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List

from dateutil import tz
from ics import Calendar, Event

from config import SESSION_HOURS, TIMEZONE

logger = logging.getLogger(__name__)


def exam_event(item: Dict[str, Any]) -> Event:
    e = Event(name=item["title"], begin=item["date"], status="CONFIRMED")
    e.make_all_day()
    return e


def revision_event(item: Dict[str, Any]) -> Event:
    h, m = map(int, item["time"].split(":"))
    start_dt = datetime.fromisoformat(item["date"]).replace(
        hour=h, minute=m, second=0, tzinfo=tz.gettz(TIMEZONE)
    )
    e = Event(
        name=item["title"],
        begin=start_dt,
        duration=timedelta(hours=SESSION_HOURS),
        status="CONFIRMED",
    )
    if item.get("category"):
        e.description = f"Revision ({item['category']})"
    return e


def create_ics_file(
    revision: List[Dict[str, Any]],
    exams: List[Dict[str, Any]],
) -> str:
    c = Calendar()
    for item in exams:
        c.events.add(exam_event(item))
    for item in revision:
        c.events.add(revision_event(item))

    logger.info("Exported %d exams and %d revision sessions to iCalendar", len(exams), len(revision))
    return c.serialize()
