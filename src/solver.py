"""
Revision session allocator:
- exam timelines (ordered by final exam)
- reinforcement session on the day before every exam
- early phase: continuous round robin over the selection
- focused phase: nearest upcoming exam first
- exam entries straight from the exam table
"""

import logging
import re
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from config import (
    DEFAULT_EXAM_TIME,
    EARLY_PHASE_END,
    END_DATE,
    FOCUSED,
    REINFORCEMENT,
    ROTATION,
    START_DATE,
)
from exams import EXAM_DATES, EXAM_TIMES
from models import (
    CalendarDay,
    ConfigurationError,
    DateParseError,
    ExamSession,
    RevisionSession,
    SubjectTimeline,
)
from timeslots import normalize_availability, weekday_name

logger = logging.getLogger(__name__)

TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


# ================================================================
# Exam timelines
# ================================================================

def parse_exam_date(subject: str, raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except (TypeError, ValueError) as e:
        raise DateParseError(f"Invalid exam date {raw!r} for {subject}") from e


def build_exam_timelines(
    selected: Sequence[str],
    exam_table: Dict[str, List[str]],
) -> List[SubjectTimeline]:
    """
    One timeline per selected subject, sorted by final exam (earliest first).
    Ties keep selection order. Subjects with no exam go last.
    """
    timelines = []
    for subject in selected:
        raw_dates = exam_table.get(subject)
        if not raw_dates:
            logger.warning("No exam dates for %s; it will only join the early rotation", subject)
            timelines.append(SubjectTimeline(subject))
            continue
        exams = sorted(parse_exam_date(subject, d) for d in raw_dates)
        timelines.append(SubjectTimeline(subject, tuple(exams)))

    # sorted() is stable, so equal finals stay in selection order
    return sorted(
        timelines,
        key=lambda t: (t.final_exam is None, t.final_exam or date.min),
    )


# ================================================================
# Calendar bookkeeping
# ================================================================

def build_calendar(
    start: date,
    end: date,
    availability: Dict[str, Tuple[str, ...]],
) -> Dict[date, CalendarDay]:
    calendar: Dict[date, CalendarDay] = {}
    day = start
    while day <= end:
        name = weekday_name(day)
        calendar[day] = CalendarDay(day=day, weekday=name, slots=tuple(availability.get(name, ())))
        day += timedelta(days=1)
    return calendar


def _book(cal_day: CalendarDay, subject: str, category: str) -> RevisionSession:
    slot = cal_day.book(subject)
    return RevisionSession(subject=subject, day=cal_day.day, time=slot, category=category)


# ================================================================
# Pass 1: day-before-exam reinforcement
# ================================================================

def schedule_reinforcement(
    timelines: Sequence[SubjectTimeline],
    calendar: Dict[date, CalendarDay],
) -> List[RevisionSession]:
    """
    Subjects are visited in final-exam order and each subject's exams in date
    order. A full day is first come, first served.
    """
    sessions: List[RevisionSession] = []
    for tl in timelines:
        for exam in tl.exams:
            cal_day = calendar.get(exam - timedelta(days=1))
            if cal_day is None or not cal_day.slots:
                continue
            if cal_day.has(tl.subject):
                continue
            if cal_day.remaining() <= 0:
                logger.debug(
                    "No slot left on %s for %s reinforcement (exam %s)",
                    cal_day.day, tl.subject, exam,
                )
                continue
            sessions.append(_book(cal_day, tl.subject, REINFORCEMENT))
    return sessions


# ================================================================
# Pass 2: early round robin
# ================================================================

def fill_rotation(
    calendar: Dict[date, CalendarDay],
    subjects: Sequence[str],
    boundary: date,
    index: int = 0,
) -> Tuple[List[RevisionSession], int]:
    """
    Every free slot before `boundary` gets one attempt with the next subject
    in the rotation. The index moves on after every attempt, placed or not,
    and carries over between days. Returns the sessions and the final index.
    """
    sessions: List[RevisionSession] = []
    if not subjects:
        return sessions, index

    for day, cal_day in calendar.items():
        if day >= boundary:
            break
        for _ in range(cal_day.remaining()):
            subject = subjects[index % len(subjects)]
            index += 1
            if not cal_day.has(subject):
                sessions.append(_book(cal_day, subject, ROTATION))
    return sessions, index


# ================================================================
# Pass 3: focused, nearest exam first
# ================================================================

def _pick_focused(timelines: Sequence[SubjectTimeline], cal_day: CalendarDay) -> Optional[str]:
    for tl in timelines:
        if cal_day.has(tl.subject):
            continue
        if tl.next_exam_after(cal_day.day) is not None:
            return tl.subject
    return None


def fill_focused(
    calendar: Dict[date, CalendarDay],
    timelines: Sequence[SubjectTimeline],
    boundary: date,
) -> List[RevisionSession]:
    sessions: List[RevisionSession] = []
    for day, cal_day in calendar.items():
        if day < boundary:
            continue
        for _ in range(cal_day.remaining()):
            subject = _pick_focused(timelines, cal_day)
            if subject is None:
                # nobody left with an exam ahead; rest of the day stays empty
                break
            sessions.append(_book(cal_day, subject, FOCUSED))
    return sessions


# ================================================================
# Exam entries
# ================================================================

def build_exam_sessions(
    timelines: Sequence[SubjectTimeline],
    selected: Sequence[str],
    exam_times: Dict[Tuple[str, str], str],
) -> List[ExamSession]:
    by_subject = {tl.subject: tl for tl in timelines}
    exams: List[ExamSession] = []
    for subject in selected:
        for exam in by_subject[subject].exams:
            explicit = exam_times.get((subject, exam.isoformat()))
            exams.append(
                ExamSession(
                    subject=subject,
                    day=exam,
                    time=explicit or DEFAULT_EXAM_TIME,
                    explicit_time=explicit is not None,
                )
            )
    return exams


# ================================================================
# Input checks
# ================================================================

def _unique_selection(selected: Sequence[str]) -> List[str]:
    if isinstance(selected, str):
        raise ConfigurationError("Selected subjects must be a list of names, not a single string")
    seen = []
    for s in selected or []:
        if s not in seen:
            seen.append(s)
    if not seen:
        raise ConfigurationError("Select at least one subject")
    return seen


def _check_exam_times(exam_times: Dict[Tuple[str, str], str]):
    for (subject, raw_date), t in exam_times.items():
        if not isinstance(t, str) or not TIME_RE.match(t):
            raise ConfigurationError(f"Invalid exam time {t!r} for {subject} on {raw_date}")


# ================================================================
# Main solver
# ================================================================

def solve_revision_schedule(
    selected: Sequence[str],
    availability,
    *,
    exam_table: Optional[Dict[str, List[str]]] = None,
    exam_times: Optional[Dict[Tuple[str, str], str]] = None,
    start: date = START_DATE,
    end: date = END_DATE,
    boundary: date = EARLY_PHASE_END,
):
    """
    Returns (revision_sessions, exam_sessions, message).

    Revision sessions come out in pass order: reinforcement, rotation,
    focused. Invalid input raises ConfigurationError before anything is
    scheduled.
    """
    subjects = _unique_selection(selected)
    slots = normalize_availability(availability)
    exam_table = EXAM_DATES if exam_table is None else exam_table
    exam_times = EXAM_TIMES if exam_times is None else exam_times
    _check_exam_times(exam_times)
    if start > end:
        raise ConfigurationError(f"Horizon start {start} is after end {end}")

    timelines = build_exam_timelines(subjects, exam_table)
    calendar = build_calendar(start, end, slots)

    # ------------------------------------------------------------
    # 1. Day before each exam
    # ------------------------------------------------------------
    reinforcement = schedule_reinforcement(timelines, calendar)

    # ------------------------------------------------------------
    # 2. Early phase round robin (selection order)
    # ------------------------------------------------------------
    rotation, _ = fill_rotation(calendar, subjects, boundary)

    # ------------------------------------------------------------
    # 3. Focused phase (final-exam order)
    # ------------------------------------------------------------
    focused = fill_focused(calendar, timelines, boundary)

    exams = build_exam_sessions(timelines, subjects, exam_times)
    revision = reinforcement + rotation + focused

    msg = (
        f"Planned {len(revision)} revision sessions "
        f"({len(reinforcement)} day-before, {len(rotation)} rotation, {len(focused)} focused) "
        f"and {len(exams)} exams for {len(subjects)} subjects."
    )
    logger.info(msg)
    return revision, exams, msg
