# models.py
"""
Core domain models for the GCSE Revision Planner.
These are used by:
- solver (allocation passes)
- LangGraph pipeline
- inspector
- Streamlit UI / ICS export
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

from config import CATEGORIES, CATEGORY_COLORS, EXAM_COLOR


# ======================================================================
# Errors
# ======================================================================

class ConfigurationError(ValueError):
    """Invalid input for a scheduling run. Raised before any session exists."""


class DateParseError(ConfigurationError):
    """An exam date in the table is not a valid ISO 8601 calendar date."""


# ======================================================================
# Subject timeline
# ======================================================================

@dataclass(frozen=True)
class SubjectTimeline:
    """
    Exam dates of one selected subject.

    exams:      ascending, may be empty (subject missing from the exam table)
    final_exam: last exam, None when there is none
    """

    subject: str
    exams: Tuple[date, ...] = ()

    @property
    def final_exam(self) -> Optional[date]:
        return self.exams[-1] if self.exams else None

    def next_exam_after(self, day: date) -> Optional[date]:
        for exam in self.exams:
            if exam > day:
                return exam
        return None


# ======================================================================
# Calendar day
# ======================================================================

@dataclass
class CalendarDay:
    """
    One date in the revision horizon.

    slots:    labels the student is free on this weekday, earliest first
    subjects: subjects already booked today (at most one session each)
    used:     slot labels already taken, parallel to `subjects`
    """

    day: date
    weekday: str
    slots: Tuple[str, ...] = ()
    subjects: List[str] = field(default_factory=list)
    used: List[str] = field(default_factory=list)

    def remaining(self) -> int:
        return len(self.slots) - len(self.subjects)

    def has(self, subject: str) -> bool:
        return subject in self.subjects

    def free_slots(self) -> List[str]:
        return [s for s in self.slots if s not in self.used]

    def book(self, subject: str) -> str:
        """Takes the earliest free slot for `subject` and returns its label."""
        if self.has(subject):
            raise ValueError(f"{subject} already has a session on {self.day.isoformat()}")
        free = self.free_slots()
        if not free:
            raise ValueError(f"No free slot left on {self.day.isoformat()}")
        self.subjects.append(subject)
        self.used.append(free[0])
        return free[0]


# ======================================================================
# Revision session (for UI / ICS export)
# ======================================================================

@dataclass(frozen=True)
class RevisionSession:
    subject: str
    day: date
    time: str      # "HH:MM", one-hour block
    category: str  # reinforcement / rotation / focused

    def __post_init__(self):
        if self.category not in CATEGORIES:
            raise ValueError(f"Invalid category for RevisionSession: {self.category!r}")

    @property
    def title(self) -> str:
        return f"Revise {self.subject}"

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self.category]

    def as_dict(self):
        return {
            "title": self.title,
            "subject": self.subject,
            "date": self.day.isoformat(),
            "time": self.time,
            "category": self.category,
            "color": self.color,
        }


# ======================================================================
# Exam session
# ======================================================================

@dataclass(frozen=True)
class ExamSession:
    """
    The exam itself. Not allocated, only copied from the exam table.
    explicit_time: the table gave a start time (shown in the title)
    """

    subject: str
    day: date
    time: str
    explicit_time: bool = False

    @property
    def title(self) -> str:
        if self.explicit_time:
            return f"{self.subject} Exam – {self.time}"
        return f"{self.subject} Exam"

    def as_dict(self):
        return {
            "title": self.title,
            "subject": self.subject,
            "date": self.day.isoformat(),
            "time": self.time,
            "color": EXAM_COLOR,
        }
