from datetime import date, timedelta
from typing import List, Dict, Any, Optional
import os

import pandas as pd
from langchain_groq import ChatGroq
from langchain_core.messages import HumanMessage, SystemMessage

from config import CATEGORIES, END_DATE, GROQ_MODEL, GROQ_TEMPERATURE, REINFORCEMENT, START_DATE
from timeslots import weekday_name

# -------------------------------------------------------------
# Table formatter (for limited-size schedule context)
# -------------------------------------------------------------
def format_sessions_as_table(sessions: List[Dict[str, Any]], limit: int = 60) -> str:
    if not sessions:
        return "No sessions."
    df = pd.DataFrame(sessions)
    cols = ["date", "time", "title", "category"]
    cols = [c for c in cols if c in df.columns]
    df = df[cols].sort_values(["date", "time"]).head(limit)
    return df.to_markdown(index=False)


# -------------------------------------------------------------
# Per-subject counts (subject x category)
# -------------------------------------------------------------
def summarize_by_subject(revision: List[Dict[str, Any]]) -> pd.DataFrame:
    if not revision:
        return pd.DataFrame(columns=list(CATEGORIES) + ["total"])
    df = pd.DataFrame(revision)
    table = df.pivot_table(
        index="subject",
        columns="category",
        values="title",
        aggfunc="count",
        fill_value=0,
    )
    table = table.reindex(columns=list(CATEGORIES), fill_value=0)
    table["total"] = table.sum(axis=1)
    return table.sort_values("total", ascending=False)


# -------------------------------------------------------------
# Exams whose day before got no reinforcement session
# -------------------------------------------------------------
def find_coverage_gaps(
    revision: List[Dict[str, Any]],
    exams: List[Dict[str, Any]],
    start: date = START_DATE,
    end: date = END_DATE,
    availability: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, str]]:
    """
    With `availability`, days the student is never free are not reported:
    only days where the slots ran out count as gaps.
    """
    covered = {
        (r["subject"], r["date"])
        for r in revision
        if r.get("category") == REINFORCEMENT
    }
    gaps = []
    for ex in exams:
        before = date.fromisoformat(ex["date"]) - timedelta(days=1)
        if not (start <= before <= end):
            continue
        if availability is not None and not availability.get(weekday_name(before)):
            continue
        if (ex["subject"], before.isoformat()) not in covered:
            gaps.append({"subject": ex["subject"], "exam_date": ex["date"], "revise_on": before.isoformat()})
    return gaps


def _fallback_summary(
    revision: List[Dict[str, Any]],
    exams: List[Dict[str, Any]],
    availability: Optional[Dict[str, Any]] = None,
) -> str:
    lines = ["Revision plan summary (no LLM – GROQ_API_KEY missing):"]
    counts = {c: 0 for c in CATEGORIES}
    for r in revision:
        counts[r["category"]] += 1
    lines.extend(f"{c}: {n} sessions" for c, n in counts.items())
    lines.append(f"exams: {len(exams)}")

    if revision:
        per_subject = summarize_by_subject(revision)["total"].to_dict()
        lines.append("Sessions per subject:")
        lines.extend(f"- {s}: {n}" for s, n in per_subject.items())

    gaps = find_coverage_gaps(revision, exams, availability=availability)
    if gaps:
        lines.append(f"{len(gaps)} exam(s) without a day-before session:")
        lines.extend(f"- {g['subject']} ({g['exam_date']})" for g in gaps)
    return "\n".join(lines)


# -------------------------------------------------------------
# Schedule inspector
# -------------------------------------------------------------
def inspect_schedule(
    revision: List[Dict[str, Any]],
    exams: List[Dict[str, Any]],
    availability: Optional[Dict[str, Any]] = None,
) -> str:

    if not revision and not exams:
        return "No schedule generated."

    api_key = os.getenv("GROQ_API_KEY")
    if not api_key:
        return _fallback_summary(revision, exams, availability)

    llm = ChatGroq(
        groq_api_key=api_key,   # type: ignore
        model=GROQ_MODEL,
        temperature=GROQ_TEMPERATURE,
    )

    table = format_sessions_as_table(revision, limit=80)
    exam_table = format_sessions_as_table(exams, limit=80)
    per_subject = summarize_by_subject(revision).to_markdown()

    system_instructions = """You are a GCSE revision coach reviewing a student's revision calendar.
            Produce a short, structured review with clear headings and bullet points.

            Your response MUST follow this structure:

            ### 1. Balance Across Subjects
            - Compare session counts per subject.
            - Highlight subjects that look under-revised for their number of exams.

            ### 2. Exam Week Readiness
            - Check that each exam has a revision session the day before.
            - Point out crowded days right before clustered exams.

            ### 3. Weekly Load
            - Comment on heavy or empty weeks.

            GENERAL RULES:
            - Do NOT exceed 15 lines overall.
            - Do NOT invent sessions or exams that are not in the tables.
    """

    messages = [
        SystemMessage(content=system_instructions),
        HumanMessage(
            content=(
                f"Exams:\n{exam_table}\n\n"
                f"Sessions per subject:\n{per_subject}\n\n"
                f"First revision sessions:\n{table}"
            )
        ),
    ]

    response = llm.invoke(messages)
    return response.content  # type: ignore
