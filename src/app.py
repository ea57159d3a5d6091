# app.py
import os
import logging
from datetime import date, timedelta
from typing import Dict, Any, List

import streamlit as st
import pandas as pd

from config import CATEGORY_COLORS, EXAM_COLOR, ICS_FILENAME, START_DATE, END_DATE
from exams import ALL_SUBJECTS
from exporter import create_ics_file
from graph import build_revision_graph
from inspector import find_coverage_gaps, summarize_by_subject
from timeslots import TIME_SLOTS, WEEKDAYS, count_weekly_slots, empty_availability

logging.basicConfig(level=logging.INFO)


# -----------------------------------------------------------
# Streamlit Config
# -----------------------------------------------------------
st.set_page_config(layout="wide", page_title="GCSE Revision Planner") # type: ignore

st.markdown("""
<style>
    .legend-chip { display: inline-block; padding: 2px 8px; border-radius: 4px; color: white; margin-right: 6px; }
</style>
""", unsafe_allow_html=True)


# -----------------------------------------------------------
# Session State
# -----------------------------------------------------------
if "selected" not in st.session_state:
    st.session_state.selected = []
if "availability" not in st.session_state:
    st.session_state.availability = {d: [] for d in WEEKDAYS}
if "plan" not in st.session_state:
    st.session_state.plan = None
if "trigger_solve" not in st.session_state:
    st.session_state.trigger_solve = False


# -----------------------------------------------------------
# Helpers: calendar grid
# -----------------------------------------------------------

def week_start(d: date) -> date:
    return d - timedelta(days=d.weekday())


def build_week_grid(revision: List[Dict[str, Any]], exams: List[Dict[str, Any]]) -> pd.DataFrame:
    """Rows = weeks (Monday date), columns = weekdays, cells = titles."""
    items = [dict(e, kind="exam") for e in exams] + [dict(r, kind="revision") for r in revision]
    if not items:
        return pd.DataFrame()
    df = pd.DataFrame(items)
    dates = pd.to_datetime(df["date"]).dt.date
    df["week"] = [week_start(d).isoformat() for d in dates]
    df["weekday"] = [WEEKDAYS[d.weekday()] for d in dates]
    df["label"] = df["time"] + " " + df["title"]
    df = df.sort_values(["date", "time"])
    grid = df.pivot_table(
        index="week",
        columns="weekday",
        values="label",
        aggfunc=lambda x: "\n".join(x),  # type: ignore
        fill_value="",
    )
    return grid.reindex(columns=[d for d in WEEKDAYS if d in grid.columns])


def legend_html() -> str:
    chips = [f'<span class="legend-chip" style="background:{EXAM_COLOR}">exam</span>']
    chips += [
        f'<span class="legend-chip" style="background:{color}">{name}</span>'
        for name, color in CATEGORY_COLORS.items()
    ]
    return "".join(chips)


# -----------------------------------------------------------
# LangGraph Solve
# -----------------------------------------------------------

def run_langgraph_cycle():
    state = {
        "selected": list(st.session_state.selected),
        "availability": {d: list(v) for d, v in st.session_state.availability.items()},
        "revision": [],
        "exams": [],
        "analysis": "",
        "message": "",
        "status": "",
    }

    app_graph = build_revision_graph()

    with st.spinner("🧮 Building revision plan..."):
        final_state = app_graph.invoke(state)  # type: ignore

    if final_state.get("status") != "success":
        st.error(f"❌ {final_state.get('analysis', 'Could not build a plan.')}")
        st.session_state.plan = None
        return

    st.session_state.plan = final_state
    st.toast(final_state.get("message", "Plan ready"), icon="✅")


# -----------------------------------------------------------
# Sidebar UI
# -----------------------------------------------------------

with st.sidebar:
    st.header("1. Subjects")

    st.session_state.selected = st.multiselect(
        "Which GCSE subjects are you taking?",
        ALL_SUBJECTS,
        default=st.session_state.selected,
    )

    st.header("2. Availability")
    st.caption("Pick the hours you can revise on each day of the week.")

    for day in WEEKDAYS:
        st.session_state.availability[day] = st.multiselect(
            day,
            TIME_SLOTS,
            default=st.session_state.availability.get(day, []),
            key=f"avail_{day}",
        )

    api_key = st.text_input("Groq API Key (optional review)", type="password", value=os.getenv("GROQ_API_KEY", ""))
    if api_key:
        os.environ["GROQ_API_KEY"] = api_key

    st.header("3. Plan")
    c1, c2 = st.columns(2)
    if c1.button("🔄 Generate", type="primary"):
        st.session_state.trigger_solve = True
        st.rerun()

    if c2.button("🧹 Clear"):
        st.session_state.selected = []
        st.session_state.availability = {d: list(v) for d, v in empty_availability().items()}
        for day in WEEKDAYS:
            st.session_state.pop(f"avail_{day}", None)
        st.session_state.plan = None
        st.rerun()

    plan = st.session_state.plan
    if plan:
        st.divider()
        st.download_button(
            "📅 Download .ics",
            create_ics_file(plan["revision"], plan["exams"]),
            ICS_FILENAME,
            "text/calendar",
        )


# -----------------------------------------------------------
# Main Layout
# -----------------------------------------------------------

st.title("📅 GCSE Revision Planner")
st.caption(f"Revision window: {START_DATE:%d %b %Y} – {END_DATE:%d %b %Y}")

if st.session_state.trigger_solve:
    run_langgraph_cycle()
    st.session_state.trigger_solve = False

plan = st.session_state.plan

if not plan:
    st.info("👈 Choose your subjects and weekly availability, then click **Generate**.")
else:
    revision = plan["revision"]
    exams = plan["exams"]

    st.markdown("### 📊 Summary")
    s1, s2, s3, s4 = st.columns(4)
    s1.metric("Subjects", len(plan["selected"]))
    s2.metric("Weekly hours", count_weekly_slots(plan["availability"]))
    s3.metric("Revision sessions", len(revision))
    s4.metric("Exams", len(exams))

    gaps = find_coverage_gaps(revision, exams, availability=plan["availability"])
    if gaps:
        st.warning(
            "⚠ No free slot the day before: "
            + ", ".join(f"{g['subject']} ({g['exam_date']})" for g in gaps)
        )

    col_cal, col_review = st.columns([2.2, 1])

    with col_cal:
        st.markdown("### 📌 Calendar")
        st.markdown(legend_html(), unsafe_allow_html=True)

        view_mode = st.radio("Display Mode", ["Weeks", "List"], horizontal=True)

        if view_mode == "Weeks":
            st.dataframe(build_week_grid(revision, exams), width="stretch", height=700)
        else:
            items = exams + revision
            df = pd.DataFrame(items).sort_values(["date", "time"]) if items else pd.DataFrame()
            st.dataframe(df, width="stretch", height=700)

    with col_review:
        st.subheader("🧭 Review")
        st.markdown(plan.get("analysis") or "No analysis.")
        if revision:
            st.dataframe(summarize_by_subject(revision), width="stretch")
