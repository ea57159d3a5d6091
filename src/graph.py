# graph.py

"""
LangGraph pipeline for one planning run.

Flow:

    solve → inspect → END

Configuration problems stop at `solve` with status "fail" and the
error text in `analysis`.
"""

from typing import Dict, Any

from langgraph.graph import StateGraph, END

from models import ConfigurationError
from solver import solve_revision_schedule
from inspector import inspect_schedule


# ---------------------------------------------------------
# NODES
# ---------------------------------------------------------

def solve_node(state: Dict[str, Any]) -> Dict[str, Any]:
    try:
        revision, exams, msg = solve_revision_schedule(
            selected=state["selected"],
            availability=state["availability"],
        )
    except ConfigurationError as e:
        state["revision"] = []
        state["exams"] = []
        state["analysis"] = str(e)
        state["status"] = "fail"
        return state

    state["revision"] = [s.as_dict() for s in revision]
    state["exams"] = [e.as_dict() for e in exams]
    state["message"] = msg
    state["status"] = "success"
    return state


def inspect_node(state: Dict[str, Any]) -> Dict[str, Any]:
    state["analysis"] = inspect_schedule(
        state.get("revision", []),
        state.get("exams", []),
        availability=state.get("availability"),
    )
    return state


def decide_next_step(state: Dict[str, Any]) -> str:
    """Router: only inspect a plan that was actually built."""
    if state.get("status") == "success":
        return "inspect"
    return "end"


# ---------------------------------------------------------
# GRAPH BUILD
# ---------------------------------------------------------

def build_revision_graph():
    graph = StateGraph(dict)  # type: ignore

    graph.add_node("solve", solve_node)  # type: ignore
    graph.add_node("inspect", inspect_node)  # type: ignore

    graph.set_entry_point("solve")
    graph.add_conditional_edges(
        "solve",
        decide_next_step,
        {
            "inspect": "inspect",
            "end": END,
        },
    )
    graph.add_edge("inspect", END)

    return graph.compile()
