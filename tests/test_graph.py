import pytest

from graph import build_revision_graph


@pytest.fixture(autouse=True)
def no_llm(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)


def test_solve_then_inspect():
    app = build_revision_graph()
    final = app.invoke({"selected": ["Maths"], "availability": {"Monday": ["09:00"]}})

    assert final["status"] == "success"
    assert len(final["revision"]) == 10
    assert len(final["exams"]) == 3
    assert final["revision"][0]["title"] == "Revise Maths"
    assert final["analysis"].startswith("Revision plan summary")
    assert final["message"].startswith("Planned 10 revision sessions")


def test_configuration_error_stops_before_inspect():
    app = build_revision_graph()
    final = app.invoke({"selected": [], "availability": {}})

    assert final["status"] == "fail"
    assert final["revision"] == []
    assert "Select at least one subject" in final["analysis"]


def test_review_uses_student_availability():
    app = build_revision_graph()
    final = app.invoke({"selected": ["Maths"], "availability": {"Monday": ["09:00"]}})

    # every day before a Maths exam is a Tuesday or Wednesday
    assert "without a day-before session" not in final["analysis"]
