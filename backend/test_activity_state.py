"""Activity and state diagrams"""

import pytest

from yuml2dot import GrammarError, compile_document


def compile_activity(source, **options):
    return compile_document(source, {"type": "activity", **options}).model


def test_start_activity_end():
    model = compile_activity("(start)->(Find Products)->(end)")
    start, activity, end = model.nodes

    assert start.shape == "circle"
    assert end.shape == "doublecircle"
    assert activity.shape == "record"
    assert activity.style == "rounded"
    assert activity.label == "Find\\ Products"

    assert [(e.source, e.target, e.arrowhead) for e in model.edges] == [
        ("A0", "A1", "vee"),
        ("A1", "A2", "vee"),
    ]


def test_decision_with_labels():
    model = compile_activity(
        "(start)-><d1>logged in->(Show Dashboard), <d1>not logged in->(Show Login Page)"
    )

    assert model.get_node("A1").shape == "diamond"
    assert len(model.nodes) == 4
    assert [(e.source, e.target, e.label) for e in model.edges] == [
        ("A0", "A1", ""),
        ("A1", "A2", "logged in"),
        ("A1", "A3", "not logged in"),
    ]


def test_parallel_bar_fan_in():
    model = compile_activity("(Action1)->|a|\n(Action 2)->|a|")
    bar = model.get_node("A1")

    assert bar.label == "<f1>|<f2>"
    assert [e.target_ref for e in model.edges] == ["A1:f1:n", "A1:f2:n"]


def test_parallel_bar_left_to_right():
    model = compile_activity("// {direction: leftToRight}\n(Action1)->|a|")
    bar = model.get_node("A1")

    assert bar.attrs["height"] == 0.5
    assert bar.attrs["width"] == 0.05
    assert model.edges[0].target_ref == "A1:f1:w"


def test_bar_with_ports_stays_record():
    dot = compile_document("(a)->|b|,(c)->|b|", {"type": "activity"}).source
    assert 'shape="record"' in dot
    assert 'label="<f1>|<f2>"' in dot
    assert "A0 -> A1:f1:n" in dot


def test_activity_note_is_dashed():
    model = compile_activity("(Action1)-(note: A note message here)")

    assert model.get_node("A1").shape == "note"
    assert model.edges[0].style == "dashed"


def test_colored_activity():
    node = compile_activity("(Pay{bg:green})").get_node("A0")

    assert node.style == "rounded,filled"
    assert node.fillcolor == "#008000"
    assert node.fontcolor == "white"


def test_state_transition_with_fields():
    compiled = compile_document(
        "(Simulator running)Pause->(Simulator paused|do/wait)", {"type": "state"}
    )
    model = compiled.model

    assert model.get_node("A1").label == "Simulator\\ paused|do/wait"
    assert model.edges[0].label == "Pause"
    assert "<TABLE" in compiled.source
    assert "Simulator paused" in compiled.source


def test_state_start_and_end():
    model = compile_document("(start)->(Running)->(end)", {"type": "state"}).model
    assert [n.shape for n in model.nodes] == ["circle", "record", "doublecircle"]


def test_state_rejects_unknown_connector():
    with pytest.raises(GrammarError):
        compile_document("(A)=>(B)", {"type": "state"})


def test_state_has_no_decisions():
    with pytest.raises(GrammarError):
        compile_document("(A)-><d1>", {"type": "state"})


def test_parallel_bar_right_to_left():
    model = compile_activity("(Action1)->|a|\n(Action 2)->|a|", dir="RL")

    assert model.get_node("A1").attrs["width"] == 0.05
    assert [e.target_ref for e in model.edges] == ["A1:f1:e", "A1:f2:e"]
