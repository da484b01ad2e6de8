"""Document driver: directives, options, input forms, error ordering"""

import asyncio
import io
import logging

import pytest
from pydantic import ValidationError

from yuml2dot import (
    DiagramOptions,
    DiagramTypeError,
    InputError,
    InvalidDiagramTypeError,
    MissingDiagramTypeError,
    YumlError,
    compile_document,
    yuml2dot,
    yuml2svg,
)
from yuml2dot.compiler.document import EMPTY_SVG


def test_direction_directive_overrides_options():
    compiled = compile_document("// {direction: leftToRight}\n[A]-[B]", DiagramOptions(dir="TB"))

    assert compiled.model.rankdir == "LR"
    assert "\trankdir=LR" in compiled.source


def test_directives_apply_wherever_they_appear():
    compiled = compile_document("[A]-[B]\n// {direction: rightToLeft}")
    assert compiled.model.rankdir == "RL"


def test_type_directive():
    model = compile_document("// {type: activity}\n(start)->(end)").model
    assert [n.shape for n in model.nodes] == ["circle", "doublecircle"]


def test_invalid_directive_value_warns(caplog):
    with caplog.at_level(logging.WARNING):
        compiled = compile_document("// {direction: diagonal}\n[A]")

    assert compiled.model.rankdir == "TB"
    assert "Invalid value for 'direction'" in caplog.text


def test_generate_directive_is_inert(caplog):
    with caplog.at_level(logging.WARNING):
        compiled = compile_document("// {generate: true}\n[A]")

    assert compiled.options.generate is True
    assert "Generate option is not supported" in caplog.text


def test_plain_comments_are_skipped():
    model = compile_document("// just a note\n[A]\n//{type: usecase}").model

    assert len(model.nodes) == 1
    assert model.nodes[0].shape == "record"


def test_caller_options_are_not_mutated():
    options = DiagramOptions()
    compile_document("// {direction: leftToRight}\n// {type: state}\n(A)", options)

    assert options.dir == "TB"
    assert options.type == "class"


def test_unknown_type_fails_before_parsing():
    with pytest.raises(InvalidDiagramTypeError) as excinfo:
        compile_document("[A]foo[B]", {"type": "foo"})
    assert excinfo.value.diagram_type == "foo"


def test_missing_type():
    with pytest.raises(MissingDiagramTypeError):
        compile_document("[A]", {"type": None})

    with pytest.raises(DiagramTypeError):
        compile_document("[A]", {"type": ""})


def test_empty_document_gives_bare_header():
    compiled = compile_document("// nothing here\n\n   \n")

    assert compiled.model is None
    assert compiled.source.startswith("digraph G {\n")
    assert compiled.source.rstrip().endswith("}")
    assert "rankdir" not in compiled.source


def test_empty_document_does_not_need_a_type():
    compiled = compile_document("", {"type": None})
    assert compiled.kind == "dot"


def test_empty_sequence_document():
    assert compile_document("", {"type": "sequence"}).source == EMPTY_SVG


def test_empty_document_renders_without_graphviz():
    assert asyncio.run(yuml2svg("")) == EMPTY_SVG


@pytest.mark.parametrize(
    "data",
    [
        "[A]-[B]\r\n[B]-[C]",
        b"[A]-[B]\n[B]-[C]",
        io.StringIO("[A]-[B]\r[B]-[C]"),
        io.BytesIO(b"[A]-[B]\n[B]-[C]"),
    ],
)
def test_input_forms(data):
    model = compile_document(data).model
    assert [n.label for n in model.nodes] == ["A", "B", "C"]


def test_output_is_deterministic():
    source = "[Customer]<>1->*[Order]\n[Order]-[note: paid]"
    assert yuml2dot(source) == yuml2dot(source)


def test_yuml2dot_returns_svg_for_sequence():
    assert yuml2dot("[A]x>[B]", {"type": "sequence"}).startswith("<svg")


def test_camel_case_option_names():
    compiled = compile_document(
        "[A]", {"isDark": True, "dotHeaderOverrides": {"edge": {"fontsize": 9}}}
    )

    assert 'bgcolor="transparent"' in compiled.source
    assert "fontsize=9" in compiled.source.splitlines()[3]


def test_unknown_option_is_rejected():
    with pytest.raises(ValidationError):
        compile_document("[A]", {"dark": True})


def test_undecodable_bytes():
    with pytest.raises(InputError):
        compile_document(b"[Caf\xe9]-[Order]")

    with pytest.raises(YumlError):
        compile_document(io.BytesIO(b"\xff\xfe[A]"))
