"""DOT serialization"""

from yuml2dot import compile_document
from yuml2dot.compiler.render_dot import render_dot, render_header
from yuml2dot.ir.graph import GraphModel, GraphNode

LIGHT_HEADER = (
    "digraph G {\n"
    '\tgraph [fontname="Helvetica"]\n'
    '\tnode [fontname="Helvetica",shape="none",margin=0]\n'
    '\tedge [fontname="Helvetica"]'
)


def test_light_header():
    assert render_header() == LIGHT_HEADER


def test_dark_header():
    header = render_header(is_dark=True)

    assert '\tgraph [fontname="Helvetica",bgcolor="transparent"]' in header
    assert '\tnode [fontname="Helvetica",shape="none",margin=0,color="white",fontcolor="white"]' in header
    assert '\tedge [fontname="Helvetica",color="white",fontcolor="white"]' in header


def test_header_overrides_win():
    header = render_header(overrides={"node": {"fontname": "Courier"}, "graph": {"splines": "ortho"}})

    assert '\tnode [fontname="Courier",shape="none",margin=0]' in header
    assert '\tgraph [fontname="Helvetica",splines="ortho"]' in header


def test_class_document():
    dot = compile_document("[Customer]-[Order]").source
    lines = dot.splitlines()

    assert dot.startswith(LIGHT_HEADER)
    assert "\tranksep=0.7" in lines
    assert "\trankdir=TB" in lines
    assert '\tA0 [shape="rectangle" , height=0.5 , fontsize=10 , margin="0.20,0.05" , label="Customer"]' in lines
    assert (
        '\tA0 -> A1 [dir="both" , style="solid" , arrowtail="none" , arrowhead="none" , '
        "labeldistance=2 , fontsize=10]"
    ) in lines
    assert lines[-1] == "}"


def test_nodes_precede_their_edges():
    lines = compile_document("[A]-[B]-[C]").source.splitlines()
    body = [line.strip().split(" ")[0] for line in lines if line.startswith("\tA")]

    assert body == ["A0", "A1", "A2", "A0", "A1"]


def test_record_with_fields_becomes_table():
    dot = compile_document("[Customer|name;email|save()]").source

    assert 'shape="none"' in dot
    assert "margin=0" in dot
    assert "label=<<TABLE" in dot
    assert "<TR><TD>Customer</TD></TR><TR><TD>name<BR/>email</TD></TR><TR><TD>save()</TD></TR>" in dot


def test_table_cells_are_html_escaped():
    dot = compile_document("[Box|List<int> items]").source
    assert "List&lt;int&gt; items" in dot


def test_quotes_are_escaped():
    model = GraphModel()
    model.add(GraphNode(id="A0", shape="rectangle", label='say "hi"'))

    assert 'label="say \\"hi\\""' in render_dot(model)


def test_colored_node_attributes():
    dot = compile_document("[Order{bg:green}]").source
    assert 'style="filled" , fillcolor="#008000" , fontcolor="white"' in dot
