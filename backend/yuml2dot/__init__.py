"""
yuml2dot: compile yUML diagram notation to Graphviz DOT or SVG.
"""

from yuml2dot.compiler import render_compiled, yuml2dot, yuml2svg
from yuml2dot.compiler.document import CompiledDiagram, compile_document
from yuml2dot.ir.errors import (
    DiagramTypeError,
    GrammarError,
    InputError,
    InvalidDiagramTypeError,
    MissingDiagramTypeError,
    RenderError,
    YumlError,
)
from yuml2dot.schemas import DiagramOptions, RenderFile, RenderOptions

__version__ = "0.4.0"

__all__ = [
    "CompiledDiagram",
    "DiagramOptions",
    "DiagramTypeError",
    "GrammarError",
    "InputError",
    "InvalidDiagramTypeError",
    "MissingDiagramTypeError",
    "RenderError",
    "RenderFile",
    "RenderOptions",
    "YumlError",
    "compile_document",
    "render_compiled",
    "yuml2dot",
    "yuml2svg",
]
