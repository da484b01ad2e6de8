"""
Document driver: line splitting, inline directives, dialect dispatch.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, IO, Iterable, List, Optional, Union

from yuml2dot.compiler.render_dot import render_dot, render_empty_dot
from yuml2dot.dialects import DIALECTS, get_dialect
from yuml2dot.ir.errors import InputError, MissingDiagramTypeError
from yuml2dot.ir.graph import GraphModel
from yuml2dot.ir.sequence import SequenceModel
from yuml2dot.renderer.sequence_renderer import render_sequence_svg
from yuml2dot.schemas import DiagramOptions

logger = logging.getLogger(__name__)

EMPTY_SVG = '<svg xmlns="http://www.w3.org/2000/svg"/>'

DIRECTIONS = {
    "topDown": "TB",
    "leftToRight": "LR",
    "rightToLeft": "RL",
}

COMMENT_PREFIX = "//"

# "// {key: value}"
_DIRECTIVE_RE = re.compile(r"^//\s+\{\s*(\w+)\s*:\s*(\w+)\s*\}$")
_LINE_SPLIT_RE = re.compile(r"\r|\n")

YumlInput = Union[str, bytes, IO[str], IO[bytes]]


@dataclass
class CompiledDiagram:
    kind: str                                   # "dot" or "svg"
    source: str
    model: Optional[Union[GraphModel, SequenceModel]] = None
    options: Optional[DiagramOptions] = None


def iter_input_lines(data: YumlInput) -> Iterable[str]:
    """Accept text, bytes, or any readable stream."""
    if hasattr(data, "read"):
        data = data.read()
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InputError(f"Document is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc
    return _LINE_SPLIT_RE.split(str(data))


def process_directive(line: str, options: DiagramOptions) -> None:
    match = _DIRECTIVE_RE.match(line)
    if match is None:
        return

    key, value = match.groups()

    if key == "type":
        if value in DIALECTS:
            options.type = value
        else:
            logger.warning(
                "Invalid value for 'type'. Allowed values are: %s", ", ".join(DIALECTS)
            )
    elif key == "direction":
        if value in DIRECTIONS:
            options.dir = DIRECTIONS[value]
        else:
            logger.warning(
                "Invalid value for 'direction'. Allowed values are: %s", ", ".join(DIRECTIONS)
            )
    elif key == "generate":
        if value in ("true", "false"):
            options.generate = value == "true"
            logger.warning("Generate option is not supported")
        else:
            logger.warning("Invalid value for 'generate'. Allowed values are: true, false")
    else:
        logger.warning("Unknown directive %r ignored", key)


def read_document(data: YumlInput, options: DiagramOptions) -> List[str]:
    """Collect diagram instructions, applying directives to ``options``."""
    instructions = []
    for raw in iter_input_lines(data):
        line = raw.strip()
        if line.startswith(COMMENT_PREFIX):
            process_directive(line, options)
        elif line:
            instructions.append(line)
    return instructions


def compile_document(data: YumlInput, options: Optional[Union[DiagramOptions, dict]] = None) -> CompiledDiagram:
    """
    Compile a yUML document.

    Graph dialects yield DOT text; sequence diagrams yield SVG directly.
    Raises DiagramTypeError before any parsing, GrammarError on the first
    bad token. Nothing partial is returned.
    """
    options = _private_options(options)
    instructions = read_document(data, options)

    if not instructions:
        if options.type == "sequence":
            return CompiledDiagram("svg", EMPTY_SVG, None, options)
        return CompiledDiagram(
            "dot", render_empty_dot(options.is_dark, options.dot_header_overrides), None, options
        )

    if not options.type:
        raise MissingDiagramTypeError()

    dialect = get_dialect(options.type)
    logger.debug("Compiling %d lines as %s diagram (%s)", len(instructions), dialect.name, options.dir)

    model = dialect.compile(instructions, options.dir)

    if isinstance(model, SequenceModel):
        return CompiledDiagram("svg", render_sequence_svg(model, options.is_dark), model, options)

    dot = render_dot(model, options.is_dark, options.dot_header_overrides)
    return CompiledDiagram("dot", dot, model, options)


def _private_options(options: Any) -> DiagramOptions:
    if options is None:
        return DiagramOptions()
    if isinstance(options, DiagramOptions):
        return options.model_copy(deep=True)
    return DiagramOptions(**options)
