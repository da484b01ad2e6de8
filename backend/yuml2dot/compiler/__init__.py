from typing import Optional, Union

from yuml2dot.compiler.document import (
    EMPTY_SVG,
    CompiledDiagram,
    YumlInput,
    compile_document,
)
from yuml2dot.renderer.embedded_images import process_embedded_images
from yuml2dot.renderer.svg_renderer import render_dot_to_svg_async
from yuml2dot.schemas import DiagramOptions, RenderOptions


def yuml2dot(data: YumlInput, options: Optional[Union[DiagramOptions, dict]] = None) -> str:
    """DOT text for graph dialects, SVG for sequence diagrams."""
    return compile_document(data, options).source


async def yuml2svg(
    data: YumlInput,
    options: Optional[Union[DiagramOptions, dict]] = None,
    render_options: Optional[Union[RenderOptions, dict]] = None,
) -> str:
    compiled = compile_document(data, options)
    return await render_compiled(compiled, render_options)


async def render_compiled(
    compiled: CompiledDiagram,
    render_options: Optional[Union[RenderOptions, dict]] = None,
) -> str:
    if compiled.kind == "svg":
        return compiled.source
    if compiled.model is None:
        return EMPTY_SVG

    if render_options is None:
        render_options = RenderOptions()
    elif isinstance(render_options, dict):
        render_options = RenderOptions(**render_options)

    rendered = await render_dot_to_svg_async(
        compiled.source, render_options.engine, render_options.format, render_options.file_map()
    )
    if render_options.format != "svg":
        return rendered
    return process_embedded_images(rendered, compiled.options.is_dark)
