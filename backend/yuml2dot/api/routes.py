import logging

from fastapi import APIRouter, HTTPException

from yuml2dot.api.serializers import serialize_model
from yuml2dot.compiler import render_compiled
from yuml2dot.compiler.document import DIRECTIONS, compile_document
from yuml2dot.dialects import list_diagram_types
from yuml2dot.ir.errors import DiagramTypeError, GrammarError, RenderError
from yuml2dot.schemas import (
    CompileRequest,
    DiagramResponse,
    DiagramTypesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="",
    tags=["yuml"],
)


def _compile(request: CompileRequest):
    try:
        return compile_document(request.source, request.diagram_options())
    except DiagramTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GrammarError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/compile", response_model=DiagramResponse)
async def compile_diagram(request: CompileRequest):
    compiled = _compile(request)

    if request.format == "dot" or compiled.kind == "svg":
        return DiagramResponse(type=compiled.kind, source=compiled.source)

    try:
        svg = await render_compiled(compiled, request.render_options())
    except RenderError as e:
        logger.error("Render failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e))

    return DiagramResponse(type="svg", source=svg)


@router.post("/model")
def compile_model(request: CompileRequest):
    compiled = _compile(request)
    return {
        "type": compiled.options.type,
        "dir": compiled.options.dir,
        "model": serialize_model(compiled.model),
    }


@router.get("/diagram-types", response_model=DiagramTypesResponse)
def diagram_types():
    return DiagramTypesResponse(types=list_diagram_types(), directions=DIRECTIONS)
