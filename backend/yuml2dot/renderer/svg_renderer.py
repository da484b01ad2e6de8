"""
Graphviz layout/render step for DOT documents.
"""

import asyncio
import logging
import tempfile
from pathlib import Path
from typing import Mapping, Optional, Union

import graphviz

from yuml2dot.config import GRAPHVIZ_ENGINE
from yuml2dot.ir.errors import RenderError

logger = logging.getLogger(__name__)

SOURCE_FILENAME = "diagram.gv"

RenderFiles = Mapping[str, Union[str, bytes]]


def render_dot_to_svg(
    dot: str,
    engine: Optional[str] = None,
    format: str = "svg",
    files: Optional[RenderFiles] = None,
) -> str:
    """
    Lay out and render ``dot``. ``files`` (name -> content) are made
    available next to the document, so ``image="logo.png"`` attributes
    resolve against them.
    """
    engine = engine or GRAPHVIZ_ENGINE
    files = files or {}

    if engine not in graphviz.ENGINES:
        raise RenderError(f"Unsupported layout engine: {engine!r}")
    if format not in graphviz.FORMATS:
        raise RenderError(f"Unsupported output format: {format!r}")
    for name in files:
        if name in ("", ".", "..", SOURCE_FILENAME) or Path(name).name != name:
            raise RenderError(f"Invalid render file name: {name!r}")

    logger.debug(
        "Rendering %d bytes of DOT with %s -> %s (%d files)", len(dot), engine, format, len(files)
    )

    try:
        if not files:
            return graphviz.Source(dot, engine=engine).pipe(format=format, encoding="utf-8")
        return _render_with_files(dot, engine, format, files)
    except graphviz.ExecutableNotFound as exc:
        raise RenderError("Graphviz executable not found on PATH") from exc
    except graphviz.CalledProcessError as exc:
        stderr = exc.stderr.decode("utf-8", "replace") if isinstance(exc.stderr, bytes) else exc.stderr
        raise RenderError(f"Graphviz failed: {(stderr or '').strip()}") from exc


def _render_with_files(dot: str, engine: str, format: str, files: RenderFiles) -> str:
    with tempfile.TemporaryDirectory(prefix="yuml2dot-") as tmp:
        for name, content in files.items():
            path = Path(tmp) / name
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")

        # render() runs Graphviz inside ``directory``; pipe() does not
        source = graphviz.Source(dot, filename=SOURCE_FILENAME, directory=tmp, engine=engine)
        output = source.render(format=format, quiet=True)
        return Path(output).read_text(encoding="utf-8")


async def render_dot_to_svg_async(
    dot: str,
    engine: Optional[str] = None,
    format: str = "svg",
    files: Optional[RenderFiles] = None,
) -> str:
    return await asyncio.to_thread(render_dot_to_svg, dot, engine, format, files)
