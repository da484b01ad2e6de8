from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional, Union

Direction = Literal["TB", "LR", "RL"]


class DiagramOptions(BaseModel):
    """
    Per-document compile options; directives may override type and dir.
    Accepts both snake_case names and the camelCase yUML option names
    (``isDark``, ``dotHeaderOverrides``). Unknown keys are rejected.
    """
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    type: Optional[str] = "class"  # class | usecase | activity | state | deployment | package | sequence
    dir: Direction = "TB"
    is_dark: bool = Field(False, alias="isDark")
    dot_header_overrides: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict, alias="dotHeaderOverrides"
    )  # graph | node | edge
    generate: Optional[bool] = None  # accepted from directives, has no effect


class RenderFile(BaseModel):
    """A file Graphviz can read while rendering, e.g. a node image."""
    name: str  # plain file name, no directories
    content: Union[str, bytes]


class RenderOptions(BaseModel):
    """Pass-through options for the Graphviz layout/render step"""
    engine: Optional[str] = None  # dot | circo | fdp | neato | osage | twopi
    format: str = "svg"
    files: List[RenderFile] = Field(default_factory=list)

    def file_map(self) -> Dict[str, Union[str, bytes]]:
        return {f.name: f.content for f in self.files}


class CompileRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str
    type: Optional[str] = "class"
    dir: Direction = "TB"
    is_dark: bool = Field(False, alias="isDark")
    dot_header_overrides: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict, alias="dotHeaderOverrides"
    )
    format: Literal["svg", "dot"] = "svg"
    engine: Optional[str] = None
    files: List[RenderFile] = Field(default_factory=list)

    def diagram_options(self) -> DiagramOptions:
        return DiagramOptions(
            type=self.type,
            dir=self.dir,
            is_dark=self.is_dark,
            dot_header_overrides=self.dot_header_overrides,
        )

    def render_options(self) -> RenderOptions:
        return RenderOptions(engine=self.engine, files=self.files)


class DiagramResponse(BaseModel):
    type: str  # svg | dot
    source: str


class DiagramTypesResponse(BaseModel):
    types: List[str]
    directions: Dict[str, str]
