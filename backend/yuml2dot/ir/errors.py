from typing import Optional


class YumlError(Exception):
    """Base class for every failure raised while compiling a yUML document."""


class GrammarError(YumlError):
    """A token matched none of the active dialect's grammar rules."""

    def __init__(self, token: str, line: str = "", line_number: Optional[int] = None):
        self.token = token
        self.line = line
        self.line_number = line_number
        message = f"Invalid expression - {token!r}"
        if line_number is not None:
            message += f" (line {line_number}: {line!r})"
        super().__init__(message)


class DiagramTypeError(YumlError):
    """Configuration error: the diagram type is missing or unknown."""


class MissingDiagramTypeError(DiagramTypeError):
    def __init__(self):
        super().__init__("Missing mandatory 'type' directive")


class InvalidDiagramTypeError(DiagramTypeError):
    def __init__(self, diagram_type: str):
        self.diagram_type = diagram_type
        super().__init__(f"Invalid diagram type: {diagram_type!r}")


class RenderError(YumlError):
    """The external layout/render collaborator failed."""


class InputError(YumlError):
    """The document could not be read as UTF-8 text."""
