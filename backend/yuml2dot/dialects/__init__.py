"""
Dialect registry: diagram type name -> parser/compiler pair.
"""

from typing import Dict, List, Type

from yuml2dot.dialects.activity_diagram import ActivityDialect
from yuml2dot.dialects.base import Dialect, GraphDialect
from yuml2dot.dialects.class_diagram import ClassDialect
from yuml2dot.dialects.deployment_diagram import DeploymentDialect
from yuml2dot.dialects.package_diagram import PackageDialect
from yuml2dot.dialects.sequence_diagram import SequenceDialect
from yuml2dot.dialects.state_diagram import StateDialect
from yuml2dot.dialects.usecase_diagram import UseCaseDialect
from yuml2dot.ir.errors import InvalidDiagramTypeError

DIALECTS: Dict[str, Type[Dialect]] = {
    dialect.name: dialect
    for dialect in (
        ClassDialect,
        UseCaseDialect,
        ActivityDialect,
        StateDialect,
        DeploymentDialect,
        PackageDialect,
        SequenceDialect,
    )
}


def get_dialect(diagram_type: str) -> Dialect:
    """Return a fresh dialect instance for ``diagram_type``."""
    dialect = DIALECTS.get(diagram_type)
    if dialect is None:
        raise InvalidDiagramTypeError(diagram_type)
    return dialect()


def list_diagram_types() -> List[str]:
    return list(DIALECTS)


__all__ = [
    "DIALECTS",
    "Dialect",
    "GraphDialect",
    "get_dialect",
    "list_diagram_types",
]
