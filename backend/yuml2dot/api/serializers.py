from dataclasses import fields, is_dataclass
from typing import Any


PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def serialize_model(obj: Any):
    """
    Serialize a compiled GraphModel or SequenceModel for ``POST /model``.

    Nodes and edges share one ``elements`` list and sequence signals mix
    ``Signal`` and ``Note`` entries, so every model object carries a
    ``kind`` key (its class name) for clients to tell them apart.
    Field order follows the dataclass definitions. Derived properties such
    as ``GraphModel.nodes`` are left out.
    """

    if isinstance(obj, PRIMITIVE_TYPES):
        return obj

    if isinstance(obj, (list, tuple)):
        return [serialize_model(item) for item in obj]

    if isinstance(obj, dict):
        return {str(k): serialize_model(v) for k, v in obj.items()}

    if is_dataclass(obj):
        data = {"kind": type(obj).__name__}
        for f in fields(obj):
            data[f.name] = serialize_model(getattr(obj, f.name))
        return data

    return str(obj)
