from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class GraphNode:
    id: str
    shape: str
    label: str = ""
    style: Optional[str] = None
    fillcolor: Optional[str] = None
    fontcolor: Optional[str] = None
    attrs: Dict[str, Any] = field(default_factory=dict)   # height, width, margin, fontsize ...

    def dot_attrs(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"shape": self.shape}
        out.update(self.attrs)
        out["label"] = self.label
        if self.style:
            out["style"] = self.style
        if self.fillcolor:
            out["fillcolor"] = self.fillcolor
        if self.fontcolor:
            out["fontcolor"] = self.fontcolor
        return out


@dataclass
class GraphEdge:
    source: str
    target: str
    arrowtail: str = "none"
    arrowhead: str = "none"
    style: str = "solid"
    label: str = ""
    taillabel: str = ""
    headlabel: str = ""
    target_port: Optional[str] = None
    target_compass: Optional[str] = None
    same_rank: bool = False
    attrs: Dict[str, Any] = field(default_factory=dict)   # labeldistance, fontsize

    @property
    def target_ref(self) -> str:
        parts = [self.target]
        if self.target_port:
            parts.append(self.target_port)
        if self.target_compass:
            parts.append(self.target_compass)
        return ":".join(parts)

    def dot_attrs(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "dir": "both",
            "style": self.style,
            "arrowtail": self.arrowtail,
            "arrowhead": self.arrowhead,
        }
        if self.label:
            out["label"] = self.label
        if self.taillabel:
            out["taillabel"] = self.taillabel
        if self.headlabel:
            out["headlabel"] = self.headlabel
        out.update(self.attrs)
        return out


GraphElement = Union[GraphNode, GraphEdge]


@dataclass
class GraphModel:
    """Cumulative output of one compilation pass, in emission order."""
    rankdir: str = "TB"
    ranksep: float = 0.5
    elements: List[GraphElement] = field(default_factory=list)

    @property
    def nodes(self) -> List[GraphNode]:
        return [e for e in self.elements if isinstance(e, GraphNode)]

    @property
    def edges(self) -> List[GraphEdge]:
        return [e for e in self.elements if isinstance(e, GraphEdge)]

    def add(self, element: GraphElement) -> GraphElement:
        self.elements.append(element)
        return element

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def add_bar_port(self, node_id: str) -> Optional[str]:
        """
        Append a new port field to a parallel-bar node and return its name.
        Ports are numbered f1, f2, ... in the order edges arrive.
        """
        node = self.get_node(node_id)
        if node is None:
            return None

        if node.label:
            port = f"f{len(node.label.split('|')) + 1}"
            node.label += f"|<{port}>"
        else:
            port = "f1"
            node.label = "<f1>"
        return port
