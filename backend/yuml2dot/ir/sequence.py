from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass
class SequenceActor:
    uid: str
    label: str
    index: int
    # layout, filled in by the renderer
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    padding_right: float = 0.0


@dataclass
class Signal:
    actor_a: SequenceActor
    actor_b: SequenceActor
    message: str
    linetype: str = "solid"            # solid | dashed
    arrowtype: str = "arrow-filled"    # arrow-filled | arrow-open
    activation_start: str = ""         # "(" or ")" before the message
    activation_end: str = ""           # "(" or ")" after the arrow
    width: float = 0.0
    height: float = 0.0

    @property
    def is_self(self) -> bool:
        return self.actor_a is self.actor_b


@dataclass
class Note:
    actor: SequenceActor
    message: str
    bgcolor: Optional[str] = None
    fontcolor: Optional[str] = None
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


SequenceItem = Union[Signal, Note]


@dataclass
class SequenceModel:
    actors: List[SequenceActor] = field(default_factory=list)
    signals: List[SequenceItem] = field(default_factory=list)
