"""
Move Module - The three jug actions: fill, empty and pour.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


# Every action costs one unit
MOVE_COST = 1


class MoveType(Enum):
    """Kind of jug action."""
    FILL = "FILL"
    EMPTY = "EMPTY"
    POUR = "POUR"


@dataclass(frozen=True)
class Move:
    """
    Represents one action on the jugs.

    FILL and EMPTY act on a single jug; POUR transfers from jug_index
    into target_jug_index until the source is empty or the target full.

    Attributes:
        type: Kind of action
        jug_index: Jug acted on (source jug for POUR), 0-based
        target_jug_index: Destination jug for POUR, None otherwise
        label: Optional override for the human-readable description
    """
    type: MoveType
    jug_index: int
    target_jug_index: Optional[int] = None
    label: Optional[str] = None

    @classmethod
    def fill(cls, i: int) -> 'Move':
        """Fill jug i to capacity."""
        return cls(type=MoveType.FILL, jug_index=i)

    @classmethod
    def empty(cls, i: int) -> 'Move':
        """Empty jug i."""
        return cls(type=MoveType.EMPTY, jug_index=i)

    @classmethod
    def pour(cls, i: int, j: int) -> 'Move':
        """Pour jug i into jug j."""
        if i == j:
            raise ValueError("Cannot pour a jug into itself")
        return cls(type=MoveType.POUR, jug_index=i, target_jug_index=j)

    @property
    def cost(self) -> int:
        """Cost of this move (unit cost)."""
        return MOVE_COST

    @property
    def description(self) -> str:
        """Human-readable description with 1-based jug numbers."""
        if self.label is not None:
            return self.label
        if self.type is MoveType.FILL:
            return f"Fill Jug {self.jug_index + 1}"
        if self.type is MoveType.EMPTY:
            return f"Empty Jug {self.jug_index + 1}"
        return f"Pour Jug {self.jug_index + 1} into Jug {self.target_jug_index + 1}"

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form for the rendering layer."""
        data: Dict[str, Any] = {
            "type": self.type.value,
            "jugIndex": self.jug_index,
            "description": self.description,
        }
        if self.target_jug_index is not None:
            data["targetJugIndex"] = self.target_jug_index
        return data

    def __str__(self) -> str:
        if self.type is MoveType.POUR:
            return f"POUR({self.jug_index},{self.target_jug_index})"
        return f"{self.type.value}({self.jug_index})"
