"""
Jug State Module - Immutable fill-level representation for water jug puzzles.
"""

import json
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .move import Move, MoveType


@dataclass(frozen=True)
class JugState:
    """
    Immutable jug fill state.

    Uses a tuple for hashability and immutability. Index i holds the
    current fill level of jug i.

    Attributes:
        levels: Tuple of non-negative integer fill levels
    """
    levels: Tuple[int, ...]

    @classmethod
    def from_list(cls, levels: Sequence[int]) -> 'JugState':
        """
        Create JugState from any integer sequence.

        Args:
            levels: Fill levels (list, tuple or another JugState)

        Returns:
            JugState instance with immutable levels
        """
        if isinstance(levels, JugState):
            return levels
        return cls(levels=tuple(int(v) for v in levels))

    @property
    def key(self) -> str:
        """
        Canonical string form, used as visited-set and tree-node identity.

        Compact JSON of the levels, e.g. "[4,0]".
        """
        return json.dumps(list(self.levels), separators=(",", ":"))

    def apply_move(self, move: Move, capacities: Sequence[int]) -> 'JugState':
        """
        Apply a move to create a new state.

        The move is assumed legal for this state; the original state is
        unchanged.

        Args:
            move: Move to apply
            capacities: Jug capacities

        Returns:
            New JugState after the move
        """
        levels = list(self.levels)
        i = move.jug_index

        if move.type is MoveType.FILL:
            levels[i] = capacities[i]
        elif move.type is MoveType.EMPTY:
            levels[i] = 0
        else:
            j = move.target_jug_index
            amount = min(levels[i], capacities[j] - levels[j])
            levels[i] -= amount
            levels[j] += amount

        return JugState(levels=tuple(levels))

    def to_list(self) -> List[int]:
        """Convert to a mutable list of levels."""
        return list(self.levels)

    def __len__(self) -> int:
        return len(self.levels)

    def __getitem__(self, index: int) -> int:
        return self.levels[index]

    def __iter__(self):
        return iter(self.levels)

    def __str__(self) -> str:
        return self.key
