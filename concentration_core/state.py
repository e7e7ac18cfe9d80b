from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .board import Card, cards_up


@dataclass(frozen=True)
class Snapshot:
    """Immutable capture of the board, the current selection and the move count, used by undo."""
    cards: Tuple[Card, ...]
    selected: Tuple[int, ...]
    moves: int

    @classmethod
    def capture(cls, cards, moves: int) -> 'Snapshot':
        cards = tuple(cards)
        return cls(cards=cards, selected=tuple(cards_up(cards)), moves=moves)
