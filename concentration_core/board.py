from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Sequence

PAIR_COUNT = 8
BOARD_SIZE = 2 * PAIR_COUNT
GRID_WIDTH = 4


class CardIndexError(IndexError):
    """Raised when a caller asks for a card position that is not on the board."""

    def __init__(self, index: object, size: int = BOARD_SIZE):
        super().__init__(f"card index {index!r} out of range 0..{size - 1}")
        self.index = index
        self.size = size


@dataclass(frozen=True)
class Card:
    """A single tile: which picture it shows and whether it is visible or resolved."""
    pair_id: int
    face_up: bool = False
    matched: bool = False

    def flipped_up(self) -> 'Card':
        return Card(self.pair_id, True, self.matched)

    def flipped_down(self) -> 'Card':
        return Card(self.pair_id, False, False)

    def as_matched(self) -> 'Card':
        return Card(self.pair_id, True, True)


def validate_index(index: object, size: int = BOARD_SIZE) -> int:
    """Returns index unchanged if it addresses a card, otherwise raises CardIndexError."""
    # bool is an int subclass; True/False are never valid positions
    if isinstance(index, bool) or not isinstance(index, int):
        raise CardIndexError(index, size)
    if not 0 <= index < size:
        raise CardIndexError(index, size)
    return index


def cards_up(cards: Sequence[Card]) -> List[int]:
    """Indices of cards that are face-up but not yet matched (the current selection)."""
    return [i for i, card in enumerate(cards) if card.face_up and not card.matched]


def all_matched(cards: Iterable[Card]) -> bool:
    return all(card.matched for card in cards)


def check_pairs(cards: Sequence[Card]) -> None:
    """Asserts the board invariants: every pair id appears twice and matched cards are up."""
    counts = Counter(card.pair_id for card in cards)
    assert all(n == 2 for n in counts.values()), f"unpaired cards: {dict(counts)}"
    for card in cards:
        if card.matched:
            assert card.face_up
    assert len(cards_up(cards)) <= 2


def pretty(cards: Sequence[Card], width: int = GRID_WIDTH, reveal: bool = False) -> str:
    """Generates a human-readable grid: '?' face-down, pair id face-up, [n] matched."""
    lines: List[str] = []
    for start in range(0, len(cards), width):
        row: List[str] = []
        for card in cards[start:start + width]:
            if card.matched:
                row.append(f"[{card.pair_id}]")
            elif card.face_up or reveal:
                row.append(f" {card.pair_id} ")
            else:
                row.append(" ? ")
        lines.append(" ".join(row))
    return "\n".join(lines)
