from __future__ import annotations

import random
from typing import List, Optional, Protocol, Tuple

from .board import Card, PAIR_COUNT


class Shuffler(Protocol):
    def shuffle(self, x: List[int]) -> None: ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Private random source for one model; never the module-level generator."""
    return random.Random(seed)


def deal_cards(rng: Optional[Shuffler] = None, seed: Optional[int] = None) -> Tuple[Card, ...]:
    """Deals a face-down board holding each of the PAIR_COUNT pictures twice."""
    if rng is None:
        rng = make_rng(seed)
    deck: List[int] = list(range(PAIR_COUNT)) * 2
    rng.shuffle(deck)
    return tuple(Card(pair_id) for pair_id in deck)
