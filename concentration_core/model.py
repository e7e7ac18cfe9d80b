from __future__ import annotations

import enum
import logging
from typing import List, Optional, Tuple

from .board import BOARD_SIZE, Card, all_matched, cards_up, check_pairs, validate_index
from .deal import Shuffler, deal_cards, make_rng
from .observer import CHEAT, Observer, ObserverRegistry
from .state import Snapshot

logger = logging.getLogger(__name__)


class Selection(enum.Enum):
    NONE_SELECTED = 0
    ONE_SELECTED = 1
    TWO_SELECTED_MISMATCH = 2


class ConcentrationModel:
    """
    Game state for one Concentration session.

    The face-up flags on the board are the selection state: whatever is
    face-up and unmatched is what the player has currently picked. Every
    public operation either completes its transition and notifies observers
    once, or changes nothing.

    Not thread-safe; a multi-threaded host must hold one lock around each call.
    """

    def __init__(self, rng: Optional[Shuffler] = None, seed: Optional[int] = None):
        self._rng: Shuffler = rng if rng is not None else make_rng(seed)
        self._observers = ObserverRegistry()
        self._cards: List[Card] = []
        self._moves = 0
        self._history: List[Snapshot] = []
        self._turn_start: Optional[Snapshot] = None
        self._deal()

    # ---------- observers ----------

    def add_observer(self, observer: Observer) -> None:
        self._observers.add(observer)

    def remove_observer(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def _notify(self, arg: Optional[object] = None) -> None:
        self._observers.notify(self, arg)

    # ---------- lifecycle ----------

    def _deal(self) -> None:
        self._cards = list(deal_cards(self._rng))
        self._moves = 0
        self._history = []
        self._turn_start = None
        self._check_rep()
        logger.debug("dealt board %s", [c.pair_id for c in self._cards])

    def reset(self, seed: Optional[int] = None) -> None:
        """Deals a fresh shuffled board, clearing moves and undo history.

        A seed replaces the model's random source before dealing.
        """
        if seed is not None:
            self._rng = make_rng(seed)
        self._deal()
        self._notify()

    def _check_rep(self) -> None:
        assert len(self._cards) == BOARD_SIZE
        check_pairs(self._cards)

    def _snapshot(self) -> Snapshot:
        return Snapshot.capture(self._cards, self._moves)

    # ---------- selection ----------

    @property
    def selection(self) -> Selection:
        return Selection(len(cards_up(self._cards)))

    def select_card(self, index: int) -> None:
        """
        Flips the card at index as part of the current turn.

        Raises CardIndexError for a position not on the board. Selecting a
        matched card or one that is already face-up does nothing.
        """
        validate_index(index)
        target = self._cards[index]
        if target.matched or target.face_up:
            return

        up = cards_up(self._cards)
        if len(up) == 2:
            # stale mismatch from the previous turn goes back face-down first
            for i in up:
                self._cards[i] = self._cards[i].flipped_down()
            up = []

        if not up:
            self._turn_start = self._snapshot()
            self._cards[index] = target.flipped_up()
        else:
            first = up[0]
            self._cards[index] = target.flipped_up()
            self._moves += 1
            if self._cards[first].pair_id == target.pair_id:
                self._cards[first] = self._cards[first].as_matched()
                self._cards[index] = self._cards[index].as_matched()
                # matches are permanent; nothing before them can be undone
                self._history.clear()
                logger.debug("move %d: match %d/%d (pair %d)", self._moves, first, index, target.pair_id)
            else:
                if self._turn_start is not None:
                    self._history.append(self._turn_start)
                logger.debug("move %d: no match %d/%d", self._moves, first, index)
            self._turn_start = None

        self._check_rep()
        self._notify()

    def how_many_cards_up(self) -> int:
        """Number of face-up cards that are not matched: 0, 1 or 2."""
        return len(cards_up(self._cards))

    # ---------- undo ----------

    def can_undo(self) -> bool:
        return bool(self._history)

    def undo(self) -> None:
        """Reverts the most recent mismatched turn; does nothing when there is none."""
        if not self._history:
            return
        snap = self._history.pop()
        self._cards = list(snap.cards)
        self._moves = snap.moves
        self._turn_start = None
        self._check_rep()
        logger.debug("undo to move %d, %d snapshot(s) left", self._moves, len(self._history))
        self._notify()

    # ---------- cheat ----------

    def cheat(self) -> None:
        self._notify(CHEAT)

    def get_cheat(self) -> Tuple[Card, ...]:
        """Every card face-up, as a detached copy; the real board is untouched."""
        return tuple(Card(c.pair_id, True, c.matched) for c in self._cards)

    # ---------- queries ----------

    def get_cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def get_move_count(self) -> int:
        return self._moves

    def is_solved(self) -> bool:
        return all_matched(self._cards)
