from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .board import Card, all_matched

STATUS_TEXT = {
    0: "Select the first card.",
    1: "Select the second card.",
    2: "No Match: Undo or select a card.",
}
WIN_TEXT = "YOU WIN!"


def status_message(model) -> str:
    """Instruction line shown above the board."""
    if model.is_solved():
        return WIN_TEXT
    return STATUS_TEXT[model.how_many_cards_up()]


def moves_label(model) -> str:
    return f"{model.get_move_count()} Moves"


def card_to_json(card: Card) -> Dict[str, Any]:
    # face-down cards keep their picture hidden from the client
    return {
        "pairId": int(card.pair_id) if card.face_up else None,
        "faceUp": bool(card.face_up),
        "matched": bool(card.matched),
    }


def cards_to_json(cards: Sequence[Card]) -> List[Dict[str, Any]]:
    return [card_to_json(c) for c in cards]


def model_to_json(model, cheat: Optional[Sequence[Card]] = None) -> Dict[str, Any]:
    cards = model.get_cards()
    out: Dict[str, Any] = {
        "ok": True,
        "cards": cards_to_json(cards),
        "moves": int(model.get_move_count()),
        "cardsUp": int(model.how_many_cards_up()),
        "canUndo": bool(model.can_undo()),
        "status": status_message(model),
        "solved": all_matched(cards),
    }
    if cheat is not None:
        out["cheat"] = cards_to_json(cheat)
    return out
