from __future__ import annotations

# Facade module that re-exports Concentration core functionality.
# Used by the Flask app, the tests and "python game.py".
# Single-responsibility modules live under concentration_core/*.

from concentration_core.board import (  # noqa: F401
    BOARD_SIZE,
    PAIR_COUNT,
    Card,
    CardIndexError,
    all_matched,
    cards_up,
    check_pairs,
    pretty,
    validate_index,
)
from concentration_core.deal import deal_cards, make_rng  # noqa: F401
from concentration_core.state import Snapshot  # noqa: F401
from concentration_core.observer import CHEAT, Observer, ObserverRegistry  # noqa: F401
from concentration_core.model import ConcentrationModel, Selection  # noqa: F401
from concentration_core.view import (  # noqa: F401
    STATUS_TEXT,
    WIN_TEXT,
    model_to_json,
    moves_label,
    status_message,
)


def main() -> None:
    # CLI driver delegated to concentration_core.cli
    from concentration_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
