from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from game import CardIndexError, ConcentrationModel, model_to_json

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def _env_seed() -> Optional[int]:
    raw = os.getenv("CONCENTRATION_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring non-integer CONCENTRATION_SEED=%r", raw)
        return None


app = Flask(__name__)


class _SessionView:
    """Observer for the web session: remembers whether the last notification was a cheat reveal."""

    def __init__(self) -> None:
        self.cheat_requested = False
        self.updates = 0

    def update(self, model: ConcentrationModel, arg: Optional[object]) -> None:
        self.updates += 1
        self.cheat_requested = arg is not None


# One in-memory game per process. Flask may serve requests on several
# threads, so every engine call and its serialisation happens under LOCK.
LOCK = threading.Lock()
MODEL = ConcentrationModel(seed=_env_seed())
VIEW = _SessionView()
MODEL.add_observer(VIEW)


def _install(model: ConcentrationModel) -> ConcentrationModel:
    # Caller holds LOCK.
    global MODEL
    MODEL.remove_observer(VIEW)
    MODEL = model
    MODEL.add_observer(VIEW)
    VIEW.cheat_requested = False
    return MODEL


def new_session(seed: Optional[int] = None, rng: Any = None) -> ConcentrationModel:
    """Replaces the session model with a freshly dealt one; tests inject rng here."""
    with LOCK:
        return _install(ConcentrationModel(rng=rng, seed=seed))


def _state_response() -> Any:
    # Caller holds LOCK.
    cheat = MODEL.get_cheat() if VIEW.cheat_requested else None
    return jsonify(model_to_json(MODEL, cheat=cheat))


@app.get("/api/state")
def api_state() -> Any:
    with LOCK:
        VIEW.cheat_requested = False
        return _state_response()


def _json_object() -> Optional[Dict[str, Any]]:
    """Request body as a dict; None when the JSON is something other than an object."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _not_an_object() -> Any:
    return jsonify({"ok": False, "error": "JSON object required"}), 400


@app.post("/api/select")
def api_select() -> Any:
    body = _json_object()
    if body is None:
        return _not_an_object()
    index = body.get("index")
    with LOCK:
        try:
            MODEL.select_card(index)
        except CardIndexError as e:
            logger.warning("rejected selection: %s", e)
            return jsonify({"ok": False, "error": str(e)}), 400
        VIEW.cheat_requested = False
        return _state_response()


@app.post("/api/undo")
def api_undo() -> Any:
    with LOCK:
        MODEL.undo()
        VIEW.cheat_requested = False
        return _state_response()


@app.post("/api/reset")
def api_reset() -> Any:
    body = _json_object()
    if body is None:
        return _not_an_object()
    seed = body.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return jsonify({"ok": False, "error": "seed must be an integer"}), 400
    with LOCK:
        MODEL.reset(seed=seed)
        VIEW.cheat_requested = False
        return _state_response()


@app.post("/api/cheat")
def api_cheat() -> Any:
    with LOCK:
        MODEL.cheat()
        return _state_response()


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = _env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0"))
    logging.basicConfig(level=logging.DEBUG if _env_flag("CONCENTRATION_DEBUG") else logging.INFO)
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
