from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from bowling_core.errors import BowlingError
from bowling_core.frames import FrameTracker
from bowling_core.scoreboard import frame_marks
from bowling_core.scoring import calculate_score, get_frame_scores, running_totals
from bowling_core.simulate import play_random_game

DEFAULT_ACCURACY = float(os.getenv("TENPIN_SIM_ACCURACY", "0.6"))

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _score_to_json(rolls: List[int]) -> Dict[str, Any]:
    return {
        "total": calculate_score(rolls),
        "frameScores": get_frame_scores(rolls),
        "runningTotals": running_totals(rolls),
        "marks": frame_marks(rolls),
    }


def _state_to_json(t: FrameTracker) -> Dict[str, Any]:
    rolls = list(t.rolls)
    out: Dict[str, Any] = {
        "rolls": rolls,
        "currentFrame": int(t.current_frame),
        "currentBall": int(t.current_ball),
        "done": bool(t.done),
    }
    out.update(_score_to_json(rolls))
    return out


def _rolls_from_body(body: Dict[str, Any]) -> Tuple[Optional[List[int]], Optional[str]]:
    raw = body.get("rolls", [])
    if not isinstance(raw, list):
        return None, "rolls must be a list"
    # bool would pass int(); reject it along with floats and strings
    if not all(isinstance(x, int) and not isinstance(x, bool) for x in raw):
        return None, "rolls must be integers"
    return list(raw), None


def _json_body() -> Optional[Dict[str, Any]]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    return jsonify({"ok": True, "state": _state_to_json(FrameTracker())})


@app.post("/api/roll")
def api_roll() -> Any:
    body = _json_body()
    if body is None:
        return jsonify({"ok": False, "error": "JSON object required"}), 400
    rolls, err = _rolls_from_body(body)
    if err:
        return jsonify({"ok": False, "error": err}), 400
    if "pins" not in body:
        return jsonify({"ok": False, "error": "pins required"}), 400
    try:
        tracker = FrameTracker.from_rolls(rolls)
    except BowlingError as e:
        return jsonify({"ok": False, "error": f"bad rolls: {e}"}), 400
    try:
        outcome = tracker.record_roll(body["pins"])
    except BowlingError as e:
        logger.info("rejected roll %r after %d rolls: %s", body["pins"], len(rolls), e)
        return jsonify({"ok": False, "error": str(e), "state": _state_to_json(tracker)}), 400
    return jsonify({"ok": True, "outcome": outcome.value, "state": _state_to_json(tracker)})


@app.post("/api/score")
def api_score() -> Any:
    body = _json_body()
    if body is None:
        return jsonify({"ok": False, "error": "JSON object required"}), 400
    rolls, err = _rolls_from_body(body)
    if err:
        return jsonify({"ok": False, "error": err}), 400
    return jsonify({"ok": True, **_score_to_json(rolls)})


@app.post("/api/simulate")
def api_simulate() -> Any:
    body = _json_body()
    if body is None:
        return jsonify({"ok": False, "error": "JSON object required"}), 400
    seed = body.get("seed", None)
    try:
        accuracy = float(body.get("accuracy", DEFAULT_ACCURACY))
        tracker = play_random_game(seed=seed, accuracy=accuracy)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "state": _state_to_json(tracker)})


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("TENPIN_LOG_LEVEL", "INFO").upper())
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
