from __future__ import annotations

from flask import Flask, jsonify, request
import logging
import sys
from pathlib import Path

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from nim_engine import AIPlayer, Game, build_reference_table
from nim_engine.config import TABLE_SIZE

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    app = Flask(__name__)

    ai = AIPlayer()
    game = Game(ai=ai)

    @app.get("/api/state")
    def api_state():
        return jsonify(game.snapshot())

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), 400
        start = data.get("start")
        starter = data.get("starter") or "human"
        if not isinstance(starter, str):
            return jsonify({"error": "starter must be \"human\" or \"ai\""}), 400
        starter = starter.lower()

        game.reset(start, human_starts=(starter != "ai"))

        ai_move = None
        # If the AI starts, it takes its first sticks immediately
        if not game.is_game_over() and game.get_turn() == "ai":
            ai_move = game.play_ai_turn()

        snap = game.snapshot()
        snap["ai_move"] = ai_move
        return jsonify(snap)

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return jsonify({"error": "Expected a JSON object"}), 400
        move = payload.get("move")
        if move is None:
            return jsonify({"error": "Missing move"}), 400

        try:
            game.push_human(move)
        except ValueError as exc:
            logger.info("Rejected move %r: %s", move, exc)
            return jsonify({"error": str(exc)}), 400

        if game.is_game_over():
            snap = game.snapshot()
            snap["ai_move"] = None
            return jsonify(snap)

        ai_move = game.play_ai_turn()

        snap = game.snapshot()
        snap["ai_move"] = ai_move
        return jsonify(snap)

    @app.get("/api/table")
    def api_table():
        try:
            size = int(request.args.get("size", TABLE_SIZE))
            rows = build_reference_table(ai, size)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        return jsonify({"rows": [row.to_dict() for row in rows]})

    @app.post("/api/history/reset")
    def api_history_reset():
        game.clear_history()
        return jsonify(game.snapshot())

    return app


app = create_app()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    app.run(host="127.0.0.1", port=5000, debug=True)
