"""BAC estimator Flask app.

Run from project root:
    python app.py
"""

import logging
import os

from flask import Flask, jsonify, request

from bac_engine.drinks import list_presets
from bac_engine.engine import estimate

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger("bac-engine-api")

app = Flask(__name__)


def _bad_request(message: str):
    logger.warning("Rejected calculate request: %s", message)
    return jsonify({"error": message}), 400


@app.route("/healthz")
def healthz():
    return jsonify({"ok": True})


@app.route("/api/presets")
def api_presets():
    return jsonify({"presets": list_presets()})


@app.route("/api/calculate", methods=["POST"])
@app.route("/Alkomat/calculate", methods=["POST"])
def api_calculate():
    data = request.get_json(silent=True)
    if data is None:
        return _bad_request("Request body must be valid JSON")
    if not isinstance(data, dict):
        return _bad_request("Request body must be a JSON object")
    return jsonify(estimate(data).to_dict())


if __name__ == "__main__":
    app.run(
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "5000")),
        debug=os.environ.get("FLASK_DEBUG", "0") == "1",
    )
