#!/usr/bin/env python3
import os

from flask import Flask, redirect, url_for
from workout_app import workout_bp
from workout_app.defaults import STORAGE_KEY, HISTORY_LIMIT
from workout_core import BASE_DIR, LOG_FILE

app = Flask(__name__)
app.register_blueprint(workout_bp, url_prefix="/workout")


# ───────────── Config ─────────────
app.config["SECRET_KEY"] = os.environ.get("FLASK_SECRET_KEY", "change-me-to-something-random")

# Persisted profile + history live in <data dir>/<storage key>.json
app.config["WORKOUT_DATA_DIR"] = os.environ.get(
    "WORKOUT_DATA_DIR", os.path.join(BASE_DIR, "workout_app", "data")
)
app.config["WORKOUT_STORAGE_KEY"] = os.environ.get("WORKOUT_STORAGE_KEY", STORAGE_KEY)

app.config["ACTIVITY_LOG_FILE"] = os.environ.get("ACTIVITY_LOG_FILE", LOG_FILE)
app.config["HISTORY_LIMIT"] = int(os.environ.get("HISTORY_LIMIT", HISTORY_LIMIT))


# ───────────── Routes ─────────────
@app.route("/")
def index():
    return redirect(url_for("workout.home"))


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8000, debug=True)
