import math
import os
from datetime import datetime
from flask import render_template, request, redirect, url_for, flash, jsonify, current_app

from . import workout_bp
from .defaults import (
    DEFAULT_PROFILE,
    GOALS,
    HISTORY_LIMIT,
    LIFTS,
    LIFT_LABELS,
    STORAGE_KEY,
)
from .generate import (
    build_demo_state,
    build_workout,
    generate_session,
    pick_next_day_type,
    todays_session,
)
from .progression import clamp
from .storage import load_state, save_state, reset_state

from workout_core import setup_required, log_action, BASE_DIR


def _paths():
    data_dir = current_app.config.get("WORKOUT_DATA_DIR") or os.path.join(BASE_DIR, "workout_app", "data")
    key = current_app.config.get("WORKOUT_STORAGE_KEY") or STORAGE_KEY
    return data_dir, key


def _load():
    return load_state(*_paths())


def _save(state: dict):
    save_state(*_paths(), state)


def _coerce_number(raw):
    """Form value to a number: blank is 0, junk is NaN."""
    raw = (raw or "").strip()
    if not raw:
        return 0
    try:
        value = float(raw)
    except ValueError:
        return float("nan")
    return int(value) if value.is_integer() else value


def _optional_number(raw):
    if not (raw or "").strip():
        return None
    return _coerce_number(raw)


def _format_date(iso: str):
    try:
        return datetime.fromisoformat(iso).strftime("%a, %b %d")
    except Exception:
        return iso or "-"


def _json_safe(value):
    """NaN is stored as-is but is not valid JSON; send it as null."""
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


@workout_bp.app_template_filter("weight")
def format_weight(value):
    if value is None:
        return "—"
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@workout_bp.route("/", methods=["GET"])
def home():
    state = _load()
    profile = state["profile"]
    history = state["history"]
    limit = current_app.config.get("HISTORY_LIMIT") or HISTORY_LIMIT

    recent = []
    for sess in history[:limit]:
        entry = dict(sess)
        entry["date_display"] = _format_date(sess.get("date"))
        recent.append(entry)

    today = todays_session(history)
    logs_by_exercise = {}
    if today:
        logs_by_exercise = {l.get("exercise_id"): l for l in today.get("logs") or []}

    log_action("workout_home_view", {"has_profile": profile is not None, "sessions": len(history)})
    return render_template(
        "workout/index.html",
        draft=profile or DEFAULT_PROFILE,
        profile=profile,
        goals=GOALS,
        lifts=LIFTS,
        lift_labels=LIFT_LABELS,
        next_day_type=pick_next_day_type(history),
        today=today,
        logs_by_exercise=logs_by_exercise,
        history=recent,
    )


@workout_bp.route("/setup", methods=["POST"])
def save_setup():
    state = _load()

    goal = request.form.get("goal", "Hypertrophy")
    if goal not in GOALS:
        goal = "Hypertrophy"

    state["profile"] = {
        "name": (request.form.get("name") or "").strip(),
        "gender": (request.form.get("gender") or "").strip(),
        "height_in": _coerce_number(request.form.get("height_in")),
        "weight_lb": _coerce_number(request.form.get("weight_lb")),
        "goal": goal,
        "five_rm": {lift: _coerce_number(request.form.get(f"five_rm_{lift}")) for lift in LIFTS},
    }
    _save(state)

    log_action("workout_setup_saved", {"goal": goal})
    return redirect(url_for("workout.home"))


@workout_bp.route("/generate", methods=["POST"])
@setup_required(_load)
def generate(state):
    history = state["history"]

    existing = todays_session(history)
    if existing:
        flash("Today's workout has already been generated.")
        log_action("workout_generate_skipped", {"session": existing.get("id")})
        return redirect(url_for("workout.home"))

    sess = generate_session(state["profile"], history)
    state["history"] = [sess] + history
    _save(state)

    log_action("workout_generated", {
        "day_type": sess["day_type"],
        "targets": {ex["primary"]: ex["target_weight_lb"] for ex in sess["workout"] if "target_weight_lb" in ex},
    })
    return redirect(url_for("workout.home"))


@workout_bp.route("/today", methods=["POST"])
def update_today():
    state = _load()
    today = todays_session(state["history"])
    if not today:
        return redirect(url_for("workout.home"))

    if "energy" in request.form:
        today["energy"] = clamp(_coerce_number(request.form.get("energy")), 1, 5)
    if "difficulty" in request.form:
        today["difficulty"] = clamp(_coerce_number(request.form.get("difficulty")), 1, 5)
    if "sleep_hours" in request.form:
        today["sleep_hours"] = _optional_number(request.form.get("sleep_hours"))
    _save(state)

    log_action("workout_today_updated", {
        "energy": today.get("energy"),
        "difficulty": today.get("difficulty"),
        "sleep_hours": today.get("sleep_hours"),
    })
    return redirect(url_for("workout.home"))


@workout_bp.route("/log/<exercise_id>", methods=["POST"])
def log_exercise(exercise_id):
    state = _load()
    today = todays_session(state["history"])
    if not today:
        return redirect(url_for("workout.home"))

    log = next((l for l in today.get("logs") or [] if l.get("exercise_id") == exercise_id), None)
    if log is None:
        log_action("workout_log_unknown_exercise", {"exercise_id": exercise_id})
        return redirect(url_for("workout.home"))

    if "actual_weight_lb" in request.form:
        log["actual_weight_lb"] = _optional_number(request.form.get("actual_weight_lb"))
    if "actual_reps" in request.form:
        log["actual_reps"] = request.form.get("actual_reps", "").strip()
    if "rpe" in request.form:
        rpe = _optional_number(request.form.get("rpe"))
        log["rpe"] = None if rpe is None else clamp(rpe, 1, 10)
    if "notes" in request.form:
        log["notes"] = request.form.get("notes", "").strip()
    _save(state)

    log_action("workout_exercise_logged", {"exercise_id": exercise_id, "log": log})
    return redirect(url_for("workout.home") + "#logger")


@workout_bp.route("/demo", methods=["POST"])
def load_demo():
    state = build_demo_state()
    _save(state)
    log_action("workout_demo_loaded", {"sessions": len(state["history"])})
    return redirect(url_for("workout.home"))


@workout_bp.route("/reset", methods=["POST"])
def reset():
    reset_state(*_paths())
    log_action("workout_reset")
    return redirect(url_for("workout.home"))


@workout_bp.route("/api/state", methods=["GET"])
def api_state():
    log_action("workout_api_state")
    return jsonify(_json_safe(_load()))


@workout_bp.route("/api/next", methods=["GET"])
def api_next():
    state = _load()
    if not state["profile"]:
        return jsonify({"ok": False, "error": "setup_required"}), 409

    day_type = pick_next_day_type(state["history"])
    workout = build_workout(state["profile"], state["history"], day_type)
    log_action("workout_api_next", {"day_type": day_type})
    return jsonify({
        "ok": True,
        "day_type": day_type,
        "workout": [
            {
                "name": ex["name"],
                "primary": ex["primary"],
                "sets": ex["sets"],
                "reps": ex["reps"],
                "target_weight_lb": ex.get("target_weight_lb"),
            }
            for ex in workout
        ],
    })
