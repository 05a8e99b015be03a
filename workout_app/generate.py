import copy
import random
import time
from datetime import datetime, timedelta

from .defaults import (
    DAY_TYPES,
    DEMO_PROFILE,
    DEMO_SESSIONS,
    LIFTS,
    RECENT_WINDOW,
    WORKOUT_TEMPLATES,
)
from .progression import compute_target_weight_lb


def uid(prefix="id"):
    return f"{prefix}_{random.getrandbits(48):x}_{int(time.time() * 1000)}"


def pick_next_day_type(history: list) -> str:
    """
    Pick the first day type not trained in the last few sessions,
    otherwise rotate on from the most recent one.
    """
    if not history:
        return "Full"

    recent = [s.get("day_type") for s in history[:RECENT_WINDOW]]

    for day_type in DAY_TYPES:
        if day_type not in recent:
            return day_type

    last = history[0].get("day_type")
    if last not in DAY_TYPES:
        return "Full"
    return DAY_TYPES[(DAY_TYPES.index(last) + 1) % len(DAY_TYPES)]


def base_workout_template(day_type: str) -> list:
    # Anything unknown gets the full-body day
    template = WORKOUT_TEMPLATES.get(day_type) or WORKOUT_TEMPLATES["Full"]
    exercises = []
    for ex in template:
        exercise = copy.deepcopy(ex)
        exercise["id"] = uid("ex")
        exercises.append(exercise)
    return exercises


def build_workout(profile: dict, history: list, day_type: str) -> list:
    workout = base_workout_template(day_type)
    for ex in workout:
        if ex["primary"] in LIFTS:
            ex["target_weight_lb"] = compute_target_weight_lb(profile, history, ex["primary"], day_type)
    return workout


def collect_muscle_groups(workout: list) -> list:
    groups = []
    for ex in workout:
        for group in ex.get("muscle_groups") or []:
            if group not in groups:
                groups.append(group)
    return groups


def generate_session(profile: dict, history: list, now=None) -> dict:
    now = now or datetime.now()
    day_type = pick_next_day_type(history)
    workout = build_workout(profile, history, day_type)

    return {
        "id": uid("sess"),
        "date": now.isoformat(),
        "day_type": day_type,
        "muscle_groups": collect_muscle_groups(workout),
        "energy": 3,
        "difficulty": 3,
        "sleep_hours": None,
        "workout": workout,
        "logs": [{"exercise_id": ex["id"]} for ex in workout],
    }


def is_same_day(a_iso: str, b_iso: str) -> bool:
    try:
        return datetime.fromisoformat(a_iso).date() == datetime.fromisoformat(b_iso).date()
    except (TypeError, ValueError):
        return False


def todays_session(history: list, now=None):
    """Return the most recent session if it was generated today."""
    now = now or datetime.now()
    if history and is_same_day(history[0].get("date"), now.isoformat()):
        return history[0]
    return None


def build_demo_history(demo_sessions: list, now=None) -> list:
    now = now or datetime.now()
    history = []
    for demo in demo_sessions:
        workout = []
        for ex in demo["workout"]:
            exercise = copy.deepcopy(ex)
            exercise["id"] = uid("ex")
            workout.append(exercise)
        history.append({
            "id": uid("sess"),
            "date": (now - timedelta(days=demo["days_ago"])).isoformat(),
            "day_type": demo["day_type"],
            "muscle_groups": list(demo["muscle_groups"]),
            "energy": demo["energy"],
            "difficulty": demo["difficulty"],
            "sleep_hours": demo.get("sleep_hours"),
            "workout": workout,
            "logs": [{"exercise_id": ex["id"]} for ex in workout],
        })
    # most recent first
    history.sort(key=lambda s: s["date"], reverse=True)
    return history


def build_demo_state(now=None) -> dict:
    return {
        "profile": copy.deepcopy(DEMO_PROFILE),
        "history": build_demo_history(DEMO_SESSIONS, now),
    }
